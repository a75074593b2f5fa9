from dataclasses import dataclass


@dataclass(frozen=True)
class Point2D:
    x: float
    y: float


@dataclass(frozen=True)
class RoadMapping:
    """Pixel-space placement of a road segment on the map."""

    start: Point2D               # [px]
    end: Point2D                 # [px]
    width: float                 # [px]

    def start_pos(self) -> Point2D:
        return self.start

    def end_pos(self) -> Point2D:
        return self.end

    def road_width(self) -> float:
        return self.width


@dataclass(frozen=True)
class RoadSegment:
    id: int
    road_mapping: RoadMapping
