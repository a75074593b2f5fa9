from __future__ import annotations

import math
from dataclasses import dataclass, field

from idm_sim.io.logging_utils import logger
from .conversions import pixels_to_meters
from .road_network import Point2D, RoadSegment


# padding at the top of the lane [px]
LANE_PADDING = 2


@dataclass(frozen=True)
class ItineraryPath:
    """
    Straight path followed by a vehicle on one road segment.

    Origin and destination are in meters; direction_vector is normed.
    Both ends are shifted by the same vertical lane offset, whatever the
    orientation of the segment, and the destination does not account for
    the vehicle length.
    """

    road_segment: RoadSegment
    origin: Point2D
    destination: Point2D
    direction_vector: Point2D
    _norm: float = field(compare=False, repr=False)

    @classmethod
    def from_segment(cls, road_segment: RoadSegment, scale: float) -> ItineraryPath:
        """
        :param road_segment: segment to follow
        :param scale: scenario scale [m/px]
        :raises ZeroDivisionError: if the segment has zero length
        """
        mapping = road_segment.road_mapping
        start = mapping.start_pos()
        end = mapping.end_pos()
        width = mapping.road_width()

        # lane offsets are applied on the integer pixel grid
        start_x = int(start.x)
        start_y = int(start.y + LANE_PADDING - width)
        end_x = int(end.x)
        end_y = int(end.y + LANE_PADDING - width)

        origin = Point2D(pixels_to_meters(scale, start_x), pixels_to_meters(scale, start_y))
        destination = Point2D(pixels_to_meters(scale, end_x), pixels_to_meters(scale, end_y))

        norm = math.sqrt((destination.x - origin.x) ** 2 + (destination.y - origin.y) ** 2)
        direction = Point2D(
            (destination.x - origin.x) / norm,
            (destination.y - origin.y) / norm,
        )

        logger.debug(
            f"Itinerary for segment {road_segment.id}: "
            f"({origin.x:.2f}, {origin.y:.2f}) -> ({destination.x:.2f}, {destination.y:.2f}) m"
        )

        return cls(
            road_segment=road_segment,
            origin=origin,
            destination=destination,
            direction_vector=direction,
            _norm=norm,
        )

    def norm(self) -> float:
        """Length of the path [m]."""
        return self._norm

    def point_at(self, distance: float) -> Point2D:
        """World position [m] at the given distance from the origin."""
        return Point2D(
            self.origin.x + self.direction_vector.x * distance,
            self.origin.y + self.direction_vector.y * distance,
        )
