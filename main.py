import math

from idm_sim.backends import get_backend, BACKENDS
from idm_sim.config import ComputeConfig, PROFILES, get_profile
from idm_sim.io.logging_utils import setup_logging, logger
from idm_sim.model.controller import VehicleController
from idm_sim.model.conversions import meters_to_pixels
from idm_sim.model.itinerary import ItineraryPath
from idm_sim.model.road_network import Point2D, RoadMapping, RoadSegment
from idm_sim.model.vehicles import Vehicle


def choose(title: str, options) -> str:
    print(f"=== Choose {title} ===")
    names = list(options)
    for i, name in enumerate(names, start=1):
        print(f"{i}. {name}")
    choice = input("Enter number: ").strip()

    try:
        return names[int(choice) - 1]
    except (ValueError, IndexError):
        print(f"Invalid choice, falling back to '{names[0]}'")
        return names[0]


def build_platoon(n: int, spacing: float, speed: float) -> list[Vehicle]:
    """Vehicles on one lane, leader first."""
    vehicles: list[Vehicle] = []
    front = None
    for i in range(n):
        v = Vehicle(
            id=i,
            length=4.5,
            max_speed=36.0,
            speed=speed - i * 0.5,
            position=(n - i) * spacing,
            front_vehicle=front,
        )
        vehicles.append(v)
        front = v
    return vehicles


def build_lane(n: int, spacing: float, scale: float) -> ItineraryPath:
    """Horizontal lane long enough for the whole platoon plus one spacing."""
    length_px = math.ceil(meters_to_pixels(scale, (n + 1) * spacing))
    segment = RoadSegment(
        id=0,
        road_mapping=RoadMapping(start=Point2D(0, 120), end=Point2D(length_px, 120), width=10),
    )
    return ItineraryPath.from_segment(segment, scale)


def main():
    print("=== IDM car-following ===")

    cfg = ComputeConfig(
        backend=choose("backend", BACKENDS.keys()),
        profile=choose("driving profile", PROFILES.keys()),
    )
    setup_logging(cfg.log_level)

    try:
        n = int(input("Vehicles on the lane (default 5): ") or "5")
        spacing = float(input("Initial spacing [m] (default 30): ") or "30")
    except ValueError:
        print("Invalid input, using defaults.")
        n, spacing = 5, 30.0

    profile = get_profile(cfg.profile).validate()
    controller = VehicleController.from_profile(profile)

    path = build_lane(n, spacing, cfg.scale)
    logger.info(f"Lane length: {path.norm():.2f} m")

    vehicles = build_platoon(n, spacing, speed=22.22)

    logger.info(f"Computing accelerations with backend='{cfg.backend}', profile='{cfg.profile}'")
    backend = get_backend(cfg.backend)(controller, cfg)
    accelerations = backend.compute(vehicles)

    for v, acc in zip(vehicles, accelerations):
        p = path.point_at(v.position)
        logger.info(
            f"Vehicle {v.id}: at ({p.x:.1f}, {p.y:.1f}) m, "
            f"v={v.speed:.2f} m/s, gap={v.front_distance():.1f} m, acc={acc:.3f} m/s^2"
        )


if __name__ == "__main__":
    main()
