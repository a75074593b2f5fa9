from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional


@dataclass(eq=False)
class Vehicle:
    """
    Kinematic state of one simulated vehicle.

    The state does not know which controller drives it; a VehicleController
    is applied to it from the outside. Speed and position are written by the
    simulation driver once per tick.
    """

    length: float                # [m]
    max_speed: float             # [m/s]
    speed: float = 0.0           # [m/s]
    position: float = 0.0        # [m] front bumper, along the itinerary
    id: int = 0

    # vehicle immediately ahead on the same lane, None on open road
    front_vehicle: Optional[Vehicle] = field(default=None, repr=False)

    @property
    def has_front_vehicle(self) -> bool:
        return self.front_vehicle is not None

    def set_front_vehicle(self, front: Optional[Vehicle]) -> None:
        self.front_vehicle = front

    def relative_speed(self) -> float:
        """Closing speed towards the front vehicle [m/s], positive when approaching."""
        if self.front_vehicle is None:
            return 0.0
        return self.speed - self.front_vehicle.speed

    def front_distance(self) -> float:
        """Gap to the rear bumper of the front vehicle [m], +inf on open road."""
        if self.front_vehicle is None:
            return math.inf
        front = self.front_vehicle
        return front.position - front.length - self.position
