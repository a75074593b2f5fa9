from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar

import numpy as np

from idm_sim.config import DrivingProfile
from .vehicles import Vehicle


@dataclass
class VehicleController:
    """
    Car-following controller based on the Intelligent Driver Model (IDM).

    One controller can be shared by every vehicle using the same driving
    profile. Parameters are meant to be changed while setting up a scenario,
    not while accelerations are being computed.

    Preconditions (not checked here, see DrivingProfile.validate):
    max_acceleration > 0, comfortable_braking_deceleration > 0 and
    desired_velocity > 0. Other values give NaN or inf results, never
    an exception.

    References:
    - https://en.wikipedia.org/wiki/Intelligent_driver_model
    - Treiber, Hennecke, Helbing, "Congested Traffic States in Empirical
      Observations and Microscopic Simulations" (2000)
    """

    # v0 [m/s]
    desired_velocity: float
    # s0 [m]
    minimum_spacing: float
    # T [s]
    desired_time_headway: float
    # a [m/s^2]
    max_acceleration: float
    # b [m/s^2]
    comfortable_braking_deceleration: float

    DELTA: ClassVar[int] = 4

    @classmethod
    def from_profile(cls, profile: DrivingProfile) -> VehicleController:
        return cls(
            desired_velocity=profile.desired_velocity,
            minimum_spacing=profile.minimum_spacing,
            desired_time_headway=profile.desired_time_headway,
            max_acceleration=profile.max_acceleration,
            comfortable_braking_deceleration=profile.comfortable_braking_deceleration,
        )

    def to_profile(self, name: str) -> DrivingProfile:
        return DrivingProfile(
            name=name,
            desired_velocity=self.desired_velocity,
            minimum_spacing=self.minimum_spacing,
            desired_time_headway=self.desired_time_headway,
            max_acceleration=self.max_acceleration,
            comfortable_braking_deceleration=self.comfortable_braking_deceleration,
        )

    def safe_distance(self, vehicle: Vehicle) -> float:
        """s0 + v*T [m]"""
        return self.minimum_spacing + np.float64(vehicle.speed) * self.desired_time_headway

    def desired_dynamical_distance(self, vehicle: Vehicle) -> float:
        """
        Desired gap s* [m]:
        s*(v, dv) = s0 + max(0, v*T + v*dv / (2*sqrt(a*b)))
        """
        interaction = (np.float64(vehicle.speed) * vehicle.relative_speed()) / (
            2 * np.sqrt(self.max_acceleration * self.comfortable_braking_deceleration)
        )

        safe = self.safe_distance(vehicle)
        if safe - self.minimum_spacing + interaction < 0:
            return np.float64(self.minimum_spacing)

        return safe + interaction

    def desired_acceleration(self, vehicle: Vehicle) -> float:
        """Free-road term a * (1 - (v/v0)^delta) [m/s^2]"""
        return self.max_acceleration * (
            1 - (np.float64(vehicle.speed) / self.desired_velocity) ** self.DELTA
        )

    def acceleration(self, vehicle: Vehicle) -> float:
        """
        IDM acceleration [m/s^2]:
        a * (1 - (v/v0)^delta - (s*(v, dv) / s)^2)

        With no front vehicle the gap s is infinite and the result is
        exactly the free-road term.
        """
        gap = vehicle.front_distance()
        if gap == math.inf:
            return self.desired_acceleration(vehicle)

        return self.desired_acceleration(vehicle) - self.max_acceleration * (
            self.desired_dynamical_distance(vehicle) / gap
        ) ** 2
