from dataclasses import dataclass, asdict
from typing import Dict, Literal

from idm_sim.errors import ConfigurationError
from idm_sim.io.logging_utils import logger


BackendName = Literal["sequential", "numba"]


@dataclass
class DrivingProfile:
    name: str
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

    def validate(self) -> "DrivingProfile":
        """
        Check the parameters before handing them to a controller.
        The controller itself never checks them.
        """
        if self.desired_velocity <= 0:
            raise ConfigurationError(
                f"Profile '{self.name}': desired_velocity must be > 0, got {self.desired_velocity}"
            )
        if self.max_acceleration <= 0:
            raise ConfigurationError(
                f"Profile '{self.name}': max_acceleration must be > 0, got {self.max_acceleration}"
            )
        if self.comfortable_braking_deceleration <= 0:
            raise ConfigurationError(
                f"Profile '{self.name}': comfortable_braking_deceleration must be > 0, "
                f"got {self.comfortable_braking_deceleration}"
            )
        if self.minimum_spacing < 0:
            raise ConfigurationError(
                f"Profile '{self.name}': minimum_spacing must be >= 0, got {self.minimum_spacing}"
            )
        if self.desired_time_headway < 0:
            raise ConfigurationError(
                f"Profile '{self.name}': desired_time_headway must be >= 0, got {self.desired_time_headway}"
            )

        if self.comfortable_braking_deceleration < self.max_acceleration:
            logger.warning(
                f"Profile '{self.name}' brakes more gently than it accelerates "
                f"(b={self.comfortable_braking_deceleration}, a={self.max_acceleration})"
            )
        return self

    def to_dict(self) -> dict:
        return asdict(self)


# driving behaviours offered to the scenario setup
PROFILES: Dict[str, DrivingProfile] = {
    "cautious": DrivingProfile(
        name="cautious",
        desired_velocity=27.78,
        minimum_spacing=3.0,
        desired_time_headway=2.0,
        max_acceleration=0.5,
        comfortable_braking_deceleration=2.0,
    ),
    "normal": DrivingProfile(
        name="normal",
        desired_velocity=33.33,
        minimum_spacing=2.0,
        desired_time_headway=1.5,
        max_acceleration=0.3,
        comfortable_braking_deceleration=3.0,
    ),
    "aggressive": DrivingProfile(
        name="aggressive",
        desired_velocity=38.89,
        minimum_spacing=1.0,
        desired_time_headway=0.8,
        max_acceleration=2.0,
        comfortable_braking_deceleration=4.0,
    ),
}


def get_profile(name: str) -> DrivingProfile:
    try:
        return PROFILES[name]
    except KeyError:
        raise ValueError(
            f"Unknown profile '{name}'. Available: {', '.join(PROFILES.keys())}"
        )


@dataclass
class ComputeConfig:
    backend: BackendName = "sequential"

    # numba
    num_threads: int = 1

    # driving profile shared by the vehicles
    profile: str = "normal"
    # scenario scale [m/px]
    scale: float = 0.1

    log_level: str = "INFO"

    def to_dict(self) -> dict:
        return asdict(self)
