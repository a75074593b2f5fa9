import pytest

from idm_sim.model.controller import VehicleController
from idm_sim.model.vehicles import Vehicle


@pytest.fixture
def controller() -> VehicleController:
    return VehicleController(
        desired_velocity=33.33,
        minimum_spacing=2,
        desired_time_headway=1.5,
        max_acceleration=0.3,
        comfortable_braking_deceleration=3,
    )


@pytest.fixture
def front_vehicle() -> Vehicle:
    return Vehicle(length=1.6, max_speed=33.33)


@pytest.fixture
def vehicle(front_vehicle: Vehicle) -> Vehicle:
    return Vehicle(length=1.6, max_speed=33.33, front_vehicle=front_vehicle)
