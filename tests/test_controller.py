import math

import numpy as np
import pytest

from idm_sim.config import get_profile
from idm_sim.model.controller import VehicleController
from idm_sim.model.vehicles import Vehicle


@pytest.mark.parametrize(
    "attr, value",
    [
        ("desired_velocity", 22.22),
        ("minimum_spacing", 2.5),
        ("desired_time_headway", 1.5),
        ("max_acceleration", 0.73),
        ("comfortable_braking_deceleration", 1.67),
    ],
)
def test_parameters_read_back_unchanged(controller, attr, value):
    setattr(controller, attr, value)
    assert getattr(controller, attr) == value


def test_delta_is_four():
    assert VehicleController.DELTA == 4


def test_safe_distance(controller, vehicle):
    # 2 + 22.22 * 1.5
    vehicle.speed = 22.22
    assert controller.safe_distance(vehicle) == 35.33


def test_safe_distance_at_standstill_is_minimum_spacing(controller, vehicle):
    assert controller.safe_distance(vehicle) == controller.minimum_spacing


def test_desired_dynamical_distance_with_faster_front_vehicle(controller, vehicle, front_vehicle):
    # interaction term pulls v*T below zero, s* clamps to s0
    vehicle.speed = 22.22
    front_vehicle.speed = 27.77
    assert controller.desired_dynamical_distance(vehicle) == 2.0


def test_desired_dynamical_distance_with_slower_front_vehicle(controller, vehicle, front_vehicle):
    # 2 + 22.22 * 1.5 + (22.22 * 2.78) / (2 * sqrt(0.3 * 3))
    vehicle.speed = 22.22
    front_vehicle.speed = 19.44
    assert controller.desired_dynamical_distance(vehicle) == pytest.approx(67.88649178547615, rel=1e-12)


def test_desired_dynamical_distance_with_same_speed_front_vehicle(controller, vehicle, front_vehicle):
    vehicle.speed = 22.22
    front_vehicle.speed = 22.22
    assert controller.desired_dynamical_distance(vehicle) == 35.33
    assert controller.desired_dynamical_distance(vehicle) == controller.safe_distance(vehicle)


def test_desired_dynamical_distance_is_non_decreasing_in_relative_speed(controller, vehicle, front_vehicle):
    vehicle.speed = 15.0
    distances = []
    for front_speed in [40.0, 30.0, 25.0, 20.0, 15.0, 10.0, 5.0, 0.0]:
        front_vehicle.speed = front_speed
        distances.append(controller.desired_dynamical_distance(vehicle))

    assert distances == sorted(distances)
    assert min(distances) == controller.minimum_spacing


def test_desired_acceleration(controller, vehicle):
    # 0.3 * (1 - (22.22 / 33.33)^4)
    vehicle.speed = 22.22
    assert controller.desired_acceleration(vehicle) == pytest.approx(0.241, abs=0.001)


@pytest.mark.parametrize(
    "speed, sign",
    [(0.0, 1), (20.0, 1), (33.33, 0), (40.0, -1)],
)
def test_desired_acceleration_sign(controller, vehicle, speed, sign):
    vehicle.speed = speed
    acc = controller.desired_acceleration(vehicle)
    if sign > 0:
        assert acc > 0
    elif sign < 0:
        assert acc < 0
    else:
        assert acc == 0


def test_acceleration_with_slower_front_vehicle(controller, vehicle, front_vehicle):
    vehicle.speed = 22.22
    vehicle.position = 80
    front_vehicle.speed = 19.44
    front_vehicle.position = 100
    assert controller.acceleration(vehicle) == pytest.approx(-3.843, abs=0.001)


def test_acceleration_with_faster_front_vehicle(controller, vehicle, front_vehicle):
    vehicle.speed = 22.22
    vehicle.position = 80
    front_vehicle.speed = 27.77
    front_vehicle.position = 100
    assert controller.acceleration(vehicle) == pytest.approx(0.237, abs=0.001)


def test_acceleration_without_front_vehicle(controller, front_vehicle):
    front_vehicle.speed = 22.22
    front_vehicle.position = 80
    assert controller.acceleration(front_vehicle) == pytest.approx(0.241, abs=0.001)


@pytest.mark.parametrize("speed", [0.0, 5.0, 22.22, 33.33, 50.0])
def test_open_road_acceleration_is_exactly_free_road_term(controller, speed):
    v = Vehicle(length=4.0, max_speed=40.0, speed=speed, position=1e9)
    assert controller.acceleration(v) == controller.desired_acceleration(v)


def test_controller_shared_between_vehicles(controller, vehicle, front_vehicle):
    vehicle.speed = 22.22
    vehicle.position = 80
    front_vehicle.speed = 22.22
    front_vehicle.position = 100

    assert controller.acceleration(vehicle) < controller.acceleration(front_vehicle)
    assert controller.acceleration(front_vehicle) == controller.desired_acceleration(front_vehicle)


def make_controller(**overrides) -> VehicleController:
    params = dict(
        desired_velocity=33.33,
        minimum_spacing=2,
        desired_time_headway=1.5,
        max_acceleration=0.3,
        comfortable_braking_deceleration=3,
    )
    params.update(overrides)
    return VehicleController(**params)


def test_negative_max_acceleration_gives_nan(vehicle, front_vehicle):
    c = make_controller(max_acceleration=-0.3)
    vehicle.speed = 10.0
    vehicle.position = 50.0
    front_vehicle.speed = 5.0
    front_vehicle.position = 80.0

    with np.errstate(all="ignore"):
        assert math.isnan(c.desired_dynamical_distance(vehicle))
        assert math.isnan(c.acceleration(vehicle))


def test_zero_braking_deceleration_gives_infinite_gap(vehicle, front_vehicle):
    c = make_controller(comfortable_braking_deceleration=0.0)
    vehicle.speed = 10.0
    front_vehicle.speed = 5.0

    with np.errstate(all="ignore"):
        assert c.desired_dynamical_distance(vehicle) == math.inf


def test_zero_desired_velocity_gives_infinite_braking(vehicle):
    c = make_controller(desired_velocity=0.0)
    vehicle.speed = 10.0

    with np.errstate(all="ignore"):
        assert c.desired_acceleration(vehicle) == -math.inf


def test_touching_front_vehicle_gives_infinite_braking(controller, vehicle, front_vehicle):
    front_vehicle.position = 100.0
    vehicle.position = 100.0 - front_vehicle.length
    vehicle.speed = 10.0
    front_vehicle.speed = 10.0

    with np.errstate(all="ignore"):
        assert controller.acceleration(vehicle) == -math.inf


def test_profile_round_trip():
    profile = get_profile("normal")
    c = VehicleController.from_profile(profile)

    assert c.desired_velocity == 33.33
    assert c.max_acceleration == 0.3
    assert c.to_profile("normal") == profile
