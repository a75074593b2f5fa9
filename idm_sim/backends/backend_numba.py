from typing import Sequence, Tuple

import numpy as np
from numba import config as numba_config
from numba import njit, prange, set_num_threads

from idm_sim.backends.base_backend import AccelerationBackend
from idm_sim.config import ComputeConfig
from idm_sim.io.logging_utils import logger
from idm_sim.model.controller import VehicleController
from idm_sim.model.vehicles import Vehicle


# numpy error model: bad parameters give nan/inf like the pure Python path
@njit(parallel=True, error_model="numpy")
def idm_acceleration_kernel(
    speeds: np.ndarray,
    positions: np.ndarray,
    front_speeds: np.ndarray,
    front_rears: np.ndarray,
    out: np.ndarray,
    desired_velocity: float,
    minimum_spacing: float,
    desired_time_headway: float,
    max_acceleration: float,
    comfortable_braking_deceleration: float,
    delta: float,
) -> None:
    """
    Numba-parallel IDM kernel.

    front_rears[i] is the rear bumper position of the vehicle ahead of i;
    inf means vehicle i is on open road and out[i] is the free-road term only.
    """
    n = speeds.shape[0]
    denom = 2.0 * np.sqrt(max_acceleration * comfortable_braking_deceleration)

    for i in prange(n):
        v = speeds[i]
        free_road = max_acceleration * (1.0 - (v / desired_velocity) ** delta)

        gap = front_rears[i] - positions[i]
        if gap == np.inf:
            out[i] = free_road
            continue

        interaction = (v * (v - front_speeds[i])) / denom
        safe = minimum_spacing + v * desired_time_headway
        if safe - minimum_spacing + interaction < 0.0:
            s_star = minimum_spacing
        else:
            s_star = safe + interaction

        out[i] = free_road - max_acceleration * (s_star / gap) ** 2


def snapshot(vehicles: Sequence[Vehicle]) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    """
    Copy the kinematic state of the vehicles into flat arrays:
    speeds, positions, front speeds and front rear-bumper positions.
    Vehicles without a front vehicle get a front rear bumper at +inf.
    """
    n = len(vehicles)
    speeds = np.empty(n, dtype=np.float64)
    positions = np.empty(n, dtype=np.float64)
    front_speeds = np.zeros(n, dtype=np.float64)
    front_rears = np.full(n, np.inf, dtype=np.float64)

    for i, v in enumerate(vehicles):
        speeds[i] = v.speed
        positions[i] = v.position
        front = v.front_vehicle
        if front is not None:
            front_speeds[i] = front.speed
            front_rears[i] = front.position - front.length

    return speeds, positions, front_speeds, front_rears


class NumbaBackend(AccelerationBackend):
    """
    Parallel CPU backend using Numba.
    The vehicle state is copied to arrays first, then all accelerations
    are computed by a single @njit(parallel=True) kernel call.
    """

    name = "numba"

    def __init__(self, controller: VehicleController, config: ComputeConfig | None = None):
        super().__init__(controller, config)

        # Configure the number of threads used by Numba
        if self.config.num_threads > 0:
            threads = min(self.config.num_threads, numba_config.NUMBA_NUM_THREADS)
            if threads < self.config.num_threads:
                logger.warning(
                    f"Requested {self.config.num_threads} threads, only {threads} available"
                )
            set_num_threads(threads)

    def compute(self, vehicles: Sequence[Vehicle]) -> np.ndarray:
        speeds, positions, front_speeds, front_rears = snapshot(vehicles)
        out = np.empty(len(vehicles), dtype=np.float64)

        c = self.controller
        idm_acceleration_kernel(
            speeds,
            positions,
            front_speeds,
            front_rears,
            out,
            float(c.desired_velocity),
            float(c.minimum_spacing),
            float(c.desired_time_headway),
            float(c.max_acceleration),
            float(c.comfortable_braking_deceleration),
            float(c.DELTA),
        )
        return out
