from typing import Sequence

import numpy as np

from idm_sim.backends.base_backend import AccelerationBackend
from idm_sim.model.vehicles import Vehicle


class SequentialBackend(AccelerationBackend):
    """
    Pure Python backend, one controller call per vehicle.
    Used as the reference for the other backends.
    """

    name = "sequential"

    def compute(self, vehicles: Sequence[Vehicle]) -> np.ndarray:
        out = np.empty(len(vehicles), dtype=np.float64)
        for i, v in enumerate(vehicles):
            out[i] = self.controller.acceleration(v)
        return out
