from abc import ABC, abstractmethod
from typing import Sequence

import numpy as np

from idm_sim.config import ComputeConfig
from idm_sim.io.logging_utils import logger
from idm_sim.model.controller import VehicleController
from idm_sim.model.vehicles import Vehicle


class AccelerationBackend(ABC):
    """
    Abstract base for all backends (Sequential, Numba).

    A backend computes the accelerations of one tick. The vehicles must not
    be moved until compute() returns, so every vehicle sees the state of
    its front vehicle from the same tick.
    """

    name: str = "base"

    def __init__(self, controller: VehicleController, config: ComputeConfig | None = None):
        self.controller = controller
        self.config = config or ComputeConfig(backend=self.name)
        logger.debug(f"Acceleration backend '{self.name}' ready")

    @abstractmethod
    def compute(self, vehicles: Sequence[Vehicle]) -> np.ndarray:
        """
        :param vehicles: vehicles driven by this backend's controller
        :return: acceleration of each vehicle [m/s^2], same order as the input
        """
        raise NotImplementedError
