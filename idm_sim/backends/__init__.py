from typing import Dict, Type

from idm_sim.backends.base_backend import AccelerationBackend
from idm_sim.backends.backend_sequential import SequentialBackend
from idm_sim.backends.backend_numba import NumbaBackend


BACKENDS: Dict[str, Type[AccelerationBackend]] = {
    SequentialBackend.name: SequentialBackend,
    NumbaBackend.name: NumbaBackend,
}


def get_backend(name: str) -> Type[AccelerationBackend]:
    try:
        return BACKENDS[name]
    except KeyError:
        raise ValueError(
            f"Unknown backend '{name}'. Available: {', '.join(BACKENDS.keys())}"
        )
