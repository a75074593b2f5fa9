from idm_sim.config import ComputeConfig, DrivingProfile, PROFILES, get_profile
from idm_sim.errors import ConfigurationError
from idm_sim.model.controller import VehicleController
from idm_sim.model.itinerary import ItineraryPath
from idm_sim.model.vehicles import Vehicle


__all__ = [
    "ComputeConfig",
    "ConfigurationError",
    "DrivingProfile",
    "ItineraryPath",
    "PROFILES",
    "Vehicle",
    "VehicleController",
    "get_profile",
]
