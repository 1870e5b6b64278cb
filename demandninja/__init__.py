"""Hourly building energy demand from weather, via the BAIT temperature index."""
from .demand import demand_ninja, compute_demand, energy_demand
from .errors import DemandNinjaError, ValidationError, ConfigurationError
from .parameters import BaitParameters, EnergyParameters
from .diurnal import DiurnalProfile, load_diurnal_profile
