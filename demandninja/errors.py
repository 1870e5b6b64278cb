"""Exceptions raised by the demand model."""


class DemandNinjaError(ValueError):
    """Base class for bad input to the demand model."""


class ValidationError(DemandNinjaError):
    """Weather or parameters are missing required fields or are unusable."""


class ConfigurationError(DemandNinjaError):
    """A static table (diurnal profile, weather file layout) is malformed."""
