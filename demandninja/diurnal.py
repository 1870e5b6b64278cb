"""
Hour-of-day shaping of heating and cooling demand.

Daily-resolution demand carries no information about when in the day people
heat and cool. A diurnal profile holds 24 multiplicative factors per channel
(mean 1.0) which redistribute demand across the hours without changing the
daily total.
"""
import logging
import os
from dataclasses import dataclass

import numpy as np
import pandas as pd

from .constants import PROFILE_COLUMNS, HOURS_PER_DAY
from .errors import ConfigurationError

_LOGGER = logging.getLogger(__name__)

DEFAULT_PROFILE_PATH = os.path.join(os.path.dirname(__file__), 'data', 'diurnal_profiles.csv')


@dataclass(frozen=True)
class DiurnalProfile:
    """Multipliers indexed by hour of day (0-23)."""
    heating: np.ndarray
    cooling: np.ndarray

    @classmethod
    def from_frame(cls, table) -> 'DiurnalProfile':
        """
        Build a profile from a table with columns hour, heating, cooling.
        Rows may come in any order but must cover hours 0..23 exactly once.
        """
        df = pd.DataFrame(table)
        missing = [col for col in PROFILE_COLUMNS if col not in df.columns]
        if missing:
            raise ConfigurationError(f"Diurnal profile is missing column(s): {', '.join(missing)}")
        if len(df) != HOURS_PER_DAY:
            raise ConfigurationError(f"Diurnal profile must have {HOURS_PER_DAY} rows, got {len(df)}")

        try:
            values = df['hour'].to_numpy(dtype=float)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"Diurnal profile 'hour' column is not integer: {e}") from e
        if not np.all(values == np.round(values)):
            raise ConfigurationError("Diurnal profile 'hour' column must hold whole hours")
        hours = values.astype(int)
        if sorted(hours.tolist()) != list(range(HOURS_PER_DAY)):
            raise ConfigurationError("Diurnal profile 'hour' column must contain each of 0-23 once")

        df = df.assign(hour=hours).sort_values('hour')
        try:
            heating = df['heating'].to_numpy(dtype=float)
            cooling = df['cooling'].to_numpy(dtype=float)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"Diurnal profile multipliers must be numeric: {e}") from e

        return cls(heating=heating, cooling=cooling)

    def __len__(self):
        return len(self.heating)


def load_diurnal_profile(filepath=None) -> DiurnalProfile:
    """Read a diurnal profile CSV (defaults to the bundled global average profile)."""
    if filepath is None:
        filepath = DEFAULT_PROFILE_PATH
    _LOGGER.debug(f"Loading diurnal profile from {filepath}")
    try:
        table = pd.read_csv(filepath)
    except (pd.errors.EmptyDataError, pd.errors.ParserError) as e:
        raise ConfigurationError(f"Could not read diurnal profile from {filepath}: {e}") from e
    return DiurnalProfile.from_frame(table)


def hour_of_day(time) -> np.ndarray:
    """0-based hour of day for each timestamp (wall clock for timezone-aware input)."""
    return pd.DatetimeIndex(pd.to_datetime(time)).hour.to_numpy()


def apply_diurnal_profile(time, heating_demand, cooling_demand, profile):
    """
    Multiply heating and cooling demand by the profile factor for each hour.

    Args:
        time: Timestamps, aligned with the demand arrays.
        heating_demand, cooling_demand: Demand before shaping.
        profile: DiurnalProfile, or a table accepted by DiurnalProfile.from_frame.

    Returns:
        (heating_demand, cooling_demand) as new arrays.
    """
    if not isinstance(profile, DiurnalProfile):
        profile = DiurnalProfile.from_frame(profile)
    if len(profile.heating) != HOURS_PER_DAY or len(profile.cooling) != HOURS_PER_DAY:
        raise ConfigurationError(f"Diurnal profile must have {HOURS_PER_DAY} entries per channel")

    h = hour_of_day(time)
    heating = np.asarray(heating_demand, dtype=float) * profile.heating[h]
    cooling = np.asarray(cooling_demand, dtype=float) * profile.cooling[h]
    return heating, cooling
