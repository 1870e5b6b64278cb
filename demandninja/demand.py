"""
Weather -> BAIT -> hourly energy demand.

demand_ninja() runs the whole model: it aggregates hourly weather to daily
means, computes the BAIT index per day, interpolates BAIT back to the hourly
timestamps, converts it into heating and cooling degree days and demand, and
optionally reshapes demand with a diurnal profile.
"""
import logging

import numpy as np
import pandas as pd
from pandas.api.types import is_numeric_dtype

from .bait import temperature_index
from .constants import WEATHER_COLUMNS, DEMAND_COLUMNS
from .degree_days import hdd, cdd
from .diurnal import DiurnalProfile, load_diurnal_profile, apply_diurnal_profile
from .errors import ValidationError
from .parameters import BaitParameters, EnergyParameters, coerce_parameters, check_typical_ranges
from .resample import aggregate_daily, interpolate_hourly

_LOGGER = logging.getLogger(__name__)


def validate_weather(weather) -> pd.DataFrame:
    """
    Check weather has usable time, T, S, W, H columns.
    Returns a copy with 'time' parsed to datetimes and a fresh 0..n-1 index.
    """
    df = pd.DataFrame(weather).copy()

    missing = [col for col in WEATHER_COLUMNS if col not in df.columns]
    if missing:
        raise ValidationError(f"Weather is missing required column(s): {', '.join(missing)}")
    if len(df) == 0:
        raise ValidationError("Weather contains no rows")

    for col in WEATHER_COLUMNS[1:]:
        if not is_numeric_dtype(df[col]):
            raise ValidationError(f"Weather column '{col}' must be numeric (got {df[col].dtype})")
        bad = ~np.isfinite(df[col].to_numpy(dtype=float, na_value=np.nan))
        if bad.any():
            raise ValidationError(f"Weather column '{col}' has {int(bad.sum())} missing or infinite value(s)")

    try:
        times = pd.to_datetime(df['time'])
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Weather 'time' column could not be parsed: {e}") from e
    if times.isna().any():
        raise ValidationError("Weather 'time' column has missing timestamps")
    if len(times) > 1 and not (times.diff().iloc[1:] > pd.Timedelta(0)).all():
        raise ValidationError("Weather 'time' column must be strictly increasing")

    df['time'] = times
    df = df.reset_index(drop=True)

    if len(df) > 1:
        median_step = df['time'].diff().dt.total_seconds().median() / 3600.0
        if not np.isclose(median_step, 1.0):
            _LOGGER.warning(f"Weather resolution is ~{median_step:.2f} h, the model expects hourly data")
    return df


def resolve_profile(profile=None) -> DiurnalProfile:
    """Return a validated DiurnalProfile, loading the bundled one when none is given."""
    if profile is None:
        return load_diurnal_profile()
    if isinstance(profile, DiurnalProfile):
        return profile
    return DiurnalProfile.from_frame(profile)


def energy_demand(time, temperature, nrg, use_diurnal_profile=True, profile=None) -> pd.DataFrame:
    """
    Convert an hourly temperature index into energy demand.

    Args:
        time: Hourly timestamps.
        temperature: Temperature index aligned with time (normally BAIT).
        nrg: EnergyParameters (or a mapping with t_heat, t_cool, p_base, p_heat, p_cool).
        use_diurnal_profile: Shape heating/cooling by hour of day.
        profile: DiurnalProfile to use (bundled profile if None).

    Returns:
        DataFrame with time, HDD, CDD, heating_demand, cooling_demand, total_demand.
    """
    nrg = coerce_parameters(nrg, EnergyParameters)
    time = pd.Series(pd.to_datetime(time)).reset_index(drop=True)
    temperature = np.asarray(temperature, dtype=float)
    if len(time) != len(temperature):
        raise ValidationError(f"Got {len(time)} timestamps but {len(temperature)} temperatures")

    n = len(temperature)
    hdd_values = np.zeros(n)
    cdd_values = np.zeros(n)
    heating = np.zeros(n)
    cooling = np.zeros(n)

    # A channel with no power is off entirely, degree days included
    if nrg.p_heat > 0:
        hdd_values = hdd(temperature, nrg.t_heat)
        heating = hdd_values * nrg.p_heat

    if nrg.p_cool > 0:
        cdd_values = cdd(temperature, nrg.t_cool)
        cooling = cdd_values * nrg.p_cool

    if use_diurnal_profile:
        heating, cooling = apply_diurnal_profile(time, heating, cooling, resolve_profile(profile))

    return pd.DataFrame({
        'time': time,
        'HDD': hdd_values,
        'CDD': cdd_values,
        'heating_demand': heating,
        'cooling_demand': cooling,
        'total_demand': nrg.p_base + heating + cooling,
    })


def demand_ninja(weather, bait, nrg, use_diurnal_profile=True, add_raw_data=True, profile=None) -> pd.DataFrame:
    """
    Calculate hourly energy demand for a building from hourly weather.

    Args:
        weather: DataFrame with time, T (C), S (W/m2), W (m/s), H (g/kg).
        bait: BaitParameters or mapping (smoothing, solar, wind, humidity).
        nrg: EnergyParameters or mapping (t_heat, t_cool, p_base, p_heat, p_cool).
        use_diurnal_profile: Apply hour-of-day shaping to heating and cooling.
        add_raw_data: Keep weather, BAIT, HDD and CDD columns in the result.
        profile: DiurnalProfile (or hour/heating/cooling table) to use instead
            of the bundled global profile.

    Returns:
        DataFrame aligned row-for-row with weather.

    Raises:
        ValidationError: missing or unusable weather columns / parameters.
        ConfigurationError: malformed diurnal profile.
    """
    # Check everything before computing anything
    weather = validate_weather(weather)
    bait = coerce_parameters(bait, BaitParameters)
    nrg = coerce_parameters(nrg, EnergyParameters)
    if use_diurnal_profile:
        profile = resolve_profile(profile)

    check_typical_ranges(bait)
    check_typical_ranges(nrg)

    # 1. Daily weather -> daily BAIT
    daily = aggregate_daily(weather[WEATHER_COLUMNS], 'time')
    daily['BAIT'] = temperature_index(daily, bait)

    # 2. Upsample BAIT to the original timestamps
    # Earlier model output fed back in as weather is replaced, not duplicated
    outputs = ['BAIT', 'HDD', 'CDD'] + DEMAND_COLUMNS
    hourly = weather.drop(columns=[c for c in outputs if c in weather.columns])
    hourly['BAIT'] = interpolate_hourly(daily['date'], daily['BAIT'], hourly['time'])

    # 3. Degree days and demand
    ninja = energy_demand(hourly['time'], hourly['BAIT'], nrg, use_diurnal_profile, profile)
    hourly = pd.concat([hourly, ninja.drop(columns=['time'])], axis=1)

    if not add_raw_data:
        hourly = hourly[['time'] + DEMAND_COLUMNS]

    _LOGGER.info(f"Modelled {len(hourly)} hours over {len(daily)} days: "
                 f"mean total demand {hourly['total_demand'].mean():.3f} kW")
    return hourly


compute_demand = demand_ninja
