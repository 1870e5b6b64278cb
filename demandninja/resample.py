import logging

import numpy as np
import pandas as pd
from scipy.interpolate import CubicSpline

from .constants import ANCHOR_HOURS
from .errors import ValidationError

_LOGGER = logging.getLogger(__name__)


def hours_axis(times):
    """
    Convert timestamps to float hours since the epoch (for spline fitting).
    Timezone-aware input is placed on the UTC axis.
    """
    idx = pd.DatetimeIndex(pd.to_datetime(times))
    if idx.tz is not None:
        idx = idx.tz_convert('UTC').tz_localize(None)
    return np.asarray((idx - pd.Timestamp(0)) / pd.Timedelta(hours=1), dtype=float)


def aggregate_daily(hourly: pd.DataFrame, col: str = 'time') -> pd.DataFrame:
    """
    Aggregate a sub-daily DataFrame to daily means.

    Args:
        hourly: DataFrame with a datetime column `col` and numeric value columns.
        col: Name of the timestamp column.

    Returns:
        DataFrame with one row per calendar day: a 'date' column holding the
        start of the day, followed by the mean of every numeric column.
    """
    df = pd.DataFrame(hourly)
    if col not in df.columns:
        raise ValidationError(f"Missing required column: {col}")

    times = pd.to_datetime(df[col])
    tz = times.dt.tz
    if tz is None:
        dates = times.dt.floor('D')
    else:
        # Floor on the wall clock; where midnight does not exist the day starts at the first real hour
        wall = times.dt.tz_localize(None).dt.floor('D')
        dates = wall.dt.tz_localize(tz, nonexistent='shift_forward', ambiguous=np.ones(len(wall), dtype=bool))
    dates = dates.rename('date')
    daily = df.drop(columns=[col]).groupby(dates).mean(numeric_only=True).reset_index()

    _LOGGER.debug(f"Aggregated {len(df)} rows into {len(daily)} days")
    return daily


def interpolate_hourly(input_dates, input_values, output_times) -> np.ndarray:
    """
    Convert a daily series to hourly (or any) resolution.

    Each daily value is treated as the value at noon of that day and a natural
    cubic spline is fitted through those anchors. Outside the first and last
    anchor the spline continues along its end slope (zero curvature), which
    covers the first and last half-day of an hourly series.

    Args:
        input_dates: Start of each day (daily resolution, strictly increasing).
        input_values: One value per day (BAIT, demand, temperature, ...).
        output_times: Timestamps to evaluate at.

    Returns:
        numpy array aligned with output_times.
    """
    x = hours_axis(input_dates) + ANCHOR_HOURS
    y = np.asarray(input_values, dtype=float)
    x_out = hours_axis(output_times)

    if len(x) != len(y):
        raise ValidationError(f"Got {len(x)} dates but {len(y)} values to interpolate")
    if len(x) == 0:
        raise ValidationError("Cannot interpolate an empty daily series")
    if np.any(np.diff(x) <= 0):
        raise ValidationError("Daily dates must be strictly increasing")

    # A single day carries no shape, only a level
    if len(x) == 1:
        return np.full(len(x_out), y[0])

    spline = CubicSpline(x, y, bc_type='natural', extrapolate=True)
    output = spline(x_out)

    slope = spline.derivative()
    before = x_out < x[0]
    after = x_out > x[-1]
    output[before] = y[0] + slope(x[0]) * (x_out[before] - x[0])
    output[after] = y[-1] + slope(x[-1]) * (x_out[after] - x[-1])

    return output
