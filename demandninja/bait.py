"""
Building-Adjusted Internal Temperature (BAIT).

A 'feels like' temperature for the inside of a building: raw air temperature
adjusted for sun, wind and humidity relative to what is normal for that
temperature, smoothed over the previous two days to represent thermal inertia,
and finally blended back towards raw temperature in warm weather (occupants
open windows).
"""
import logging

import numpy as np

from . import constants as c
from .smoothing import smooth_temperatures

_LOGGER = logging.getLogger(__name__)


def setpoints(temperature):
    """
    The 'average' solar, wind and humidity for each temperature.
    Used as the zero reference, which keeps the index roughly 1:1 with T.
    """
    t = np.asarray(temperature, dtype=float)
    return {
        'S': c.SETPOINT_S_BASE + c.SETPOINT_S_SLOPE * t,           # W/m2
        'W': c.SETPOINT_W_BASE + c.SETPOINT_W_SLOPE * t,           # m/s
        'H': np.exp(c.SETPOINT_H_BASE + c.SETPOINT_H_SLOPE * t),   # g/kg
    }


def raw_temperature_index(weather, bait):
    """Unsmoothed index from daily T, S, W, H (before smoothing and blending)."""
    t = np.asarray(weather['T'], dtype=float)
    s = np.asarray(weather['S'], dtype=float)
    w = np.asarray(weather['W'], dtype=float)
    h = np.asarray(weather['H'], dtype=float)
    sp = setpoints(t)

    n = t.copy()

    # Sunny feels warmer, windy feels colder
    n = n + (s - sp['S']) * bait.solar
    n = n + (w - sp['W']) * bait.wind

    # Humidity pushes both hot and cold further from comfortable
    discomfort = n - c.SETPOINT_T
    n = c.SETPOINT_T + discomfort + (discomfort * (h - sp['H']) * bait.humidity)

    return n


def blend_fraction(temperature):
    """
    Share of raw temperature mixed into the index.
    Sigmoid mapping LOWER_BLEND..UPPER_BLEND onto -5..+5, capped at MAX_RAW_VAR.
    """
    t = np.asarray(temperature, dtype=float)
    avg_blend = (c.LOWER_BLEND + c.UPPER_BLEND) / 2
    dif_blend = c.UPPER_BLEND - c.LOWER_BLEND
    x = (t - avg_blend) * c.BLEND_SIGMOID_SPAN / dif_blend
    return c.MAX_RAW_VAR / (1.0 + np.exp(-x))


def temperature_index(weather, bait):
    """
    Compute BAIT for each row of daily weather.

    Args:
        weather: daily means with columns T, S, W, H (DataFrame or mapping of arrays).
        bait: BaitParameters.

    Returns:
        numpy array, one value per row.
    """
    n = raw_temperature_index(weather, bait)

    # 2nd day weight is the square of the first (compounding decay)
    weights = bait.smoothing ** np.arange(1, c.SMOOTHING_DAYS + 1)
    n = smooth_temperatures(n, weights)

    t = np.asarray(weather['T'], dtype=float)
    blend = blend_fraction(t)
    n = (t * blend) + (n * (1.0 - blend))

    _LOGGER.debug(f"BAIT computed for {len(n)} days")
    return n
