"""Pytest configuration."""
import os
import sys

import numpy as np
import pandas as pd
import pytest

# Add the repo root to sys.path so `demandninja` and `main` import without installing.
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

BAIT = {'smoothing': 0.50, 'solar': 0.012, 'wind': -0.20, 'humidity': 0.05}
NRG = {'t_heat': 14.0, 't_cool': 19.5, 'p_base': 0.325, 'p_heat': 0.125, 'p_cool': 0.25}


def make_weather(days=3, start="2025-01-15 00:00", mean=15.0, amplitude=5.0, trend=0.0, tz=None):
    """
    Hourly weather with S, W and H exactly at their setpoints for each hour.
    Temperature is a daily cosine (min 3am) around `mean`, plus `trend` C/day.
    """
    timestamps = pd.date_range(start=start, periods=days * 24, freq="h", tz=tz)
    hours = np.arange(len(timestamps)) % 24
    t = mean + trend * np.arange(len(timestamps)) / 24.0 - amplitude * np.cos((hours - 3) * np.pi / 12)
    return pd.DataFrame({
        'time': timestamps,
        'T': t,
        'S': 100 + 7 * t,
        'W': 4.5 - 0.025 * t,
        'H': np.exp(1.1 + 0.06 * t),
    })


@pytest.fixture
def weather_factory():
    return make_weather


@pytest.fixture
def setpoint_weather():
    return make_weather()


@pytest.fixture
def bait():
    return dict(BAIT)


@pytest.fixture
def nrg():
    return dict(NRG)
