import numpy as np


def hdd(temperature, threshold):
    """
    Heating degree days: how far temperature falls below the threshold.
    Elementwise over scalars or arrays, never negative.
    """
    return np.maximum(0.0, threshold - np.asarray(temperature, dtype=float))


def cdd(temperature, threshold):
    """
    Cooling degree days: how far temperature rises above the threshold.
    Elementwise over scalars or arrays, never negative.
    """
    return np.maximum(0.0, np.asarray(temperature, dtype=float) - threshold)
