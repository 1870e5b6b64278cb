import numpy as np


def smooth_temperatures(temperature, weights):
    """
    Smooth a temperature series over time with independent weights for previous steps.

    Args:
        temperature: 1-D sequence of temperatures (one per time step).
        weights: weights[0] applies to the previous step, weights[1] to two steps back, etc.

    Returns:
        Array of the same length:
        (T[t] + sum_i w_i * T[t-i]) / (1 + sum_i w_i)

    Steps before the start of the series repeat the first value, so the first
    element is returned unchanged. A temperature half-life of one day is
    weights = [0.5, 0.25].
    """
    temperature = np.asarray(temperature, dtype=float)
    weights = [float(w) for w in weights]
    if temperature.size == 0:
        return temperature.copy()

    lag = temperature
    smooth = temperature.copy()

    # Step one time-step further back for each weight in turn
    for w in weights:
        lag = np.concatenate((lag[:1], lag[:-1]))
        if w != 0:
            smooth += lag * w

    # Zero weights still count towards the normaliser
    return smooth / (1.0 + sum(weights))
