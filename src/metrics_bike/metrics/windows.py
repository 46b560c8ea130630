"""
Sample conversion and rolling-window helpers for power series.

Windows are computed from prefix sums so every window mean costs O(1)
regardless of its length.
"""

import numpy as np
import numpy.typing as npt
import pandas as pd

SampleSeries = npt.ArrayLike | pd.Series | None


def to_sample_array(samples: SampleSeries) -> np.ndarray:
    """
    Convert a power sample series to a 1-D float array.

    The input is never modified. Missing and non-finite readings (None, NaN,
    inf) become 0, the same placeholder the source stream uses for dropouts.

    Args:
        samples: Ordered per-second power readings in watts, or None

    Returns:
        New float64 array with one element per sample

    Raises:
        TypeError, ValueError: If the samples are not numeric or not 1-D
    """
    if samples is None:
        return np.empty(0, dtype=float)

    if isinstance(samples, pd.Series):
        samples = samples.to_numpy(dtype=float, na_value=np.nan)

    power = np.atleast_1d(np.asarray(samples, dtype=float))
    if power.ndim > 1:
        raise ValueError(f"Expected a 1-D sample series, got shape {power.shape}")
    return np.where(np.isfinite(power), power, 0.0)


def rolling_means(power: np.ndarray, window: int) -> np.ndarray:
    """
    Mean of every contiguous window of ``window`` samples.

    Returns ``len(power) - window + 1`` values ordered by window start, or an
    empty array when the series is shorter than the window.
    """
    if window <= 0 or len(power) < window:
        return np.empty(0, dtype=float)

    cumsum = np.concatenate(([0.0], np.cumsum(power, dtype=float)))
    return (cumsum[window:] - cumsum[:-window]) / window
