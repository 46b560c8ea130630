"""
Power-based metric calculations.

This module handles the power metrics reported for each workout:
- Average Power (positive samples only)
- Normalized Power (NP)
- Best efforts over 5s, 1m, 5m and 20m

Every function takes an ordered series of per-second power samples and
returns integer watts, or None when the series holds too little data for
that metric. None of them raise on degenerate input.
"""

import logging

import numpy as np

from ..constants import TimeConstants
from ..models import EffortDuration, PowerMetrics
from .windows import SampleSeries, rolling_means, to_sample_array

logger = logging.getLogger(__name__)


def _round_watts(value: float) -> int:
    return int(round(float(value)))


def _safe_array(samples: SampleSeries) -> np.ndarray:
    try:
        return to_sample_array(samples)
    except (TypeError, ValueError) as e:
        logger.warning(f"Ignoring unusable power samples: {e}")
        return np.empty(0, dtype=float)


def average_power(samples: SampleSeries) -> int | None:
    """
    Calculate average power over strictly positive samples.

    Zero and negative readings are sensor dropouts or coasting placeholders
    and are excluded from the mean.

    Args:
        samples: Ordered per-second power readings in watts

    Returns:
        Rounded mean in watts, or None if no sample is positive
    """
    power = _safe_array(samples)
    positive = power[power > 0]
    if positive.size == 0:
        return None
    return _round_watts(positive.mean())


def normalized_power(
    samples: SampleSeries, window: int = TimeConstants.NORMALIZED_POWER_WINDOW
) -> int | None:
    """
    Calculate Normalized Power using the 30-second rolling average method.

    The rolling averages include zero and negative samples. Each average is
    raised to the fourth power, the fourth powers are averaged and the
    fourth root of that mean is taken.

    Args:
        samples: Ordered per-second power readings in watts
        window: Rolling window length in seconds

    Returns:
        Rounded Normalized Power in watts, or None if the series is shorter
        than the rolling window
    """
    rolling_avg = rolling_means(_safe_array(samples), window)
    if rolling_avg.size == 0:
        return None

    fourth_power_mean = float(np.mean(rolling_avg**4))
    return _round_watts(fourth_power_mean**0.25)


def best_efforts(samples: SampleSeries) -> dict[str, int | None]:
    """
    Calculate the best mean power for each effort duration.

    The maximum starts at 0, so a series whose windows never average above
    zero reports 0 rather than None.

    Args:
        samples: Ordered per-second power readings in watts

    Returns:
        Mapping of every duration label ('5s', '1m', '5m', '20m') to rounded
        watts, or None where the series is shorter than the duration
    """
    power = _safe_array(samples)
    efforts: dict[str, int | None] = {}

    for duration in EffortDuration:
        window_means = rolling_means(power, duration.seconds)
        if window_means.size == 0:
            efforts[duration.label] = None
            continue
        efforts[duration.label] = _round_watts(max(0.0, float(window_means.max())))

    return efforts


class PowerMetricsEngine:
    """Computes all power metrics for one workout's sample series."""

    def calculate(self, samples: SampleSeries) -> PowerMetrics:
        """
        Calculate average power, Normalized Power and best efforts.

        Args:
            samples: Ordered per-second power readings in watts, or None

        Returns:
            PowerMetrics with every field populated; absent metrics are None
        """
        power = _safe_array(samples)
        logger.debug(f"Calculating power metrics for {power.size} samples")

        return PowerMetrics(
            average_power=average_power(power),
            normalized_power=normalized_power(power),
            best_efforts=best_efforts(power),
        )


def calculate_power_metrics(samples: SampleSeries) -> PowerMetrics:
    """Calculate all power metrics for a sample series."""
    return PowerMetricsEngine().calculate(samples)
