"""
Metrics calculation modules.

This package contains the power metric calculation logic:
- power: Average power, Normalized Power, best efforts and the engine
  combining them
- windows: Sample conversion and prefix-sum rolling windows
"""

from .power import (
    PowerMetricsEngine,
    average_power,
    best_efforts,
    calculate_power_metrics,
    normalized_power,
)
from .windows import rolling_means, to_sample_array

__all__ = [
    "PowerMetricsEngine",
    "average_power",
    "best_efforts",
    "calculate_power_metrics",
    "normalized_power",
    "rolling_means",
    "to_sample_array",
]
