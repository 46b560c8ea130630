"""
Data access layer.

This package contains modules for listing workouts, downloading their FIT
files and decoding power series from them.
"""

from .client import WahooClient, WorkoutSourceProtocol
from .decoder import FitPowerDecoder, PowerDecoderProtocol

__all__ = [
    "FitPowerDecoder",
    "PowerDecoderProtocol",
    "WahooClient",
    "WorkoutSourceProtocol",
]
