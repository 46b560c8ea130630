"""Metrics.bike - power analysis for Wahoo cycling workouts."""

__version__ = "0.1.0"

from . import auth, constants, data, exceptions, metrics, models, services
from .auth import OAuthClient, TokenStore
from .data import FitPowerDecoder, WahooClient
from .metrics import (
    PowerMetricsEngine,
    average_power,
    best_efforts,
    calculate_power_metrics,
    normalized_power,
)
from .models import (
    AnalyzedWorkout,
    AuthResult,
    EffortDuration,
    PowerMetrics,
    TokenSet,
    Workout,
    WorkoutSummary,
)
from .services import WorkoutService


def get_version() -> str:
    """Get the current version of metrics_bike."""
    return __version__


def get_package_info() -> dict[str, str]:
    """Get package information including name and version."""
    return {
        "name": "metrics-bike",
        "version": __version__,
        "description": "Power analysis for Wahoo cycling workouts",
    }


__all__ = [
    # Version & Info
    "get_version",
    "get_package_info",
    # Models
    "AnalyzedWorkout",
    "AuthResult",
    "EffortDuration",
    "PowerMetrics",
    "TokenSet",
    "Workout",
    "WorkoutSummary",
    # Metrics
    "PowerMetricsEngine",
    "average_power",
    "best_efforts",
    "calculate_power_metrics",
    "normalized_power",
    # Auth
    "OAuthClient",
    "TokenStore",
    # Data Layer
    "FitPowerDecoder",
    "WahooClient",
    # Services
    "WorkoutService",
    # Modules
    "auth",
    "constants",
    "data",
    "exceptions",
    "metrics",
    "models",
    "services",
]
