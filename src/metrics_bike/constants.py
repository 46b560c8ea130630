"""
Constants used throughout the Metrics.bike package.

This module centralizes all magic numbers and commonly used values to improve
maintainability and clarity.
"""

from typing import Final


# === Time Constants ===
class TimeConstants:
    """Time-related constants in seconds."""

    SECONDS_PER_MINUTE: Final[int] = 60
    SECONDS_PER_HOUR: Final[int] = 3600

    # Rolling window sizes
    NORMALIZED_POWER_WINDOW: Final[int] = 30  # 30 seconds for NP calculation


# === Best Effort Durations ===
class BestEffortDurations:
    """Durations for best-effort (maximal mean power) analysis, in seconds."""

    DURATION_5S: Final[int] = 5
    DURATION_1MIN: Final[int] = 60
    DURATION_5MIN: Final[int] = 300
    DURATION_20MIN: Final[int] = 1200

    @classmethod
    def get_standard_durations(cls) -> dict[str, int]:
        """Get all best-effort durations keyed by display label."""
        return {
            "5s": cls.DURATION_5S,
            "1m": cls.DURATION_1MIN,
            "5m": cls.DURATION_5MIN,
            "20m": cls.DURATION_20MIN,
        }


# === Wahoo Cloud API ===
class WahooApi:
    """Wahoo Cloud API endpoints and OAuth defaults."""

    BASE_URL: Final[str] = "https://api.wahooligan.com"
    WORKOUTS_PATH: Final[str] = "/v1/workouts"
    AUTH_ENDPOINT: Final[str] = "https://api.wahooligan.com/oauth/authorize"
    TOKEN_ENDPOINT: Final[str] = "https://api.wahooligan.com/oauth/token"
    SCOPE: Final[str] = "user_read workouts_read"
    DEFAULT_CLIENT_ID: Final[str] = "Jm_cbkNKssVAPN9wa0583ZKzdyVnjbVs0Jo9FlZ25vo"

    # Keys a workout listing may be wrapped in
    LIST_KEYS: Final[tuple[str, ...]] = ("items", "workouts")


# === PKCE ===
class PkceConstants:
    """Constants for the OAuth 2.0 PKCE extension (RFC 7636)."""

    VERIFIER_BYTES: Final[int] = 32
    CHALLENGE_METHOD: Final[str] = "S256"


# === Display ===
class DisplayConstants:
    """Constants used when rendering workouts."""

    MISSING_VALUE: Final[str] = "—"
    METERS_PER_KM: Final[float] = 1000.0
    MPS_TO_KMH: Final[float] = 3.6
    NO_WORKOUTS_MESSAGE: Final[str] = "No cycling activities with power data found."


# === CSV Export ===
class CSVConstants:
    """Constants for CSV file export."""

    DEFAULT_SEPARATOR: Final[str] = ";"  # Semicolon-separated format
    DEFAULT_ENCODING: Final[str] = "utf-8"
