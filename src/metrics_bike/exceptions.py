"""
Custom exceptions for the Metrics.bike package.

This module defines all custom exceptions used throughout the application,
providing clear error hierarchies and specific error types for different scenarios.
"""


class MetricsBikeError(Exception):
    """Base exception for all Metrics.bike errors."""


class ConfigurationError(MetricsBikeError):
    """Raised when there is an issue with configuration settings."""


class AuthenticationError(MetricsBikeError):
    """Raised when the OAuth flow fails or no valid access token is available."""


class ApiError(MetricsBikeError):
    """Raised when the workout API returns an error or an unexpected payload."""

    def __init__(self, message: str, status_code: int | None = None):
        if status_code is not None:
            super().__init__(f"API request failed: {status_code} {message}".rstrip())
        else:
            super().__init__(message)
        self.status_code = status_code
        self.message = message


class DataLoadError(MetricsBikeError):
    """Raised when there is an error loading workout data."""


class FitDecodeError(DataLoadError):
    """Raised when a FIT file cannot be decoded."""
