"""
Service layer for coordinating business logic.

This package contains high-level services that coordinate multiple components
to accomplish business goals.
"""

from .workout_service import WorkoutService

__all__ = [
    "WorkoutService",
]
