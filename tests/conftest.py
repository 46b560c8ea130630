"""
Shared pytest fixtures for Metrics.bike tests.

This module provides reusable fixtures for:
- Settings configurations
- Power sample series
- Workout API payloads and analyzed workouts
- Mocked HTTP responses
"""

from datetime import datetime, timezone
from pathlib import Path
from unittest.mock import MagicMock

import pytest
import yaml

from metrics_bike.metrics import calculate_power_metrics
from metrics_bike.models import AnalyzedWorkout, Workout
from metrics_bike.settings import Settings

# ============================================================================
# Configuration Fixtures
# ============================================================================


@pytest.fixture
def token_file(tmp_path: Path) -> Path:
    """Provide a token file path inside a temporary directory."""
    return tmp_path / "tokens" / "tokens.json"


@pytest.fixture
def settings(token_file: Path) -> Settings:
    """Provide settings that store tokens in a temporary directory."""
    return Settings(
        client_id="test-client",
        redirect_uri="http://localhost:8080/",
        token_file=token_file,
        num_activities=10,
    )


@pytest.fixture
def temp_config_file(tmp_path: Path) -> Path:
    """Create a temporary YAML config file path for testing."""
    return tmp_path / "config.yaml"


@pytest.fixture
def sample_config_file(temp_config_file: Path) -> Path:
    """Create a temporary config file with sample data."""
    with open(temp_config_file, "w") as f:
        yaml.dump(
            {
                "client_id": "yaml-client",
                "num_activities": 5,
                "token_file": "tokens.json",
            },
            f,
        )
    return temp_config_file


# ============================================================================
# Data Fixtures - Power Series
# ============================================================================


@pytest.fixture
def steady_series() -> list[float]:
    """Ten minutes of perfectly steady 200W."""
    return [200.0] * 600


@pytest.fixture
def interval_series() -> list[float]:
    """
    Provide a realistic interval session (35 minutes).

    Warmup, five 1-minute efforts with 1-minute recoveries, cooldown.
    """
    return (
        [150.0] * 600  # Warmup (10 min)
        + ([350.0] * 60 + [150.0] * 60) * 5  # Intervals (10 min)
        + [150.0] * 900  # Cooldown (15 min)
    )


@pytest.fixture
def series_with_dropouts() -> list[float]:
    """Provide a 2-minute series with zero and negative placeholders."""
    return [250.0] * 40 + [0.0] * 20 + [-1.0] * 10 + [250.0] * 50


# ============================================================================
# Data Fixtures - Workouts
# ============================================================================


@pytest.fixture
def workout_payload() -> dict:
    """Provide a workout record as returned by the workout listing."""
    return {
        "id": 1001,
        "name": "morning ride",
        "starts": "2024-05-01T07:30:00.000Z",
        "minutes": 45,
        "workout_type_id": 0,
        "workout_summary": {
            "id": 5001,
            "distance_accum": 25340.0,
            "calories_accum": 610,
            "heart_rate_avg": 142,
            "speed_avg": 8.5,
            "duration_active_accum": 2700,
            "file": {"url": "https://cdn.example.com/1001.fit"},
        },
    }


@pytest.fixture
def workout(workout_payload: dict) -> Workout:
    return Workout.model_validate(workout_payload)


@pytest.fixture
def analyzed_workout(workout: Workout, interval_series: list[float]) -> AnalyzedWorkout:
    """Provide an analyzed workout with every metric present except 20m."""
    return AnalyzedWorkout(
        workout=workout,
        metrics=calculate_power_metrics(interval_series[:900]),
        sample_count=900,
    )


@pytest.fixture
def bare_workout() -> Workout:
    """Provide a workout with no optional fields."""
    return Workout(id="bare", starts=datetime(2024, 5, 2, 18, 0, tzinfo=timezone.utc))


# ============================================================================
# HTTP Fixtures
# ============================================================================


def _make_response(
    status_code: int = 200, json_data=None, content: bytes = b"", reason: str = ""
) -> MagicMock:
    """Build a mock requests.Response."""
    response = MagicMock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 400
    response.reason = reason
    response.content = content
    if isinstance(json_data, Exception):
        response.json.side_effect = json_data
    else:
        response.json.return_value = json_data
    return response


@pytest.fixture
def make_response():
    """Provide a factory for mock requests.Response objects."""
    return _make_response


@pytest.fixture
def mock_session() -> MagicMock:
    """Provide a mock requests.Session."""
    return MagicMock()
