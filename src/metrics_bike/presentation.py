"""
Rendering of analyzed workouts.

Formats analyzed workouts as plain text for the terminal and as pandas
DataFrames for CSV export.
"""

import logging
from datetime import datetime
from pathlib import Path

import pandas as pd

from .constants import CSVConstants, DisplayConstants, TimeConstants
from .models import AnalyzedWorkout, EffortDuration, Workout

logger = logging.getLogger(__name__)


def format_duration(seconds: float) -> str:
    """Format a duration in seconds as HH:MM:SS."""
    total = int(seconds)
    hours, remainder = divmod(total, TimeConstants.SECONDS_PER_HOUR)
    minutes, remaining_seconds = divmod(remainder, TimeConstants.SECONDS_PER_MINUTE)
    return f"{hours:02d}:{minutes:02d}:{remaining_seconds:02d}"


def format_date(timestamp: datetime) -> str:
    """Format a start time in the local timezone."""
    if timestamp.tzinfo is not None:
        timestamp = timestamp.astimezone()
    return timestamp.strftime("%Y-%m-%d %H:%M:%S")


def format_distance(meters: float) -> str:
    return f"{meters / DisplayConstants.METERS_PER_KM:.2f} km"


def format_speed(meters_per_second: float) -> str:
    return f"{meters_per_second * DisplayConstants.MPS_TO_KMH:.1f} km/h"


def format_watts(value: int | None) -> str:
    """Format a power value, showing a dash when it is absent."""
    if value is None:
        return DisplayConstants.MISSING_VALUE
    return f"{value} watts"


def workout_duration_seconds(workout: Workout) -> float | None:
    """
    Duration of a workout in seconds.

    Prefers the active duration from the summary and falls back to the
    ``minutes`` field of the workout record.
    """
    summary = workout.workout_summary
    if summary is not None and summary.duration_active_accum:
        return summary.duration_active_accum
    if workout.minutes:
        return workout.minutes * TimeConstants.SECONDS_PER_MINUTE
    return None


def _display_name(workout: Workout) -> str:
    if not workout.name:
        return "Unknown"
    return workout.name[0].upper() + workout.name[1:]


def render_workout(analyzed: AnalyzedWorkout) -> str:
    """Render one analyzed workout as a block of text."""
    workout = analyzed.workout
    summary = workout.workout_summary
    metrics = analyzed.metrics

    start = format_date(workout.starts) if workout.starts else "Unknown date"
    duration = workout_duration_seconds(workout)
    lines = [
        f"{_display_name(workout)} - {start}",
        f"Duration: {format_duration(duration) if duration else 'Unknown duration'}",
        "Distance: "
        + (
            format_distance(summary.distance_accum)
            if summary is not None and summary.distance_accum
            else "Unknown distance"
        ),
    ]

    if summary is not None:
        if summary.calories_accum:
            lines.append(f"Calories: {summary.calories_accum:g} kcal")
        if summary.heart_rate_avg:
            lines.append(f"Avg Heart Rate: {summary.heart_rate_avg:g} bpm")
        if summary.speed_avg:
            lines.append(f"Avg Speed: {format_speed(summary.speed_avg)}")

    lines.append(f"Average Power: {format_watts(metrics.average_power)}")
    lines.append(f"Normalized Power: {format_watts(metrics.normalized_power)}")
    efforts = ", ".join(
        f"{duration.label}: {format_watts(metrics.best_efforts.get(duration.label))}"
        for duration in EffortDuration
    )
    lines.append(f"Best Efforts: {efforts}")

    return "\n".join(lines)


def render_workouts(workouts: list[AnalyzedWorkout]) -> str:
    """Render a list of analyzed workouts separated by blank lines."""
    if not workouts:
        return DisplayConstants.NO_WORKOUTS_MESSAGE
    return "\n\n".join(render_workout(analyzed) for analyzed in workouts)


def workouts_to_frame(workouts: list[AnalyzedWorkout]) -> pd.DataFrame:
    """
    Flatten analyzed workouts into one row per workout.

    Power columns use the nullable Int64 dtype so absent metrics stay
    distinguishable from zero.
    """
    power_columns = ["average_power", "normalized_power"] + [
        f"best_{duration.label}" for duration in EffortDuration
    ]

    rows = []
    for analyzed in workouts:
        workout = analyzed.workout
        summary = workout.workout_summary
        row = {
            "id": workout.id,
            "name": workout.name,
            "starts": workout.starts,
            "duration_seconds": workout_duration_seconds(workout),
            "distance_m": summary.distance_accum if summary is not None else None,
            "sample_count": analyzed.sample_count,
            "average_power": analyzed.metrics.average_power,
            "normalized_power": analyzed.metrics.normalized_power,
        }
        for duration in EffortDuration:
            row[f"best_{duration.label}"] = analyzed.metrics.best_efforts.get(
                duration.label
            )
        rows.append(row)

    columns = [
        "id",
        "name",
        "starts",
        "duration_seconds",
        "distance_m",
        "sample_count",
        *power_columns,
    ]
    df = pd.DataFrame(rows, columns=columns)
    return df.astype({column: "Int64" for column in power_columns})


def export_csv(workouts: list[AnalyzedWorkout], path: Path) -> Path:
    """Write analyzed workouts to a semicolon-separated CSV file."""
    df = workouts_to_frame(workouts)
    df.to_csv(
        path,
        index=False,
        sep=CSVConstants.DEFAULT_SEPARATOR,
        encoding=CSVConstants.DEFAULT_ENCODING,
    )
    logger.info(f"Saved {len(df)} workouts to {path}")
    return path
