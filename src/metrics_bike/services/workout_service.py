"""
High-level service for workout processing.

This service coordinates authentication, workout listing, FIT decoding and
power analysis to produce the analyzed workouts shown to the user.
"""

import logging
from collections.abc import Callable, Sequence
from pathlib import Path

from ..auth import OAuthClient
from ..data import (
    FitPowerDecoder,
    PowerDecoderProtocol,
    WahooClient,
    WorkoutSourceProtocol,
)
from ..exceptions import ApiError, AuthenticationError, FitDecodeError
from ..metrics import PowerMetricsEngine
from ..models import AnalyzedWorkout, Workout
from ..settings import Settings

logger = logging.getLogger(__name__)

ClientFactory = Callable[[str, Settings], WorkoutSourceProtocol]


class WorkoutService:
    """
    High-level service for workout data operations.

    Collaborators are injected so each step can be replaced independently.
    """

    def __init__(
        self,
        settings: Settings,
        oauth: OAuthClient | None = None,
        decoder: PowerDecoderProtocol | None = None,
        engine: PowerMetricsEngine | None = None,
        client_factory: ClientFactory | None = None,
    ):
        """
        Initialize the workout service.

        Args:
            settings: Application settings
            oauth: Source of access tokens
            decoder: Converts FIT bytes into power samples
            engine: Power metrics engine
            client_factory: Builds a workout source from an access token
        """
        self.settings = settings
        self.oauth = oauth or OAuthClient(settings)
        self.decoder = decoder or FitPowerDecoder()
        self.engine = engine or PowerMetricsEngine()
        self.client_factory = client_factory or WahooClient
        self.logger = logging.getLogger(__name__)

    def fetch_workouts(self, limit: int | None = None) -> list[AnalyzedWorkout]:
        """
        Fetch, decode and analyze the most recent workouts.

        Workouts without a FIT file, without power samples or without any
        positive power reading are skipped, as are workouts whose file cannot
        be downloaded or decoded.

        Args:
            limit: Number of workouts to request; defaults to settings

        Returns:
            Analyzed workouts in API order

        Raises:
            AuthenticationError: If no access token is available
            ApiError: If the workout listing fails
        """
        token = self.oauth.get_access_token()
        if not token:
            raise AuthenticationError("Not authenticated. Please log in again.")

        client = self.client_factory(token, self.settings)
        workouts = client.list_workouts(limit or self.settings.num_activities)

        analyzed: list[AnalyzedWorkout] = []
        for workout in workouts:
            url = workout.file_url
            if not url:
                self.logger.debug(f"Workout {workout.id} has no FIT file, skipping")
                continue

            try:
                samples = self.decoder.decode(client.download_file(url))
            except (ApiError, FitDecodeError) as e:
                self.logger.warning(f"Error parsing FIT file for {workout.id}: {e}")
                continue

            if not samples:
                continue

            result = self.analyze_samples(workout, samples)
            if result.metrics.average_power is None:
                self.logger.debug(f"Workout {workout.id} has no power data, skipping")
                continue

            analyzed.append(result)

        self.logger.info(f"Analyzed {len(analyzed)} of {len(workouts)} workouts")
        return analyzed

    def analyze_samples(
        self, workout: Workout, samples: Sequence[float]
    ) -> AnalyzedWorkout:
        """Attach power metrics computed from ``samples`` to a workout."""
        return AnalyzedWorkout(
            workout=workout,
            metrics=self.engine.calculate(samples),
            sample_count=len(samples),
        )

    def analyze_file(self, path: Path) -> AnalyzedWorkout:
        """
        Analyze a local FIT file without contacting the API.

        Raises:
            FitDecodeError: If the file cannot be read or decoded
        """
        path = Path(path)
        try:
            data = path.read_bytes()
        except OSError as e:
            raise FitDecodeError(f"Cannot read FIT file {path}: {e}") from e

        samples = self.decoder.decode(data)
        return self.analyze_samples(Workout(id=path.stem, name=path.stem), samples)
