"""
Workout API client.

This module provides a thin wrapper around the Wahoo Cloud API for listing
recent workouts and downloading their FIT files.
"""

import logging
from typing import Any, Protocol

import requests
from pydantic import ValidationError

from ..constants import WahooApi
from ..exceptions import ApiError
from ..models import Workout
from ..settings import Settings

logger = logging.getLogger(__name__)


class WorkoutSourceProtocol(Protocol):
    """Protocol for workout sources."""

    def list_workouts(self, per_page: int) -> list[Workout]:
        """List the most recent workouts."""
        ...

    def download_file(self, url: str) -> bytes:
        """Download a workout's FIT file."""
        ...


class WahooClient:
    """Authenticated client for the workout listing and file downloads."""

    def __init__(
        self,
        access_token: str,
        settings: Settings,
        session: requests.Session | None = None,
    ):
        self.settings = settings
        self.timeout = settings.http_timeout
        self.session = session or requests.Session()
        self.auth_headers = {"Authorization": f"Bearer {access_token}"}

    def _get(self, url: str, **kwargs: Any) -> requests.Response:
        try:
            response = self.session.get(url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            raise ApiError(f"Request to {url} failed: {e}") from e

        if not response.ok:
            raise ApiError(response.reason or "", status_code=response.status_code)
        return response

    def list_workouts(self, per_page: int | None = None) -> list[Workout]:
        """
        List the most recent workouts.

        Args:
            per_page: Number of workouts to request; defaults to settings

        Returns:
            Workouts in the order returned by the API

        Raises:
            ApiError: If the request fails or the payload is not a workout list
        """
        per_page = per_page or self.settings.num_activities
        response = self._get(
            self.settings.workouts_url,
            params={"per_page": per_page},
            headers=self.auth_headers,
        )

        try:
            payload = response.json()
        except ValueError as e:
            raise ApiError("Unexpected API response format") from e

        items = _extract_items(payload)
        if not isinstance(items, list):
            raise ApiError("Unexpected API response format")

        try:
            workouts = [Workout.model_validate(item) for item in items]
        except ValidationError as e:
            raise ApiError(f"Unexpected API response format: {e}") from e

        logger.info(f"Listed {len(workouts)} workouts")
        return workouts

    def download_file(self, url: str) -> bytes:
        """Download a FIT file. File URLs are pre-signed, so no auth header."""
        logger.debug(f"Downloading FIT file {url}")
        return self._get(url).content


def _extract_items(payload: Any) -> Any:
    if isinstance(payload, dict):
        for key in WahooApi.LIST_KEYS:
            if payload.get(key) is not None:
                return payload[key]
    return payload
