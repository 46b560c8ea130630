"""Application settings and configuration management."""

from pathlib import Path

import yaml
from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import WahooApi
from .exceptions import ConfigurationError


class Settings(BaseSettings):
    """
    Application settings for Metrics.bike.

    Settings are loaded in the following order of precedence (highest to lowest):
    1. Values from a YAML config file (via load_settings)
    2. Environment variables (e.g., METRICS_BIKE_CLIENT_ID)
    3. .env file (if found)
    4. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="METRICS_BIKE_", env_file=".env", extra="ignore"
    )

    # --- OAuth ---
    client_id: str = WahooApi.DEFAULT_CLIENT_ID
    redirect_uri: str = "http://localhost:8080/"
    scope: str = WahooApi.SCOPE
    auth_endpoint: str = WahooApi.AUTH_ENDPOINT
    token_endpoint: str = WahooApi.TOKEN_ENDPOINT

    # --- Workout API ---
    api_base_url: str = WahooApi.BASE_URL
    num_activities: int = 10  # Number of recent workouts to fetch
    http_timeout: float = 30.0  # Seconds

    # --- Token storage ---
    token_file: Path = Path("~/.metrics_bike/tokens.json")

    @property
    def workouts_url(self) -> str:
        """Full URL of the workout listing endpoint."""
        return f"{self.api_base_url.rstrip('/')}{WahooApi.WORKOUTS_PATH}"

    @property
    def token_path(self) -> Path:
        """Token file path with the user directory expanded."""
        return self.token_file.expanduser()


def load_settings(config_file: Path | None = None) -> Settings:
    """Load settings from a YAML file, environment variables, and defaults."""
    if config_file:
        try:
            with open(config_file, encoding="utf-8") as f:
                yaml_settings = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to read config file: {e}") from e

        if not isinstance(yaml_settings, dict):
            raise ConfigurationError(
                f"Config file must contain a mapping: {config_file}"
            )

        # Relative token paths are resolved against the config file location
        if (
            "token_file" in yaml_settings
            and not str(yaml_settings["token_file"]).startswith("~")
            and not Path(yaml_settings["token_file"]).is_absolute()
        ):
            yaml_settings["token_file"] = str(
                config_file.parent / yaml_settings["token_file"]
            )

        try:
            return Settings(**yaml_settings)
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid configuration in {config_file}: {e}"
            ) from e

    return Settings()
