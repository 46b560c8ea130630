"""Unit tests for the command-line interface."""

import json
from pathlib import Path
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from metrics_bike.cli import main
from metrics_bike.exceptions import AuthenticationError
from metrics_bike.models import AnalyzedWorkout, AuthResult


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture(autouse=True)
def isolated_tokens(monkeypatch, tmp_path: Path):
    """Keep CLI runs away from the real token file."""
    monkeypatch.setenv("METRICS_BIKE_TOKEN_FILE", str(tmp_path / "tokens.json"))


class TestWorkoutsCommand:
    """Test the workouts command."""

    def test_renders_workouts(
        self, runner: CliRunner, analyzed_workout: AnalyzedWorkout
    ):
        with patch("metrics_bike.cli.WorkoutService") as service_cls:
            service_cls.return_value.fetch_workouts.return_value = [analyzed_workout]

            result = runner.invoke(main, ["workouts", "--limit", "3"])

        assert result.exit_code == 0
        assert "Morning ride" in result.output
        service_cls.return_value.fetch_workouts.assert_called_once_with(3)

    def test_json_output(self, runner: CliRunner, analyzed_workout: AnalyzedWorkout):
        with patch("metrics_bike.cli.WorkoutService") as service_cls:
            service_cls.return_value.fetch_workouts.return_value = [analyzed_workout]

            result = runner.invoke(main, ["workouts", "--json"])

        assert result.exit_code == 0
        payload = json.loads(result.output)
        assert payload[0]["metrics"]["best_efforts"]["20m"] is None
        assert payload[0]["workout"]["id"] == 1001

    def test_csv_export(
        self, runner: CliRunner, analyzed_workout: AnalyzedWorkout, tmp_path: Path
    ):
        csv_path = tmp_path / "out.csv"
        with patch("metrics_bike.cli.WorkoutService") as service_cls:
            service_cls.return_value.fetch_workouts.return_value = [analyzed_workout]

            result = runner.invoke(main, ["workouts", "--csv", str(csv_path)])

        assert result.exit_code == 0
        assert csv_path.exists()

    def test_no_workouts(self, runner: CliRunner):
        with patch("metrics_bike.cli.WorkoutService") as service_cls:
            service_cls.return_value.fetch_workouts.return_value = []

            result = runner.invoke(main, ["workouts"])

        assert "No cycling activities with power data found." in result.output

    def test_not_authenticated_aborts(self, runner: CliRunner):
        with patch("metrics_bike.cli.WorkoutService") as service_cls:
            service_cls.return_value.fetch_workouts.side_effect = AuthenticationError(
                "Not authenticated. Please log in again."
            )

            result = runner.invoke(main, ["workouts"])

        assert result.exit_code == 1
        assert "Aborted" in result.output


class TestAnalyzeCommand:
    """Test the analyze command."""

    def test_analyze_file(
        self, runner: CliRunner, analyzed_workout: AnalyzedWorkout, tmp_path: Path
    ):
        fit_path = tmp_path / "ride.fit"
        fit_path.write_bytes(b"fit")

        with patch("metrics_bike.cli.WorkoutService") as service_cls:
            service_cls.return_value.analyze_file.return_value = analyzed_workout

            result = runner.invoke(main, ["analyze", str(fit_path), "--json"])

        assert result.exit_code == 0
        service_cls.return_value.analyze_file.assert_called_once_with(fit_path)
        assert json.loads(result.output)["sample_count"] == 900

    def test_missing_file_rejected(self, runner: CliRunner, tmp_path: Path):
        result = runner.invoke(main, ["analyze", str(tmp_path / "nope.fit")])

        assert result.exit_code == 2


class TestAuthCommands:
    """Test login and logout."""

    def test_login(self, runner: CliRunner):
        with patch("metrics_bike.cli.OAuthClient") as oauth_cls:
            oauth = oauth_cls.return_value
            oauth.build_authorization_url.return_value = "https://auth.example/?x=1"
            oauth.handle_auth_redirect.return_value = AuthResult(
                authenticated=True, token="t"
            )

            result = runner.invoke(
                main, ["login"], input="http://localhost:8080/?code=abc\n"
            )

        assert result.exit_code == 0
        assert "https://auth.example/?x=1" in result.output
        assert "Logged in successfully." in result.output
        oauth.handle_auth_redirect.assert_called_once_with(
            "http://localhost:8080/?code=abc"
        )

    def test_login_error(self, runner: CliRunner):
        with patch("metrics_bike.cli.OAuthClient") as oauth_cls:
            oauth = oauth_cls.return_value
            oauth.build_authorization_url.return_value = "https://auth.example/"
            oauth.handle_auth_redirect.return_value = AuthResult(
                authenticated=False, error="access_denied"
            )

            result = runner.invoke(
                main, ["login"], input="http://localhost:8080/?error=access_denied\n"
            )

        assert result.exit_code == 1

    def test_logout(self, runner: CliRunner):
        with patch("metrics_bike.cli.OAuthClient") as oauth_cls:
            result = runner.invoke(main, ["logout"])

        assert result.exit_code == 0
        oauth_cls.return_value.logout.assert_called_once_with()
