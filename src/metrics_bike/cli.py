"""
Command-line interface for the Metrics.bike package.

This module provides commands for logging in to the Wahoo Cloud API, listing
recent workouts with their power metrics and analyzing local FIT files.
"""

import json
import logging
from pathlib import Path

import click

from .auth import OAuthClient
from .exceptions import MetricsBikeError
from .presentation import export_csv, render_workout, render_workouts
from .services import WorkoutService
from .settings import load_settings


# Configure basic logging
def configure_logging(verbose: bool = False) -> None:
    """Configure logging with appropriate level."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )


config_option = click.option(
    "--config",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration file",
)
verbose_option = click.option(
    "--verbose/--quiet",
    default=False,
    help="Enable verbose output",
)


@click.group()
def main():
    """
    Analyze power data from your recent Wahoo workouts.

    This tool logs in to the Wahoo Cloud API, downloads recent workouts and
    reports average power, Normalized Power and best efforts for each ride.
    """


@main.command()
@config_option
@verbose_option
def login(config: Path | None, verbose: bool) -> None:
    """
    Log in with OAuth and store the access token.

    Open the printed URL in a browser, authorize the application and paste
    the URL you were redirected to.
    """
    configure_logging(verbose)
    logger = logging.getLogger(__name__)

    try:
        settings = load_settings(config)
        oauth = OAuthClient(settings)

        click.echo("Open this URL in your browser to authorize access:")
        click.echo(oauth.build_authorization_url())
        redirect_url = click.prompt("Paste the URL you were redirected to")

        result = oauth.handle_auth_redirect(redirect_url)
        if not result.authenticated:
            raise MetricsBikeError(f"Authentication error: {result.error}")

        click.echo("Logged in successfully.")

    except MetricsBikeError as e:
        logger.error(f"Login failed: {str(e)}")
        raise click.Abort() from e


@main.command()
@config_option
@verbose_option
def logout(config: Path | None, verbose: bool) -> None:
    """Remove stored tokens."""
    configure_logging(verbose)
    logger = logging.getLogger(__name__)

    try:
        OAuthClient(load_settings(config)).logout()
        click.echo("Logged out.")
    except MetricsBikeError as e:
        logger.error(f"Logout failed: {str(e)}")
        raise click.Abort() from e


@main.command()
@config_option
@verbose_option
@click.option(
    "--limit",
    type=click.IntRange(min=1),
    default=None,
    help="Number of recent workouts to fetch (overrides config)",
)
@click.option(
    "--csv",
    "csv_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Also save the results to a CSV file",
)
@click.option("--json", "as_json", is_flag=True, help="Print results as JSON")
def workouts(
    config: Path | None,
    verbose: bool,
    limit: int | None,
    csv_path: Path | None,
    as_json: bool,
) -> None:
    """
    Fetch recent workouts and show their power metrics.

    Workouts without a FIT file or without power data are skipped.
    """
    configure_logging(verbose)
    logger = logging.getLogger(__name__)

    try:
        settings = load_settings(config)
        service = WorkoutService(settings)

        logger.info("Fetching your activities...")
        analyzed = service.fetch_workouts(limit)

        if as_json:
            click.echo(
                json.dumps([item.model_dump(mode="json") for item in analyzed], indent=2)
            )
        else:
            click.echo(render_workouts(analyzed))

        if csv_path is not None:
            export_csv(analyzed, csv_path)

    except MetricsBikeError as e:
        logger.error(f"Failed to fetch activities: {str(e)}")
        raise click.Abort() from e


@main.command()
@config_option
@verbose_option
@click.argument(
    "fit_file", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
@click.option("--json", "as_json", is_flag=True, help="Print results as JSON")
def analyze(config: Path | None, verbose: bool, fit_file: Path, as_json: bool) -> None:
    """
    Analyze a single local FIT file.

    No login is required; the file is decoded and analyzed locally.
    """
    configure_logging(verbose)
    logger = logging.getLogger(__name__)

    try:
        settings = load_settings(config)
        result = WorkoutService(settings).analyze_file(fit_file)

        if as_json:
            click.echo(result.model_dump_json(indent=2))
        else:
            click.echo(render_workout(result))

    except MetricsBikeError as e:
        logger.error(f"Analysis failed: {str(e)}")
        raise click.Abort() from e


if __name__ == "__main__":
    main()
