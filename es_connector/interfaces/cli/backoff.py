"""Retry schedule CLI command."""

from pathlib import Path

import click
import clicycle

from es_connector.config import load_settings
from es_connector.config.duration import format_duration
from es_connector.errors import ConfigurationError


def show_backoff(path: Path):
    """Show how long failed requests wait before each retry."""
    try:
        policy = load_settings(path).retry_policy
    except ConfigurationError as e:
        raise click.ClickException(str(e)) from e

    clicycle.header("Retry Schedule")
    schedule = policy.schedule()
    if not schedule:
        clicycle.info("No retries: requests fail after the first attempt")
        return

    clicycle.table(
        [
            {"After Attempt": str(attempt), "Wait": format_duration(delay)}
            for attempt, delay in enumerate(schedule, start=1)
        ]
    )
    clicycle.info(
        f"Gives up after {policy.max_attempts} attempts, "
        f"waiting at most {format_duration(policy.total_delay())} in total"
    )
