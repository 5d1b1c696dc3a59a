"""Validation command implementation."""

from pathlib import Path

import click
import clicycle

from es_connector.config import load_settings
from es_connector.errors import ConfigurationError, SettingsValidationError


def run_validation(path: Path):
    """Validate the connector configuration."""
    try:
        settings = load_settings(path)
    except SettingsValidationError as e:
        clicycle.error(f"Configuration has {len(e.violations)} problem(s):")
        for violation in e.violations:
            clicycle.error(f"  - {violation}")
        raise click.ClickException("Configuration validation failed") from e
    except ConfigurationError as e:
        raise click.ClickException(str(e)) from e

    clicycle.success(f"Configuration is valid for {settings.host}:{settings.port}")
