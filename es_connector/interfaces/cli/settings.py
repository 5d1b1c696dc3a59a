"""Settings display CLI commands."""

from pathlib import Path

import click
import clicycle

from es_connector.config import load_settings
from es_connector.config.settings import get_all_settings, get_retired_keys
from es_connector.errors import ConfigurationError


def show_settings(path: Path):
    """Show the effective settings, leaving out sensitive values."""
    try:
        settings = load_settings(path)
    except ConfigurationError as e:
        raise click.ClickException(str(e)) from e

    clicycle.header("Connection Settings")
    clicycle.table(
        [{"Key": key, "Value": value} for key, value in settings.to_properties().items()]
    )
    clicycle.info("Sensitive settings are never displayed")


def list_keys():
    """Show every supported configuration key."""
    clicycle.header("Configuration Keys")

    table_data = []
    for key, info in get_all_settings().items():
        if info.required:
            default = "required"
        else:
            default = info.default if info.default is not None else "not set"
        table_data.append(
            {
                "Key": key,
                "Default": "hidden" if info.sensitive else default,
                "Environment": info.env_var,
                "Description": info.description,
            }
        )
    clicycle.table(table_data)

    clicycle.section("Retired Keys")
    for key in get_retired_keys():
        clicycle.list_item(key)
