"""CLI commands implementation."""

from pathlib import Path

import click
import clicycle

from es_connector import __version__
from es_connector.config import get_runtime_config
from es_connector.interfaces.cli.backoff import show_backoff
from es_connector.interfaces.cli.settings import list_keys, show_settings
from es_connector.interfaces.cli.validate import run_validation

# Configure clicycle
clicycle.configure(app_name="es-connector")

config_option = click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Connector properties file (defaults to ES_CONNECTOR_CONFIG)",
)


def _resolve(config_path: Path | None) -> Path:
    return config_path or get_runtime_config().config_path


@click.group()
@click.version_option(version=__version__, prog_name="es-connector")
def cli():
    """Elasticsearch connector - connection settings and retry policy."""
    pass


@cli.command()
@config_option
def validate(config_path: Path | None):
    """Validate the connector configuration."""
    run_validation(_resolve(config_path))


@cli.command()
@config_option
def show(config_path: Path | None):
    """Show the effective settings."""
    show_settings(_resolve(config_path))


@cli.command()
@config_option
def backoff(config_path: Path | None):
    """Show the retry backoff schedule."""
    show_backoff(_resolve(config_path))


@cli.command()
def keys():
    """List supported and retired configuration keys."""
    list_keys()
