"""Configuration loading utilities."""

import json
import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from es_connector.config.connection import ConnectionSettings, field_keys
from es_connector.config.keys import CONNECTOR_NAME_KEY, RETIRED_KEYS, env_var_name
from es_connector.errors import ConfigurationError

logger = logging.getLogger(__name__)


def read_properties(text: str) -> dict[str, str]:
    """Parse ``key=value`` / ``key: value`` lines, skipping comments."""
    properties = {}
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith(("#", "!")):
            continue

        separators = [i for i in (line.find("="), line.find(":")) if i > 0]
        if not separators:
            # A bare key means an empty value
            properties[line] = ""
            continue

        split_at = min(separators)
        properties[line[:split_at].strip()] = line[split_at + 1 :].strip()
    return properties


def _flatten(data: Mapping[str, Any], prefix: str = "") -> dict[str, Any]:
    flat = {}
    for key, value in data.items():
        full_key = f"{prefix}.{key}" if prefix else str(key)
        if isinstance(value, Mapping):
            flat.update(_flatten(value, full_key))
        else:
            flat[full_key] = value
    return flat


def read_config_file(path: Path) -> dict[str, Any]:
    """Load configuration properties from a ``.properties`` or ``.json`` file."""
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise ConfigurationError(f"Configuration file not found: {path}") from e
    except OSError as e:
        raise ConfigurationError(f"Cannot read configuration file {path}: {e}") from e

    if path.suffix == ".json":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigurationError(f"Expected a JSON object in {path}")
        return _flatten(data)

    return read_properties(text)


def env_properties(environ: Mapping[str, str] | None = None) -> dict[str, str]:
    """Collect known and retired keys from environment variables."""
    if environ is None:
        environ = os.environ

    properties = {}
    for key in [*field_keys().values(), *sorted(RETIRED_KEYS)]:
        name = env_var_name(key)
        if name in environ:
            properties[key] = environ[name]
    return properties


def load_properties(
    path: Path | None = None,
    environ: Mapping[str, str] | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Merge configuration sources: file, then environment, then overrides."""
    properties: dict[str, Any] = {}

    if path is not None:
        from_file = read_config_file(path)
        logger.debug("Loaded %d properties from %s", len(from_file), path)
        properties.update(from_file)

    from_env = env_properties(environ)
    if from_env:
        logger.debug("Environment sets: %s", ", ".join(sorted(from_env)))
    properties.update(from_env)

    if overrides:
        properties.update(overrides)

    properties.pop(CONNECTOR_NAME_KEY, None)
    return properties


def load_settings(
    path: Path | None = None,
    environ: Mapping[str, str] | None = None,
    **overrides: Any,
) -> ConnectionSettings:
    """Load configuration sources and validate them into settings."""
    return ConnectionSettings.build(load_properties(path, environ), **overrides)
