"""Startup checks that refuse to activate the connector on bad configuration."""

import logging
from pathlib import Path

from es_connector.config import ConnectionSettings, get_runtime_config, load_settings
from es_connector.config.duration import format_duration
from es_connector.errors import SettingsValidationError

logger = logging.getLogger(__name__)


def load_checked_settings(path: Path | None = None) -> ConnectionSettings:
    """Load settings, logging every violation before re-raising."""
    if path is None:
        path = get_runtime_config().config_path

    try:
        return load_settings(path)
    except SettingsValidationError as e:
        for violation in e.violations:
            logger.error("Invalid configuration %s", violation)
        raise


def startup_checks(path: Path | None = None) -> ConnectionSettings:
    """Run all startup checks and return the validated settings.
    Call this from main entry points.
    """
    logger.debug("Running startup checks...")

    settings = load_checked_settings(path)
    logger.info(
        "Connector targets %s:%s (TLS %s)",
        settings.host,
        settings.port,
        "enabled" if settings.tls_enabled else "disabled",
    )
    logger.debug(
        "Retrying failed requests up to %d attempt(s), backoff ceiling %s",
        settings.retry_policy.max_attempts,
        format_duration(settings.retry_policy.ceiling),
    )

    logger.debug("Startup checks completed")
    return settings
