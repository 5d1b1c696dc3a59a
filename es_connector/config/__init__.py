"""Configuration module - connection settings, retry policy and loading."""

import logging
from functools import cache

from es_connector.config.connection import ConnectionSettings
from es_connector.config.loader import load_settings
from es_connector.config.retry import RetryPolicy
from es_connector.config.runtime import RuntimeConfig
from es_connector.config.tls import TlsSettings

logger = logging.getLogger(__name__)


@cache
def get_runtime_config() -> RuntimeConfig:
    """Get the runtime configuration instance."""
    return RuntimeConfig()


@cache
def get_settings() -> ConnectionSettings:
    """Get the connection settings loaded from the configured file."""
    path = get_runtime_config().config_path
    logger.debug("Loading connection settings from %s", path)
    return load_settings(path)


def clear_settings_cache() -> None:
    """Clear the cached configuration."""
    get_settings.cache_clear()
    get_runtime_config.cache_clear()


__all__ = [
    "ConnectionSettings",
    "RetryPolicy",
    "RuntimeConfig",
    "TlsSettings",
    "clear_settings_cache",
    "get_runtime_config",
    "get_settings",
    "load_settings",
]
