"""
Catalogue of connector settings using Pydantic.
"""

from functools import cache

from pydantic import BaseModel

from es_connector.config.connection import ConnectionSettings, format_value
from es_connector.config.keys import RETIRED_KEYS, env_var_name, is_sensitive


class SettingInfo(BaseModel):
    """Information about a configuration setting."""

    key: str
    field_name: str
    description: str
    default: str | None = None
    required: bool = False
    sensitive: bool = False

    @property
    def env_var(self) -> str:
        return env_var_name(self.key)


@cache
def get_all_settings() -> dict[str, SettingInfo]:
    """Get all settings with their info, keyed by configuration key."""
    result = {}
    for field_name, field in ConnectionSettings.model_fields.items():
        default = None if field.is_required() else field.default
        result[field.alias] = SettingInfo(
            key=field.alias,
            field_name=field_name,
            description=field.description or "",
            default=None if default is None else format_value(default),
            required=field.is_required(),
            sensitive=is_sensitive(field.alias),
        )
    return result


def get_setting_info(key: str) -> SettingInfo | None:
    """Get information about a specific setting."""
    return get_all_settings().get(key)


def get_retired_keys() -> list[str]:
    """Get the keys that are rejected as no longer supported."""
    return sorted(RETIRED_KEYS)
