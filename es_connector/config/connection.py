"""Connection settings for the Elasticsearch cluster."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import timedelta
from functools import cache
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, SecretStr
from pydantic import ValidationError as PydanticValidationError

from es_connector.config.duration import Duration, format_duration
from es_connector.config.keys import RETIRED_KEYS, is_sensitive
from es_connector.config.retry import RetryPolicy
from es_connector.config.tls import TlsSettings
from es_connector.errors import SettingsValidationError, Violation, ViolationKind

logger = logging.getLogger(__name__)


class ConnectionSettings(BaseModel):
    """Connectivity, pagination, retry and TLS settings.

    Instances are read-only and safe to share between threads. Build them
    with :meth:`build`, which reports every problem at once.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    host: str = Field(
        alias="elasticsearch.host",
        min_length=1,
        description="Elasticsearch host to connect to",
    )
    port: int = Field(
        9200,
        alias="elasticsearch.port",
        description="Elasticsearch HTTP port",
    )
    default_schema: str = Field(
        "default",
        alias="elasticsearch.default-schema-name",
        min_length=1,
        description="Default schema name to use",
    )
    table_description_directory: Path = Field(
        Path("etc/elasticsearch/"),
        alias="elasticsearch.table-description-directory",
        description="Directory that contains JSON table description files",
    )
    scroll_size: int = Field(
        1_000,
        alias="elasticsearch.scroll-size",
        ge=1,
        description="Scroll batch size",
    )
    scroll_timeout: Duration = Field(
        timedelta(seconds=1),
        alias="elasticsearch.scroll-timeout",
        description="Scroll timeout",
    )
    request_timeout: Duration = Field(
        timedelta(milliseconds=100),
        alias="elasticsearch.request-timeout",
        description="Elasticsearch request timeout",
    )
    connect_timeout: Duration = Field(
        timedelta(seconds=1),
        alias="elasticsearch.connect-timeout",
        description="Elasticsearch connect timeout",
    )
    max_request_retries: int = Field(
        5,
        alias="elasticsearch.max-request-retries",
        ge=1,
        description="Maximum number of Elasticsearch request retries",
    )
    max_retry_time: Duration = Field(
        timedelta(seconds=10),
        alias="elasticsearch.max-request-retry-time",
        description=(
            "Use exponential backoff starting at 1s up to the value specified "
            "by this configuration when retrying failed requests"
        ),
    )

    tls_enabled: bool = Field(
        False,
        alias="elasticsearch.tls.enabled",
        description="Use TLS to connect to Elasticsearch",
    )
    keystore_path: Path | None = Field(
        None,
        alias="elasticsearch.tls.keystore-path",
        description="Path to the key store with the client certificate",
    )
    keystore_password: SecretStr | None = Field(
        None,
        alias="elasticsearch.tls.keystore-password",
        description="Key store password",
    )
    truststore_path: Path | None = Field(
        None,
        alias="elasticsearch.tls.truststore-path",
        description="Path to the trust store with the cluster CA",
    )
    truststore_password: SecretStr | None = Field(
        None,
        alias="elasticsearch.tls.truststore-password",
        description="Trust store password",
    )
    verify_hostnames: bool = Field(
        True,
        alias="elasticsearch.tls.verify-hostnames",
        description="Verify the cluster host name against its certificate",
    )

    @classmethod
    def build(
        cls,
        properties: Mapping[str, Any] | None = None,
        /,
        **overrides: Any,
    ) -> ConnectionSettings:
        """Validate configuration and return read-only settings.

        Args:
            properties: Values keyed by configuration key
                (``elasticsearch.scroll-size``); field names are accepted
                and mapped to their key
            **overrides: Values keyed by field name (``scroll_size``); these
                win over ``properties``

        Raises:
            SettingsValidationError: listing every violation found

        """
        keys_by_name = field_keys()
        values: dict[str, Any] = {
            keys_by_name.get(key, key): value
            for key, value in (properties or {}).items()
        }
        violations: list[Violation] = []

        for name, value in overrides.items():
            key = keys_by_name.get(name)
            if key is None:
                violations.append(
                    Violation(ViolationKind.UNKNOWN_KEY, name, "unknown setting")
                )
                continue
            values[key] = value

        for key in sorted(values.keys() & RETIRED_KEYS):
            del values[key]
            violations.append(
                Violation(
                    ViolationKind.RETIRED_KEY_USED,
                    key,
                    f"Configuration property '{key}' is no longer supported",
                )
            )

        required = required_keys()
        for key in [k for k, v in values.items() if v is None and k in required]:
            del values[key]
            violations.append(
                Violation(
                    ViolationKind.MISSING_REQUIRED_VALUE, key, "a value is required"
                )
            )

        settings = None
        try:
            settings = cls.model_validate(values)
        except PydanticValidationError as e:
            violations.extend(_violations_from(e))

        if violations:
            logger.debug("Connection settings rejected: %d violation(s)", len(violations))
            raise SettingsValidationError(violations)
        return settings

    def with_overrides(self, **overrides: Any) -> ConnectionSettings:
        """Return new validated settings with some fields replaced."""
        return type(self).build(self.model_dump(by_alias=True), **overrides)

    @property
    def retry_policy(self) -> RetryPolicy:
        return RetryPolicy(
            max_attempts=self.max_request_retries, ceiling=self.max_retry_time
        )

    @property
    def tls(self) -> TlsSettings:
        return TlsSettings(
            enabled=self.tls_enabled,
            keystore_path=self.keystore_path,
            keystore_password=self.keystore_password,
            truststore_path=self.truststore_path,
            truststore_password=self.truststore_password,
            verify_hostnames=self.verify_hostnames,
        )

    def to_properties(self) -> dict[str, str]:
        """Dump as configuration properties.

        Sensitive keys are always left out, as are absent optional values.
        """
        properties = {}
        for key, value in self.model_dump(by_alias=True).items():
            if value is None or is_sensitive(key):
                continue
            properties[key] = format_value(value)
        return properties


def format_value(value: Any) -> str:
    """Render a setting value the way it is written in a properties file."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, timedelta):
        return format_duration(value)
    return str(value)


@cache
def field_keys() -> dict[str, str]:
    """Map of field name to configuration key."""
    return {
        name: info.alias for name, info in ConnectionSettings.model_fields.items()
    }


@cache
def required_keys() -> frozenset[str]:
    """Keys that must resolve to a value (no None allowed)."""
    return frozenset(
        info.alias
        for info in ConnectionSettings.model_fields.values()
        if info.is_required() or info.default is not None
    )


def _violations_from(error: PydanticValidationError) -> list[Violation]:
    violations = []
    for detail in error.errors(include_url=False, include_input=False):
        key = ".".join(str(part) for part in detail["loc"]) or "<settings>"
        error_type = detail["type"]

        if error_type == "missing":
            kind, message = ViolationKind.MISSING_REQUIRED_VALUE, "a value is required"
        elif error_type == "string_too_short":
            kind, message = ViolationKind.MISSING_REQUIRED_VALUE, "must not be empty"
        elif error_type == "extra_forbidden":
            kind, message = ViolationKind.UNKNOWN_KEY, "unknown configuration property"
        elif is_sensitive(key):
            kind, message = ViolationKind.CONSTRAINT_VIOLATION, "invalid value"
        else:
            kind, message = ViolationKind.CONSTRAINT_VIOLATION, detail["msg"]

        violations.append(Violation(kind, key, message))
    return violations
