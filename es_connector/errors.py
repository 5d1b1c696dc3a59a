"""Exception classes and error handling utilities for the Elasticsearch connector."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from tenacity import (
    RetryCallState,
    before_sleep_log,
    retry,
    stop_after_attempt,
    wait_exponential,
)

if TYPE_CHECKING:
    from es_connector.config.retry import RetryPolicy

logger = logging.getLogger(__name__)


class ConnectorError(Exception):
    """Base exception for all connector errors."""


class ConfigurationError(ConnectorError):
    """Raised when configuration is invalid or cannot be read."""


class ViolationKind(str, Enum):
    """Categories of configuration problems."""

    MISSING_REQUIRED_VALUE = "missing_required_value"
    CONSTRAINT_VIOLATION = "constraint_violation"
    RETIRED_KEY_USED = "retired_key_used"
    UNKNOWN_KEY = "unknown_key"


@dataclass(frozen=True)
class Violation:
    """A single problem found while validating configuration."""

    kind: ViolationKind
    key: str
    message: str

    def __str__(self: Violation) -> str:
        return f"{self.key}: {self.message}"


class SettingsValidationError(ConfigurationError):
    """Raised when connection settings fail validation.

    Carries every violation found in the validation pass, not just the first.
    """

    def __init__(self: SettingsValidationError, violations: Iterable[Violation]) -> None:
        self.violations = list(violations)
        lines = "\n".join(f"  - {violation}" for violation in self.violations)
        super().__init__(
            f"Invalid Elasticsearch connector configuration "
            f"({len(self.violations)} problem(s)):\n{lines}"
        )

    def of_kind(self: SettingsValidationError, kind: ViolationKind) -> list[Violation]:
        """Return the violations of the given kind."""
        return [v for v in self.violations if v.kind is kind]

    @property
    def keys(self: SettingsValidationError) -> list[str]:
        """Configuration keys that have at least one violation."""
        return [v.key for v in self.violations]


class ClusterRequestError(ConnectorError):
    """Raised when a request to the search cluster fails."""

    def __init__(
        self: ClusterRequestError,
        message: str,
        status_code: int | None = None,
        service: str = "Elasticsearch",
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.service = service
        super().__init__(f"{service}: {message}")


def retry_on_error(
    policy: RetryPolicy,
    exceptions: tuple[type[BaseException], ...] = (ClusterRequestError, TimeoutError),
    **kwargs,
) -> Callable:
    """Decorator to retry a function on specific errors using tenacity.

    Waits follow the policy's backoff (1s doubling up to the ceiling) and the
    call stops after ``policy.max_attempts`` attempts, reraising the last
    failure.

    Args:
        policy: Retry policy supplying attempt count and backoff ceiling
        exceptions: Tuple of exceptions to retry on
        **kwargs: Extra arguments for ``tenacity.retry`` (e.g. ``sleep``)

    """

    def should_retry(retry_state: RetryCallState) -> bool:
        """Custom retry condition that excludes non-retryable errors."""
        if retry_state.outcome and retry_state.outcome.failed:
            exception = retry_state.outcome.exception()
            # Never retry configuration errors
            if isinstance(exception, ConfigurationError):
                return False
            return isinstance(exception, exceptions)
        return False

    return retry(
        stop=stop_after_attempt(policy.max_attempts),
        wait=wait_exponential(
            multiplier=policy.base_delay.total_seconds(),
            exp_base=2,
            max=policy.ceiling.total_seconds(),
        ),
        retry=should_retry,
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=True,
        **kwargs,
    )
