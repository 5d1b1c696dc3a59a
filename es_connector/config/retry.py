"""Retry policy with capped exponential backoff."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import timedelta

from es_connector.errors import ClusterRequestError, retry_on_error

BASE_DELAY = timedelta(seconds=1)

# 2.0 ** 1024 overflows a float
_MAX_EXPONENT = 1023


@dataclass(frozen=True)
class RetryPolicy:
    """Exponential backoff starting at one second, capped at ``ceiling``.

    Attempts are numbered from 1. The policy keeps no state between calls;
    the caller tracks how many attempts it has made.
    """

    max_attempts: int
    ceiling: timedelta
    base_delay: timedelta = field(default=BASE_DELAY, repr=False)

    def should_retry(self: RetryPolicy, attempts: int) -> bool:
        """Whether another attempt is allowed after ``attempts`` failures."""
        return attempts < self.max_attempts

    def delay(self: RetryPolicy, attempt: int) -> timedelta:
        """Wait between failed attempt ``attempt`` and the next one."""
        if attempt < 1:
            raise ValueError(f"attempt numbers start at 1, got {attempt}")

        exponent = min(attempt - 1, _MAX_EXPONENT)
        growth = self.base_delay.total_seconds() * 2.0**exponent
        if growth >= self.ceiling.total_seconds():
            return self.ceiling
        return timedelta(seconds=growth)

    def next_delay(self: RetryPolicy, attempt: int) -> timedelta | None:
        """Delay before the attempt after ``attempt``, or None once exhausted."""
        if not self.should_retry(attempt):
            return None
        return self.delay(attempt)

    def is_exhausted(self: RetryPolicy, attempts: int) -> bool:
        """Whether the caller must stop and surface the last failure."""
        return not self.should_retry(attempts)

    def schedule(self: RetryPolicy) -> list[timedelta]:
        """Every delay the policy will produce, in order."""
        return [self.delay(attempt) for attempt in range(1, self.max_attempts)]

    def total_delay(self: RetryPolicy) -> timedelta:
        """Worst-case time spent waiting across all retries."""
        return sum(self.schedule(), timedelta(0))

    def retrying(
        self: RetryPolicy,
        exceptions: tuple[type[BaseException], ...] = (ClusterRequestError, TimeoutError),
        **kwargs,
    ) -> Callable:
        """Build a tenacity decorator that retries with this policy."""
        return retry_on_error(self, exceptions, **kwargs)
