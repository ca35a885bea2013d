"""Domain models for retry policy."""

import typing as t
from dataclasses import dataclass

from .exceptions import ValidationError


def is_network_error(error: Exception) -> bool:
    """Default retry condition: retry only when no response was received.

    HTTP status failures carry a response and are therefore not retried;
    connection-level failures (refused, reset, timed out) carry none.
    """
    return getattr(error, "response", None) is None


@dataclass(frozen=True)
class RetryPolicy:
    """Retry limit and eligibility predicate, fixed at install time.

    Shared read-only by every request flowing through the client.

    Attributes:
        max_retries: Maximum number of re-issues per request (0 disables retry)
        retry_condition: Predicate deciding whether a failure is eligible
    """

    max_retries: int = 3
    retry_condition: t.Callable[[Exception], bool] = is_network_error

    def __post_init__(self) -> None:
        # bool is an int subclass; reject it explicitly
        if isinstance(self.max_retries, bool) or not isinstance(
            self.max_retries, int
        ):
            raise ValidationError(
                f"max_retries must be an integer, got {self.max_retries!r}"
            )
        if self.max_retries < 0:
            raise ValidationError(
                f"max_retries must be non-negative, got {self.max_retries}"
            )
        if not callable(self.retry_condition):
            raise ValidationError("retry_condition must be callable")

    def allows(self, retry_count: int) -> bool:
        """Check whether another retry fits under the limit."""
        return retry_count < self.max_retries
