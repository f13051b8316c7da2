"""Bounded retry with exponential backoff for transient store failures."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, TypeVar

from grocery.domain.exceptions import PersistenceError, TransientStoreError, ValidationError

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class RetryPolicy:
    """How many times, and how patiently, to retry a store operation.

    Only ``TransientStoreError`` is retried. Anything else propagates
    immediately. When every attempt fails the last transient error is
    chained onto a ``PersistenceError``.
    """

    attempts: int = 3
    base_delay: float = 0.05
    max_delay: float = 1.0
    sleep: Callable[[float], None] = field(default=time.sleep, compare=False, repr=False)

    def __post_init__(self) -> None:
        if self.attempts < 1:
            raise ValidationError("Retry attempts must be at least 1")
        if self.base_delay < 0 or self.max_delay < 0:
            raise ValidationError("Retry delays cannot be negative")

    def delay_for(self, attempt: int) -> float:
        """Backoff before retry number *attempt* (1-based)."""
        return min(self.base_delay * (2 ** (attempt - 1)), self.max_delay)

    def call(self, operation: Callable[[], T], description: str) -> T:
        last_error: TransientStoreError | None = None
        for attempt in range(1, self.attempts + 1):
            try:
                return operation()
            except TransientStoreError as exc:
                last_error = exc
                if attempt == self.attempts:
                    break
                delay = self.delay_for(attempt)
                logger.warning(
                    "%s failed (attempt %d/%d): %s; retrying in %.3fs",
                    description, attempt, self.attempts, exc, delay,
                )
                self.sleep(delay)
        raise PersistenceError(
            f"{description} failed after {self.attempts} attempts"
        ) from last_error
