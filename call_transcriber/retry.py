"""Async retry executor with bounded exponential backoff."""
import asyncio
import logging
import math
import random
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional, TypeVar

from call_transcriber.constants import (
    DEFAULT_BACKOFF_FACTOR,
    DEFAULT_MAX_DELAY,
    DEFAULT_MAX_RETRIES,
    DEFAULT_MIN_DELAY,
    MSG_FACTOR_TOO_SMALL,
    MSG_MIN_ABOVE_MAX,
    MSG_NEGATIVE,
    MSG_NOT_FINITE,
    MSG_RETRYING_IN,
)
from call_transcriber.errors import ExhaustedRetriesError

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class RetryPolicy:
    max_retries: int = DEFAULT_MAX_RETRIES
    min_delay: float = DEFAULT_MIN_DELAY
    max_delay: float = DEFAULT_MAX_DELAY
    factor: float = DEFAULT_BACKOFF_FACTOR
    randomize: bool = False

    def __post_init__(self) -> None:
        for name in ("min_delay", "max_delay", "factor"):
            if not math.isfinite(getattr(self, name)):
                raise ValueError(MSG_NOT_FINITE % (name, getattr(self, name)))
        if self.max_retries < 0:
            raise ValueError(MSG_NEGATIVE % "max_retries")
        if self.min_delay < 0:
            raise ValueError(MSG_NEGATIVE % "min_delay")
        if self.min_delay > self.max_delay:
            raise ValueError(MSG_MIN_ABOVE_MAX % ("min_delay", "max_delay"))
        if self.factor < 1:
            raise ValueError(MSG_FACTOR_TOO_SMALL % "factor")

    @property
    def max_attempts(self) -> int:
        return self.max_retries + 1


@dataclass(frozen=True)
class FailedAttempt:
    attempt_number: int
    retries_left: int
    error: Exception
    delay: float


def compute_delay(
    policy: RetryPolicy,
    attempt_number: int,
    rand: Callable[[], float] = random.random,
) -> float:
    """Seconds to wait after the 1-based ``attempt_number`` failed.

    Grows as ``min_delay * factor ** (attempt_number - 1)`` (optionally scaled
    by a random factor in [1, 2)) and is always clamped to
    ``[min_delay, max_delay]``.
    """
    delay = policy.min_delay * policy.factor ** (attempt_number - 1)
    if policy.randomize:
        delay *= 1 + rand()
    return max(policy.min_delay, min(delay, policy.max_delay))


OnFailedAttempt = Callable[[FailedAttempt], None]


async def retry_async(
    operation: Callable[[], Awaitable[T]],
    policy: RetryPolicy,
    *,
    is_retryable: Callable[[Exception], bool],
    on_failed_attempt: Optional[OnFailedAttempt] = None,
    sleep: Optional[Callable[[float], Awaitable[None]]] = None,
) -> T:
    """Await ``operation`` until it succeeds or ``policy`` is used up.

    Errors rejected by ``is_retryable`` propagate unchanged. When every
    attempt fails, ``ExhaustedRetriesError`` is raised from the last error.
    """
    wait = sleep or asyncio.sleep
    attempt_number = 0
    while True:
        attempt_number += 1
        try:
            return await operation()
        except Exception as exc:
            if not is_retryable(exc):
                raise
            retries_left = policy.max_attempts - attempt_number
            delay = compute_delay(policy, attempt_number) if retries_left > 0 else 0.0
            if on_failed_attempt is not None:
                on_failed_attempt(FailedAttempt(attempt_number, retries_left, exc, delay))
            if retries_left <= 0:
                raise ExhaustedRetriesError(attempt_number, exc) from exc
            logger.debug(MSG_RETRYING_IN, delay)
            await wait(delay)
