"""Opt-in, caller-side retry with exponential backoff.

The client never retries on its own; wrap a call in ``retry_call`` to retry
errors whose ``retryable`` flag is set (transport failures, 429, 5xx).
"""

from __future__ import annotations

import asyncio
import logging
import random
from dataclasses import dataclass
from typing import Awaitable, Callable, TypeVar

from twcai.errors import TwcError

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class RetryPolicy:
    max_retries: int = 2
    base_delay: float = 1.0
    max_delay: float = 60.0
    backoff_multiplier: float = 2.0
    jitter: bool = True
    on_retry: Callable[[TwcError, int, float], None] | None = None

    def calculate_delay(self, attempt: int) -> float:
        delay = min(self.base_delay * (self.backoff_multiplier ** attempt), self.max_delay)
        if self.jitter:
            delay *= random.uniform(0.5, 1.5)
        return delay


async def retry_call(
    coro_factory: Callable[[], Awaitable[T]],
    policy: RetryPolicy | None = None,
) -> T:
    """Await ``coro_factory()`` and retry retryable TwcErrors per ``policy``."""
    pol = policy or RetryPolicy()

    attempt = 0
    while True:
        try:
            return await coro_factory()
        except TwcError as exc:
            if not exc.retryable or attempt >= pol.max_retries:
                raise

            delay = pol.calculate_delay(attempt)
            # A server-supplied Retry-After wins, unless it exceeds our ceiling.
            retry_after = getattr(exc, "retry_after", None)
            if retry_after is not None:
                if retry_after > pol.max_delay:
                    raise
                delay = retry_after

            logger.info("Retrying after %s (attempt %d, %.2fs)", exc.kind.value, attempt + 1, delay)
            if pol.on_retry:
                pol.on_retry(exc, attempt, delay)

            await asyncio.sleep(delay)
            attempt += 1
