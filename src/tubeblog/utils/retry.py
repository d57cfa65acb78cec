"""Retry logic and exponential backoff utilities."""

import asyncio
import logging
from typing import Awaitable, Callable, Tuple, Type, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


def exponential_backoff(attempt: int, base_delay: float = 1.0) -> float:
    """Calculate exponential backoff delay."""
    return base_delay * (2 ** attempt)


class RetryableError(Exception):
    """Base class for errors that should trigger retries."""
    pass


class NetworkError(RetryableError):
    """Raised for network-related errors."""
    pass


class TemporaryServiceError(RetryableError):
    """Raised for temporary service unavailability or rate limiting."""
    pass


class RetryPolicy:
    """Bounded exponential-backoff retry around an async operation.

    The operation is retried on any ``Exception`` except those listed in
    ``give_up_on``. ``asyncio.CancelledError`` is a ``BaseException`` and is
    never caught, so cancelling the caller aborts both the running attempt
    and any backoff sleep.
    """

    def __init__(
        self,
        max_retries: int = 3,
        base_delay: float = 2.0,
        give_up_on: Tuple[Type[BaseException], ...] = (),
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        if max_retries < 0:
            raise ValueError("max_retries must be >= 0")
        self.max_retries = max_retries
        self.base_delay = base_delay
        self.give_up_on = tuple(give_up_on)
        self._sleep = sleep

    def delay_for(self, attempt: int) -> float:
        return exponential_backoff(attempt, self.base_delay)

    async def execute(
        self, operation: Callable[[], Awaitable[T]], description: str = "operation"
    ) -> T:
        """Run ``operation`` until it succeeds or retries are exhausted.

        Args:
            operation: Zero-argument callable returning an awaitable
            description: Human-readable name used in log messages

        Returns:
            Whatever the first successful attempt returns
        """
        attempt = 0
        while True:
            try:
                return await operation()
            except self.give_up_on:
                raise
            except Exception as e:
                if attempt >= self.max_retries:
                    logger.error(
                        f"{description} failed after {self.max_retries} retries: {e}"
                    )
                    raise

                delay = self.delay_for(attempt)
                logger.warning(
                    f"Attempt {attempt + 1} of {description} failed: {e}. "
                    f"Retrying in {delay:.2f}s..."
                )
                await self._sleep(delay)
                attempt += 1
