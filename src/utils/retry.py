"""Async sleep and exponential backoff helpers.

Any coroutine-producing call can opt into retries by wrapping it:

```
from src.utils.retry import retry_with_backoff

file = await retry_with_backoff(lambda: client.get_file("abc123"), max_retries=3)
```
"""

import asyncio
from collections.abc import Awaitable, Callable
from typing import TypeVar

from src.utils.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


async def sleep(ms: float) -> None:
    """Suspend the calling task for ``ms`` milliseconds without blocking the event loop."""
    await asyncio.sleep(ms / 1000)


async def retry_with_backoff(
    operation: Callable[[], Awaitable[T]],
    max_retries: int = 3,
    base_delay_ms: float = 1000,
    should_retry: Callable[[Exception], bool] | None = None,
) -> T:
    """
    Call ``operation`` until it succeeds, waiting ``base_delay_ms * 2**attempt`` between attempts.

    Args:
        operation: Zero-argument callable returning a fresh awaitable per attempt
        max_retries: Total number of attempts, including the first
        base_delay_ms: Delay after the first failure, doubled after each subsequent one
        should_retry: Optional predicate; when it returns False the error is raised immediately

    Returns:
        The first successful result

    Raises:
        ValueError: If max_retries is less than 1
        Exception: The last error raised by ``operation`` once attempts are exhausted
    """
    if max_retries < 1:
        raise ValueError(f"max_retries must be at least 1, got {max_retries}")

    for attempt in range(max_retries):
        try:
            return await operation()
        except Exception as e:
            is_last_attempt = attempt >= max_retries - 1
            if is_last_attempt or (should_retry is not None and not should_retry(e)):
                raise

            delay_ms = base_delay_ms * (2**attempt)
            logger.warning(
                "Operation failed, retrying with backoff",
                attempt=attempt + 1,
                max_retries=max_retries,
                delay_ms=delay_ms,
                error=str(e),
            )
            await sleep(delay_ms)

    raise RuntimeError("retry_with_backoff exited without a result")
