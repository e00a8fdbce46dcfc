"""Short retry for flaky upstream calls."""

import asyncio
import logging
from typing import TYPE_CHECKING

_logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable


async def call_with_retry(
    func: "Callable[[], Awaitable[dict[str, object]]]",
    *,
    action: str,
    retry_attempts: int = 1,
    retry_delay_seconds: float = 0.3,
) -> dict[str, object]:
    """Call an async function, retrying after a short delay on failure."""
    attempt = 0
    while True:
        try:
            return await func()
        except Exception as exc:
            attempt += 1
            _logger.debug(
                "%s failed (attempt %s/%s, status=%s): %s",
                action,
                attempt,
                retry_attempts + 1,
                status_code_from_exception(exc),
                exc,
            )
            if attempt > retry_attempts:
                raise
            await asyncio.sleep(retry_delay_seconds)


def status_code_from_exception(exc: Exception) -> str:
    """Extract HTTP status code from an exception, if available."""
    response = getattr(exc, "response", None)
    status_code = getattr(response, "status_code", None)
    if isinstance(status_code, int):
        return str(status_code)
    return "n/a"
