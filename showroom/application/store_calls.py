"""Bounded product store calls.

Wraps store coroutines with a timeout and maps storage failures to
StoreUnavailableError, so callers see one error type for every
persistence problem.
"""

import asyncio
from collections.abc import Awaitable
from typing import TypeVar

import structlog
from sqlalchemy.exc import SQLAlchemyError

from showroom.domain.exceptions import StoreUnavailableError
from showroom.infrastructure.config import settings

logger = structlog.get_logger()

T = TypeVar("T")


async def call_store(
    operation: str,
    awaitable: Awaitable[T],
    timeout: float | None = None,
) -> T:
    """Await a store call with a timeout.

    Args:
        operation: Operation name for logs and error details.
        awaitable: The store coroutine.
        timeout: Seconds to wait; defaults to ``settings.store_timeout_seconds``.

    Returns:
        The store call's result.

    Raises:
        StoreUnavailableError: On timeout or storage error.
    """
    seconds = timeout if timeout is not None else settings.store_timeout_seconds
    try:
        return await asyncio.wait_for(awaitable, timeout=seconds)
    except asyncio.TimeoutError as e:
        logger.error("Product store timed out", operation=operation, timeout=seconds)
        raise StoreUnavailableError(operation, "timeout") from e
    except (SQLAlchemyError, OSError) as e:
        logger.exception("Product store failed", operation=operation, error=str(e))
        raise StoreUnavailableError(operation, type(e).__name__) from e
