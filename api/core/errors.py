"""
Error boundary for service operations.

Expected failures are raised as `HTTPException` (404/400/409) inside the
services. Anything else escaping an operation is logged with its traceback
and turned into a generic 500 whose detail never includes the cause.
"""

from __future__ import annotations

import functools
import logging
from typing import Any, Awaitable, Callable, TypeVar

from fastapi import HTTPException, status

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Awaitable[Any]])


def internal_errors(message: str) -> Callable[[F], F]:
    def decorator(func: F) -> F:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return await func(*args, **kwargs)
            except HTTPException:
                raise
            except Exception as exc:
                logger.exception("operation_failed operation=%s", func.__qualname__)
                raise HTTPException(
                    status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                    detail=message,
                ) from exc

        return wrapper  # type: ignore[return-value]

    return decorator
