import logging
import os
from typing import Any, Awaitable, Callable, TypeVar

from fastapi import HTTPException, Request

from async_convert.conversion import conversion_error_type, try_into_async

logger = logging.getLogger(__name__)

TargetT = TypeVar("TargetT")

# Status returned when a request body cannot be converted.
ERROR_STATUS = int(os.getenv("ASYNC_CONVERT_ERROR_STATUS", "422"))

# Diagnostic mode (off by default): name the failing error class in a response header.
DEBUG_CONVERSION = os.getenv("ASYNC_CONVERT_DEBUG", "").lower() in {"1", "true", "yes", "on"}


def from_request(target: type[TargetT]) -> Callable[[Request], Awaitable[TargetT]]:
    """Build a FastAPI dependency converting the incoming request into ``target``.

    ``target`` implements ``TryFromAsync[Request]``; the dependency consumes the
    request through the derived reverse conversion. Only ``target.Error`` is
    turned into an HTTP error, everything else propagates.

        @app.post("/items")
        async def create(item: Item = Depends(from_request(Item))): ...
    """
    error_type = conversion_error_type(target)

    async def dependency(request: Request) -> Any:
        try:
            return await try_into_async(request, target)
        except error_type as exc:
            logger.debug("request conversion into %s failed: %s", target.__qualname__, exc)
            headers = {"X-Convert-Error-Type": type(exc).__qualname__} if DEBUG_CONVERSION else None
            raise HTTPException(
                status_code=ERROR_STATUS,
                detail={"code": "conversion_failed", "message": str(exc)},
                headers=headers,
            ) from exc

    dependency.__name__ = f"from_request_{target.__name__}"
    return dependency
