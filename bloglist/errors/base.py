from collections.abc import Awaitable, Callable

from fastapi import Request
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR
from structlog.stdlib import BoundLogger

from bloglist.configs import DEFAULT_ERROR_MESSAGE
from bloglist.utils.helpers import host


class BaseAppError(Exception):
    """Base exception class for application errors."""

    headers: dict[str, str] | None = None

    def __init__(
        self,
        detail: str = "Internal Server Error",
        status_code: int = HTTP_500_INTERNAL_SERVER_ERROR,
    ) -> None:
        super().__init__(detail)
        self.detail = detail
        self.status_code = status_code

    def __str__(self) -> str:
        return self.detail


def create_exception_handler(
    logger: BoundLogger,
) -> Callable[[Request, Exception], Awaitable[ORJSONResponse]]:
    """
    Create a standardized exception handler for the application.

    Args:
        logger: Logger instance to use for logging exceptions.

    Returns:
        A callable exception handler.
    """

    async def handler(request: Request, exc: Exception) -> ORJSONResponse:
        status_code = getattr(exc, "status_code", HTTP_500_INTERNAL_SERVER_ERROR)
        detail = getattr(exc, "detail", "Internal Server Error")

        logger.warning(f"{detail} for ip: {host(request)} for endpoint {request.url.path}")

        # Extra public attributes of the exception ride along in the body
        content = {"detail": detail}
        content.update(
            {
                k: v
                for k, v in exc.__dict__.items()
                if k not in ("status_code", "detail", "headers") and not k.startswith("_")
            },
        )

        return ORJSONResponse(
            content=content,
            status_code=status_code,
            headers=getattr(exc, "headers", None),
        )

    return handler


def create_unhandled_exception_handler(
    logger: BoundLogger,
) -> Callable[[Request, Exception], Awaitable[ORJSONResponse]]:
    """Create the last-resort handler that hides internals behind a 500."""

    async def handler(request: Request, exc: Exception) -> ORJSONResponse:
        logger.error(
            f"Unhandled {type(exc).__name__} for ip: {host(request)} "
            f"for endpoint {request.url.path}",
            exc_info=exc,
        )
        return ORJSONResponse(
            content={"detail": DEFAULT_ERROR_MESSAGE},
            status_code=HTTP_500_INTERNAL_SERVER_ERROR,
        )

    return handler
