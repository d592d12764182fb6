"""Input validation errors and request validation handling."""

from typing import cast

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_400_BAD_REQUEST

from bloglist.errors.base import BaseAppError, create_exception_handler
from bloglist.monitoring import get_logger
from bloglist.utils.helpers import host

logger = get_logger(__name__)


class InvalidInputError(BaseAppError):
    """Raised when a request body fails a domain rule before persistence."""

    def __init__(
        self,
        detail: str = "Invalid input",
        errors: list[dict] | None = None,
    ) -> None:
        super().__init__(detail=detail, status_code=HTTP_400_BAD_REQUEST)
        self.errors = errors or []


invalid_input_exception_handler = create_exception_handler(logger)


def format_validation_errors(exc: RequestValidationError) -> list[dict]:
    """Flatten pydantic errors into `field`/`message`/`type` records."""
    formatted_errors = []
    for error in exc.errors():
        loc = error.get("loc", [])
        # Skip the leading 'body'/'path'/'query' segment
        formatted_error = {
            "field": ".".join(str(part) for part in loc[1:]) or ".".join(map(str, loc)),
            "message": error.get("msg", "Invalid value"),
            "type": error.get("type", "validation_error"),
        }
        if "ctx" in error:
            formatted_error["context"] = {
                key: str(value) if isinstance(value, Exception) else value
                for key, value in error["ctx"].items()
            }
        formatted_errors.append(formatted_error)
    return formatted_errors


async def validation_exception_handler(
    request: Request,
    exc: Exception,
) -> ORJSONResponse:
    """
    Render request validation failures as 400 Bad Request.

    Malformed ids and schema violations are client input errors, same as a
    missing title or url.
    """
    formatted_errors = format_validation_errors(cast(RequestValidationError, exc))

    logger.warning(
        f"Validation error for ip: {host(request)} at endpoint {request.url.path}: {formatted_errors}",
    )

    return ORJSONResponse(
        status_code=HTTP_400_BAD_REQUEST,
        content=jsonable_encoder(
            {
                "detail": "Validation failed",
                "errors": formatted_errors,
            },
        ),
    )
