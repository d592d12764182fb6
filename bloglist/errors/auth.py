"""Authentication and authorization errors."""

from starlette.status import HTTP_401_UNAUTHORIZED, HTTP_403_FORBIDDEN

from bloglist.errors.base import BaseAppError, create_exception_handler
from bloglist.monitoring import get_logger

logger = get_logger(__name__)


class UserAuthenticationError(BaseAppError):
    """Base class for authentication errors."""

    headers = {"WWW-Authenticate": "Bearer"}

    def __init__(
        self,
        detail: str = "Authentication failed",
        status_code: int = HTTP_401_UNAUTHORIZED,
    ) -> None:
        super().__init__(detail, status_code)


class UnauthenticatedError(UserAuthenticationError):
    """Raised when a bearer credential is missing, unverifiable or names no user."""

    def __init__(self, detail: str = "token invalid") -> None:
        super().__init__(detail, HTTP_401_UNAUTHORIZED)


class InvalidCredentialsError(UserAuthenticationError):
    """Raised when a username/password pair does not match."""

    def __init__(self) -> None:
        super().__init__("invalid username or password", HTTP_401_UNAUTHORIZED)


class ForbiddenError(BaseAppError):
    """Raised when an authenticated user acts on a blog they do not own."""

    def __init__(self, detail: str = "only the owner can modify this blog") -> None:
        super().__init__(detail, HTTP_403_FORBIDDEN)


auth_exception_handler = create_exception_handler(logger)
