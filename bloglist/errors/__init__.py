from bloglist.errors.auth import (
    ForbiddenError,
    InvalidCredentialsError,
    UnauthenticatedError,
    UserAuthenticationError,
    auth_exception_handler,
)
from bloglist.errors.base import (
    BaseAppError,
    create_exception_handler,
    create_unhandled_exception_handler,
)
from bloglist.errors.database import (
    DatabaseConnectionError,
    DatabaseError,
    DatabaseInitializationError,
    DuplicateEntryError,
    RecordNotFoundError,
    database_exception_handler,
)
from bloglist.errors.password_hasher import (
    PasswordHashingError,
    password_hashing_exception_handler,
)
from bloglist.errors.validation import (
    InvalidInputError,
    invalid_input_exception_handler,
    validation_exception_handler,
)

__all__ = [
    "BaseAppError",
    "DatabaseConnectionError",
    "DatabaseError",
    "DatabaseInitializationError",
    "DuplicateEntryError",
    "ForbiddenError",
    "InvalidCredentialsError",
    "InvalidInputError",
    "PasswordHashingError",
    "RecordNotFoundError",
    "UnauthenticatedError",
    "UserAuthenticationError",
    "auth_exception_handler",
    "create_exception_handler",
    "create_unhandled_exception_handler",
    "database_exception_handler",
    "invalid_input_exception_handler",
    "password_hashing_exception_handler",
    "validation_exception_handler",
]
