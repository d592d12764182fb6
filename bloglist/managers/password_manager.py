"""
Password hashing module using Argon2 with passlib's CryptContext.

Hashing is CPU bound, so the module-level coroutines push the work to a
thread pool instead of blocking the event loop.
"""

from asyncio import get_running_loop
from concurrent.futures import ThreadPoolExecutor

from passlib.context import CryptContext
from passlib.exc import UnknownHashError

from bloglist.configs import settings
from bloglist.errors import PasswordHashingError
from bloglist.monitoring import get_logger

executor = ThreadPoolExecutor(max_workers=4)
logger = get_logger(__name__)


class PasswordHasher:
    """
    Password hashing and verification using Argon2id.

    pbkdf2_sha256 stays readable as a deprecated fallback so older hashes
    still verify.
    """

    def __init__(
        self,
        memory_cost: int = settings.ARGON2_MEMORY_COST,
        time_cost: int = settings.ARGON2_TIME_COST,
        parallelism: int = settings.ARGON2_PARALLELISM,
    ) -> None:
        self.pwd_context = CryptContext(
            schemes=["argon2", "pbkdf2_sha256"],
            deprecated="pbkdf2_sha256",
            argon2__memory_cost=memory_cost,
            argon2__time_cost=time_cost,
            argon2__parallelism=parallelism,
        )

    def hash(self, password: str) -> str:
        """
        Hash a plaintext password.

        Raises:
            ValueError: If password is empty
            PasswordHashingError: If hashing fails
        """
        if not password:
            mssg = "Password cannot be empty"
            raise ValueError(mssg)

        try:
            return self.pwd_context.hash(password)
        except Exception as e:
            logger.exception("Error hashing password")
            mssg = "Failed to hash password"
            raise PasswordHashingError(mssg) from e

    def verify(self, password: str, hashed_password: str | None) -> bool:
        """Verify a plaintext password against a stored hash."""
        if not hashed_password:
            # Burn comparable time so unknown users are not distinguishable
            self.pwd_context.dummy_verify()
            return False

        try:
            return self.pwd_context.verify(password, hashed_password)
        except (ValueError, UnknownHashError):
            logger.warning("Stored hash is corrupted or has an unknown format")
            return False


_default_hasher: PasswordHasher | None = None


def get_password_hasher() -> PasswordHasher:
    """Get or create the default password hasher instance."""
    global _default_hasher  # noqa: PLW0603
    if _default_hasher is None:
        _default_hasher = PasswordHasher()
    return _default_hasher


async def hash_password(password: str) -> str:
    """Hash a password on the worker pool using the default hasher."""
    return await get_running_loop().run_in_executor(
        executor,
        get_password_hasher().hash,
        password,
    )


async def verify_password(password: str, hashed_password: str | None) -> bool:
    """Verify a password on the worker pool using the default hasher."""
    return await get_running_loop().run_in_executor(
        executor,
        get_password_hasher().verify,
        password,
        hashed_password,
    )
