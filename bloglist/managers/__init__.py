from bloglist.managers.password_manager import (
    PasswordHasher,
    get_password_hasher,
    hash_password,
    verify_password,
)
from bloglist.managers.token_manager import TokenManager

__all__ = [
    "PasswordHasher",
    "TokenManager",
    "get_password_hasher",
    "hash_password",
    "verify_password",
]
