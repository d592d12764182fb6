"""Tests for the password hasher."""

import pytest

from bloglist.errors import PasswordHashingError
from bloglist.managers import PasswordHasher, hash_password, verify_password


@pytest.fixture
def hasher() -> PasswordHasher:
    return PasswordHasher(memory_cost=1024, time_cost=1, parallelism=1)


class TestPasswordHasher:
    """Test cases for PasswordHasher."""

    def test_hash_is_argon2(self, hasher: PasswordHasher) -> None:
        hashed = hasher.hash("salainen")

        assert hashed.startswith("$argon2")
        assert "salainen" not in hashed

    def test_verify_roundtrip(self, hasher: PasswordHasher) -> None:
        hashed = hasher.hash("salainen")

        assert hasher.verify("salainen", hashed) is True
        assert hasher.verify("wrong", hashed) is False

    def test_empty_password_rejected(self, hasher: PasswordHasher) -> None:
        with pytest.raises(ValueError, match="empty"):
            hasher.hash("")

    def test_missing_hash_never_verifies(self, hasher: PasswordHasher) -> None:
        """Unknown users go through a dummy verification and fail."""
        assert hasher.verify("salainen", None) is False

    def test_corrupted_hash_never_verifies(self, hasher: PasswordHasher) -> None:
        assert hasher.verify("salainen", "not-a-hash") is False

    def test_hashing_failure_is_wrapped(
        self,
        hasher: PasswordHasher,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        def broken(_: str) -> str:
            raise RuntimeError("backend missing")

        monkeypatch.setattr(hasher.pwd_context, "hash", broken)

        with pytest.raises(PasswordHashingError):
            hasher.hash("salainen")


class TestAsyncHelpers:
    """Test cases for the thread-pool wrappers."""

    @pytest.mark.asyncio
    async def test_hash_and_verify(self) -> None:
        hashed = await hash_password("salainen")

        assert await verify_password("salainen", hashed) is True
        assert await verify_password("nope", hashed) is False
