# tests/managers/test_password_manager.py
"""Tests for bloglist/managers/password_manager.py module."""

from unittest.mock import patch

import pytest
from passlib.context import CryptContext
from passlib.exc import InternalBackendError

from bloglist.errors import PasswordHashingError
from bloglist.managers import PasswordHasher, get_password_hasher, hash_password

argon2_context = CryptContext(schemes=["argon2"])


@pytest.fixture
def hasher() -> PasswordHasher:
    return PasswordHasher(level="low")


class TestPasswordHasher:
    """Tests for the synchronous hasher."""

    def test_hash_is_argon2(self, hasher: PasswordHasher) -> None:
        hashed = hasher.hash("miauuuuu")

        assert hashed.startswith("$argon2id$")
        assert "miauuuuu" not in hashed

    def test_hashes_are_salted(self, hasher: PasswordHasher) -> None:
        assert hasher.hash("miauuuuu") != hasher.hash("miauuuuu")

    def test_low_level_costs_are_applied(self, hasher: PasswordHasher) -> None:
        hashed = hasher.hash("miauuuuu")

        assert "m=8192,t=1,p=1" in hashed

    def test_hash_matches_only_its_password(self, hasher: PasswordHasher) -> None:
        hashed = hasher.hash("llllllll")

        assert argon2_context.verify("llllllll", hashed) is True
        assert argon2_context.verify("wrong", hashed) is False

    def test_argon2_is_the_only_scheme(self, hasher: PasswordHasher) -> None:
        assert hasher.pwd_context.schemes() == ("argon2",)

    def test_empty_password_is_rejected(self, hasher: PasswordHasher) -> None:
        with pytest.raises(ValueError, match="empty"):
            hasher.hash("")

    def test_backend_failure_becomes_hashing_error(self, hasher: PasswordHasher) -> None:
        with (
            patch.object(hasher.pwd_context, "hash", side_effect=InternalBackendError("boom")),
            pytest.raises(PasswordHashingError),
        ):
            hasher.hash("miauuuuu")

    def test_default_hasher_is_a_singleton(self) -> None:
        assert get_password_hasher() is get_password_hasher()


class TestHashPassword:
    """Tests for the event-loop friendly wrapper."""

    @pytest.mark.asyncio
    async def test_hash_is_produced_off_the_loop(self) -> None:
        hashed = await hash_password("salainen")

        assert hashed.startswith("$argon2id$")
        assert argon2_context.verify("salainen", hashed) is True
        assert argon2_context.verify("salainen!", hashed) is False

    @pytest.mark.asyncio
    async def test_hashing_error_fails_on_first_attempt(self) -> None:
        hasher = get_password_hasher()
        with (
            patch.object(
                hasher,
                "hash",
                side_effect=PasswordHashingError("Failed to hash password"),
            ) as mock_hash,
            pytest.raises(PasswordHashingError),
        ):
            await hash_password("salainen")

        assert mock_hash.call_count == 1
