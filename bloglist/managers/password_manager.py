"""
Password hashing module using Argon2 with passlib's CryptContext.

Users are stored with a derived secret only. This module turns a plaintext
password into that secret; the API has no login, so nothing here checks a
password against a stored hash.
"""

from asyncio import get_running_loop
from concurrent.futures import ThreadPoolExecutor

from passlib.context import CryptContext
from passlib.exc import InternalBackendError

from bloglist.configs import CONFIG_MAP, settings
from bloglist.errors import PasswordHashingError
from bloglist.monitoring import get_logger

executor = ThreadPoolExecutor(max_workers=4)
logger = get_logger(__name__)


class PasswordHasher:
    """
    A password hashing manager using the Argon2id algorithm.

    Wraps passlib's CryptContext with argon2 as its only scheme, tuned to one
    of the `CONFIG_MAP` cost levels.
    """

    def __init__(self, level: str | None = None) -> None:
        """
        Initialize the PasswordHasher for a security level.

        Args:
            level: Key into `CONFIG_MAP`; defaults to `PASSWORD_SECURITY_LEVEL`.
        """
        self.level = level or settings.PASSWORD_SECURITY_LEVEL
        costs = CONFIG_MAP[self.level]
        self.pwd_context = CryptContext(
            schemes=["argon2"],
            argon2__memory_cost=costs.memory_cost,
            argon2__time_cost=costs.time_cost,
            argon2__parallelism=costs.parallelism,
        )
        logger.info(f"PasswordHasher initialized with Argon2id on level {self.level}")

    def hash(self, password: str) -> str:
        """
        Hash a plaintext password using Argon2id.

        Args:
            password: The plaintext password to hash

        Returns:
            str: The hashed password in Argon2id format

        Raises:
            ValueError: If password is empty
            PasswordHashingError: If hashing fails

        Example:
            >>> hasher = PasswordHasher()
            >>> hasher.hash("miauuuuu")  # $argon2id$v=19$m=65536,t=2,p=2$...
        """
        if not password:
            msg = "Password cannot be empty"
            raise ValueError(msg)

        try:
            hashed_password = self.pwd_context.hash(password)
            logger.debug(f"Password hashed successfully on level {self.level}")
        except (ValueError, InternalBackendError, UnicodeError) as e:
            logger.exception("Invalid password format")
            mssg = "Failed to hash password"
            raise PasswordHashingError(mssg) from e
        return hashed_password


_default_hasher: PasswordHasher | None = None


def get_password_hasher() -> PasswordHasher:
    """
    Get or create the default password hasher instance.

    Returns:
        PasswordHasher: The singleton password hasher instance
    """
    global _default_hasher
    if _default_hasher is None:
        _default_hasher = PasswordHasher()
    return _default_hasher


async def hash_password(password: str) -> str:
    """
    Hash a password off the event loop using the default hasher.

    Failures are not retried: the same input fails the same way again.

    Args:
        password: The plaintext password to hash

    Returns:
        str: The hashed password
    """
    return await get_running_loop().run_in_executor(
        executor,
        get_password_hasher().hash,
        password,
    )
