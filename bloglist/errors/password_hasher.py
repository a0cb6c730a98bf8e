from logging import getLogger

from bloglist.errors.base import BaseAppError, create_exception_handler
from bloglist.utils.helpers import file_logger

logger = file_logger(getLogger(__name__))


class PasswordHashingError(BaseAppError):
    """Base error for password hasher module."""

    def __init__(self, detail: str = "Password hashing failed") -> None:
        super().__init__(detail)


password_hashing_exception_handler = create_exception_handler(logger)
