from logging import getLogger

from starlette.status import HTTP_400_BAD_REQUEST

from bloglist.errors.base import BaseAppError, create_exception_handler
from bloglist.utils.helpers import file_logger

logger = file_logger(getLogger(__name__))


class MalformedIdentifierError(BaseAppError):
    """Raised when an id string cannot be parsed into a record identifier."""

    has_body = False

    def __init__(self, value: str = "") -> None:
        super().__init__(f"Malformed identifier '{value}'", HTTP_400_BAD_REQUEST)


identifier_exception_handler = create_exception_handler(logger)
