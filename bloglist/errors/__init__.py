from bloglist.errors.base import BaseAppError, create_exception_handler
from bloglist.errors.database import (
    DatabaseConnectionError,
    DatabaseError,
    DatabaseInitializationError,
    DuplicateEntryError,
    RecordNotFoundError,
    database_exception_handler,
)
from bloglist.errors.identifier import MalformedIdentifierError, identifier_exception_handler
from bloglist.errors.password_hasher import (
    PasswordHashingError,
    password_hashing_exception_handler,
)
from bloglist.errors.validation import (
    ContentMissingError,
    DuplicateUsernameError,
    MalformedUserError,
    UnknownUserError,
    ValidationError,
    app_validation_exception_handler,
    validation_exception_handler,
)

__all__ = [
    "BaseAppError",
    "ContentMissingError",
    "DatabaseConnectionError",
    "DatabaseError",
    "DatabaseInitializationError",
    "DuplicateEntryError",
    "DuplicateUsernameError",
    "MalformedIdentifierError",
    "MalformedUserError",
    "PasswordHashingError",
    "RecordNotFoundError",
    "UnknownUserError",
    "ValidationError",
    "app_validation_exception_handler",
    "create_exception_handler",
    "database_exception_handler",
    "identifier_exception_handler",
    "password_hashing_exception_handler",
    "validation_exception_handler",
]
