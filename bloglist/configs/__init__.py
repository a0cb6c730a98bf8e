from bloglist.configs.settings import (
    CONFIG_MAP,
    CONTENT_MISSING_ERROR,
    DUPLICATE_USERNAME_ERROR,
    MALFORMED_USER_ERROR,
    MAX_LIKES,
    MAX_USERNAME_LENGTH,
    MIN_LIKES,
    MIN_PASSWORD_LENGTH,
    MIN_USERNAME_LENGTH,
    UNKNOWN_USER_ERROR,
    Argon2Config,
    settings,
)

__all__ = [
    "Argon2Config",
    "CONFIG_MAP",
    "CONTENT_MISSING_ERROR",
    "DUPLICATE_USERNAME_ERROR",
    "MALFORMED_USER_ERROR",
    "MAX_LIKES",
    "MAX_USERNAME_LENGTH",
    "MIN_LIKES",
    "MIN_PASSWORD_LENGTH",
    "MIN_USERNAME_LENGTH",
    "UNKNOWN_USER_ERROR",
    "settings",
]
