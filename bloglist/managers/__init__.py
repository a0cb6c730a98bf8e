from bloglist.managers.password_manager import (
    PasswordHasher,
    get_password_hasher,
    hash_password,
)

__all__ = [
    "PasswordHasher",
    "get_password_hasher",
    "hash_password",
]
