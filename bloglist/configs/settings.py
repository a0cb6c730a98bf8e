"""Application settings and configuration constants.

This module contains application settings, constants, and configuration
values for the Bloglist backend application.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = Path(__file__).parent.parent.parent / ".env"

# --- Constants ---
MIN_USERNAME_LENGTH = 3
MIN_PASSWORD_LENGTH = 3
MAX_USERNAME_LENGTH = 50
# Signed 64-bit range of the likes column
MIN_LIKES = -(2**63)
MAX_LIKES = 2**63 - 1

# Response constants
CONTENT_MISSING_ERROR = "content missing"
UNKNOWN_USER_ERROR = "no user created the blog"
MALFORMED_USER_ERROR = "malformed user"
DUPLICATE_USERNAME_ERROR = "duplicate username"


class Settings(BaseSettings):
    """Application settings with validation and default values."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    APP_NAME: str = "Bloglist API"
    DEBUG: bool = False

    # Environment
    ENVIRONMENT: Literal["development", "staging", "production"] = "development"
    HOST: str = "127.0.0.1"
    PORT: int = 3003
    PRODUCTION_FRONTEND_URL: str | None = None

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_TO_FILE: bool = False
    LOG_FILE: str = "logs/bloglist.log"

    # Database
    DATABASE_URL: str = "sqlite+aiosqlite:///./data/bloglist.db"
    DATABASE_ECHO: bool = False
    POOL_SIZE: int = 5
    MAX_OVERFLOW: int = 10
    POOL_TIMEOUT: int = 30  # seconds
    POOL_RECYCLE: int = 1800  # 30 minutes

    # Password hashing
    PASSWORD_SECURITY_LEVEL: Literal["low", "medium", "high"] = "medium"

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT == "development"


settings = Settings()


@dataclass(frozen=True)
class Argon2Config:
    """Argon2id cost parameters for one security level."""

    memory_cost: int  # KiB
    time_cost: int
    parallelism: int


CONFIG_MAP: dict[str, Argon2Config] = {
    "low": Argon2Config(memory_cost=8 * 1024, time_cost=1, parallelism=1),
    "medium": Argon2Config(memory_cost=64 * 1024, time_cost=2, parallelism=2),
    "high": Argon2Config(memory_cost=512 * 1024, time_cost=3, parallelism=4),
}
