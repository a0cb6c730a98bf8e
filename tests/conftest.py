# tests/conftest.py
"""Root pytest configuration and shared fixtures."""

import os

# These must be set before the application is imported anywhere
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["PASSWORD_SECURITY_LEVEL"] = "low"
os.environ["LOG_TO_FILE"] = "false"
os.environ["ENVIRONMENT"] = "development"
