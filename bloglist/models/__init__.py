"""Database models for the application."""

from bloglist.models.blog import BlogDB
from bloglist.models.user import UserDB

__all__ = ["UserDB", "BlogDB"]
