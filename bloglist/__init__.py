"""Bloglist API package."""

from bloglist.main import app

__all__ = ["app"]
