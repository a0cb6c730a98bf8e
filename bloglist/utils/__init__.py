"""Utility helper functions."""

from bloglist.utils.helpers import file_logger, get_summary, host, today_str

__all__ = [
    "file_logger",
    "get_summary",
    "host",
    "today_str",
]
