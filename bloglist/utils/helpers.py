from collections.abc import MutableMapping
from datetime import datetime
from functools import cache
from logging import INFO, Handler, Logger
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

from fastapi import FastAPI, Request
from fastapi.routing import APIRoute
from pythonjsonlogger.json import JsonFormatter
from starlette.routing import BaseRoute, Match, Route

from bloglist.configs.settings import settings

FILE_HANDLER_NAME = "bloglist-file"


def host(request: Request) -> str:
    """Return the host IP address."""
    return request.client.host if request.client else "unknown"


def today_str() -> str:
    """Return today's date as a string."""
    return datetime.now(datetime.now().astimezone().tzinfo).strftime(
        "%Y-%m-%d %H:%M:%S",
    )


def get_summary(request: Request) -> str | None:
    """Extract route summary from request."""

    scope: MutableMapping[str, Any] = request.scope
    app: FastAPI = scope["app"]
    routes: list[BaseRoute] = app.routes

    summary = None
    for route in routes:
        is_api_route = type(route) is APIRoute
        is_route = type(route) is Route
        if is_api_route and route.matches(scope)[0] == Match.FULL:
            summary = route.summary
            break
        if is_route and route.matches(scope)[0] == Match.FULL:
            summary = route.name
            break

    return summary


@cache
def _shared_file_handler() -> Handler:
    log_file = Path(settings.LOG_FILE)
    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(log_file, maxBytes=5 * 1024 * 1024, backupCount=5)
    handler.set_name(FILE_HANDLER_NAME)
    handler.setLevel(INFO)
    handler.setFormatter(JsonFormatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
    return handler


def file_logger(logger: Logger) -> Logger:
    """
    Attach the shared rotating JSON file handler to a logger.

    Does nothing unless `LOG_TO_FILE` is enabled. Safe to call more than once
    for the same logger.

    Args:
        logger: Logger to extend.

    Returns:
        Logger: The same logger, for `logger = file_logger(getLogger(__name__))`.
    """
    if not settings.LOG_TO_FILE:
        return logger
    if all(h.get_name() != FILE_HANDLER_NAME for h in logger.handlers):
        logger.addHandler(_shared_file_handler())
    return logger
