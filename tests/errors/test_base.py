# tests/errors/test_base.py
"""Tests for bloglist/errors/base.py module."""

from unittest.mock import MagicMock

import pytest
from fastapi.responses import ORJSONResponse

from bloglist.errors import BaseAppError, create_exception_handler


def make_request(client_host: str | None, path: str) -> MagicMock:
    request = MagicMock()
    if client_host is None:
        request.client = None
    else:
        request.client.host = client_host
    request.url.path = path
    return request


class TestBaseAppError:
    """Tests for BaseAppError exception."""

    def test_default_values(self) -> None:
        """Test default initialization values."""
        error = BaseAppError()
        assert error.detail == "Internal Server Error"
        assert error.status_code == 500
        assert error.has_body is True

    def test_custom_values(self) -> None:
        """Test custom initialization values."""
        error = BaseAppError(detail="Custom error", status_code=400)
        assert error.detail == "Custom error"
        assert error.status_code == 400

    def test_str_representation(self) -> None:
        """Test string representation returns detail."""
        error = BaseAppError(detail="Test error")
        assert str(error) == "Test error"


class TestCreateExceptionHandler:
    """Tests for create_exception_handler factory function."""

    @pytest.mark.asyncio
    async def test_handler_with_base_app_error(self) -> None:
        """Test handler with BaseAppError exception."""
        logger = MagicMock()
        handler = create_exception_handler(logger)
        request = make_request("192.168.1.1", "/api/blogs")

        response = await handler(request, BaseAppError(detail="content missing", status_code=400))

        assert response.status_code == 400
        assert response.body == b'{"error":"content missing"}'
        logger.warning.assert_called_once_with(
            "content missing for ip: 192.168.1.1 for endpoint /api/blogs",
        )

    @pytest.mark.asyncio
    async def test_handler_with_generic_exception(self) -> None:
        """Test handler with generic Python exception."""
        logger = MagicMock()
        handler = create_exception_handler(logger)
        request = make_request("127.0.0.1", "/api/error")

        response = await handler(request, ValueError("Something went wrong"))

        assert response.status_code == 500
        assert response.body == b'{"error":"Internal Server Error"}'
        logger.warning.assert_called_once_with(
            "Internal Server Error for ip: 127.0.0.1 for endpoint /api/error",
        )

    @pytest.mark.asyncio
    async def test_handler_with_no_client(self) -> None:
        """Test handler when request has no client."""
        logger = MagicMock()
        handler = create_exception_handler(logger)
        request = make_request(None, "/api/users")

        _ = await handler(request, BaseAppError(detail="Error"))

        logger.warning.assert_called_once_with("Error for ip: unknown for endpoint /api/users")

    @pytest.mark.asyncio
    async def test_handler_without_body(self) -> None:
        """Errors flagged without a body are rendered as a bare status."""

        class BodilessError(BaseAppError):
            has_body = False

        logger = MagicMock()
        handler = create_exception_handler(logger)
        request = make_request("10.0.0.1", "/api/blogs/panko")

        response = await handler(request, BodilessError(detail="Gone", status_code=404))

        assert response.status_code == 404
        assert response.body == b""
        assert not isinstance(response, ORJSONResponse)
        logger.warning.assert_called_once()

    @pytest.mark.asyncio
    async def test_handler_with_custom_exception_attributes(self) -> None:
        """Test handler extracts status_code and detail from a foreign exception."""

        class CustomError(Exception):
            def __init__(self) -> None:
                self.status_code = 418
                self.detail = "I'm a teapot"

        logger = MagicMock()
        handler = create_exception_handler(logger)
        request = make_request("172.16.0.1", "/api/coffee")

        response = await handler(request, CustomError())

        assert response.status_code == 418
        assert response.body == b'{"error":"I\'m a teapot"}'

    @pytest.mark.asyncio
    async def test_handler_includes_extra_public_attributes(self) -> None:
        """Public attributes beyond detail and status_code are added to the body."""

        class ContextError(BaseAppError):
            def __init__(self) -> None:
                super().__init__(detail="Conflict", status_code=409)
                self.field = "username"
                self._internal = "hidden"

        logger = MagicMock()
        handler = create_exception_handler(logger)
        request = make_request("8.8.8.8", "/api/users")

        response = await handler(request, ContextError())

        assert response.status_code == 409
        assert response.body == b'{"error":"Conflict","field":"username"}'

    @pytest.mark.asyncio
    async def test_handler_returns_orjson_response(self) -> None:
        """Test handler returns ORJSONResponse instance."""
        logger = MagicMock()
        handler = create_exception_handler(logger)
        request = make_request("localhost", "/test")

        response = await handler(request, BaseAppError())

        assert isinstance(response, ORJSONResponse)
