"""Bloglist API - blogs and the users who create them."""

from logging import getLogger

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from bloglist.configs import settings
from bloglist.dependencies import SessionDep
from bloglist.errors import (
    DatabaseError,
    MalformedIdentifierError,
    PasswordHashingError,
    ValidationError,
    app_validation_exception_handler,
    database_exception_handler,
    identifier_exception_handler,
    password_hashing_exception_handler,
    validation_exception_handler,
)
from bloglist.middleware import (
    LoggingMiddleware,
    SecurityHeadersMiddleware,
    configure_cors,
    lifespan,
)
from bloglist.routes import blog_router, user_router
from bloglist.schemas import HealthCheckResponse
from bloglist.utils.helpers import file_logger, today_str

logger = file_logger(getLogger(__name__))

app = FastAPI(
    title=settings.APP_NAME,
    description="Bloglist API for sharing and liking blogs",
    version="1.0.0",
    lifespan=lifespan,
    swagger_ui_parameters={
        "docExpansion": "none",
        "operationsSorter": "method",
    },
)

configure_cors(app)

app.add_middleware(LoggingMiddleware)
app.add_middleware(SecurityHeadersMiddleware)


routes = [
    blog_router,
    user_router,
]

_ = [app.include_router(router) for router in routes]

errors = [
    (ValidationError, app_validation_exception_handler),
    (MalformedIdentifierError, identifier_exception_handler),
    (PasswordHashingError, password_hashing_exception_handler),
    (DatabaseError, database_exception_handler),
    (RequestValidationError, validation_exception_handler),
]

_ = [app.add_exception_handler(exc_type, handler) for exc_type, handler in errors]


@app.get(
    "/health",
    tags=["🩺 Health"],
    summary="Health check endpoint",
    response_model=HealthCheckResponse,
    response_class=ORJSONResponse,
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "version": "1.0.0",
                        "status": "ok",
                        "timestamp": "2025-01-01 12:00:00",
                        "database": "ok",
                    },
                },
            },
        },
    },
    operation_id="health_check",
)
async def health_check(session: SessionDep) -> HealthCheckResponse:
    """
    Health check endpoint with database status.

    Parameters
    ----------
    session : AsyncSession
        Database session used for a trivial query.

    Returns
    -------
    HealthCheckResponse
        Service version, overall status and database status.

    Examples
    --------
    Request
        GET /health
    Response
        200 OK
        {"version": "1.0.0", "status": "ok", "timestamp": "...", "database": "ok"}
    """
    try:
        await session.execute(select(1))
        database = "ok"
    except SQLAlchemyError:
        logger.exception("Database health check failed")
        database = "unavailable"

    return HealthCheckResponse(
        version=app.version,
        status="ok" if database == "ok" else "degraded",
        timestamp=today_str(),
        database=database,
    )
