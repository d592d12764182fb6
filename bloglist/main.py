# bloglist/main.py

"""Bloglist Backend - blog listings with token-gated authoring."""

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from bloglist.configs import API_PREFIX, settings
from bloglist.db import transaction
from bloglist.errors import (
    BaseAppError,
    DatabaseError,
    ForbiddenError,
    InvalidInputError,
    PasswordHashingError,
    UserAuthenticationError,
    auth_exception_handler,
    create_exception_handler,
    create_unhandled_exception_handler,
    database_exception_handler,
    invalid_input_exception_handler,
    password_hashing_exception_handler,
    validation_exception_handler,
)
from bloglist.middleware import (
    LoggingMiddleware,
    SecurityHeadersMiddleware,
    configure_cors,
    lifespan,
)
from bloglist.monitoring import get_logger
from bloglist.routes import blog_router, login_router, user_router
from bloglist.schemas import HealthCheckResponse
from bloglist.utils.helpers import today_str

logger = get_logger(__name__)

app = FastAPI(
    title=settings.APP_NAME,
    description="Bloglist Backend API",
    version=settings.APP_VERSION,
    debug=settings.DEBUG,
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
    login_router,
]

_ = [app.include_router(router, prefix=API_PREFIX) for router in routes]

errors = [
    (UserAuthenticationError, auth_exception_handler),
    (ForbiddenError, auth_exception_handler),
    (InvalidInputError, invalid_input_exception_handler),
    (PasswordHashingError, password_hashing_exception_handler),
    (DatabaseError, database_exception_handler),
    (BaseAppError, create_exception_handler(logger)),
    (RequestValidationError, validation_exception_handler),
    (Exception, create_unhandled_exception_handler(logger)),
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
                        "database": "connected",
                    },
                },
            },
        },
    },
    operation_id="health_check",
)
async def health_check() -> HealthCheckResponse:
    """
    Health check endpoint.

    Returns
    -------
    HealthCheckResponse
        Version, status and database reachability. A database failure
        degrades the status instead of failing the request.

    Examples
    --------
    Request
        GET /health
    Response
        200 OK
        {"version": "1.0.0", "status": "ok", "timestamp": "...", "database": "connected"}
    """
    try:
        async with transaction() as session:
            await session.execute(text("SELECT 1"))
        database = "connected"
    except SQLAlchemyError:
        logger.exception("Health check could not reach the database")
        database = "unavailable"

    return HealthCheckResponse(
        version=app.version,
        status="ok" if database == "connected" else "degraded",
        timestamp=today_str(),
        database=database,
    )
