"""
Todo Service - Main FastAPI Application.

Serves read-only user and todo collections loaded from JSON files at startup,
plus the static client pages that browse them.
"""

from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator, List, Tuple

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from . import __version__
from .config import settings
from .dependencies import set_databases
from .exceptions import (
    BadRequestException,
    DataLoadException,
    NotFoundException,
    TodoServiceException,
)
from .logging_config import get_logger, get_request_id, setup_logging
from .metrics import metrics_endpoint, track_rejected_query, track_request_metrics
from .middleware import PrometheusMiddleware, RequestLoggingMiddleware
from .repositories import TodoDatabase, UserDatabase
from .routers import site_router, todo_router, user_router
from .routers.overview_router import RouteInfo, route_overview

setup_logging(
    log_level=settings.LOG_LEVEL,
    service_name="todo-service",
    use_json=settings.LOG_JSON,
)
logger = get_logger(__name__)


def build_databases() -> Tuple[UserDatabase, TodoDatabase]:
    """
    Create the user and todo databases from the configured JSON files.

    Returns:
        Tuple of (user database, todo database)

    Raises:
        DataLoadException: If either file cannot be loaded
    """
    try:
        user_database = UserDatabase(settings.USER_DATA_FILE)
    except DataLoadException as e:
        logger.error(
            "The server failed to load the user data; shutting down.",
            data_file=e.data_file,
            reason=e.reason,
        )
        raise

    try:
        todo_database = TodoDatabase(settings.TODO_DATA_FILE)
    except DataLoadException as e:
        logger.error(
            "The server failed to load the todo data; shutting down.",
            data_file=e.data_file,
            reason=e.reason,
        )
        raise

    return user_database, todo_database


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Loads both databases before the first request is served. A load failure
    propagates, which aborts server startup.
    """
    logger.info(
        "Starting Todo Service",
        app_name=settings.APP_NAME,
        version=__version__,
        host=settings.HOST,
        port=settings.PORT,
        client_directory=str(settings.CLIENT_DIRECTORY),
    )

    user_database, todo_database = build_databases()
    set_databases(user_database, todo_database)

    logger.info(
        "Todo Service startup complete",
        users=user_database.size(),
        todos=todo_database.size(),
    )

    yield

    logger.info("Shutting down Todo Service")
    set_databases(None, None)


app = FastAPI(
    title=settings.APP_NAME,
    description="Read-only users and todos served from JSON files",
    version=__version__,
    docs_url="/api/docs" if settings.DEBUG else None,
    redoc_url="/api/redoc" if settings.DEBUG else None,
    openapi_url="/api/openapi.json" if settings.DEBUG else None,
    lifespan=lifespan,
)

# Add middleware (order matters - first added is last executed)
app.add_middleware(
    RequestLoggingMiddleware,
    slow_request_threshold_ms=settings.SLOW_REQUEST_THRESHOLD_MS,
)
app.add_middleware(PrometheusMiddleware, track_func=track_request_metrics)


def _error_response(status_code: int, error: str, exc: TodoServiceException) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "error": error,
            "message": exc.message,
            "details": exc.details,
        },
    )


@app.exception_handler(BadRequestException)
async def bad_request_handler(request: Request, exc: BadRequestException) -> JSONResponse:
    """Reject invalid query parameters with 400."""
    logger.warning(
        "Rejected query",
        path=request.url.path,
        parameter=exc.parameter,
        value=str(exc.value),
    )
    track_rejected_query(exc.parameter)
    return _error_response(400, "bad_request", exc)


@app.exception_handler(NotFoundException)
async def not_found_handler(request: Request, exc: NotFoundException) -> JSONResponse:
    return _error_response(404, "not_found", exc)


@app.exception_handler(TodoServiceException)
async def service_exception_handler(
    request: Request, exc: TodoServiceException
) -> JSONResponse:
    logger.error("Service error", path=request.url.path, error=exc.message)
    return _error_response(500, "service_error", exc)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle all unhandled exceptions."""
    logger.error(
        "Unhandled exception",
        path=request.url.path,
        method=request.method,
        error=str(exc),
        exc_info=True,
    )

    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": "internal_server_error",
            "message": "An unexpected error occurred",
            "request_id": get_request_id() or request.headers.get("X-Request-ID"),
        },
    )


# Include routers
ROUTERS = [site_router.router, user_router.router, todo_router.router]
for router in ROUTERS:
    app.include_router(router)
app.state.overview_routers = ROUTERS

app.add_api_route(
    settings.ROUTE_OVERVIEW_PATH,
    route_overview,
    methods=["GET"],
    response_model=List[RouteInfo],
    tags=["site"],
    summary="Route overview",
)
app.add_api_route(
    "/metrics",
    metrics_endpoint,
    methods=["GET"],
    include_in_schema=False,
)


def mount_client(target: FastAPI, directory: Path) -> bool:
    """
    Serve the static client pages in `directory` at the site root.

    Must be called after every route is registered, since the root mount
    matches any path.

    Args:
        target: Application to mount the pages on
        directory: Directory holding the client files

    Returns:
        True if the pages were mounted, False if the directory is missing
    """
    try:
        target.mount(
            "/",
            StaticFiles(directory=str(directory), html=True),
            name="client",
        )
    except RuntimeError:
        logger.warning(
            "Client directory not found - static pages disabled",
            client_directory=str(directory),
        )
        return False
    return True


mount_client(app, settings.CLIENT_DIRECTORY)


def main() -> None:
    """Run the service with uvicorn."""
    import uvicorn

    uvicorn.run(
        app,
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
