"""
Main entrypoint for the Fitness Events API.

This module assembles the FastAPI application, sets up logging,
registers the error handlers and includes the versioned routers.
The payment page reads ``{message, isOk}``, so body validation failures
on the invoice route use that envelope instead of ``{"error": ...}``.
The ``create_app`` function builds and configures the app, which is
then instantiated at module import time as ``app``::

    uvicorn fitness_events_api.app.main:app --reload
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .api.v1.endpoints.invoice import invoice_failure
from .api.v1.router import router as v1_router
from .core.config import settings
from .core.db import init_db
from .core.errors import ApiError
from .core.logging_config import setup_logging


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Performs one-time setup: logging, error handlers, the ``/api/v1``
    routes and a startup hook applying database migrations.
    """
    # Logging first so that everything below can log.
    setup_logging(settings.log_level, settings.log_file or None)
    logger = logging.getLogger(__name__)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == status.HTTP_401_UNAUTHORIZED else None
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message}, headers=headers)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
        if request.url.path == request.app.url_path_for("create_invoice"):
            return invoice_failure(status.HTTP_400_BAD_REQUEST, "Invalid request body")
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": "Invalid request body"})

    app.include_router(v1_router, prefix="/api/v1")

    @app.on_event("startup")
    async def startup_event() -> None:
        # Creates the database file on first run and applies migrations.
        init_db()

    return app


app = create_app()
