"""FastAPI application factory for the Patrol backend."""
from __future__ import annotations

import logging
import time
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from starlette.middleware.base import BaseHTTPMiddleware

from patrol.core.config import Settings, get_settings
from patrol.core.responses import DocumentResponse
from patrol.routers import error_response
from patrol.routers import health as health_router
from patrol.routers import positions as positions_router
from patrol.routers import reports as reports_router
from patrol.routers import units as units_router
from patrol.services.dispatch_service import DispatchState

logger = logging.getLogger("patrol.access")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("patrol").setLevel(level)


class RequestLogMiddleware(BaseHTTPMiddleware):
    """Log method, path, status and duration of every request."""

    async def dispatch(self, request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            "%s %s -> %s (%.1f ms)",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response


async def _validation_error_handler(request: Request, exc: RequestValidationError):
    # Body shape problems are presence-check failures, reported like the others.
    return error_response("Request body must be a JSON object", 400)


def create_app(
    settings: Optional[Settings] = None,
    state: Optional[DispatchState] = None,
) -> FastAPI:
    """Factory compatible with uvicorn (``--factory``)."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="Patrol Dispatch API", default_response_class=DocumentResponse)
    app.state.settings = settings
    app.state.dispatch = state or DispatchState.from_settings(settings)

    allow_all = "*" in settings.cors_origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if allow_all else sorted(settings.cors_origins),
        allow_credentials=not allow_all,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLogMiddleware)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)

    static_dir = settings.static_dir if settings.static_dir.is_dir() else None
    if static_dir is not None:
        app.mount("/static", StaticFiles(directory=static_dir), name="static")
    health_router.configure_static(static_dir)

    app.include_router(health_router.router)
    app.include_router(positions_router.router)
    app.include_router(reports_router.router)
    app.include_router(units_router.router)
    return app
