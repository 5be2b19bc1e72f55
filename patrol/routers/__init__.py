"""
FastAPI routers grouped by resource (positions, reports, units, health).

Each module exposes an APIRouter included by patrol.app. Handlers reach the
stores through ``request.app.state.dispatch`` and translate store errors into
HTTP responses.
"""

from __future__ import annotations

from fastapi import Request
from fastapi.responses import JSONResponse

from patrol.core.responses import DocumentResponse
from patrol.services.dispatch_service import DispatchState
from patrol.services.errors import DispatchError


def get_dispatch(request: Request) -> DispatchState:
    state = getattr(getattr(request.app, "state", None), "dispatch", None)
    if not state:
        raise RuntimeError("DispatchState not configured")
    return state


def error_response(message: str, status_code: int) -> JSONResponse:
    return DocumentResponse({"status": "error", "message": message}, status_code=status_code)


def dispatch_error_response(err: DispatchError) -> JSONResponse:
    return error_response(err.message, err.status_code)
