from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.responses import FileResponse, PlainTextResponse, Response

from patrol.routers import get_dispatch

router = APIRouter(tags=["health"])

STATIC_DIR: Path | None = None


def configure_static(static_dir: Path | None) -> None:
    """Point the index route at the directory hosting the dispatcher map."""
    global STATIC_DIR
    STATIC_DIR = static_dir


@router.get("/")
def index():
    if STATIC_DIR is not None:
        page = STATIC_DIR / "index.html"
        if page.is_file():
            return FileResponse(page, media_type="text/html")
    return PlainTextResponse("GPS server running. POST /update, GET /positions")


@router.get("/favicon.ico")
def favicon():
    if STATIC_DIR is not None:
        ico_path = STATIC_DIR / "favicon.ico"
        if ico_path.is_file():
            return FileResponse(ico_path, media_type="image/x-icon")
    return Response(status_code=204)


@router.get("/health")
def health(request: Request):
    return get_dispatch(request).health()
