from __future__ import annotations

import logging

from fastapi import APIRouter, Request

from patrol.routers import dispatch_error_response, error_response, get_dispatch
from patrol.services.errors import ValidationError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["positions"])


@router.get("/positions")
def list_positions(request: Request):
    return get_dispatch(request).officers.list_positions()


@router.post("/update")
def update_position(payload: dict, request: Request):
    logger.debug("POST /update body: %s", payload)
    location = payload.get("location")
    device_id = payload.get("device_id")
    coords = location.get("coords") if isinstance(location, dict) else None
    if not location or not isinstance(coords, dict) or not device_id:
        logger.info("POST /update rejected: missing location, coordinates or device_id")
        return error_response("Missing location, coordinates or device_id", 400)
    try:
        data = get_dispatch(request).officers.upsert_position(
            str(device_id),
            coords.get("latitude"),
            coords.get("longitude"),
            location.get("timestamp"),
        )
    except ValidationError as exc:
        return dispatch_error_response(exc)
    return {"status": "ok", "data": data, "received": payload}
