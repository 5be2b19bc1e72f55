from __future__ import annotations

from fastapi import APIRouter, Request

from patrol.routers import dispatch_error_response, get_dispatch
from patrol.services.errors import DispatchError

router = APIRouter(prefix="/units", tags=["units"])


@router.get("")
def list_units(request: Request):
    return get_dispatch(request).units.list_units()


@router.put("/{unit_id}")
def upsert_unit(unit_id: str, payload: dict, request: Request):
    try:
        unit = get_dispatch(request).units.upsert_unit(unit_id, payload)
    except DispatchError as exc:
        return dispatch_error_response(exc)
    return {"status": "ok", "unit": unit}


@router.delete("/{unit_id}")
def delete_unit(unit_id: str, request: Request):
    get_dispatch(request).delete_unit(unit_id)
    return {"status": "ok"}
