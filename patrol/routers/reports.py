from __future__ import annotations

from fastapi import APIRouter, Request

from patrol.routers import dispatch_error_response, get_dispatch
from patrol.services.errors import DispatchError

router = APIRouter(prefix="/reports", tags=["reports"])


@router.get("")
def list_reports(request: Request):
    return get_dispatch(request).reports.list_reports()


@router.post("")
def create_report(payload: dict, request: Request):
    try:
        report = get_dispatch(request).reports.create_report(payload)
    except DispatchError as exc:
        return dispatch_error_response(exc)
    return {"status": "ok", "report": report}


@router.put("/{report_id}")
def replace_report(report_id: str, payload: dict, request: Request):
    try:
        report = get_dispatch(request).reports.replace_report(report_id, payload)
    except DispatchError as exc:
        return dispatch_error_response(exc)
    return {"status": "ok", "report": report}


@router.delete("/{report_id}")
def delete_report(report_id: str, request: Request):
    try:
        get_dispatch(request).delete_report(report_id)
    except DispatchError as exc:
        return dispatch_error_response(exc)
    return {"status": "ok"}
