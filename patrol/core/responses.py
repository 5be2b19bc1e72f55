"""
JSON encoding helpers.

Coordinates parsed from malformed input are stored as NaN. Strict JSON has no
token for it, so NaN and infinities are written as ``null`` the same way a
browser's ``JSON.stringify`` does, both on disk and over HTTP.
"""

from __future__ import annotations

import json
import math
from typing import Any

from fastapi.responses import JSONResponse


def to_jsonable(value: Any) -> Any:
    """Return a copy of ``value`` with non-finite floats replaced by None."""
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if isinstance(value, dict):
        return {key: to_jsonable(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_jsonable(item) for item in value]
    return value


def dumps(value: Any, *, pretty: bool = False) -> str:
    if pretty:
        return json.dumps(to_jsonable(value), ensure_ascii=False, indent=2, allow_nan=False)
    return json.dumps(to_jsonable(value), ensure_ascii=False, allow_nan=False, separators=(",", ":"))


class DocumentResponse(JSONResponse):
    """JSONResponse that tolerates NaN coordinates."""

    def render(self, content: Any) -> bytes:
        return dumps(content).encode("utf-8")
