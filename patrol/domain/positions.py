"""Domain helpers for coordinate parsing and capture timestamps."""
from __future__ import annotations

import math
import re
import time
from datetime import datetime, timezone
from typing import Any

# Widest range of a valid instant, in ms either side of the epoch.
MAX_INSTANT_MS = 8_640_000_000_000_000

# Leading decimal literal, the prefix browsers accept in parseFloat().
FLOAT_PREFIX = re.compile(r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def now_millis() -> int:
    return int(time.time() * 1000)


def _as_instant(number: float | int) -> int | None:
    if isinstance(number, float) and not math.isfinite(number):
        return None
    if abs(number) > MAX_INSTANT_MS:
        return None
    return int(number)


def parse_coordinate(value: Any) -> float:
    """
    Parse a latitude/longitude the lenient way GPS clients expect.

    Numbers pass through, strings are read up to the first character that
    cannot continue a decimal literal ("52.1abc" -> 52.1). Anything else
    yields NaN; NaN is stored as-is and is not treated as an error.
    """
    if isinstance(value, bool):
        return math.nan
    if isinstance(value, (int, float)):
        try:
            return float(value)
        except OverflowError:
            return -math.inf if value < 0 else math.inf
    if not isinstance(value, str):
        return math.nan
    match = FLOAT_PREFIX.match(value.lstrip())
    if not match:
        return math.nan
    literal = match.group(0)
    if literal.endswith("Infinity"):
        return -math.inf if literal.startswith("-") else math.inf
    return float(literal)


def parse_captured_at(value: Any) -> int | None:
    """
    Convert a client capture time into epoch milliseconds.

    Accepts epoch milliseconds (number or numeric string) and ISO-8601
    strings; naive ISO values are taken as UTC. Returns None when the value
    is absent or does not describe a valid instant.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return _as_instant(value)
    if not isinstance(value, str):
        return None
    text = value.strip()
    if not text:
        return None
    try:
        number = float(text)
    except ValueError:
        number = None
    if number is not None:
        return _as_instant(number)
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return int(parsed.timestamp() * 1000)


def resolve_timestamp(captured_at: Any, *, now: int | None = None) -> int:
    """Client capture time when parseable, else server receipt time."""
    parsed = parse_captured_at(captured_at)
    if parsed is not None:
        return parsed
    return now if now is not None else now_millis()
