from __future__ import annotations

import math

from patrol.domain.positions import parse_captured_at, parse_coordinate, resolve_timestamp


def test_parse_coordinate_accepts_numbers_and_numeric_strings():
    assert parse_coordinate("52.1") == 52.1
    assert parse_coordinate(" -21.5") == -21.5
    assert parse_coordinate(21) == 21.0
    assert parse_coordinate("52.1abc") == 52.1
    assert parse_coordinate("1e3") == 1000.0


def test_parse_coordinate_malformed_is_nan():
    for value in ("abc", "", None, True, {"lat": 1}):
        assert math.isnan(parse_coordinate(value))


def test_parse_captured_at_formats():
    assert parse_captured_at(1700000000000) == 1700000000000
    assert parse_captured_at("1700000000000") == 1700000000000
    assert parse_captured_at("2024-01-01T00:00:00Z") == 1704067200000
    assert parse_captured_at("2024-01-01T02:00:00+02:00") == 1704067200000
    assert parse_captured_at("yesterday") is None
    assert parse_captured_at(None) is None
    assert parse_captured_at(math.nan) is None


def test_resolve_timestamp_falls_back_to_server_time():
    assert resolve_timestamp("garbage", now=42) == 42
    assert resolve_timestamp(None, now=42) == 42
    assert resolve_timestamp(1000, now=42) == 1000


def test_parse_coordinate_integer_too_large_for_float_is_infinite():
    assert parse_coordinate(10 ** 400) == math.inf
    assert parse_coordinate(-(10 ** 400)) == -math.inf


def test_parse_captured_at_outside_valid_instant_range():
    assert parse_captured_at(8.64e15) == 8_640_000_000_000_000
    assert parse_captured_at(-8.64e15) == -8_640_000_000_000_000
    assert parse_captured_at(1e20) is None
    assert parse_captured_at("1e20") is None
    assert parse_captured_at(10 ** 400) is None
    assert resolve_timestamp(1e20, now=42) == 42
