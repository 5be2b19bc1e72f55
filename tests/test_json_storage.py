"""
DocumentStore behaviour against a temporary directory.
"""
from __future__ import annotations

import json
import math

from patrol.repositories.json_storage import DocumentStore


def test_save_then_load_returns_same_value(storage):
    value = {"car-1": {"name": "car-1", "lat": 52.1, "lng": 21.0, "timestamp": 1700000000000}}
    assert storage.save("officers", value) is True
    assert storage.load("officers", {"ignored": True}) == value


def test_load_missing_document_writes_default(storage, storage_dir):
    assert not storage_dir.exists()
    assert storage.load("reports", []) == []
    path = storage_dir / "reports.json"
    assert path.exists()
    assert json.loads(path.read_text(encoding="utf-8")) == []
    assert storage.faults()["failures"] == 0


def test_malformed_document_is_replaced_and_counted(storage, storage_dir):
    storage_dir.mkdir(parents=True)
    (storage_dir / "units.json").write_text("{not json", encoding="utf-8")

    assert storage.load("units", {}) == {}
    assert json.loads((storage_dir / "units.json").read_text(encoding="utf-8")) == {}

    faults = storage.faults()
    assert faults["failures"] == 1
    assert faults["last_error"]["document"] == "units"
    assert faults["last_error"]["operation"] == "load"


def test_save_failure_is_swallowed_and_counted(tmp_path):
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("", encoding="utf-8")
    storage = DocumentStore(blocker)

    assert storage.save("officers", {"a": 1}) is False
    faults = storage.faults()
    assert faults["failures"] == 1
    assert faults["last_error"]["operation"] == "save"


def test_documents_are_pretty_printed_with_nan_as_null(storage, storage_dir):
    storage.save("officers", {"x": {"lat": math.nan, "lng": 1.5}})
    text = (storage_dir / "officers.json").read_text(encoding="utf-8")
    assert "\n  " in text
    assert json.loads(text) == {"x": {"lat": None, "lng": 1.5}}


def test_ensure_container_is_idempotent(storage, storage_dir):
    storage.ensure_container()
    storage.ensure_container()
    assert storage_dir.is_dir()


def test_deeply_nested_document_is_replaced_and_counted(storage, storage_dir):
    storage_dir.mkdir(parents=True)
    (storage_dir / "reports.json").write_text("[" * 200000 + "]" * 200000, encoding="utf-8")

    assert storage.load("reports", []) == []
    assert json.loads((storage_dir / "reports.json").read_text(encoding="utf-8")) == []

    faults = storage.faults()
    assert faults["failures"] == 1
    assert faults["last_error"]["document"] == "reports"
    assert faults["last_error"]["operation"] == "load"
