#!/usr/bin/env python3
"""
Register (or overwrite) a responder unit directly in the units document.

Run with the server stopped: the server keeps its own copy in memory and
overwrites the document on its next write.

Usage:
  python scripts/seed_units.py --id U1 [--name "Patrol 1"] [--status available] [--storage-dir data]
"""
from __future__ import annotations

import argparse
import sys

from patrol.core.config import get_settings
from patrol.repositories.json_storage import DocumentStore
from patrol.services.unit_service import UNIT_STATUS_AVAILABLE, UnitStore


def main() -> None:
    settings = get_settings()
    ap = argparse.ArgumentParser(description="Register a unit in the units document")
    ap.add_argument("--id", required=True, help="Unit id (e.g. U1)")
    ap.add_argument("--name", help="Display name (default: the id)")
    ap.add_argument("--status", default=UNIT_STATUS_AVAILABLE, help="Initial status (default: available)")
    ap.add_argument("--storage-dir", default=str(settings.storage_dir), help="Directory holding the documents")
    args = ap.parse_args()

    unit_id = (args.id or "").strip()
    if not unit_id:
        raise SystemExit("Invalid unit id")
    storage = DocumentStore(args.storage_dir)
    units = UnitStore(storage)
    existed = unit_id in units
    units.upsert_unit(unit_id, {"name": (args.name or "").strip() or unit_id, "status": args.status})
    if storage.failures:
        raise SystemExit(f"Could not write {storage.path_for(units.document)}")

    print("OK: unit updated" if existed else "OK: unit created")
    print(f"  ID: {unit_id}")
    print(f"  Status: {args.status}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
