#!/usr/bin/env python3
"""
Set units back to "available" in the units document.

Usage:
  python scripts/release_units.py --id U1 [--id U2 ...]
  python scripts/release_units.py --all
"""
from __future__ import annotations

import argparse
import sys

from patrol.core.config import get_settings
from patrol.repositories.json_storage import DocumentStore
from patrol.services.unit_service import UnitStore


def main() -> None:
    settings = get_settings()
    ap = argparse.ArgumentParser(description="Release units to available")
    group = ap.add_mutually_exclusive_group(required=True)
    group.add_argument("--id", action="append", dest="ids", help="Unit id to release (repeatable)")
    group.add_argument("--all", action="store_true", help="Release every unit")
    ap.add_argument("--storage-dir", default=str(settings.storage_dir), help="Directory holding the documents")
    args = ap.parse_args()

    storage = DocumentStore(args.storage_dir)
    units = UnitStore(storage)
    ids = list(units.list_units()) if args.all else [i.strip() for i in args.ids if i.strip()]
    released = units.release(ids)
    missing = [i for i in ids if i not in released]

    print(f"OK: {len(released)} unit(s) released")
    for unit_id in released:
        print(f"  {unit_id}")
    if missing:
        print(f"  Not found: {', '.join(missing)}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
