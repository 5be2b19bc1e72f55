"""Officer position use cases (GPS updates and the live position map)."""

from __future__ import annotations

import copy
import logging
import threading
from typing import Any, Dict, Optional

from patrol.core.config import OFFICERS_DOCUMENT
from patrol.domain.positions import parse_coordinate, resolve_timestamp
from patrol.repositories.json_storage import DocumentStore
from patrol.services.errors import ValidationError

logger = logging.getLogger(__name__)


class OfficerStore:
    """Last known position per device, mirrored to the officers document."""

    def __init__(self, storage: DocumentStore, document: str = OFFICERS_DOCUMENT) -> None:
        self.storage = storage
        self.document = document
        self._lock = threading.RLock()
        loaded = storage.load(document, {})
        if not isinstance(loaded, dict):
            logger.warning("Document %s is not an object, starting empty", document)
            storage.record_fault(document, "load", TypeError(f"expected object, got {type(loaded).__name__}"))
            loaded = {}
            storage.save(document, loaded)
        self._positions: Dict[str, dict] = loaded

    def upsert_position(
        self,
        device_id: str,
        lat: Any,
        lng: Any,
        captured_at: Any = None,
    ) -> dict:
        if not device_id:
            raise ValidationError("device_id is required")
        device_id = str(device_id)
        with self._lock:
            previous = self._positions.get(device_id)
            if not isinstance(previous, dict):
                previous = {}
            entry = {
                "name": previous.get("name") or device_id,
                "lat": parse_coordinate(lat),
                "lng": parse_coordinate(lng),
                "timestamp": resolve_timestamp(captured_at),
            }
            self._positions[device_id] = entry
            self.storage.save(self.document, self._positions)
        logger.info("Position update: %s -> lat:%s, lng:%s", device_id, entry["lat"], entry["lng"])
        return dict(entry)

    def list_positions(self) -> Dict[str, dict]:
        """Serve the in-memory map; every write lands here before the disk."""
        with self._lock:
            return copy.deepcopy(self._positions)

    def get_position(self, device_id: str) -> Optional[dict]:
        with self._lock:
            entry = self._positions.get(device_id)
            return dict(entry) if entry is not None else None

    def __len__(self) -> int:
        return len(self._positions)
