"""Responder unit use cases."""

from __future__ import annotations

import copy
import logging
import threading
from typing import Any, Dict, Iterable, List

from patrol.core.config import UNITS_DOCUMENT
from patrol.repositories.json_storage import DocumentStore
from patrol.services.errors import ValidationError

logger = logging.getLogger(__name__)

UNIT_STATUS_AVAILABLE = "available"


class UnitStore:
    """Units keyed by id, mirrored to the units document."""

    def __init__(self, storage: DocumentStore, document: str = UNITS_DOCUMENT) -> None:
        self.storage = storage
        self.document = document
        self._lock = threading.RLock()
        loaded = storage.load(document, {})
        if not isinstance(loaded, dict):
            logger.warning("Document %s is not an object, starting empty", document)
            storage.record_fault(document, "load", TypeError(f"expected object, got {type(loaded).__name__}"))
            loaded = {}
            storage.save(document, loaded)
        self._units: Dict[str, Any] = loaded

    def list_units(self) -> Dict[str, Any]:
        with self._lock:
            return copy.deepcopy(self._units)

    def get_unit(self, unit_id: str) -> Any:
        with self._lock:
            return copy.deepcopy(self._units.get(unit_id))

    def upsert_unit(self, unit_id: str, payload: Any) -> Any:
        """Create or wholesale replace a unit. The id comes from the path, not the body."""
        if not unit_id:
            raise ValidationError("unit id is required")
        unit = copy.deepcopy(payload)
        with self._lock:
            self._units[unit_id] = unit
            self.storage.save(self.document, self._units)
        return copy.deepcopy(unit)

    def release(self, unit_ids: Iterable[str]) -> List[str]:
        """Mark every existing unit in ``unit_ids`` as available; missing ids are skipped."""
        released: List[str] = []
        with self._lock:
            for unit_id in unit_ids:
                unit = self._units.get(unit_id)
                if not isinstance(unit, dict):
                    continue
                unit["status"] = UNIT_STATUS_AVAILABLE
                released.append(unit_id)
            self.storage.save(self.document, self._units)
        if released:
            logger.info("Released units: %s", ", ".join(released))
        return released

    def discard(self, unit_id: str) -> bool:
        """Remove a unit if present. Persists either way."""
        with self._lock:
            removed = unit_id in self._units
            self._units.pop(unit_id, None)
            self.storage.save(self.document, self._units)
        return removed

    def __contains__(self, unit_id: object) -> bool:
        return unit_id in self._units

    def __len__(self) -> int:
        return len(self._units)
