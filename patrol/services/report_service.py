"""
Dispatch report use cases (create, replace, list, remove).

Report ids are supplied by the dispatcher and are not checked for uniqueness:
a duplicate id is accepted on create, and replace/remove by id act on the
first report carrying that id.
"""

from __future__ import annotations

import copy
import logging
import threading
from typing import Any, Dict, List, Optional

from patrol.core.config import REPORTS_DOCUMENT
from patrol.repositories.json_storage import DocumentStore
from patrol.services.errors import ReportNotFoundError, ValidationError

logger = logging.getLogger(__name__)


def normalize_report(payload: Dict[str, Any]) -> Dict[str, Any]:
    report = copy.deepcopy(payload)
    if report.get("assignedUnits") is None:
        report["assignedUnits"] = []
    return report


class ReportStore:
    """Ordered list of reports, mirrored to the reports document."""

    def __init__(self, storage: DocumentStore, document: str = REPORTS_DOCUMENT) -> None:
        self.storage = storage
        self.document = document
        self._lock = threading.RLock()
        loaded = storage.load(document, [])
        if not isinstance(loaded, list):
            logger.warning("Document %s is not an array, starting empty", document)
            storage.record_fault(document, "load", TypeError(f"expected array, got {type(loaded).__name__}"))
            loaded = []
            storage.save(document, loaded)
        self._reports: List[Any] = loaded

    @property
    def lock(self) -> threading.RLock:
        """Held by cascades that must see and remove the same report."""
        return self._lock

    def _index_of(self, report_id: str) -> Optional[int]:
        for idx, report in enumerate(self._reports):
            if isinstance(report, dict) and report.get("id") == report_id:
                return idx
        return None

    def list_reports(self) -> List[Any]:
        with self._lock:
            return copy.deepcopy(self._reports)

    def get_report(self, report_id: str) -> Optional[dict]:
        with self._lock:
            idx = self._index_of(report_id)
            return copy.deepcopy(self._reports[idx]) if idx is not None else None

    def create_report(self, payload: Dict[str, Any]) -> dict:
        if not isinstance(payload, dict) or payload.get("id") in (None, ""):
            raise ValidationError("report id is required")
        report = normalize_report(payload)
        with self._lock:
            if self._index_of(report["id"]) is not None:
                logger.warning("Report id %s already exists, appending duplicate", report["id"])
            self._reports.append(report)
            self.storage.save(self.document, self._reports)
        return copy.deepcopy(report)

    def replace_report(self, report_id: str, payload: Dict[str, Any]) -> dict:
        """Overwrite the whole record in place; the stored id stays ``report_id``."""
        report = normalize_report(payload)
        report["id"] = report_id
        with self._lock:
            idx = self._index_of(report_id)
            if idx is None:
                raise ReportNotFoundError(f"Report {report_id} not found")
            self._reports[idx] = report
            self.storage.save(self.document, self._reports)
        return copy.deepcopy(report)

    def remove_report(self, report_id: str) -> Optional[dict]:
        """Drop the first report with ``report_id``; returns it, or None when already gone."""
        with self._lock:
            idx = self._index_of(report_id)
            if idx is None:
                return None
            removed = self._reports.pop(idx)
            self.storage.save(self.document, self._reports)
        return removed

    def remove_unit_references(self, unit_id: str) -> List[str]:
        """Retract ``unit_id`` from every report's assignedUnits. Returns the touched report ids."""
        touched: List[str] = []
        with self._lock:
            for report in self._reports:
                if not isinstance(report, dict):
                    continue
                assigned = report.get("assignedUnits")
                if not isinstance(assigned, list) or unit_id not in assigned:
                    continue
                report["assignedUnits"] = [u for u in assigned if u != unit_id]
                touched.append(report.get("id"))
            self.storage.save(self.document, self._reports)
        return touched

    def __len__(self) -> int:
        return len(self._reports)
