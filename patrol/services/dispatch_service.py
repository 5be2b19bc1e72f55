"""
Application state and the report/unit consistency rule.

DispatchState is built once at startup and handed to the HTTP layer through
``app.state.dispatch``. Cascading deletes touch two documents one after the
other; there is no transaction spanning both, so a crash between the writes
leaves one document ahead of the other. The write order is chosen so that such
a crash over-releases units rather than leaving them stuck as assigned.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List

from patrol.core.config import Settings
from patrol.domain.positions import now_millis
from patrol.repositories.json_storage import DocumentStore
from patrol.services.errors import ReportNotFoundError
from patrol.services.officer_service import OfficerStore
from patrol.services.report_service import ReportStore
from patrol.services.unit_service import UnitStore

logger = logging.getLogger(__name__)


@dataclass
class DispatchState:
    """Officers, reports and units sharing one DocumentStore."""

    storage: DocumentStore
    officers: OfficerStore = field(init=False)
    reports: ReportStore = field(init=False)
    units: UnitStore = field(init=False)

    def __post_init__(self):
        self.storage.ensure_container()
        self.officers = OfficerStore(self.storage)
        self.reports = ReportStore(self.storage)
        self.units = UnitStore(self.storage)
        logger.info(
            "Loaded %d officers, %d reports, %d units from %s",
            len(self.officers),
            len(self.reports),
            len(self.units),
            self.storage.base_dir,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "DispatchState":
        return cls(DocumentStore(settings.storage_dir))

    def delete_report(self, report_id: str) -> List[str]:
        """
        Remove a report and release its units.

        Units are released and persisted before the report is removed. The
        reports lock is held throughout so the report whose units were
        released is the one removed; lock order is always reports, then units.
        Returns the ids of the units that were set back to available.
        """
        with self.reports.lock:
            report = self.reports.get_report(report_id)
            if report is None:
                raise ReportNotFoundError(f"Report {report_id} not found")
            assigned = report.get("assignedUnits") or []
            if not isinstance(assigned, list):
                assigned = []
            released = self.units.release(assigned)
            if self.reports.remove_report(report_id) is None:
                raise ReportNotFoundError(f"Report {report_id} not found")
        logger.info("Report %s deleted, released %d unit(s)", report_id, len(released))
        return released

    def delete_unit(self, unit_id: str) -> List[str]:
        """
        Remove a unit and retract it from every report. Idempotent.

        Reports are persisted before units. Returns the ids of the reports
        whose assignedUnits changed.
        """
        touched = self.reports.remove_unit_references(unit_id)
        removed = self.units.discard(unit_id)
        if removed or touched:
            logger.info("Unit %s deleted, retracted from %d report(s)", unit_id, len(touched))
        return touched

    def health(self) -> Dict[str, Any]:
        return {
            "status": "ok",
            "timestamp": now_millis(),
            "persistence": self.storage.faults(),
            "counts": {
                "officers": len(self.officers),
                "reports": len(self.reports),
                "units": len(self.units),
            },
        }
