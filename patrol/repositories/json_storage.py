"""
JSON document persistence adapter.

Each logical store (officers, reports, units) is mirrored to one pretty-printed
JSON document under a base directory. Reads and writes never raise: failures
are logged, counted and reported through :meth:`DocumentStore.faults` so the
health check can show that memory and disk have diverged.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional
import copy
import json
import logging
import threading
import time

from patrol.core.responses import dumps

logger = logging.getLogger(__name__)


class DocumentStore:
    """Maps a document name to a JSON value stored at ``<base_dir>/<name>.json``."""

    def __init__(self, base_dir: Path | str) -> None:
        self.base_dir = Path(base_dir)
        self._locks: Dict[str, threading.Lock] = {}
        self._locks_guard = threading.Lock()
        self._fault_lock = threading.Lock()
        self.failures = 0
        self.last_error: Optional[dict] = None

    def path_for(self, name: str) -> Path:
        return self.base_dir / f"{name}.json"

    def ensure_container(self) -> None:
        self.base_dir.mkdir(parents=True, exist_ok=True)

    def _lock_for(self, name: str) -> threading.Lock:
        with self._locks_guard:
            lock = self._locks.get(name)
            if lock is None:
                lock = self._locks[name] = threading.Lock()
            return lock

    def record_fault(self, name: str, operation: str, exc: BaseException) -> None:
        with self._fault_lock:
            self.failures += 1
            self.last_error = {
                "document": name,
                "operation": operation,
                "error": f"{type(exc).__name__}: {exc}",
                "at": int(time.time() * 1000),
            }

    def faults(self) -> dict:
        with self._fault_lock:
            return {"failures": self.failures, "last_error": copy.deepcopy(self.last_error)}

    def load(self, name: str, default: Any) -> Any:
        """
        Read the named document, falling back to ``default`` on first use.

        An absent, unreadable or malformed document is replaced by ``default``
        (not repaired) and ``default`` is returned.
        """
        path = self.path_for(name)
        try:
            self.ensure_container()
            with path.open("r", encoding="utf-8") as f:
                return json.load(f)
        except FileNotFoundError:
            logger.info("Document %s not found, creating %s", name, path)
        except (OSError, ValueError, RecursionError) as exc:
            logger.warning("Document %s unreadable (%s), replacing with default", name, exc)
            self.record_fault(name, "load", exc)
        self.save(name, default)
        return default

    def save(self, name: str, value: Any) -> bool:
        """Write ``value`` as the full content of the document. Returns False on failure."""
        path = self.path_for(name)
        with self._lock_for(name):
            try:
                self.ensure_container()
                path.write_text(dumps(value, pretty=True), encoding="utf-8")
            except (OSError, TypeError, ValueError, RecursionError) as exc:
                logger.exception("Failed to write document %s to %s", name, path)
                self.record_fault(name, "save", exc)
                return False
        return True
