from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Make the patrol package importable when running tests from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from patrol.core.config import Settings  # noqa: E402
from patrol.repositories.json_storage import DocumentStore  # noqa: E402
from patrol.services.dispatch_service import DispatchState  # noqa: E402


@pytest.fixture()
def storage_dir(tmp_path) -> Path:
    return tmp_path / "data"


@pytest.fixture()
def storage(storage_dir) -> DocumentStore:
    return DocumentStore(storage_dir)


@pytest.fixture()
def dispatch(storage) -> DispatchState:
    return DispatchState(storage)


@pytest.fixture()
def settings(tmp_path, storage_dir) -> Settings:
    return Settings(
        app_env="test",
        host="127.0.0.1",
        port=3000,
        storage_dir=storage_dir,
        static_dir=tmp_path / "web",
        cors_origins=("*",),
        log_level="INFO",
    )
