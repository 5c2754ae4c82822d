"""Shared test fixtures for Phaseline."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from pathlib import Path
from typing import Any

import pytest

from phaseline.config import Config
from phaseline.models.project import Project, Task, User

NOW = datetime(2025, 6, 2, 12, 0, tzinfo=UTC)
PROJECT_ID = "proj-1"


def ago(**delta: float) -> datetime:
    return NOW - timedelta(**delta)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for var in ("PHASELINE_HOME", "PHASELINE_LOG_LEVEL", "PHASELINE_LOCALE"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def config(tmp_path: Path) -> Config:
    return Config(home_path=tmp_path)


@pytest.fixture
def project() -> Project:
    """A project started a month ago."""
    return Project(id=PROJECT_ID, name="Thesis Portal", created_at=ago(days=30))


@pytest.fixture
def new_project() -> Project:
    return Project(id=PROJECT_ID, name="Fresh Start", created_at=ago(days=1))


@pytest.fixture
def ana() -> User:
    return User(id="u-ana", name="Ana")


@pytest.fixture
def luis() -> User:
    return User(id="u-luis", name="Luis")


@pytest.fixture
def make_task() -> Callable[..., Task]:
    """Factory for tasks in PROJECT_ID, created 20 days and updated 10 days ago."""
    counter = {"n": 0}

    def _make(**overrides: Any) -> Task:
        counter["n"] += 1
        data: dict[str, Any] = {
            "id": f"t-{counter['n']}",
            "title": f"Task {counter['n']}",
            "description": "",
            "status": "pending",
            "priority": "medium",
            "project_id": PROJECT_ID,
            "created_at": ago(days=20),
            "updated_at": ago(days=10),
        }
        data.update(overrides)
        return Task(**data)

    return _make
