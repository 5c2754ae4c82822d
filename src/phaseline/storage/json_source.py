"""Read projects and tasks from a JSON export of the web app.

Accepted layouts::

    {"projects": [...], "tasks": [...]}
    {"project": {...}, "tasks": [...]}

Tasks nested under a project's ``tasks`` key are collected too, with their
``projectId`` defaulting to that project.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from phaseline.models.project import Project, Task

logger = logging.getLogger(__name__)


@dataclass
class Dataset:
    """Projects and tasks loaded from one snapshot."""

    projects: list[Project] = field(default_factory=list)
    tasks: list[Task] = field(default_factory=list)

    def project(self, project_id: str | None = None) -> Project:
        """Look up a project. Without an id the snapshot must hold exactly one.

        Raises:
            ValueError: If the project is unknown or the choice is ambiguous
        """
        if project_id is None:
            if len(self.projects) == 1:
                return self.projects[0]
            if not self.projects:
                raise ValueError("Snapshot contains no projects")
            ids = ", ".join(p.id for p in self.projects)
            raise ValueError(f"Several projects in snapshot, pick one of: {ids}")
        for project in self.projects:
            if project.id == project_id:
                return project
        raise ValueError(f"Project not found: {project_id}")

    def tasks_for(self, project_id: str) -> list[Task]:
        return [t for t in self.tasks if t.project_id == project_id]


def parse_dataset(data: Any) -> Dataset:
    """Build a Dataset from already-decoded JSON.

    Raises:
        ValueError: If the payload has neither ``project`` nor ``projects``
        pydantic.ValidationError: If a record is malformed
    """
    if not isinstance(data, dict):
        raise ValueError("Snapshot must be a JSON object")

    if "projects" in data:
        raw_projects = data["projects"] or []
    elif "project" in data:
        raw_projects = [data["project"]]
    else:
        raise ValueError("Snapshot needs a 'project' or 'projects' key")

    dataset = Dataset()
    for raw in raw_projects:
        nested = (raw.get("tasks") or []) if isinstance(raw, dict) else []
        project = Project.model_validate(raw)
        dataset.projects.append(project)
        for raw_task in nested:
            if isinstance(raw_task, dict) and not (
                raw_task.get("projectId") or raw_task.get("project_id")
            ):
                raw_task = {**raw_task, "projectId": project.id}
            dataset.tasks.append(Task.model_validate(raw_task))

    for raw_task in data.get("tasks") or []:
        dataset.tasks.append(Task.model_validate(raw_task))

    logger.debug(
        "Parsed snapshot: %d project(s), %d task(s)", len(dataset.projects), len(dataset.tasks)
    )
    return dataset


def load_dataset(path: Path | str) -> Dataset:
    """Load a JSON snapshot from disk.

    Raises:
        ValueError: If the file is missing, not JSON, or not a snapshot
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise ValueError(f"Snapshot not found: {path}") from e
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {path}: {e}") from e

    dataset = parse_dataset(data)
    logger.info(
        "Loaded %s (%d projects, %d tasks)", path, len(dataset.projects), len(dataset.tasks)
    )
    return dataset
