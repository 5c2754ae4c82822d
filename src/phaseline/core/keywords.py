"""Keyword hints for phase inference.

Plain case-insensitive substring matching over a task's title and
description against a small fixed vocabulary.
"""

from __future__ import annotations

from collections.abc import Iterable

from phaseline.models.project import Task

TESTING_KEYWORDS: tuple[str, ...] = ("test", "prueba")
DEPLOYMENT_KEYWORDS: tuple[str, ...] = ("deploy", "despliegue")
DESIGN_KEYWORDS: tuple[str, ...] = ("diseño", "análisis")


def mentions(task: Task, keywords: Iterable[str]) -> bool:
    title = task.title.lower()
    description = task.description.lower()
    return any(k in title or k in description for k in keywords)


def any_mentions(tasks: Iterable[Task], keywords: Iterable[str]) -> bool:
    words = tuple(keywords)
    return any(mentions(t, words) for t in tasks)


def infer_task_phase(task: Task) -> str:
    """Display phase for a single task, development when nothing matches."""
    if mentions(task, TESTING_KEYWORDS):
        return "testing"
    if mentions(task, DEPLOYMENT_KEYWORDS):
        return "deployment"
    if mentions(task, DESIGN_KEYWORDS):
        return "analysis-design"
    return "development"
