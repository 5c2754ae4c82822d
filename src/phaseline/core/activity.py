"""Active-user detection over in-progress tasks."""

from __future__ import annotations

import math
from collections.abc import Sequence
from datetime import datetime, timedelta

from phaseline.config import Config
from phaseline.core.keywords import infer_task_phase
from phaseline.core.timeutil import timestamp_or
from phaseline.messages import message
from phaseline.models.analysis import ActivityInfo
from phaseline.models.project import Task


def recency_bucket(last_activity: datetime, *, now: datetime, config: Config) -> str:
    age = now - last_activity
    if age <= timedelta(minutes=config.active_window_minutes):
        return "active"
    if age <= timedelta(hours=config.recent_window_hours):
        return "recent"
    return "idle"


def detect_active_users(
    tasks: Sequence[Task],
    *,
    now: datetime,
    config: Config,
) -> list[ActivityInfo]:
    """Report who is working on what, newest activity first.

    Only in-progress tasks count. A user assigned to several of them keeps the
    most recent one; on equal timestamps the first task seen wins.
    """
    latest: dict[str, ActivityInfo] = {}

    for task in tasks:
        if task.status != "in-progress":
            continue
        last_update = timestamp_or(task.updated_at, now)
        status = recency_bucket(last_update, now=now, config=config)
        phase = infer_task_phase(task)

        for assignee in task.assignees:
            existing = latest.get(assignee.id)
            if existing is not None and last_update <= existing.last_activity:
                continue
            latest[assignee.id] = ActivityInfo(
                user=assignee,
                task=task,
                phase=phase,
                last_activity=last_update,
                status=status,
            )

    return sorted(latest.values(), key=lambda a: a.last_activity, reverse=True)


def humanize_age(last_activity: datetime, *, now: datetime, locale: str = "en") -> str:
    """Render elapsed time as "5 minutes ago" / "hace 5 minutos"."""
    minutes = max(0, math.floor((now - last_activity).total_seconds() / 60))
    if minutes < 60:
        unit, n = "minute", minutes
    elif minutes < 24 * 60:
        unit, n = "hour", minutes // 60
    else:
        unit, n = "day", minutes // (24 * 60)
    key = f"ago.{unit}" if n == 1 else f"ago.{unit}s"
    return message(locale, key, n=n)
