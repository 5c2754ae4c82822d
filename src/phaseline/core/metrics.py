"""Quantitative project metrics derived from the task set."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime, timedelta

from phaseline.config import Config
from phaseline.core.timeutil import due_date_of, timestamp_or, whole_days
from phaseline.models.analysis import ProjectMetrics
from phaseline.models.project import Project, Task


def is_overdue(task: Task, now: datetime) -> bool:
    """A task with a past due date that is not done."""
    if task.is_done:
        return False
    due = due_date_of(task.due_date, now)
    return due is not None and due < now


def calculate_metrics(
    project: Project,
    tasks: Sequence[Task],
    *,
    now: datetime,
    config: Config,
) -> ProjectMetrics:
    """Compute counts, rates and ages for ``tasks`` as of ``now``.

    An empty task list yields all-zero metrics.
    """
    started = timestamp_or(project.created_at, now)

    total = len(tasks)
    completed = sum(1 for t in tasks if t.status == "done")
    in_progress = sum(1 for t in tasks if t.status == "in-progress")
    pending = sum(1 for t in tasks if t.status == "pending")
    completion_rate = completed * 100 / total if total > 0 else 0.0

    high_priority = [t for t in tasks if t.is_high_priority]
    high_priority_completed = sum(1 for t in high_priority if t.is_done)

    overdue = sum(1 for t in tasks if is_overdue(t, now))

    ages = [whole_days(timestamp_or(t.created_at, now), now) for t in tasks]
    average_age = sum(ages) / len(ages) if ages else 0.0

    window = timedelta(days=config.recent_activity_days)
    recent = sum(1 for t in tasks if now - timestamp_or(t.updated_at, now) <= window)

    return ProjectMetrics(
        total_tasks=total,
        completed_tasks=completed,
        in_progress_tasks=in_progress,
        pending_tasks=pending,
        completion_rate=completion_rate,
        high_priority_completed=high_priority_completed,
        high_priority_total=len(high_priority),
        days_since_start=whole_days(started, now),
        average_task_age=average_age,
        overdue_tasks=overdue,
        recent_activity=recent,
    )
