"""Health classification: delayed, at-risk or on-time."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from phaseline.config import Config
from phaseline.core.metrics import is_overdue
from phaseline.models.analysis import ProjectMetrics
from phaseline.models.project import Task


def determine_health(
    tasks: Sequence[Task],
    metrics: ProjectMetrics,
    *,
    now: datetime,
    config: Config,
) -> str:
    """Classify project health.

    An overdue high-priority task makes the project delayed regardless of
    anything else. Otherwise any overdue task, or a low completion rate on a
    project that is no longer new, puts it at risk. A project with no tasks
    has nothing to be late on.
    """
    if any(t.is_high_priority and is_overdue(t, now) for t in tasks):
        return "delayed"

    stale = (
        metrics.total_tasks > 0
        and metrics.completion_rate < config.low_completion_rate
        and metrics.days_since_start > config.stale_after_days
    )
    if metrics.overdue_tasks > 0 or stale:
        return "at-risk"

    return "on-time"
