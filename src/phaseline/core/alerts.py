"""Metric-driven alerts shown next to an analysis."""

from __future__ import annotations

from phaseline.config import Config
from phaseline.messages import message
from phaseline.models.analysis import ProjectAlert, ProjectMetrics


def _alert(kind: str, severity: str, locale: str, **params: object) -> ProjectAlert:
    return ProjectAlert(
        kind=kind,
        severity=severity,
        title=message(locale, f"alert.{kind}.title"),
        message=message(locale, f"alert.{kind}.message", **params),
    )


def detect_alerts(
    metrics: ProjectMetrics,
    *,
    config: Config,
    locale: str = "en",
) -> list[ProjectAlert]:
    """Overdue tasks raise an error; a backlog nobody works on raises a warning.

    A project counts as stalled once it is older than ``stalled_after_days``
    with pending tasks and nothing in progress.
    """
    alerts = []
    if metrics.overdue_tasks > 0:
        alerts.append(_alert("overdue-tasks", "error", locale, count=metrics.overdue_tasks))
    if (
        metrics.in_progress_tasks == 0
        and metrics.pending_tasks > 0
        and metrics.days_since_start > config.stalled_after_days
    ):
        alerts.append(_alert("stalled", "warning", locale))
    return alerts
