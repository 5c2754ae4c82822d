"""Overall progress, phase-local progress and trend."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from phaseline.core.timeutil import clamp_percent, round_half_up
from phaseline.models.analysis import ProjectMetrics


@dataclass(frozen=True)
class Progress:
    overall: int
    phase: int
    trend: str


_PHASE_PROGRESS: dict[str, Callable[[ProjectMetrics], float]] = {
    "planning": lambda m: min(100, m.total_tasks / 10 * 100),
    "analysis-design": lambda m: min(100, m.completion_rate / 0.2 * 100),
    "development": lambda m: min(100, m.completion_rate / 0.8 * 100),
    "testing": lambda m: min(100, (m.completion_rate - 80) / 20 * 100),
    "deployment": lambda m: 100 if m.completion_rate >= 90 else 75,
    "maintenance": lambda m: 100,
    "finalized": lambda m: 100,
}


def phase_progress(metrics: ProjectMetrics, phase: str) -> int:
    """Progress within ``phase``, rounded and clamped to 0-100."""
    formula = _PHASE_PROGRESS.get(phase)
    value = formula(metrics) if formula else 0.0
    return round_half_up(clamp_percent(value))


def determine_trend(metrics: ProjectMetrics) -> str:
    if metrics.overdue_tasks > 0:
        return "down"
    if metrics.recent_activity >= metrics.total_tasks * 0.2:
        return "up"
    if metrics.in_progress_tasks == 0 and metrics.pending_tasks > 0:
        return "at-risk"
    return "stable"


def calculate_progress(metrics: ProjectMetrics, phase: str) -> Progress:
    return Progress(
        overall=round_half_up(clamp_percent(metrics.completion_rate)),
        phase=phase_progress(metrics, phase),
        trend=determine_trend(metrics),
    )
