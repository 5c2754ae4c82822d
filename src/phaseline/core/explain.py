"""Natural-language explanation of an analysis."""

from __future__ import annotations

from phaseline.core.phases import PhaseAssessment
from phaseline.core.progress import Progress
from phaseline.messages import message, phase_name
from phaseline.models.analysis import ProjectMetrics


def generate_explanation(
    assessment: PhaseAssessment,
    metrics: ProjectMetrics,
    health: str,
    progress: Progress,
    *,
    locale: str = "en",
) -> str:
    text = message(
        locale,
        "explain.phase",
        phase=phase_name(locale, assessment.phase),
        confidence=assessment.confidence,
    )
    if assessment.reasons:
        text += message(locale, "explain.reasons", reasons=", ".join(assessment.reasons))
    text += message(locale, "explain.progress", overall=progress.overall, phase=progress.phase)
    text += message(locale, "explain.health", health=message(locale, f"health.{health}"))
    if metrics.in_progress_tasks > 0:
        text += message(locale, "explain.in_progress", count=metrics.in_progress_tasks)
    return text
