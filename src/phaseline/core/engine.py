"""Lifecycle analysis engine.

Runs the stages in order over one project's tasks: metrics, phase, health,
progress and trend, active users, deployment estimate, then the explanation,
timeline and alerts. ``now`` is read once per run and passed to every stage.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import UTC, datetime

from phaseline.config import Config
from phaseline.core.activity import detect_active_users
from phaseline.core.alerts import detect_alerts
from phaseline.core.deployment import estimate_deployment
from phaseline.core.explain import generate_explanation
from phaseline.core.health import determine_health
from phaseline.core.metrics import calculate_metrics
from phaseline.core.phases import classify_phase
from phaseline.core.progress import calculate_progress
from phaseline.core.timeline import build_timeline
from phaseline.core.timeutil import ensure_utc
from phaseline.messages import phase_description, phase_name
from phaseline.models.analysis import LifecycleAnalysis, PhaseInfo
from phaseline.models.project import Project, Task

logger = logging.getLogger(__name__)


class LifecycleEngine:
    """Infers lifecycle phase, health and progress from a project's tasks."""

    def __init__(self, config: Config | None = None) -> None:
        self.config = config or Config()

    def analyze(
        self,
        project: Project,
        tasks: Iterable[Task],
        *,
        now: datetime | None = None,
    ) -> LifecycleAnalysis:
        """Analyze ``project`` using the tasks that belong to it.

        ``tasks`` may contain other projects' tasks; they are ignored. Inputs
        are never modified.
        """
        now = ensure_utc(now) if now is not None else datetime.now(UTC)
        config = self.config
        locale = config.resolved_locale

        project_tasks = [t for t in tasks if t.project_id == project.id]

        metrics = calculate_metrics(project, project_tasks, now=now, config=config)
        assessment = classify_phase(project_tasks, metrics, now=now, config=config)
        health = determine_health(project_tasks, metrics, now=now, config=config)
        progress = calculate_progress(metrics, assessment.phase)
        active_users = detect_active_users(project_tasks, now=now, config=config)
        deployment = estimate_deployment(project_tasks, assessment.phase, now=now)
        explanation = generate_explanation(
            assessment, metrics, health, progress, locale=locale
        )

        logger.info(
            "Analyzed project %s: phase=%s (rule=%s, confidence=%d) health=%s progress=%d%%",
            project.id,
            assessment.phase,
            assessment.rule,
            assessment.confidence,
            health,
            progress.overall,
        )

        return LifecycleAnalysis(
            project_id=project.id,
            current_phase=assessment.phase,
            phase_info=PhaseInfo(
                id=assessment.phase,
                name=phase_name(locale, assessment.phase),
                description=phase_description(locale, assessment.phase),
                status=assessment.status,
                progress=assessment.progress,
            ),
            metrics=metrics,
            health=health,
            overall_progress=progress.overall,
            phase_progress=progress.phase,
            trend=progress.trend,
            estimated_deployment_date=deployment,
            explanation=explanation,
            reasons=list(assessment.reasons),
            confidence=assessment.confidence,
            active_users=active_users,
            timeline=build_timeline(
                assessment.phase, assessment.status, progress.phase, locale=locale
            ),
            alerts=detect_alerts(metrics, config=config, locale=locale),
            analyzed_at=now,
        )


def analyze(
    project: Project,
    tasks: Iterable[Task],
    *,
    now: datetime | None = None,
    config: Config | None = None,
) -> LifecycleAnalysis:
    """Analyze a project with a one-off engine."""
    return LifecycleEngine(config).analyze(project, tasks, now=now)
