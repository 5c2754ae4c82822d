"""Phase classifier: an ordered cascade of lifecycle rules.

Each rule pairs a predicate with a result builder. Rules are evaluated top to
bottom and the first match wins; when nothing matches, a fallback picks
development (some activity) or planning (none).

Finalized and deployment are checked before testing, otherwise a fully
completed project would always read as testing. Deployment keeps its place
ahead of maintenance.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field, replace
from datetime import datetime

from phaseline.config import Config
from phaseline.core.keywords import DEPLOYMENT_KEYWORDS, TESTING_KEYWORDS, any_mentions
from phaseline.core.timeutil import clamp_percent, round_half_up, timestamp_or
from phaseline.messages import message
from phaseline.models.analysis import ProjectMetrics
from phaseline.models.project import Task

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PhaseAssessment:
    """Outcome of the cascade for one project."""

    phase: str
    confidence: int
    status: str
    progress: float
    reasons: list[str] = field(default_factory=list)
    rule: str = "fallback"


@dataclass(frozen=True)
class PhaseContext:
    """Everything a rule may look at, computed once per run."""

    tasks: Sequence[Task]
    metrics: ProjectMetrics
    config: Config
    locale: str
    has_testing_tasks: bool
    has_deploy_tasks: bool
    tasks_after_last_completion: int

    def t(self, key: str, **params: object) -> str:
        return message(self.locale, f"reason.{key}", **params)

    @property
    def all_critical_done(self) -> bool:
        m = self.metrics
        return m.high_priority_total > 0 and m.high_priority_completed == m.high_priority_total


@dataclass(frozen=True)
class PhaseRule:
    name: str
    matches: Callable[[PhaseContext], bool]
    assess: Callable[[PhaseContext], PhaseAssessment]


def _pct(value: float) -> int:
    return round_half_up(value)


def _result(
    phase: str,
    confidence: int,
    progress: float,
    reasons: list[str],
    *,
    status: str = "in-progress",
) -> PhaseAssessment:
    return PhaseAssessment(
        phase=phase,
        confidence=int(clamp_percent(confidence)),
        status=status,
        progress=clamp_percent(progress),
        reasons=reasons,
    )


def tasks_created_after_last_completion(tasks: Sequence[Task], now: datetime) -> int:
    """Count tasks created after the newest completion.

    Completion time is the ``updated_at`` of a done task. With no done task
    there is no reference point and the count is zero.
    """
    done = [t for t in tasks if t.is_done]
    if not done:
        return 0
    last_completion = max(timestamp_or(t.updated_at, now) for t in done)
    return sum(1 for t in tasks if timestamp_or(t.created_at, now) > last_completion)


# ── Rules ────────────────────────────────────────────────────


def _is_planning(ctx: PhaseContext) -> bool:
    m = ctx.metrics
    return (
        m.days_since_start < ctx.config.new_project_days
        and m.in_progress_tasks == 0
        and m.completed_tasks == 0
    )


def _planning(ctx: PhaseContext) -> PhaseAssessment:
    m = ctx.metrics
    return _result(
        "planning",
        90,
        min(50, m.total_tasks / 5 * 10),
        [ctx.t("project_age", days=m.days_since_start), ctx.t("no_activity")],
    )


def _is_analysis_design(ctx: PhaseContext) -> bool:
    m = ctx.metrics
    return m.completion_rate < 20 and m.pending_tasks > m.in_progress_tasks * 2


def _analysis_design(ctx: PhaseContext) -> PhaseAssessment:
    m = ctx.metrics
    return _result(
        "analysis-design",
        75,
        m.completion_rate * 2,
        [
            ctx.t("completed_pct", pct=_pct(m.completion_rate)),
            ctx.t("pending_vs_active", pending=m.pending_tasks, in_progress=m.in_progress_tasks),
        ],
    )


def _is_development(ctx: PhaseContext) -> bool:
    m = ctx.metrics
    return m.active_rate >= 30 and m.completion_rate < 80 and not ctx.has_testing_tasks


def _development(ctx: PhaseContext) -> PhaseAssessment:
    m = ctx.metrics
    reasons = [
        ctx.t("active_pct", pct=_pct(m.active_rate)),
        ctx.t("overall_completion", pct=_pct(m.completion_rate)),
    ]
    if m.in_progress_tasks > 0:
        reasons.append(ctx.t("in_progress_now", count=m.in_progress_tasks))
    return _result("development", 85, min(100, m.completion_rate / 0.8 * 100), reasons)


def _is_finalized(ctx: PhaseContext) -> bool:
    m = ctx.metrics
    return m.completion_rate >= 100 and m.pending_tasks == 0


def _finalized(ctx: PhaseContext) -> PhaseAssessment:
    return _result(
        "finalized",
        95,
        100,
        [ctx.t("all_done"), ctx.t("none_pending")],
        status="completed",
    )


def _is_maintenance(ctx: PhaseContext) -> bool:
    return ctx.metrics.completion_rate >= 95 and ctx.tasks_after_last_completion > 0


def _maintenance(ctx: PhaseContext) -> PhaseAssessment:
    return _result(
        "maintenance",
        75,
        100,
        [
            ctx.t("completion", pct=_pct(ctx.metrics.completion_rate)),
            ctx.t("new_after_completion", count=ctx.tasks_after_last_completion),
        ],
    )


def _is_deployment(ctx: PhaseContext) -> bool:
    return (ctx.all_critical_done and ctx.metrics.completion_rate >= 90) or ctx.has_deploy_tasks


def _deployment(ctx: PhaseContext) -> PhaseAssessment:
    m = ctx.metrics
    reasons = []
    if ctx.all_critical_done:
        reasons.append(ctx.t("critical_done"))
    reasons.append(ctx.t("overall_completion", pct=_pct(m.completion_rate)))
    if ctx.has_deploy_tasks:
        reasons.append(ctx.t("deploy_detected"))
    return _result("deployment", 85, 100 if m.completion_rate >= 95 else 75, reasons)


def _is_testing(ctx: PhaseContext) -> bool:
    rate = ctx.metrics.completion_rate
    return rate >= 80 or (ctx.has_testing_tasks and rate >= 60)


def _testing(ctx: PhaseContext) -> PhaseAssessment:
    m = ctx.metrics
    reasons = [ctx.t("completed_pct", pct=_pct(m.completion_rate))]
    if ctx.has_testing_tasks:
        reasons.append(ctx.t("testing_detected"))
    if m.high_priority_total > 0:
        critical_rate = m.high_priority_completed * 100 / m.high_priority_total
        reasons.append(ctx.t("critical_pct", pct=_pct(critical_rate)))
    return _result("testing", 80, min(100, (m.completion_rate - 80) / 20 * 100), reasons)


def _fallback(ctx: PhaseContext) -> PhaseAssessment:
    m = ctx.metrics
    if m.in_progress_tasks > 0 or m.completed_tasks > 0:
        reasons = [ctx.t("activity_detected")]
        if m.in_progress_tasks > 0:
            reasons.append(ctx.t("in_progress_count", count=m.in_progress_tasks))
        return _result("development", 60, m.completion_rate, reasons)
    return _result("planning", 70, 10, [ctx.t("initial_stage")])


RULES: tuple[PhaseRule, ...] = (
    PhaseRule("planning", _is_planning, _planning),
    PhaseRule("analysis-design", _is_analysis_design, _analysis_design),
    PhaseRule("development", _is_development, _development),
    PhaseRule("finalized", _is_finalized, _finalized),
    PhaseRule("deployment", _is_deployment, _deployment),
    PhaseRule("maintenance", _is_maintenance, _maintenance),
    PhaseRule("testing", _is_testing, _testing),
)


def build_context(
    tasks: Sequence[Task],
    metrics: ProjectMetrics,
    *,
    now: datetime,
    config: Config,
) -> PhaseContext:
    return PhaseContext(
        tasks=tasks,
        metrics=metrics,
        config=config,
        locale=config.resolved_locale,
        has_testing_tasks=any_mentions(tasks, TESTING_KEYWORDS),
        has_deploy_tasks=any_mentions(tasks, DEPLOYMENT_KEYWORDS),
        tasks_after_last_completion=tasks_created_after_last_completion(tasks, now),
    )


def classify_phase(
    tasks: Sequence[Task],
    metrics: ProjectMetrics,
    *,
    now: datetime,
    config: Config,
    rules: Sequence[PhaseRule] = RULES,
) -> PhaseAssessment:
    """Run the cascade and return the first matching rule's assessment."""
    ctx = build_context(tasks, metrics, now=now, config=config)
    for rule in rules:
        if rule.matches(ctx):
            assessment = replace(rule.assess(ctx), rule=rule.name)
            logger.debug("Phase rule %s matched (confidence=%d)", rule.name, assessment.confidence)
            return assessment
    return _fallback(ctx)
