"""Lifecycle analysis result models."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

from phaseline.models.project import Task, User

LifecyclePhase = Literal[
    "planning",
    "analysis-design",
    "development",
    "testing",
    "deployment",
    "maintenance",
    "finalized",
]
PhaseStatus = Literal["pending", "in-progress", "completed"]
ProjectHealth = Literal["on-time", "at-risk", "delayed"]
Trend = Literal["up", "stable", "down", "at-risk"]
ActivityStatus = Literal["active", "recent", "idle"]
AlertKind = Literal["overdue-tasks", "stalled"]
AlertSeverity = Literal["error", "warning"]

# Canonical lifecycle order, used by the timeline.
PHASE_ORDER: tuple[str, ...] = (
    "planning",
    "analysis-design",
    "development",
    "testing",
    "deployment",
    "maintenance",
    "finalized",
)


class ProjectMetrics(BaseModel):
    """Quantitative snapshot of a project's task set."""

    total_tasks: int = 0
    completed_tasks: int = 0
    in_progress_tasks: int = 0
    pending_tasks: int = 0
    completion_rate: float = 0.0
    high_priority_completed: int = 0
    high_priority_total: int = 0
    days_since_start: int = 0
    average_task_age: float = 0.0
    overdue_tasks: int = 0
    recent_activity: int = 0

    @property
    def active_rate(self) -> float:
        """Share of tasks either in progress or done, as a percentage."""
        touched = self.in_progress_tasks + self.completed_tasks
        return touched * 100 / max(self.total_tasks, 1)


class PhaseInfo(BaseModel):
    id: LifecyclePhase
    name: str
    description: str = ""
    status: PhaseStatus
    progress: float = Field(ge=0, le=100)


class TimelineEntry(BaseModel):
    id: LifecyclePhase
    name: str
    status: PhaseStatus
    progress: int = Field(ge=0, le=100)


class ProjectAlert(BaseModel):
    kind: AlertKind
    severity: AlertSeverity
    title: str
    message: str


class ActivityInfo(BaseModel):
    """Who is working on what, and how recently."""

    user: User
    task: Task
    phase: LifecyclePhase
    last_activity: datetime
    status: ActivityStatus

    def to_response(self) -> dict:
        return {
            "user": self.user.to_response(),
            "task": {"id": self.task.id, "title": self.task.title},
            "phase": self.phase,
            "last_activity": self.last_activity.isoformat(),
            "status": self.status,
        }


class LifecycleAnalysis(BaseModel):
    """Result of one engine run. Recomputed on demand, never stored."""

    project_id: str
    current_phase: LifecyclePhase
    phase_info: PhaseInfo
    metrics: ProjectMetrics
    health: ProjectHealth
    overall_progress: int = Field(ge=0, le=100)
    phase_progress: int = Field(ge=0, le=100)
    trend: Trend
    estimated_deployment_date: datetime | None = None
    explanation: str
    reasons: list[str]
    confidence: int = Field(ge=0, le=100)
    active_users: list[ActivityInfo] = Field(default_factory=list)
    timeline: list[TimelineEntry] = Field(default_factory=list)
    alerts: list[ProjectAlert] = Field(default_factory=list)
    analyzed_at: datetime

    def to_response(self, *, detail: str = "summary") -> dict:
        data = {
            "_v": "1.0",
            "project_id": self.project_id,
            "current_phase": self.current_phase,
            "phase_name": self.phase_info.name,
            "health": self.health,
            "overall_progress": self.overall_progress,
            "phase_progress": self.phase_progress,
            "trend": self.trend,
            "confidence": self.confidence,
            "estimated_deployment_date": (
                self.estimated_deployment_date.isoformat()
                if self.estimated_deployment_date
                else None
            ),
            "explanation": self.explanation,
        }
        if detail != "summary":
            data.update(
                {
                    "phase_info": self.phase_info.model_dump(),
                    "metrics": self.metrics.model_dump(),
                    "reasons": list(self.reasons),
                    "active_users": [a.to_response() for a in self.active_users],
                    "timeline": [t.model_dump() for t in self.timeline],
                    "alerts": [a.model_dump() for a in self.alerts],
                    "analyzed_at": self.analyzed_at.isoformat(),
                }
            )
        return data
