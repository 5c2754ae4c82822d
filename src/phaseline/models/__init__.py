"""Phaseline data models."""

from phaseline.models.analysis import (
    PHASE_ORDER,
    ActivityInfo,
    LifecycleAnalysis,
    PhaseInfo,
    ProjectAlert,
    ProjectMetrics,
    TimelineEntry,
)
from phaseline.models.project import Project, Task, User

__all__ = [
    "PHASE_ORDER",
    "ActivityInfo",
    "LifecycleAnalysis",
    "PhaseInfo",
    "Project",
    "ProjectAlert",
    "ProjectMetrics",
    "Task",
    "TimelineEntry",
    "User",
]
