"""Phaseline — project lifecycle analysis from task data."""

from phaseline.core.engine import LifecycleEngine, analyze
from phaseline.models import LifecycleAnalysis, Project, Task, User

__version__ = "0.1.0"

__all__ = ["LifecycleAnalysis", "LifecycleEngine", "Project", "Task", "User", "analyze"]
