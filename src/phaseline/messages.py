"""Localized strings for phase names, reasons and explanations.

English is the default; the Spanish catalog follows the wording of the web app.
"""

from __future__ import annotations

_EN: dict[str, str] = {
    # Phases
    "phase.planning.name": "Planning",
    "phase.planning.description": "Scope, goals and the initial backlog are being defined",
    "phase.analysis-design.name": "Analysis & Design",
    "phase.analysis-design.description": "Requirements are analysed and the solution designed",
    "phase.development.name": "Development",
    "phase.development.description": "The bulk of the work is being built",
    "phase.testing.name": "Testing",
    "phase.testing.description": "Work is being verified before release",
    "phase.deployment.name": "Deployment",
    "phase.deployment.description": "The result is being released",
    "phase.maintenance.name": "Maintenance",
    "phase.maintenance.description": "New work arrives after the main delivery",
    "phase.finalized.name": "Finalized",
    "phase.finalized.description": "All work is complete",
    # Health, trend, activity
    "health.on-time": "on time",
    "health.at-risk": "at risk",
    "health.delayed": "delayed",
    "trend.up": "improving",
    "trend.stable": "stable",
    "trend.down": "declining",
    "trend.at-risk": "stalled",
    "activity.active": "Active",
    "activity.recent": "Recent",
    "activity.idle": "Idle",
    "status.pending": "Pending",
    "status.in-progress": "In progress",
    "status.completed": "Completed",
    # Reasons
    "reason.project_age": "Project started {days} day(s) ago",
    "reason.no_activity": "No tasks in progress or completed",
    "reason.completed_pct": "{pct}% of tasks completed",
    "reason.pending_vs_active": "{pending} pending tasks vs {in_progress} in progress",
    "reason.active_pct": "{pct}% of tasks active (in progress or completed)",
    "reason.overall_completion": "{pct}% overall completion",
    "reason.in_progress_now": "{count} task(s) currently in progress",
    "reason.testing_detected": "Testing tasks detected",
    "reason.critical_pct": "{pct}% of critical tasks completed",
    "reason.critical_done": "All critical tasks completed",
    "reason.deploy_detected": "Deployment tasks detected",
    "reason.completion": "{pct}% completion",
    "reason.new_after_completion": "{count} new task(s) created after completion",
    "reason.all_done": "All tasks completed",
    "reason.none_pending": "No pending tasks",
    "reason.activity_detected": "Activity detected in the project",
    "reason.in_progress_count": "{count} task(s) in progress",
    "reason.initial_stage": "Project in initial stage",
    # Explanation
    "explain.phase": "The project is in the **{phase}** phase ({confidence}% confidence). ",
    "explain.reasons": "This assessment is based on: {reasons}. ",
    "explain.progress": (
        "Overall progress is **{overall}%** and progress within the current phase "
        "is **{phase}%**. "
    ),
    "explain.health": "The project is **{health}**.",
    "explain.in_progress": " There are currently {count} task(s) in progress.",
    # Alerts
    "alert.overdue-tasks.title": "Overdue tasks",
    "alert.overdue-tasks.message": "{count} task(s) are overdue and need attention",
    "alert.stalled.title": "Stalled project",
    "alert.stalled.message": "No tasks in progress. The project may have stopped.",
    # CLI labels
    "label.health": "Health",
    "label.trend": "Trend",
    "label.progress": "Progress: {overall}% overall, {phase}% in phase",
    "label.deployment": "Estimated deployment",
    "label.timeline": "Timeline",
    "label.active_users": "Active Users",
    "label.phases": "Lifecycle Phases",
    "label.phase": "Phase",
    "label.name": "Name",
    "label.description": "Description",
    "label.status": "Status",
    "label.progress_column": "Progress",
    "label.user": "User",
    "label.task": "Task",
    "label.last_activity": "Last activity",
    # Relative time
    "ago.minute": "{n} minute ago",
    "ago.minutes": "{n} minutes ago",
    "ago.hour": "{n} hour ago",
    "ago.hours": "{n} hours ago",
    "ago.day": "{n} day ago",
    "ago.days": "{n} days ago",
}

_ES: dict[str, str] = {
    "phase.planning.name": "Planeación",
    "phase.planning.description": "Se definen el alcance, los objetivos y las tareas iniciales",
    "phase.analysis-design.name": "Análisis y Diseño",
    "phase.analysis-design.description": "Se analizan los requisitos y se diseña la solución",
    "phase.development.name": "Desarrollo",
    "phase.development.description": "Se construye la mayor parte del trabajo",
    "phase.testing.name": "Pruebas",
    "phase.testing.description": "Se verifica el trabajo antes de liberarlo",
    "phase.deployment.name": "Despliegue",
    "phase.deployment.description": "Se libera el resultado",
    "phase.maintenance.name": "Mantenimiento",
    "phase.maintenance.description": "Llega trabajo nuevo después de la entrega principal",
    "phase.finalized.name": "Finalizado",
    "phase.finalized.description": "Todo el trabajo está completo",
    "health.on-time": "en tiempo",
    "health.at-risk": "en riesgo",
    "health.delayed": "atrasado",
    "trend.up": "al alza",
    "trend.stable": "estable",
    "trend.down": "a la baja",
    "trend.at-risk": "estancado",
    "activity.active": "Activo",
    "activity.recent": "Reciente",
    "activity.idle": "Inactivo",
    "status.pending": "Pendiente",
    "status.in-progress": "En progreso",
    "status.completed": "Completada",
    "reason.project_age": "Proyecto iniciado hace {days} día(s)",
    "reason.no_activity": "Sin tareas en progreso ni completadas",
    "reason.completed_pct": "{pct}% de tareas completadas",
    "reason.pending_vs_active": "{pending} tareas pendientes vs {in_progress} en progreso",
    "reason.active_pct": "{pct}% de tareas activas (en progreso o completadas)",
    "reason.overall_completion": "{pct}% de completitud total",
    "reason.in_progress_now": "{count} tarea(s) actualmente en progreso",
    "reason.testing_detected": "Tareas de testing detectadas",
    "reason.critical_pct": "{pct}% de tareas críticas completadas",
    "reason.critical_done": "Todas las tareas críticas completadas",
    "reason.deploy_detected": "Tareas de despliegue detectadas",
    "reason.completion": "{pct}% de completitud",
    "reason.new_after_completion": "{count} nueva(s) tarea(s) creada(s) después de completitud",
    "reason.all_done": "Todas las tareas completadas",
    "reason.none_pending": "No hay tareas pendientes",
    "reason.activity_detected": "Actividad detectada en el proyecto",
    "reason.in_progress_count": "{count} tarea(s) en progreso",
    "reason.initial_stage": "Proyecto en etapa inicial",
    "explain.phase": "El proyecto está en la fase de **{phase}** ({confidence}% de confianza). ",
    "explain.reasons": "Esta decisión se basa en: {reasons}. ",
    "explain.progress": (
        "El progreso global es del **{overall}%** y el progreso dentro de la fase "
        "actual es del **{phase}%**. "
    ),
    "explain.health": "El proyecto está **{health}**.",
    "explain.in_progress": " Actualmente hay {count} tarea(s) en progreso.",
    "alert.overdue-tasks.title": "Tareas Vencidas",
    "alert.overdue-tasks.message": "{count} tarea(s) han vencido y requieren atención",
    "alert.stalled.title": "Proyecto Estancado",
    "alert.stalled.message": "No hay tareas en progreso. El proyecto puede estar detenido.",
    "label.health": "Salud",
    "label.trend": "Tendencia",
    "label.progress": "Progreso: {overall}% global, {phase}% en la fase",
    "label.deployment": "Despliegue estimado",
    "label.timeline": "Línea de Tiempo",
    "label.active_users": "Usuarios Activos",
    "label.phases": "Fases del Ciclo de Vida",
    "label.phase": "Fase",
    "label.name": "Nombre",
    "label.description": "Descripción",
    "label.status": "Estado",
    "label.progress_column": "Progreso",
    "label.user": "Usuario",
    "label.task": "Tarea",
    "label.last_activity": "Última actividad",
    "ago.minute": "hace {n} minuto",
    "ago.minutes": "hace {n} minutos",
    "ago.hour": "hace {n} hora",
    "ago.hours": "hace {n} horas",
    "ago.day": "hace {n} día",
    "ago.days": "hace {n} días",
}

CATALOGS: dict[str, dict[str, str]] = {"en": _EN, "es": _ES}


def message(locale: str, key: str, **params: object) -> str:
    """Format ``key`` in ``locale``, falling back to English."""
    catalog = CATALOGS.get(locale, _EN)
    template = catalog.get(key) or _EN[key]
    return template.format(**params) if params else template


def phase_name(locale: str, phase: str) -> str:
    return message(locale, f"phase.{phase}.name")


def phase_description(locale: str, phase: str) -> str:
    return message(locale, f"phase.{phase}.description")
