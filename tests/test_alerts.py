"""Tests for metric-driven project alerts."""

from __future__ import annotations

import dataclasses

import pytest

from phaseline import LifecycleEngine
from phaseline.core.alerts import detect_alerts
from phaseline.models.analysis import ProjectMetrics
from tests.conftest import NOW, ago


class TestDetectAlerts:
    def test_healthy_metrics_raise_nothing(self, config):
        m = ProjectMetrics(total_tasks=4, in_progress_tasks=2, pending_tasks=2, days_since_start=30)
        assert detect_alerts(m, config=config) == []

    def test_overdue_tasks(self, config):
        m = ProjectMetrics(total_tasks=5, overdue_tasks=2, in_progress_tasks=1, pending_tasks=4)
        [alert] = detect_alerts(m, config=config)

        assert alert.kind == "overdue-tasks"
        assert alert.severity == "error"
        assert alert.title == "Overdue tasks"
        assert alert.message == "2 task(s) are overdue and need attention"

    def test_stalled_project(self, config):
        m = ProjectMetrics(total_tasks=3, pending_tasks=3, days_since_start=8)
        [alert] = detect_alerts(m, config=config)

        assert alert.kind == "stalled"
        assert alert.severity == "warning"
        assert alert.title == "Stalled project"

    @pytest.mark.parametrize(
        ("metrics", "reason"),
        [
            (ProjectMetrics(total_tasks=3, pending_tasks=3, days_since_start=7), "too young"),
            (
                ProjectMetrics(
                    total_tasks=3, pending_tasks=2, in_progress_tasks=1, days_since_start=30
                ),
                "work in progress",
            ),
            (ProjectMetrics(total_tasks=3, completed_tasks=3, days_since_start=30), "no backlog"),
        ],
    )
    def test_not_stalled(self, config, metrics, reason):
        assert detect_alerts(metrics, config=config) == [], reason

    def test_stalled_threshold_is_configurable(self, config):
        config = dataclasses.replace(config, stalled_after_days=30)
        m = ProjectMetrics(total_tasks=3, pending_tasks=3, days_since_start=20)
        assert detect_alerts(m, config=config) == []

    def test_both_alerts_in_order(self, config):
        m = ProjectMetrics(total_tasks=3, pending_tasks=3, overdue_tasks=1, days_since_start=10)
        assert [a.kind for a in detect_alerts(m, config=config)] == ["overdue-tasks", "stalled"]

    def test_spanish(self, config):
        m = ProjectMetrics(total_tasks=3, pending_tasks=3, overdue_tasks=3, days_since_start=10)
        overdue, stalled = detect_alerts(m, config=config, locale="es")

        assert overdue.title == "Tareas Vencidas"
        assert overdue.message == "3 tarea(s) han vencido y requieren atención"
        assert stalled.title == "Proyecto Estancado"
        assert stalled.message == "No hay tareas en progreso. El proyecto puede estar detenido."


class TestAnalysisAlerts:
    def test_engine_reports_alerts(self, config, project, make_task):
        tasks = [make_task(status="done")] + [make_task() for _ in range(8)] + [
            make_task(due_date=ago(days=2))
        ]
        result = LifecycleEngine(config).analyze(project, tasks, now=NOW)

        assert [a.kind for a in result.alerts] == ["overdue-tasks", "stalled"]

    def test_alerts_only_in_full_response(self, config, project, make_task):
        tasks = [make_task(), make_task()]
        result = LifecycleEngine(config).analyze(project, tasks, now=NOW)

        assert "alerts" not in result.to_response()
        assert result.to_response(detail="full")["alerts"] == [
            {
                "kind": "stalled",
                "severity": "warning",
                "title": "Stalled project",
                "message": "No tasks in progress. The project may have stopped.",
            }
        ]

    def test_new_project_has_no_alerts(self, config, new_project, make_task):
        result = LifecycleEngine(config).analyze(new_project, [make_task()], now=NOW)
        assert result.alerts == []
