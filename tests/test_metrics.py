"""Tests for the metrics calculator."""

from __future__ import annotations

import pytest

from phaseline.core.metrics import calculate_metrics, is_overdue
from phaseline.models.project import Project
from tests.conftest import NOW, ago


def test_empty_task_list_is_all_zero(project, config):
    m = calculate_metrics(project, [], now=NOW, config=config)

    assert m.total_tasks == 0
    assert m.completed_tasks == 0
    assert m.completion_rate == 0
    assert m.average_task_age == 0
    assert m.overdue_tasks == 0
    assert m.recent_activity == 0
    assert m.active_rate == 0
    assert m.days_since_start == 30


def test_counts_by_status(project, config, make_task):
    tasks = [
        make_task(status="done"),
        make_task(status="done"),
        make_task(status="in-progress"),
        make_task(status="pending"),
        make_task(status="pendiente"),
    ]
    m = calculate_metrics(project, tasks, now=NOW, config=config)

    assert m.total_tasks == 5
    assert m.completed_tasks == 2
    assert m.in_progress_tasks == 1
    assert m.pending_tasks == 2
    assert m.completion_rate == pytest.approx(40.0)
    assert m.active_rate == pytest.approx(60.0)


def test_unknown_status_counts_toward_total_only(project, config, make_task):
    tasks = [make_task(status="done"), make_task(status="blocked")]
    m = calculate_metrics(project, tasks, now=NOW, config=config)

    assert m.total_tasks == 2
    assert m.completed_tasks + m.in_progress_tasks + m.pending_tasks == 1
    assert m.completion_rate == pytest.approx(50.0)


def test_high_priority_counts(project, config, make_task):
    tasks = [
        make_task(priority="high", status="done"),
        make_task(priority="alta", status="pending"),
        make_task(priority="low", status="done"),
    ]
    m = calculate_metrics(project, tasks, now=NOW, config=config)

    assert m.high_priority_total == 2
    assert m.high_priority_completed == 1


def test_overdue_ignores_done_and_undated(project, config, make_task):
    tasks = [
        make_task(due_date=ago(days=1)),
        make_task(due_date=ago(days=1), status="done"),
        make_task(due_date=None),
        make_task(due_date=ago(days=-3)),
    ]
    m = calculate_metrics(project, tasks, now=NOW, config=config)
    assert m.overdue_tasks == 1


def test_malformed_due_date_is_never_overdue(make_task):
    assert not is_overdue(make_task(due_date="not a date"), NOW)
    assert not is_overdue(make_task(due_date=""), NOW)


def test_days_since_start_floors(config):
    project = Project(id="p", created_at=ago(days=2, hours=23))
    m = calculate_metrics(project, [], now=NOW, config=config)
    assert m.days_since_start == 2


def test_missing_created_at_reads_as_now(config):
    project = Project(id="p", created_at="garbage")
    m = calculate_metrics(project, [], now=NOW, config=config)
    assert m.days_since_start == 0


def test_average_task_age_uses_whole_days(project, config, make_task):
    tasks = [make_task(created_at=ago(days=1, hours=12)), make_task(created_at=ago(days=4))]
    m = calculate_metrics(project, tasks, now=NOW, config=config)
    assert m.average_task_age == pytest.approx(2.5)


def test_recent_activity_window(project, config, make_task):
    tasks = [
        make_task(updated_at=ago(days=1)),
        make_task(updated_at=ago(days=7)),
        make_task(updated_at=ago(days=8)),
    ]
    m = calculate_metrics(project, tasks, now=NOW, config=config)
    assert m.recent_activity == 2


def test_recent_activity_boundary_is_inclusive(project, config, make_task):
    tasks = [
        make_task(updated_at=ago(days=7)),
        make_task(updated_at=ago(days=7, seconds=1)),
    ]
    m = calculate_metrics(project, tasks, now=NOW, config=config)
    assert m.recent_activity == 1


def test_iso_string_timestamps(config, make_task):
    project = Project(id="p", created_at="2025-05-28T12:00:00Z")
    tasks = [make_task(updated_at="2025-06-02T11:00:00+00:00", project_id="p")]
    m = calculate_metrics(project, tasks, now=NOW, config=config)
    assert m.days_since_start == 5
    assert m.recent_activity == 1
