"""Deployment date estimation."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import datetime, timedelta

from phaseline.core.timeutil import due_date_of, timestamp_or
from phaseline.models.project import Task

logger = logging.getLogger(__name__)

LATE_PHASES = {"deployment", "maintenance", "finalized"}


def estimate_deployment(
    tasks: Sequence[Task],
    phase: str,
    *,
    now: datetime,
) -> datetime | None:
    """Estimate when the project will be deployed.

    Late-phase projects use the latest due date among open tasks. Otherwise
    the average time it took to complete past tasks is projected over the
    remaining ones. Without any completed task there is nothing to go on, and a
    projection past the representable date range is dropped as well.
    """
    remaining = [t for t in tasks if not t.is_done]

    if phase in LATE_PHASES:
        due_dates = [d for d in (due_date_of(t.due_date, now) for t in remaining) if d]
        if due_dates:
            return max(due_dates)

    completed = [t for t in tasks if t.is_done]
    if not completed:
        return None

    durations = [
        max(timedelta(0), timestamp_or(t.updated_at, now) - timestamp_or(t.created_at, now))
        for t in completed
    ]
    average = sum(durations, timedelta(0)) / len(durations)
    try:
        estimate = now + average * len(remaining)
    except OverflowError:
        # Placeholder dates (e.g. year 1) push the projection past datetime.max.
        logger.debug("Velocity estimate out of range: avg=%s remaining=%d", average, len(remaining))
        return None
    logger.debug(
        "Velocity estimate: avg=%s remaining=%d -> %s", average, len(remaining), estimate
    )
    return estimate
