"""Timestamp parsing and numeric helpers shared by the engine stages."""

from __future__ import annotations

import logging
import math
from datetime import UTC, datetime

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 86400


def ensure_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


def parse_timestamp(value: object) -> datetime | None:
    """Parse a datetime or ISO-8601 string. Returns None if unusable."""
    if isinstance(value, datetime):
        return ensure_utc(value)
    if isinstance(value, str) and value.strip():
        try:
            return ensure_utc(datetime.fromisoformat(value.strip()))
        except ValueError:
            logger.debug("Unparsable timestamp %r", value)
    return None


def timestamp_or(value: object, fallback: datetime) -> datetime:
    """Parse ``value``; missing or malformed timestamps read as ``fallback``."""
    parsed = parse_timestamp(value)
    return parsed if parsed is not None else fallback


def due_date_of(value: object, now: datetime) -> datetime | None:
    """Resolve a due date. Empty means no due date; malformed reads as now."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    return timestamp_or(value, now)


def whole_days(start: datetime, end: datetime) -> int:
    """Floor of the elapsed days between two instants."""
    return math.floor((end - start).total_seconds() / SECONDS_PER_DAY)


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def clamp_percent(value: float) -> float:
    return max(0.0, min(100.0, value))
