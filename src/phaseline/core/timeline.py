"""Per-phase timeline strip for an analysed project."""

from __future__ import annotations

from phaseline.messages import phase_name
from phaseline.models.analysis import PHASE_ORDER, TimelineEntry


def build_timeline(
    current_phase: str,
    current_status: str,
    current_progress: int,
    *,
    locale: str = "en",
) -> list[TimelineEntry]:
    """Phases before the current one are completed, later ones pending."""
    current_index = PHASE_ORDER.index(current_phase)
    entries = []
    for index, phase in enumerate(PHASE_ORDER):
        if index < current_index:
            status, progress = "completed", 100
        elif index == current_index:
            status, progress = current_status, current_progress
        else:
            status, progress = "pending", 0
        entries.append(
            TimelineEntry(
                id=phase,
                name=phase_name(locale, phase),
                status=status,
                progress=progress,
            )
        )
    return entries
