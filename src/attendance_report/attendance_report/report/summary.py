from __future__ import annotations

from typing import Sequence

from ..attendance.model import DisplayRow
from .model import Summary


def attendance_rate(present: int, total: int) -> float:
    if total <= 0:
        return 0.0
    return round(present / total * 100, 1)


def compute_summary(rows: Sequence[DisplayRow]) -> Summary:
    """Counts over the whole row set; every non-attended status counts as absent."""
    total = len(rows)
    present = sum(1 for r in rows if r.is_present)
    return Summary(
        total=total,
        present=present,
        absent=total - present,
        rate=attendance_rate(present, total),
    )
