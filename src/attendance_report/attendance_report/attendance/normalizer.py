from __future__ import annotations

from typing import Iterable

from ..common.datetime_utils import to_calendar_date
from ..core.exceptions import MalformedRecordError
from .model import DisplayRow, Person, RawAttendanceEntry


def full_name(person: Person) -> str:
    """Join the name parts with single spaces, skipping missing/empty ones."""
    parts = [str(p).strip() for p in person.name_parts() if p is not None]
    return " ".join(p for p in parts if p)


def normalize_entry(entry: RawAttendanceEntry) -> DisplayRow:
    if entry.student is None or entry.student.person is None:
        raise MalformedRecordError(entry.entry_id)
    if entry.status is None:
        raise MalformedRecordError(entry.entry_id, "missing status")
    if entry.attendance_date is None:
        raise MalformedRecordError(entry.entry_id, "missing attendanceDate")

    try:
        day = to_calendar_date(entry.attendance_date)
    except ValueError as exc:
        raise MalformedRecordError(entry.entry_id, f"invalid attendanceDate {entry.attendance_date!r}") from exc

    return DisplayRow(
        entry_id=entry.entry_id,
        student_name=full_name(entry.student.person),
        status=entry.status,
        date=day.isoformat(),
        student_id=entry.student.student_id,
    )


def normalize(entries: Iterable[RawAttendanceEntry]) -> list[DisplayRow]:
    """Map raw entries to display rows, failing the whole batch on any bad entry."""
    return [normalize_entry(e) for e in entries]
