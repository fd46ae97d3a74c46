from __future__ import annotations

import pytest

from src.attendance_report.attendance_report.attendance.model import DisplayRow
from src.attendance_report.attendance_report.core.enums import AttendanceStatus
from src.attendance_report.attendance_report.report.summary import attendance_rate, compute_summary


def _rows(statuses):
    return [
        DisplayRow(entry_id=i, student_name=f"S{i}", status=s, date="2024-03-07")
        for i, s in enumerate(statuses)
    ]


def test_three_of_four_present_is_75_percent():
    rows = _rows([AttendanceStatus.ATTENDED] * 3 + [AttendanceStatus.ABSENT])

    summary = compute_summary(rows)

    assert (summary.total, summary.present, summary.absent) == (4, 3, 1)
    assert summary.rate == 75.0
    assert summary.rate_label == "75.0%"


def test_unknown_statuses_count_as_absent():
    rows = _rows([AttendanceStatus.ATTENDED, "late", "excused"])

    summary = compute_summary(rows)

    assert summary.present == 1
    assert summary.absent == 2
    assert summary.rate == 33.3


@pytest.mark.parametrize("present, total", [(0, 1), (1, 1), (2, 7), (5, 9), (13, 40)])
def test_counts_always_add_up(present, total):
    statuses = [AttendanceStatus.ATTENDED] * present + [AttendanceStatus.ABSENT] * (total - present)

    summary = compute_summary(_rows(statuses))

    assert summary.total == total
    assert summary.present + summary.absent == summary.total
    assert summary.rate == round(present / total * 100, 1)


def test_rate_is_zero_without_rows():
    assert attendance_rate(0, 0) == 0.0
    assert compute_summary([]).rate == 0.0
