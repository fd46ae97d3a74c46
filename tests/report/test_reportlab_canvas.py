from __future__ import annotations

import pytest
from reportlab.lib.pagesizes import A4

from src.attendance_report.attendance_report.attendance.model import DisplayRow
from src.attendance_report.attendance_report.core.enums import AttendanceStatus
from src.attendance_report.attendance_report.report.canvas import ReportLabCanvas
from src.attendance_report.attendance_report.report.service import render


def _rows(n):
    return [
        DisplayRow(
            entry_id=i,
            student_name=f"Student {i}",
            status=AttendanceStatus.ATTENDED if i % 3 else "excused",
            date="2024-03-07",
        )
        for i in range(n)
    ]


def test_page_width_is_a4_in_points():
    assert ReportLabCanvas().page_width() == pytest.approx(A4[0])


def test_render_produces_pdf_bytes_in_memory():
    canvas = ReportLabCanvas()

    result = render("Attendance Records for CS 101", _rows(25), canvas)
    artifact = canvas.save("attendance-report-cs_101-2024-03-07.pdf")

    assert result.document.page_count == 2
    assert artifact.path is None
    assert artifact.content.startswith(b"%PDF")
    assert b"/Count 2" in artifact.content


def test_save_writes_file_when_output_dir_configured(tmp_path):
    out = tmp_path / "reports"
    canvas = ReportLabCanvas(output_dir=out)

    render("Report", _rows(3), canvas)
    artifact = canvas.save("report.pdf")

    assert artifact.path == out / "report.pdf"
    assert artifact.path.read_bytes() == artifact.content


def test_save_into_unusable_directory_leaves_no_file(tmp_path):
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("x")
    canvas = ReportLabCanvas(output_dir=blocker)

    render("Report", _rows(1), canvas)
    with pytest.raises(OSError):
        canvas.save("report.pdf")

    assert blocker.read_text() == "x"


def test_full_first_page_stays_inside_a4_in_points():
    canvas = ReportLabCanvas()

    result = render("Report", _rows(19), canvas)

    lowest = max(c.y for c in result.document.commands() if hasattr(c, "y"))
    assert result.document.page_count == 1
    assert lowest < canvas.page_height()
