from datetime import date, datetime

from src.attendance_report.attendance_report.report import filename as filename_module
from src.attendance_report.attendance_report.report.filename import build_filename, slugify_label


def test_filename_from_class_label_and_date():
    assert build_filename("CS 101 - Lab", date(2024, 3, 7)) == "attendance-report-cs_101___lab-2024-03-07.pdf"


def test_slug_replaces_everything_outside_lowercase_alnum():
    assert slugify_label("Math/Physics #2") == "math_physics__2"
    assert slugify_label("Café") == "caf_"


def test_filename_defaults_to_today(monkeypatch):
    monkeypatch.setattr(filename_module, "now_local", lambda: datetime(2025, 12, 31, 23, 0))

    assert build_filename("Group A") == "attendance-report-group_a-2025-12-31.pdf"


def test_slug_matches_ascii_letters_only_before_lowercasing():
    assert slugify_label("\u212a") == "_"
    assert slugify_label("ABC-xyz") == "abc_xyz"
