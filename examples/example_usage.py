"""Ví dụ: xuất báo cáo điểm danh qua service layer (không qua Flask).

Ghi file PDF vào thư mục ``reports/`` và in phần tổng kết.
"""

from pathlib import Path

from src.attendance_report.attendance_report.attendance.model import RawAttendanceEntry
from src.attendance_report.attendance_report.container import build_container

SAMPLE = [
    {
        "id": 1,
        "status": "attended",
        "attendanceDate": "2024-03-07",
        "student": {"id": 10, "person": {"firstName": "Ada", "secondName": "King", "fourthName": "Lovelace"}},
    },
    {
        "id": 2,
        "status": "absent",
        "attendanceDate": "2024-03-07T08:00:00.000Z",
        "student": {"id": 11, "person": {"firstName": "Alan", "thirdName": "Turing"}},
    },
    {
        "id": 3,
        "status": "excused",
        "attendanceDate": "2024-03-07",
        "student": {"id": 12, "person": {"firstName": "Grace", "secondName": "Brewster", "thirdName": "Murray", "fourthName": "Hopper"}},
    },
]


def main():
    container = build_container(output_dir=str(Path("reports")))
    entries = [RawAttendanceEntry.from_payload(item) for item in SAMPLE]
    result = container.report_service.export("CS 101 - Lab", entries)
    print(result.artifact.path, result.summary)


if __name__ == "__main__":
    main()
