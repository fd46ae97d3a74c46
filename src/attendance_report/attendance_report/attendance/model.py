from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Mapping, Optional, Union

from ..core.enums import AttendanceStatus

# Known values map to AttendanceStatus; anything else the backend sends stays a str.
Status = Union[AttendanceStatus, str]


def parse_status(value: Any) -> Optional[Status]:
    if value is None:
        return None
    text = str(value)
    try:
        return AttendanceStatus(text)
    except ValueError:
        return text


def status_value(status: Status) -> str:
    return status.value if isinstance(status, AttendanceStatus) else str(status)


@dataclass(frozen=True)
class Person:
    first_name: Optional[str] = None
    second_name: Optional[str] = None
    third_name: Optional[str] = None
    fourth_name: Optional[str] = None

    @classmethod
    def from_payload(cls, data: Mapping[str, Any]) -> "Person":
        def _part(key: str) -> Optional[str]:
            value = data.get(key)
            return None if value is None else str(value)

        return cls(
            first_name=_part("firstName"),
            second_name=_part("secondName"),
            third_name=_part("thirdName"),
            fourth_name=_part("fourthName"),
        )

    def name_parts(self) -> tuple[Optional[str], ...]:
        return (self.first_name, self.second_name, self.third_name, self.fourth_name)


@dataclass(frozen=True)
class StudentRef:
    student_id: Optional[int] = None
    person: Optional[Person] = None


@dataclass(frozen=True)
class RawAttendanceEntry:
    """Bản ghi điểm danh thô như backend trả về (không chỉnh sửa)."""

    entry_id: Any
    status: Optional[Status]
    attendance_date: Union[date, datetime, str, None]
    student: Optional[StudentRef]

    @classmethod
    def from_payload(cls, data: Mapping[str, Any]) -> "RawAttendanceEntry":
        """Build an entry from the backend JSON shape.

        Missing nested parts are kept as None; the normalizer decides whether
        the entry is usable.
        """
        student = None
        raw_student = data.get("student")
        if isinstance(raw_student, Mapping):
            raw_person = raw_student.get("person")
            student = StudentRef(
                student_id=raw_student.get("id"),
                person=Person.from_payload(raw_person) if isinstance(raw_person, Mapping) else None,
            )

        return cls(
            entry_id=data.get("id"),
            status=parse_status(data.get("status")),
            attendance_date=data.get("attendanceDate"),
            student=student,
        )


@dataclass(frozen=True)
class DisplayRow:
    """Read-model phục vụ xuất báo cáo: một dòng cho mỗi bản ghi."""

    entry_id: Any
    student_name: str
    status: Status
    date: str
    student_id: Optional[int] = None

    @property
    def is_present(self) -> bool:
        return self.status == AttendanceStatus.ATTENDED

    def to_dict(self) -> dict:
        return {
            "id": self.entry_id,
            "studentName": self.student_name,
            "status": status_value(self.status),
            "date": self.date,
            "studentId": self.student_id,
        }
