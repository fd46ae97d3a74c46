from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Trạng thái điểm danh mà backend trả về.

    Backend có thể thêm giá trị mới; những giá trị lạ được giữ nguyên dạng chuỗi.
    """

    ATTENDED = "attended"
    ABSENT = "absent"


class FontWeight(str, Enum):
    NORMAL = "normal"
    BOLD = "bold"


class TextAlign(str, Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class RectMode(str, Enum):
    FILL = "F"
    STROKE = "S"
    FILL_STROKE = "FD"
