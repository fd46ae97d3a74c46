"""Attendance report layout.

The layout is computed as plain draw commands, one ``PageBuilder`` per page,
and only afterwards replayed onto a real canvas (see ``canvas.replay``).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ..attendance.model import DisplayRow, Status, status_value
from ..core import constants as C
from ..core.enums import AttendanceStatus, FontWeight, RectMode, TextAlign
from ..core.exceptions import EmptyInputError
from .model import (
    DrawLine,
    DrawRect,
    DrawText,
    PageBuilder,
    ReportDocument,
    SetDrawColor,
    SetFillColor,
    SetFont,
    SetLineWidth,
    SetTextColor,
    Summary,
)


def page_row_budget(
    top: float = C.CONTINUATION_TOP,
    bottom: float = C.PAGE_BOTTOM,
    row_height: float = C.ROW_HEIGHT,
) -> int:
    """How many row baselines fit between ``top`` and ``bottom`` inclusive."""
    return int((bottom - top) // row_height) + 1


def truncate_name(name: str) -> str:
    if len(name) > C.NAME_MAX_LENGTH:
        return name[: C.NAME_KEEP_LENGTH] + C.ELLIPSIS
    return name


def format_display_date(iso_date: str) -> str:
    """``2024-03-07`` -> ``07-03-2024``."""
    return "-".join(reversed(iso_date.split("-")))


def status_label(status: Status) -> str:
    if status == AttendanceStatus.ATTENDED:
        return C.PRESENT_LABEL
    return status_value(status)


@dataclass(frozen=True)
class TableGeometry:
    left: float
    width: float
    columns: tuple[float, float, float]

    @classmethod
    def for_page(cls, page_width: float, margin: float = C.MARGIN) -> "TableGeometry":
        width = page_width - 2 * margin
        name_w, date_w, status_w = (width * r for r in C.COLUMN_RATIOS)
        return cls(left=margin, width=width, columns=(name_w, date_w, status_w))

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def separators(self) -> tuple[float, float, float, float]:
        name_w, date_w, _ = self.columns
        return (self.left, self.left + name_w, self.left + name_w + date_w, self.right)

    @property
    def name_x(self) -> float:
        return self.left + C.CELL_INSET

    @property
    def date_center(self) -> float:
        name_w, date_w, _ = self.columns
        return self.left + name_w + date_w / 2

    @property
    def status_center(self) -> float:
        name_w, date_w, status_w = self.columns
        return self.left + name_w + date_w + status_w / 2


class ReportLayout:
    """Lays out one attendance report.

    Note: The header band is drawn on the first page only; continuation pages
    start directly with rows at ``CONTINUATION_TOP``.
    """

    def __init__(self, page_width: float, *, rows_per_page: int | None = None):
        self._table = TableGeometry.for_page(page_width)
        self._page_width = page_width
        self._rows_per_page = rows_per_page or page_row_budget()

    @property
    def rows_per_page(self) -> int:
        return self._rows_per_page

    def build(self, title: str, rows: Sequence[DisplayRow], summary: Summary) -> ReportDocument:
        if not rows:
            raise EmptyInputError("Cannot lay out an attendance report without rows")

        pages = []
        page = PageBuilder(index=0, cursor_y=C.TABLE_TOP)
        self._title(page, title)
        self._header(page)

        for index, row in enumerate(rows):
            if page.row_count >= self._rows_per_page:
                pages.append(page.build())
                page = PageBuilder(index=page.index + 1, cursor_y=C.CONTINUATION_TOP)
            self._row(page, index, row)

        self._summary(page, summary)
        pages.append(page.build())
        return ReportDocument(title=title, pages=tuple(pages))

    def _title(self, page: PageBuilder, title: str) -> None:
        page.emit(
            SetFont(C.TITLE_FONT_SIZE, FontWeight.BOLD),
            DrawText(title, self._page_width / 2, C.TITLE_Y, TextAlign.CENTER),
        )

    def _header(self, page: PageBuilder) -> None:
        t = self._table
        y = page.cursor_y
        page.emit(
            SetFont(C.HEADER_FONT_SIZE, FontWeight.BOLD),
            SetFillColor(C.HEADER_FILL),
            SetTextColor(C.HEADER_TEXT),
            DrawRect(t.left, y - C.ROW_BASELINE_OFFSET, t.width, C.ROW_HEIGHT, RectMode.FILL),
            DrawText("Student Name", t.name_x, y),
            DrawText("Date", t.date_center, y, TextAlign.CENTER),
            DrawText("Status", t.status_center, y, TextAlign.CENTER),
        )
        page.advance(C.ROW_HEIGHT)
        page.emit(
            SetFont(C.BODY_FONT_SIZE, FontWeight.NORMAL),
            SetTextColor(C.BODY_TEXT),
        )

    def _row(self, page: PageBuilder, index: int, row: DisplayRow) -> None:
        t = self._table
        y = page.cursor_y
        top = y - C.ROW_BASELINE_OFFSET
        bottom = top + C.ROW_HEIGHT

        # stripe index is global to the table, not per page
        if index % 2 == 0:
            page.emit(
                SetFillColor(C.STRIPE_FILL),
                DrawRect(t.left, top, t.width, C.ROW_HEIGHT, RectMode.FILL),
            )

        page.emit(SetDrawColor(C.BORDER_COLOR), SetLineWidth(C.BORDER_WIDTH))
        page.emit(*(DrawLine(x, top, x, bottom) for x in t.separators))
        page.emit(DrawLine(t.left, bottom, t.right, bottom))

        page.emit(
            DrawText(truncate_name(row.student_name), t.name_x, y),
            DrawText(format_display_date(row.date), t.date_center, y, TextAlign.CENTER),
            DrawText(status_label(row.status), t.status_center, y, TextAlign.CENTER),
        )
        page.row_count += 1
        page.advance(C.ROW_HEIGHT)

    def _summary(self, page: PageBuilder, summary: Summary) -> None:
        t = self._table
        y = page.advance(C.SUMMARY_GAP)
        page.emit(
            SetDrawColor(C.HEADER_FILL),
            SetLineWidth(C.SUMMARY_RULE_WIDTH),
            DrawLine(t.left, y, t.right, y),
        )

        y = page.advance(C.SUMMARY_HEADING_GAP)
        page.emit(
            SetFont(C.SUMMARY_HEADING_FONT_SIZE, FontWeight.BOLD),
            DrawText("Summary", t.left, y),
            SetFont(C.SUMMARY_FONT_SIZE, FontWeight.NORMAL),
        )

        lines = (
            ("Present:", str(summary.present)),
            ("Absent:", str(summary.absent)),
            ("Attendance Rate:", summary.rate_label),
        )
        for label, value in lines:
            y = page.advance(C.SUMMARY_LINE_GAP)
            page.emit(
                DrawText(label, t.left + C.SUMMARY_LABEL_INSET, y),
                DrawText(value, t.left + C.SUMMARY_VALUE_INSET, y),
            )


def layout(title: str, rows: Sequence[DisplayRow], page_width: float, summary: Summary) -> ReportDocument:
    return ReportLayout(page_width).build(title, rows, summary)
