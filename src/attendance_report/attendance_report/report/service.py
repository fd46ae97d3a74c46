from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Iterable, Optional, Sequence

from ..attendance.model import DisplayRow, RawAttendanceEntry
from ..attendance.normalizer import normalize
from ..common.datetime_utils import now_local
from ..common.validators import require_non_empty
from ..core.constants import TITLE_TEMPLATE
from ..core.exceptions import EmptyInputError, RenderError
from .canvas import DocumentCanvas, replay
from .filename import build_filename
from .layout import ReportLayout
from .model import ExportResult, RenderResult, Summary
from .summary import compute_summary

logger = logging.getLogger(__name__)


def render(title: str, rows: Sequence[DisplayRow], canvas: DocumentCanvas) -> RenderResult:
    """Lay out ``rows`` under ``title`` and draw them on ``canvas``.

    Raises EmptyInputError before touching the canvas when there are no rows.
    """
    if not rows:
        raise EmptyInputError("Cannot render an attendance report without rows")
    title = require_non_empty(title, "Report title")

    try:
        page_width = canvas.page_width()
    except Exception as exc:
        raise RenderError(f"Canvas failed to report its page width: {exc}") from exc

    summary = compute_summary(rows)
    document = ReportLayout(page_width).build(title, rows, summary)
    replay(document, canvas)
    return RenderResult(document=document, summary=summary)


class AttendanceReportService:
    """Use case: export an attendance report for one class/course label."""

    def __init__(
        self,
        canvas_factory: Callable[[], DocumentCanvas],
        *,
        title_template: str = TITLE_TEMPLATE,
        clock: Callable[[], datetime] = now_local,
    ):
        self._canvas_factory = canvas_factory
        self._title_template = title_template
        self._clock = clock

    def build_title(self, label: str) -> str:
        return self._title_template.format(label=label)

    def summarize(self, entries: Iterable[RawAttendanceEntry]) -> tuple[list[DisplayRow], Summary]:
        rows = normalize(entries)
        return rows, compute_summary(rows)

    def export(self, label: str, entries: Iterable[RawAttendanceEntry], *, canvas: Optional[DocumentCanvas] = None) -> ExportResult:
        label = require_non_empty(label, "Class label")
        rows = normalize(entries)
        if not rows:
            raise EmptyInputError(f"No attendance records to export for {label!r}")

        filename = build_filename(label, self._clock().date())
        logger.info("Exporting attendance report %s (%d rows)", filename, len(rows))

        canvas = canvas or self._canvas_factory()
        try:
            result = render(self.build_title(label), rows, canvas)
        except RenderError as exc:
            logger.error("Rendering attendance report %s failed: %s", filename, exc)
            raise

        try:
            artifact = canvas.save(filename)
        except Exception as exc:
            logger.exception("Saving attendance report %s failed", filename)
            raise RenderError(f"Could not save {filename}: {exc}") from exc

        logger.info(
            "Exported %s: %d pages, %d present / %d absent (%s)",
            filename,
            result.document.page_count,
            result.summary.present,
            result.summary.absent,
            result.summary.rate_label,
        )
        return ExportResult(
            filename=filename,
            summary=result.summary,
            artifact=artifact,
            page_count=result.document.page_count,
        )
