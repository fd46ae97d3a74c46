from __future__ import annotations

from dataclasses import dataclass
from functools import partial
from pathlib import Path
from typing import Callable, Optional

from .core.constants import TITLE_TEMPLATE
from .report.canvas import DocumentCanvas, ReportLabCanvas
from .report.service import AttendanceReportService


@dataclass(frozen=True)
class Container:
    canvas_factory: Callable[[], DocumentCanvas]
    report_service: AttendanceReportService


def build_container(*, output_dir: Optional[str] = None, title_template: str = TITLE_TEMPLATE) -> Container:
    canvas_factory = partial(ReportLabCanvas, output_dir=Path(output_dir) if output_dir else None)
    report_service = AttendanceReportService(canvas_factory, title_template=title_template)

    return Container(
        canvas_factory=canvas_factory,
        report_service=report_service,
    )
