from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Optional, Protocol

from reportlab.lib.pagesizes import A4
from reportlab.pdfgen import canvas as rl_canvas

from ..core.enums import FontWeight, RectMode, TextAlign
from ..core.exceptions import RenderError
from .model import PdfArtifact, ReportDocument

logger = logging.getLogger(__name__)


class DocumentCanvas(Protocol):
    """Drawing surface the layout is replayed onto.

    Coordinates are measured from the top-left corner of the current page.
    """

    def page_width(self) -> float:
        raise NotImplementedError

    def add_page(self) -> None:
        raise NotImplementedError

    def set_font(self, size: float, weight: FontWeight) -> None:
        raise NotImplementedError

    def set_fill_color(self, r: int, g: int, b: int) -> None:
        raise NotImplementedError

    def set_text_color(self, r: int, g: int, b: int) -> None:
        raise NotImplementedError

    def set_draw_color(self, r: int, g: int, b: int) -> None:
        raise NotImplementedError

    def set_line_width(self, width: float) -> None:
        raise NotImplementedError

    def draw_rect(self, x: float, y: float, width: float, height: float, mode: RectMode) -> None:
        raise NotImplementedError

    def draw_line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        raise NotImplementedError

    def draw_text(self, text: str, x: float, y: float, align: TextAlign) -> None:
        raise NotImplementedError

    def save(self, filename: str) -> PdfArtifact:
        raise NotImplementedError


def replay(document: ReportDocument, canvas: DocumentCanvas) -> None:
    """Drive ``canvas`` with the document's commands, one page at a time."""
    try:
        for page in document.pages:
            if page.index > 0:
                canvas.add_page()
            for command in page.commands:
                command.apply(canvas)
    except RenderError:
        raise
    except Exception as exc:
        raise RenderError(f"Canvas failed while drawing the report: {exc}") from exc


_FONTS = {
    FontWeight.NORMAL: "Helvetica",
    FontWeight.BOLD: "Helvetica-Bold",
}


def _rgb(r: int, g: int, b: int) -> tuple[float, float, float]:
    return (r / 255.0, g / 255.0, b / 255.0)


class ReportLabCanvas:
    """DocumentCanvas backed by reportlab's pdfgen canvas.

    reportlab uses a bottom-left origin and shares one colour between text
    and fills, so this adapter flips y and swaps colours around each call.

    All layout coordinates are PDF points (A4 is 595 x 842), so a full page
    of rows only fills the upper part of the sheet.
    """

    def __init__(self, *, pagesize: tuple[float, float] = A4, output_dir: Optional[Path] = None):
        self._pagesize = pagesize
        self._output_dir = Path(output_dir) if output_dir else None
        self._buffer = io.BytesIO()
        self._canvas = rl_canvas.Canvas(self._buffer, pagesize=pagesize)

        self._font = (_FONTS[FontWeight.NORMAL], 12.0)
        self._fill = (0.0, 0.0, 0.0)
        self._text = (0.0, 0.0, 0.0)
        self._stroke = (0.0, 0.0, 0.0)
        self._line_width = 1.0
        self._restore_state()

    def _y(self, y: float) -> float:
        return self._pagesize[1] - y

    def _restore_state(self) -> None:
        # showPage() resets the graphics state of the new page
        self._canvas.setFont(*self._font)
        self._canvas.setStrokeColorRGB(*self._stroke)
        self._canvas.setLineWidth(self._line_width)

    def page_width(self) -> float:
        return float(self._pagesize[0])

    def page_height(self) -> float:
        return float(self._pagesize[1])

    def add_page(self) -> None:
        self._canvas.showPage()
        self._restore_state()

    def set_font(self, size: float, weight: FontWeight) -> None:
        self._font = (_FONTS[FontWeight(weight)], float(size))
        self._canvas.setFont(*self._font)

    def set_fill_color(self, r: int, g: int, b: int) -> None:
        self._fill = _rgb(r, g, b)

    def set_text_color(self, r: int, g: int, b: int) -> None:
        self._text = _rgb(r, g, b)

    def set_draw_color(self, r: int, g: int, b: int) -> None:
        self._stroke = _rgb(r, g, b)
        self._canvas.setStrokeColorRGB(*self._stroke)

    def set_line_width(self, width: float) -> None:
        self._line_width = float(width)
        self._canvas.setLineWidth(self._line_width)

    def draw_rect(self, x: float, y: float, width: float, height: float, mode: RectMode) -> None:
        mode = RectMode(mode)
        fill = mode in (RectMode.FILL, RectMode.FILL_STROKE)
        stroke = mode in (RectMode.STROKE, RectMode.FILL_STROKE)
        self._canvas.setFillColorRGB(*self._fill)
        self._canvas.rect(x, self._y(y) - height, width, height, stroke=int(stroke), fill=int(fill))

    def draw_line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        self._canvas.line(x1, self._y(y1), x2, self._y(y2))

    def draw_text(self, text: str, x: float, y: float, align: TextAlign) -> None:
        self._canvas.setFillColorRGB(*self._text)
        align = TextAlign(align)
        if align is TextAlign.CENTER:
            self._canvas.drawCentredString(x, self._y(y), text)
        elif align is TextAlign.RIGHT:
            self._canvas.drawRightString(x, self._y(y), text)
        else:
            self._canvas.drawString(x, self._y(y), text)

    def save(self, filename: str) -> PdfArtifact:
        self._canvas.setTitle(filename)
        self._canvas.save()
        content = self._buffer.getvalue()

        if not self._output_dir:
            return PdfArtifact(filename=filename, content=content)

        path = self._output_dir / filename
        try:
            self._output_dir.mkdir(parents=True, exist_ok=True)
            path.write_bytes(content)
        except OSError:
            if path.exists():
                path.unlink()
            raise
        logger.info("Saved attendance report to %s (%d bytes)", path, len(content))
        return PdfArtifact(filename=filename, content=content, path=path)
