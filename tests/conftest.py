from __future__ import annotations

import pytest

from src.attendance_report.attendance_report.report.model import PdfArtifact


class RecordingCanvas:
    """In-memory DocumentCanvas that records every call in order."""

    def __init__(self, width: float = 210.0):
        self.width = width
        self.calls: list[tuple] = []
        self.saved: list[str] = []

    def page_width(self) -> float:
        self.calls.append(("page_width",))
        return self.width

    def add_page(self) -> None:
        self.calls.append(("add_page",))

    def set_font(self, size, weight) -> None:
        self.calls.append(("set_font", size, weight))

    def set_fill_color(self, r, g, b) -> None:
        self.calls.append(("set_fill_color", (r, g, b)))

    def set_text_color(self, r, g, b) -> None:
        self.calls.append(("set_text_color", (r, g, b)))

    def set_draw_color(self, r, g, b) -> None:
        self.calls.append(("set_draw_color", (r, g, b)))

    def set_line_width(self, width) -> None:
        self.calls.append(("set_line_width", width))

    def draw_rect(self, x, y, width, height, mode) -> None:
        self.calls.append(("draw_rect", x, y, width, height, mode))

    def draw_line(self, x1, y1, x2, y2) -> None:
        self.calls.append(("draw_line", x1, y1, x2, y2))

    def draw_text(self, text, x, y, align) -> None:
        self.calls.append(("draw_text", text, x, y, align))

    def save(self, filename: str) -> PdfArtifact:
        self.saved.append(filename)
        return PdfArtifact(filename=filename, content=b"%PDF-recorded")

    # helpers for assertions
    def texts(self) -> list[str]:
        return [c[1] for c in self.calls if c[0] == "draw_text"]

    def text_calls(self) -> list[tuple]:
        return [c for c in self.calls if c[0] == "draw_text"]

    @property
    def page_count(self) -> int:
        return 1 + sum(1 for c in self.calls if c[0] == "add_page")


@pytest.fixture
def canvas() -> RecordingCanvas:
    return RecordingCanvas()


@pytest.fixture
def canvas_factory():
    created: list[RecordingCanvas] = []

    def factory() -> RecordingCanvas:
        c = RecordingCanvas()
        created.append(c)
        return c

    factory.created = created
    return factory
