from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Iterator, Optional, Union

from ..core.enums import FontWeight, RectMode, TextAlign

if TYPE_CHECKING:
    from .canvas import DocumentCanvas


RGB = tuple[int, int, int]


@dataclass(frozen=True)
class SetFont:
    size: float
    weight: FontWeight = FontWeight.NORMAL

    def apply(self, canvas: "DocumentCanvas") -> None:
        canvas.set_font(self.size, self.weight)


@dataclass(frozen=True)
class SetFillColor:
    rgb: RGB

    def apply(self, canvas: "DocumentCanvas") -> None:
        canvas.set_fill_color(*self.rgb)


@dataclass(frozen=True)
class SetTextColor:
    rgb: RGB

    def apply(self, canvas: "DocumentCanvas") -> None:
        canvas.set_text_color(*self.rgb)


@dataclass(frozen=True)
class SetDrawColor:
    rgb: RGB

    def apply(self, canvas: "DocumentCanvas") -> None:
        canvas.set_draw_color(*self.rgb)


@dataclass(frozen=True)
class SetLineWidth:
    width: float

    def apply(self, canvas: "DocumentCanvas") -> None:
        canvas.set_line_width(self.width)


@dataclass(frozen=True)
class DrawRect:
    x: float
    y: float
    width: float
    height: float
    mode: RectMode = RectMode.FILL

    def apply(self, canvas: "DocumentCanvas") -> None:
        canvas.draw_rect(self.x, self.y, self.width, self.height, self.mode)


@dataclass(frozen=True)
class DrawLine:
    x1: float
    y1: float
    x2: float
    y2: float

    def apply(self, canvas: "DocumentCanvas") -> None:
        canvas.draw_line(self.x1, self.y1, self.x2, self.y2)


@dataclass(frozen=True)
class DrawText:
    text: str
    x: float
    y: float
    align: TextAlign = TextAlign.LEFT

    def apply(self, canvas: "DocumentCanvas") -> None:
        canvas.draw_text(self.text, self.x, self.y, self.align)


DrawCommand = Union[SetFont, SetFillColor, SetTextColor, SetDrawColor, SetLineWidth, DrawRect, DrawLine, DrawText]


@dataclass(frozen=True)
class Page:
    index: int
    commands: tuple[DrawCommand, ...]
    row_count: int


@dataclass
class PageBuilder:
    """Collects the commands of one page while the layout cursor moves down it."""

    index: int
    cursor_y: float
    commands: list[DrawCommand] = field(default_factory=list)
    row_count: int = 0

    def emit(self, *commands: DrawCommand) -> None:
        self.commands.extend(commands)

    def advance(self, dy: float) -> float:
        self.cursor_y += dy
        return self.cursor_y

    def build(self) -> Page:
        return Page(index=self.index, commands=tuple(self.commands), row_count=self.row_count)


@dataclass(frozen=True)
class ReportDocument:
    title: str
    pages: tuple[Page, ...]

    @property
    def page_count(self) -> int:
        return len(self.pages)

    @property
    def row_count(self) -> int:
        return sum(p.row_count for p in self.pages)

    def commands(self) -> Iterator[DrawCommand]:
        for page in self.pages:
            yield from page.commands

    def texts(self) -> list[str]:
        return [c.text for c in self.commands() if isinstance(c, DrawText)]


@dataclass(frozen=True)
class Summary:
    total: int
    present: int
    absent: int
    rate: float

    @property
    def rate_label(self) -> str:
        return f"{self.rate:.1f}%"

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "present": self.present,
            "absent": self.absent,
            "rate": self.rate,
        }


@dataclass(frozen=True)
class RenderResult:
    document: ReportDocument
    summary: Summary


@dataclass(frozen=True)
class PdfArtifact:
    filename: str
    content: bytes
    path: Optional[Path] = None


@dataclass(frozen=True)
class ExportResult:
    filename: str
    summary: Summary
    artifact: PdfArtifact
    page_count: int
