"""Drawing surfaces.

The layout and diagram code only ever talk to a :class:`Surface`.  Two
implementations exist:

- :class:`RecordingSurface` keeps an ordered list of drawing instructions
  (a page description) that can be inspected or replayed later.
- :class:`CanvasSurface` draws straight onto a ReportLab canvas; it is
  what :class:`PdfDocument` hands out for each page.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from pathlib import Path
from typing import NamedTuple

from reportlab.pdfbase import pdfmetrics
from reportlab.pdfgen import canvas

# A4-ish page in PDF user units (points)
PAGE_WIDTH = 596.0
PAGE_HEIGHT = 842.0

WidthFunc = Callable[[str, str, float], float]


class Surface(ABC):
    """The drawing primitives the renderer needs from an output page."""

    @abstractmethod
    def string_width(self, text: str, font: str, size: float) -> float:
        """Return the advance width of *text* in points."""

    @abstractmethod
    def set_line_width(self, width: float) -> None:
        """Set the stroke width for subsequent lines and circles."""

    @abstractmethod
    def line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        """Stroke a straight line."""

    @abstractmethod
    def circle(self, x: float, y: float, r: float, fill: bool = False) -> None:
        """Stroke a circle, or fill it when *fill* is true."""

    @abstractmethod
    def draw_text(
        self,
        x: float,
        y: float,
        text: str,
        font: str,
        size: float,
        char_space: float = 0.0,
        word_space: float = 0.0,
        rise: float = 0.0,
    ) -> None:
        """Show *text* with its baseline at (*x*, *y*).

        *char_space* and *word_space* are extra points added after every
        glyph and every space respectively; *rise* lifts the text above the
        baseline.  None of them outlive this call.
        """


class Instruction(NamedTuple):
    op: str
    args: tuple


class RecordingSurface(Surface):
    """A surface that records instructions instead of drawing them."""

    def __init__(self, measure: WidthFunc = pdfmetrics.stringWidth):
        self.measure = measure
        self.instructions: list[Instruction] = []

    def _record(self, op: str, *args) -> None:
        self.instructions.append(Instruction(op, args))

    def string_width(self, text: str, font: str, size: float) -> float:
        return self.measure(text, font, size)

    def set_line_width(self, width: float) -> None:
        self._record("set_line_width", width)

    def line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        self._record("line", x1, y1, x2, y2)

    def circle(self, x: float, y: float, r: float, fill: bool = False) -> None:
        self._record("circle", x, y, r, fill)

    def draw_text(
        self,
        x: float,
        y: float,
        text: str,
        font: str,
        size: float,
        char_space: float = 0.0,
        word_space: float = 0.0,
        rise: float = 0.0,
    ) -> None:
        self._record("draw_text", x, y, text, font, size, char_space, word_space, rise)

    def replay(self, target: Surface) -> None:
        """Issue every recorded instruction, in order, against *target*."""
        for op, args in self.instructions:
            getattr(target, op)(*args)


class CanvasSurface(Surface):
    """A surface backed by a ReportLab canvas page."""

    def __init__(self, c: canvas.Canvas):
        self._canvas = c

    def string_width(self, text: str, font: str, size: float) -> float:
        return pdfmetrics.stringWidth(text, font, size)

    def set_line_width(self, width: float) -> None:
        self._canvas.setLineWidth(width)

    def line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        self._canvas.line(x1, y1, x2, y2)

    def circle(self, x: float, y: float, r: float, fill: bool = False) -> None:
        self._canvas.circle(x, y, r, stroke=0 if fill else 1, fill=1 if fill else 0)

    def draw_text(
        self,
        x: float,
        y: float,
        text: str,
        font: str,
        size: float,
        char_space: float = 0.0,
        word_space: float = 0.0,
        rise: float = 0.0,
    ) -> None:
        t = self._canvas.beginText(x, y)
        t.setFont(font, size)
        t.setCharSpace(char_space)
        t.setWordSpace(word_space)
        t.setRise(rise)
        t.textOut(text)
        self._canvas.drawText(t)


class PdfDocument:
    """A multi-page PDF written through ReportLab.

    Usage::

        doc = PdfDocument("songbook.pdf", title="Songbook")
        doc.new_page(PAGE_WIDTH, PAGE_HEIGHT, recording.replay)
        doc.save()
    """

    def __init__(self, path: str | Path, title: str = "Songbook", producer: str = "chordsheet"):
        self.path = Path(path)
        self.pages = 0
        self._canvas = canvas.Canvas(str(self.path), pagesize=(PAGE_WIDTH, PAGE_HEIGHT))
        self._canvas.setTitle(title)
        self._canvas.setProducer(producer)

    def new_page(self, width: float, height: float, draw: Callable[[Surface], None]) -> None:
        """Add one page of *width* x *height* and let *draw* fill it."""
        self._canvas.setPageSize((width, height))
        draw(CanvasSurface(self._canvas))
        self._canvas.showPage()
        self.pages += 1

    def save(self) -> None:
        self._canvas.save()
