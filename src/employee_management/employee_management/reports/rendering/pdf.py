"""Small canvas-based document builder for tabular PDF reports."""
from __future__ import annotations

import io
from datetime import datetime
from typing import Any, Callable, Optional, Sequence

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4, landscape
from reportlab.pdfbase.pdfmetrics import stringWidth
from reportlab.pdfgen import canvas

from .formatting import generated_on

MARGIN = 36
ROW_HEIGHT = 16
HEADER_FILL = colors.HexColor("#404040")

# (row values, column index) -> fill colour for that cell, or None.
CellFill = Callable[[Sequence[Any], int], Optional[colors.Color]]


def _fit(text: str, width: float, font: str, size: float) -> str:
    """Truncate with an ellipsis so the text fits in `width` points."""
    if stringWidth(text, font, size) <= width:
        return text
    while text and stringWidth(text + "...", font, size) > width:
        text = text[:-1]
    return text + "..."


class PdfReport:
    def __init__(self, *, wide: bool = False):
        self._buf = io.BytesIO()
        self._pagesize = landscape(A4) if wide else A4
        self._width, self._height = self._pagesize
        self._c = canvas.Canvas(self._buf, pagesize=self._pagesize)
        self._y = self._height - MARGIN

    @property
    def usable_width(self) -> float:
        return self._width - 2 * MARGIN

    def _new_page(self) -> None:
        self._c.showPage()
        self._y = self._height - MARGIN

    def _ensure(self, needed: float) -> bool:
        """Start a new page when less than `needed` points remain; True if a page was added."""
        if self._y - needed < MARGIN:
            self._new_page()
            return True
        return False

    def title(self, text: str) -> None:
        self._ensure(30)
        self._c.setFont("Helvetica-Bold", 16)
        self._c.setFillColor(colors.darkgrey)
        self._c.drawCentredString(self._width / 2, self._y - 16, text)
        self._c.setFillColor(colors.black)
        self._y -= 30

    def subtitle(self, text: str) -> None:
        self._ensure(20)
        self._c.setFont("Helvetica", 11)
        self._c.drawCentredString(self._width / 2, self._y - 11, text)
        self._y -= 22

    def heading(self, text: str) -> None:
        self._ensure(30)
        self._y -= 6
        self._c.setFont("Helvetica-Bold", 12)
        self._c.drawString(MARGIN, self._y - 12, text)
        self._y -= 20

    def line(self, text: str) -> None:
        self._ensure(14)
        self._c.setFont("Helvetica", 10)
        self._c.drawString(MARGIN, self._y - 10, _fit(text, self.usable_width, "Helvetica", 10))
        self._y -= 14

    def bullets(self, items: Sequence[str]) -> None:
        for item in items:
            self.line(f"• {item}")

    def spacer(self, height: float = 10) -> None:
        self._y -= height

    def _draw_row(self, values: Sequence[Any], widths: Sequence[float], *, header: bool, fill: CellFill | None):
        font = "Helvetica-Bold" if header else "Helvetica"
        size = 9 if header else 8
        x = MARGIN
        for i, (value, width) in enumerate(zip(values, widths)):
            background = HEADER_FILL if header else (fill(values, i) if fill else None)
            if background is not None:
                self._c.setFillColor(background)
                self._c.rect(x, self._y - ROW_HEIGHT, width, ROW_HEIGHT, stroke=0, fill=1)
            self._c.setStrokeColor(colors.lightgrey)
            self._c.rect(x, self._y - ROW_HEIGHT, width, ROW_HEIGHT, stroke=1, fill=0)
            self._c.setFillColor(colors.white if header else colors.black)
            self._c.setFont(font, size)
            text = "" if value is None else str(value)
            self._c.drawString(x + 3, self._y - ROW_HEIGHT + 5, _fit(text, width - 6, font, size))
            x += width
        self._c.setFillColor(colors.black)
        self._y -= ROW_HEIGHT

    def table(
        self,
        headers: Sequence[str],
        rows: Sequence[Sequence[Any]],
        *,
        weights: Sequence[float] | None = None,
        fill: CellFill | None = None,
    ) -> None:
        """Draw a grid with a shaded header row, repeating the header on each new page."""
        weights = list(weights or [1.0] * len(headers))
        total = sum(weights)
        widths = [self.usable_width * w / total for w in weights]

        self._ensure(ROW_HEIGHT * 2)
        self._draw_row(headers, widths, header=True, fill=None)
        for row in rows:
            if self._ensure(ROW_HEIGHT):
                self._draw_row(headers, widths, header=True, fill=None)
            self._draw_row(row, widths, header=False, fill=fill)
        self._y -= 8

    def footer(self, moment: datetime) -> None:
        self._ensure(24)
        self._y -= 10
        self._c.setFont("Helvetica-Oblique", 8)
        self._c.setFillColor(colors.grey)
        self._c.drawRightString(self._width - MARGIN, self._y - 8, generated_on(moment))
        self._c.setFillColor(colors.black)
        self._y -= 14

    def to_bytes(self) -> bytes:
        self._c.save()
        return self._buf.getvalue()
