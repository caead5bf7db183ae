"""Workbook builder: pandas writes the tables, openpyxl styles them."""
from __future__ import annotations

import io
from typing import Any, Callable, Iterable, Mapping, Optional, Sequence

import pandas as pd
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter

MONEY_FORMAT = "$#,##0.00"
ONE_DECIMAL = "0.0"
PERCENT_FORMAT = "0.0%"

HEADER_FILL = PatternFill(fill_type="solid", fgColor="1F3864")
TITLE_FILL = PatternFill(fill_type="solid", fgColor="D3D3D3")
HEADER_FONT = Font(bold=True, color="FFFFFF")
_THIN = Side(style="thin")
THIN_BORDER = Border(left=_THIN, right=_THIN, top=_THIN, bottom=_THIN)

GREEN = PatternFill(fill_type="solid", fgColor="90EE90")
YELLOW = PatternFill(fill_type="solid", fgColor="FFFFE0")
CORAL = PatternFill(fill_type="solid", fgColor="F08080")

MAX_COLUMN_WIDTH = 60


class ExcelReport:
    """Builds one .xlsx in memory.

    Rows and columns are 1-based as in openpyxl; `table` returns the last row it
    wrote so callers can stack sections below it.
    """

    def __init__(self):
        self._out = io.BytesIO()
        self._writer = pd.ExcelWriter(self._out, engine="openpyxl")

    def sheet(self, name: str):
        if name not in self._writer.sheets:
            self._writer.book.create_sheet(title=name)
        return self._writer.sheets[name]

    def title(self, sheet: str, text: str, *, columns: int, row: int = 1) -> None:
        ws = self.sheet(sheet)
        ws.merge_cells(start_row=row, start_column=1, end_row=row, end_column=max(columns, 1))
        cell = ws.cell(row=row, column=1, value=text)
        cell.font = Font(bold=True, size=16)
        cell.fill = TITLE_FILL
        cell.alignment = Alignment(horizontal="center")

    def note(self, sheet: str, text: str, *, columns: int, row: int) -> None:
        """Merged italic line such as the generated-on stamp."""
        ws = self.sheet(sheet)
        ws.merge_cells(start_row=row, start_column=1, end_row=row, end_column=max(columns, 1))
        cell = ws.cell(row=row, column=1, value=text)
        cell.font = Font(italic=True)
        cell.alignment = Alignment(horizontal="right")

    def cells(self, sheet: str, row: int, values: Sequence[Any], *, bold: bool = False, size: Optional[int] = None) -> None:
        ws = self.sheet(sheet)
        for col, value in enumerate(values, start=1):
            cell = ws.cell(row=row, column=col, value=value)
            if bold or size:
                cell.font = Font(bold=bold, size=size or 11)

    def table(
        self,
        sheet: str,
        columns: Sequence[str],
        rows: Iterable[Sequence[Any]],
        *,
        header_row: int = 1,
        formats: Optional[Mapping[str, str]] = None,
    ) -> int:
        frame = pd.DataFrame(list(rows), columns=list(columns))
        self.sheet(sheet)
        frame.to_excel(self._writer, sheet_name=sheet, index=False, startrow=header_row - 1)

        ws = self._writer.sheets[sheet]
        last_row = header_row + len(frame)
        for col in range(1, len(columns) + 1):
            head = ws.cell(row=header_row, column=col)
            head.font = HEADER_FONT
            head.fill = HEADER_FILL
            head.alignment = Alignment(horizontal="center")
            for r in range(header_row, last_row + 1):
                ws.cell(row=r, column=col).border = THIN_BORDER

        for name, number_format in (formats or {}).items():
            col = list(columns).index(name) + 1
            for r in range(header_row + 1, last_row + 1):
                ws.cell(row=r, column=col).number_format = number_format
        return last_row

    def fill_column(
        self,
        sheet: str,
        column: int,
        first_row: int,
        last_row: int,
        rule: Callable[[Any], Optional[PatternFill]],
    ) -> None:
        ws = self.sheet(sheet)
        for r in range(first_row, last_row + 1):
            cell = ws.cell(row=r, column=column)
            fill = rule(cell.value)
            if fill is not None:
                cell.fill = fill

    def autofit(self, sheet: str, *, from_row: int = 1) -> None:
        """Size columns to their longest value, ignoring merged title rows above `from_row`."""
        ws = self.sheet(sheet)
        widths: dict[int, int] = {}
        for row in ws.iter_rows(min_row=from_row):
            for cell in row:
                if cell.value is None:
                    continue
                widths[cell.column] = max(widths.get(cell.column, 0), len(str(cell.value)))
        for col, width in widths.items():
            ws.column_dimensions[get_column_letter(col)].width = min(width + 2, MAX_COLUMN_WIDTH)

    def to_bytes(self) -> bytes:
        self._writer.close()
        return self._out.getvalue()
