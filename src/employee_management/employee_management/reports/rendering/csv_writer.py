from __future__ import annotations

import csv
import io
from typing import Any, Iterable, Sequence


def _cell(value: Any) -> Any:
    return "" if value is None else value


def csv_bytes(header: Sequence[str], rows: Iterable[Sequence[Any]]) -> bytes:
    """Render a header and rows as UTF-8 CSV with a BOM so Excel opens it correctly."""
    out = io.StringIO()
    writer = csv.writer(out)
    writer.writerow(header)
    for row in rows:
        writer.writerow([_cell(v) for v in row])
    return out.getvalue().encode("utf-8-sig")
