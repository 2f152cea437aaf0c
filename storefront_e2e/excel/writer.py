from __future__ import annotations

import logging
from collections.abc import Sequence
from io import BytesIO

import pandas as pd

from ..models.record import HeaderMap, Record
from .errors import WorkbookEncodeError

"""Upload workbook encoder.

Writes a fresh single-sheet workbook: row 1 is the header row verbatim, then
one row per record with its cells in header order. Positions come from the
header tuple, never from dict iteration order.
"""

logger = logging.getLogger(__name__)

__all__ = [
    "XLSX_MIME_TYPE",
    "encode_workbook",
]

XLSX_MIME_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def encode_workbook(sheet_name: str, header: HeaderMap, records: Sequence[Record]) -> bytes:
    """Serialize header + records to .xlsx bytes.

    Raises:
        WorkbookEncodeError: openpyxl / pandas failed to write the workbook
    """
    rows: list[list[str]] = [list(header.names)]
    for record in records:
        rows.append(record.values())
    # 短い行は空文字で埋めて矩形にする (DataFrame の None 埋めを避ける)
    width = max(len(r) for r in rows)
    rows = [r + [""] * (width - len(r)) for r in rows]

    buffer = BytesIO()
    try:
        with pd.ExcelWriter(buffer, engine="openpyxl") as writer:
            df = pd.DataFrame(rows, dtype=object)
            df.to_excel(writer, sheet_name=sheet_name or "Sheet1", header=False, index=False)
    except (ValueError, TypeError, OSError) as e:
        raise WorkbookEncodeError(f"cannot encode workbook: {e}") from e

    data = buffer.getvalue()
    logger.debug(f"encoded sheet '{sheet_name}' rows={len(rows)} bytes={len(data)}")
    return data
