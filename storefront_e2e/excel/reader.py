from __future__ import annotations

import logging
import math
import zipfile
from dataclasses import dataclass
from datetime import date, datetime, time
from io import BytesIO
from typing import Any

import pandas as pd
from openpyxl.utils.exceptions import InvalidFileException

from ..models.record import HeaderMap, Record, normalize_header
from ..models.row_patch import REQUIRED_COLUMNS
from .errors import MissingColumnError, WorkbookDecodeError

"""Upload workbook reader.

Row 1 of the first worksheet is the header row; rows 2.. are data rows.
All cells are read as text: pandas is asked for object dtype with NA
detection disabled so strings such as "NA" or "001" survive unchanged, and
the remaining non-string cells are converted by cell_to_text().

Blank-row policy: a data row whose cells are all blank is skipped. The first
*non-blank* row is the patch target, and blank rows are not written back.
"""

logger = logging.getLogger(__name__)

__all__ = [
    "Worksheet",
    "decode_workbook",
    "cell_to_text",
    "resolve_header",
    "read_records",
]


@dataclass
class Worksheet:
    sheet_name: str
    rows: list[list[str]]  # セルはすべて文字列化済み


def cell_to_text(value: Any) -> str:
    """Render a decoded cell value as text without locale formatting.

    - None / NaN -> ""
    - bool -> "TRUE" / "FALSE" (Excel display form)
    - integral float -> "5" rather than "5.0"
    - date / datetime / time -> ISO-8601
    - str -> unchanged
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, float):
        if math.isnan(value):
            return ""
        if value.is_integer():
            return str(int(value))
        return repr(value)
    if value is pd.NaT:
        return ""
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    return str(value)


def decode_workbook(raw: bytes) -> Worksheet:
    """Decode .xlsx bytes and return the first worksheet as text rows.

    Raises:
        WorkbookDecodeError: the bytes are not a readable .xlsx container, or a
            worksheet part inside it is not well-formed XML
    """
    try:
        with pd.ExcelFile(BytesIO(raw), engine="openpyxl") as xls:
            if not xls.sheet_names:
                raise WorkbookDecodeError("workbook has no worksheets")
            sheet_name = str(xls.sheet_names[0])
            df = xls.parse(sheet_name, header=None, dtype=object, na_filter=False)
    except WorkbookDecodeError:
        raise
    # 壊れたシート XML: ElementTree.ParseError / lxml XMLSyntaxError はどちらも SyntaxError 派生
    except (zipfile.BadZipFile, InvalidFileException, SyntaxError, ValueError, KeyError, OSError) as e:
        raise WorkbookDecodeError(f"cannot decode workbook: {e}") from e

    rows = [[cell_to_text(v) for v in raw_row] for raw_row in df.itertuples(index=False, name=None)]
    logger.debug(f"decoded sheet '{sheet_name}' rows={len(rows)}")
    return Worksheet(sheet_name=sheet_name, rows=rows)


def resolve_header(header_row: list[str]) -> HeaderMap:
    """Build the HeaderMap from row 1 and check the required columns.

    Checked before any data row is read so a bad fixture fails with a single
    MissingColumnError rather than a partial patch.
    """
    # pandas pads short rows to the sheet width; keep those trailing blanks out of the header
    names = list(header_row)
    while names and not names[-1].strip():
        names.pop()
    header = HeaderMap.from_names(names)
    missing = [name for name in REQUIRED_COLUMNS if normalize_header(name) not in header.index]
    if missing:
        raise MissingColumnError(missing[0], missing)
    return header


def read_records(sheet: Worksheet, header: HeaderMap) -> list[Record]:
    """Read rows 2..N as Records, skipping rows that are entirely blank."""
    records: list[Record] = []
    skipped = 0
    for offset, cells in enumerate(sheet.rows[1:]):
        row_number = offset + 2
        width = max(len(header), _last_filled(cells))
        record = Record(row_number=row_number, header=header, cells=tuple(cells[:width]))
        if record.is_blank:
            skipped += 1
            continue
        records.append(record)
    if skipped:
        logger.debug(f"sheet '{sheet.sheet_name}': skipped {skipped} blank row(s)")
    return records


def _last_filled(cells: list[str]) -> int:
    n = len(cells)
    while n and not cells[n - 1].strip():
        n -= 1
    return n
