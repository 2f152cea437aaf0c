from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from ..excel.errors import EmptyInputError
from ..excel.reader import decode_workbook, read_records, resolve_header
from ..excel.writer import encode_workbook
from ..models.record import HeaderMap, Record
from ..models.row_patch import RowPatch

"""Row-patch service for Code/Decode upload workbooks.

Pipeline (single pass, no shared state between calls):

    raw bytes -> decode_workbook -> resolve_header -> read_records
              -> patch_records -> encode_workbook -> bytes

The caller owns the input bytes; nothing here mutates them or the decoded
records. Every failure is raised as a TransformError subclass.
"""

logger = logging.getLogger(__name__)

__all__ = [
    "PatchResult",
    "patch_records",
    "patch_workbook",
    "patch_workbook_bytes",
]


@dataclass(frozen=True)
class PatchResult:
    """Output of patch_workbook()."""
    data: bytes
    sheet_name: str
    header: HeaderMap
    records: list[Record]

    @property
    def patched_row(self) -> int:
        """Original worksheet row number of the patched record."""
        return self.records[0].row_number


def patch_records(records: Sequence[Record], patch: RowPatch) -> list[Record]:
    """Return a new record list with the first record's CODE/DECODE/FUNCTION replaced.

    Raises:
        EmptyInputError: ``records`` is empty
    """
    if not records:
        raise EmptyInputError()
    first = records[0].with_fields(patch.as_fields())
    return [first, *records[1:]]


def patch_workbook(raw: bytes, patch: RowPatch) -> PatchResult:
    """Apply ``patch`` to the first data record of the workbook in ``raw``."""
    sheet = decode_workbook(raw)
    header = resolve_header(sheet.rows[0] if sheet.rows else [])
    records = read_records(sheet, header)
    patched = patch_records(records, patch)
    logger.info(
        f"patched sheet '{sheet.sheet_name}' row={patched[0].row_number} "
        f"function={patch.function.value} records={len(patched)}"
    )
    data = encode_workbook(sheet.sheet_name, header, patched)
    return PatchResult(data=data, sheet_name=sheet.sheet_name, header=header, records=patched)


def patch_workbook_bytes(raw: bytes, patch: RowPatch) -> bytes:
    """Convenience wrapper returning only the encoded bytes."""
    return patch_workbook(raw, patch).data
