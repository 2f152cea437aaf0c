from __future__ import annotations

from dataclasses import dataclass

from .upload_type import UploadType

"""RowPatch model: the new field values applied to the first data row."""

__all__ = [
    "RowPatch",
    "CODE",
    "DECODE",
    "FUNCTION",
    "REQUIRED_COLUMNS",
]

CODE = "CODE"
DECODE = "DECODE"
FUNCTION = "FUNCTION"

# 検証順 (MissingColumnError はこの順で最初に欠けた列名を報告)
REQUIRED_COLUMNS: tuple[str, ...] = (CODE, DECODE, FUNCTION)


@dataclass(frozen=True)
class RowPatch:
    """Field values written into the first data record of an upload workbook."""
    code: str
    decode: str
    function: UploadType

    def as_fields(self) -> dict[str, str]:
        """Return the patch keyed by normalized column name."""
        return {
            CODE: str(self.code),
            DECODE: str(self.decode),
            FUNCTION: self.function.value,
        }
