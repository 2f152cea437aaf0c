from __future__ import annotations

"""Error taxonomy for the upload workbook row-patch pipeline.

Every error is terminal for the current scenario. The message is meant to be
surfaced verbatim by the caller (step definition or CLI).
"""

__all__ = [
    "TransformError",
    "MissingColumnError",
    "EmptyInputError",
    "WorkbookDecodeError",
    "WorkbookEncodeError",
]


class TransformError(Exception):
    """Base class for row-patch pipeline failures."""

    error_type = "TRANSFORM_ERROR"


class MissingColumnError(TransformError):
    """Raised when a required header is absent from row 1.

    ``name`` is the first missing column in CODE, DECODE, FUNCTION order;
    ``missing`` lists every required column that was not found.
    """

    error_type = "MISSING_COLUMN"

    def __init__(self, name: str, missing: list[str] | None = None) -> None:
        self.name = name
        self.missing = missing if missing is not None else [name]
        super().__init__(f"Required header missing: {', '.join(self.missing)}")


class EmptyInputError(TransformError):
    """Raised when the worksheet has no data record to patch."""

    error_type = "EMPTY_INPUT"

    def __init__(self, message: str = "No data rows found to update") -> None:
        super().__init__(message)


class WorkbookDecodeError(TransformError):
    """Raised when the input bytes are not a readable .xlsx workbook."""

    error_type = "DECODE_FAILURE"


class WorkbookEncodeError(TransformError):
    """Raised when the patched workbook cannot be serialized."""

    error_type = "ENCODE_FAILURE"
