from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from datetime import UTC, datetime

"""ErrorRecord model for error logging.

Structured record written by ErrorLogBuffer when a fixture cannot be patched.
Supports row=-1 as a sentinel for failures that are not tied to one worksheet
row (decode failures, missing header columns, ...).

The record shape is fixed by storefront_e2e/logging/error_log_schema.json.
"""

__all__ = [
    "ErrorRecord",
]


@dataclass(frozen=True)
class ErrorRecord:
    """Structured error record for JSON Lines logging.

    Attributes:
        timestamp: ISO8601 UTC timestamp with 'Z' suffix
        fixture: Fixture file name being patched
        sheet: Worksheet name ("" when the workbook could not be opened)
        row: Row number (1-based). Use -1 when the row is unknown
        error_type: Error classification in UPPER_SNAKE_CASE format
        message: Error message, verbatim
    """
    timestamp: str  # ISO8601 UTC
    fixture: str
    sheet: str
    row: int  # 行番号。不明な場合 -1
    error_type: str  # UPPER_SNAKE
    message: str

    @staticmethod
    def create(fixture: str, sheet: str, row: int, error_type: str, message: str) -> ErrorRecord:
        """Create a new ErrorRecord stamped with the current UTC time."""
        ts = datetime.now(UTC).isoformat().replace("+00:00", "Z")
        return ErrorRecord(
            timestamp=ts,
            fixture=fixture,
            sheet=sheet,
            row=row,
            error_type=error_type,
            message=message,
        )

    def to_json_line(self) -> str:
        """Serialize to a single JSON line (no extra keys)."""
        return json.dumps(asdict(self), ensure_ascii=False)
