from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path

from ..excel.errors import TransformError
from ..models.error_record import ErrorRecord

"""Error log buffering.

- JSON Lines, fixed record schema (error_log_schema.json, no extra keys)
- One file per run: ``logs/errors-YYYYMMDD-HHMMSS.log`` (UTC), created on first flush
- Records are buffered and appended on flush()
"""

__all__ = [
    "ErrorRecord",
    "ErrorLogBuffer",
    "record_from_error",
    "LOGS_DIR",
]

LOGS_DIR = Path("./logs")
TIMESTAMP_FMT = "%Y%m%d-%H%M%S"


def record_from_error(fixture: str, error: TransformError, sheet: str = "", row: int = -1) -> ErrorRecord:
    """Build an ErrorRecord for a failed patch (row -1: not row specific)."""
    return ErrorRecord.create(
        fixture=fixture,
        sheet=sheet,
        row=row,
        error_type=error.error_type,
        message=str(error),
    )


class ErrorLogBuffer:
    """In-memory buffer for error records. flush() appends JSON Lines.

    The file path is fixed on first access. Single-threaded use only.
    """

    def __init__(self, logs_dir: Path | None = None) -> None:
        self._records: list[ErrorRecord] = []
        self._file_path: Path | None = None
        self._logs_dir = logs_dir if logs_dir is not None else LOGS_DIR

    @property
    def file_path(self) -> Path:
        if self._file_path is None:
            self._logs_dir.mkdir(parents=True, exist_ok=True)
            stamp = datetime.now(UTC).strftime(TIMESTAMP_FMT)
            self._file_path = self._logs_dir / f"errors-{stamp}.log"
        return self._file_path

    def append(self, record: ErrorRecord) -> None:
        self._records.append(record)

    def __len__(self) -> int:
        return len(self._records)

    def flush(self) -> Path | None:
        """Write buffered records; returns the log path, or None if nothing was buffered."""
        if not self._records:
            return self._file_path
        fp = self.file_path
        with fp.open("a", encoding="utf-8") as f:
            for r in self._records:
                f.write(r.to_json_line() + "\n")
        self._records.clear()
        return fp
