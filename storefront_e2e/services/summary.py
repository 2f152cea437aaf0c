from __future__ import annotations

from pathlib import Path

from ..models.row_patch import RowPatch
from .row_patcher import PatchResult

"""SUMMARY line rendering for the patch CLI.

Format:
SUMMARY fixture={name} function={F} code={c} decode={d} rows={n}
patched_row={r} output={path} elapsed_sec={elapsed}
"""


def format_elapsed(seconds: float) -> str:
    """Render seconds without scientific notation or trailing zeros."""
    if seconds <= 0:
        return "0"
    if seconds == int(seconds):
        return str(int(seconds))
    if seconds < 0.01:
        return f"{seconds:.6f}".rstrip("0").rstrip(".")
    return f"{seconds:.3f}".rstrip("0").rstrip(".")


def render_summary_line(
    fixture: str,
    patch: RowPatch,
    result: PatchResult,
    output: Path,
    elapsed_seconds: float,
) -> str:
    """Render the SUMMARY line for one patched fixture.

    Examples:
        >>> from storefront_e2e.models import HeaderMap, Record, UploadType
        >>> header = HeaderMap.from_names(["CODE", "DECODE", "FUNCTION"])
        >>> rec = Record(row_number=2, header=header, cells=("A", "B", "Add"))
        >>> res = PatchResult(data=b"", sheet_name="Sheet1", header=header, records=[rec])
        >>> p = RowPatch(code="A", decode="B", function=UploadType.ADD)
        >>> render_summary_line("codes.xlsx", p, res, Path("temp/temp.xlsx"), 0.5)
        'SUMMARY fixture=codes.xlsx function=Add code=A decode=B rows=1 patched_row=2 output=temp/temp.xlsx elapsed_sec=0.5'
    """
    return (
        f"SUMMARY fixture={fixture} "
        f"function={patch.function.value} "
        f"code={patch.code} "
        f"decode={patch.decode} "
        f"rows={len(result.records)} "
        f"patched_row={result.patched_row} "
        f"output={output.as_posix()} "
        f"elapsed_sec={format_elapsed(elapsed_seconds)}"
    )
