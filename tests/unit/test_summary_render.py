from __future__ import annotations

import re
from pathlib import Path

import pytest

from storefront_e2e.models import HeaderMap, Record, RowPatch, UploadType
from storefront_e2e.services.row_patcher import PatchResult
from storefront_e2e.services.summary import format_elapsed, render_summary_line

SUMMARY_PATTERN = re.compile(
    r"^SUMMARY\s+fixture=(\S+)\s+function=(Add|Update|Delete|NewCategory)\s+"
    r"code=(\S*)\s+decode=(\S*)\s+rows=([0-9]+)\s+patched_row=([0-9]+)\s+"
    r"output=(\S+)\s+elapsed_sec=([0-9]+\.?[0-9]*)$"
)


def _result(row_number: int = 2, count: int = 3) -> PatchResult:
    header = HeaderMap.from_names(["CODE", "DECODE", "FUNCTION"])
    records = [
        Record(row_number=row_number + i, header=header, cells=(f"A{i}", f"B{i}", "Add"))
        for i in range(count)
    ]
    return PatchResult(data=b"", sheet_name="Sheet1", header=header, records=records)


def test_render_summary_line():
    patch = RowPatch(code="X9Z12", decode="Q7R33", function=UploadType.UPDATE)
    line = render_summary_line("codes.xlsx", patch, _result(row_number=3), Path("temp/temp.xlsx"), 0.25)
    assert line == (
        "SUMMARY fixture=codes.xlsx function=Update code=X9Z12 decode=Q7R33 "
        "rows=3 patched_row=3 output=temp/temp.xlsx elapsed_sec=0.25"
    )
    m = SUMMARY_PATTERN.match(line)
    assert m, "SUMMARY line should match contract regex"
    assert m.group(6) == "3"


@pytest.mark.parametrize(
    "seconds,expected",
    [(0, "0"), (2.0, "2"), (0.004, "0.004"), (0.000123, "0.000123"), (1.23456, "1.235"), (0.5, "0.5")],
)
def test_format_elapsed(seconds, expected):
    assert format_elapsed(seconds) == expected
