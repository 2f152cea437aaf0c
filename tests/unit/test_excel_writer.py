from __future__ import annotations

from io import BytesIO

import pytest
from openpyxl import load_workbook

from storefront_e2e.excel.errors import WorkbookEncodeError
from storefront_e2e.excel.writer import encode_workbook
from storefront_e2e.models.record import HeaderMap, Record


def _sheet_values(data: bytes) -> list[list[object]]:
    wb = load_workbook(BytesIO(data))
    ws = wb.worksheets[0]
    return [[c.value for c in row] for row in ws.iter_rows()]


def test_encode_header_then_records_in_header_order():
    header = HeaderMap.from_names(["FUNCTION", "CODE", "EXTRA", "DECODE"])
    records = [
        Record(row_number=2, header=header, cells=("Add", "A1", "e1", "B1")),
        Record(row_number=3, header=header, cells=("Delete", "A2")),
    ]
    data = encode_workbook("Upload", header, records)
    wb = load_workbook(BytesIO(data))
    assert wb.sheetnames == ["Upload"]
    values = _sheet_values(data)
    assert values[0] == ["FUNCTION", "CODE", "EXTRA", "DECODE"]
    assert values[1] == ["Add", "A1", "e1", "B1"]
    # 足りないセルは空 (None か "" で読まれる)
    assert values[2][:2] == ["Delete", "A2"]
    assert all(v in (None, "") for v in values[2][2:])


def test_encode_writes_text_cells():
    header = HeaderMap.from_names(["CODE", "DECODE", "FUNCTION"])
    records = [Record(row_number=2, header=header, cells=("001", "1.50", "Add"))]
    values = _sheet_values(encode_workbook("S", header, records))
    assert values[1] == ["001", "1.50", "Add"]


def test_encode_defaults_blank_sheet_name():
    header = HeaderMap.from_names(["CODE", "DECODE", "FUNCTION"])
    data = encode_workbook("", header, [])
    assert load_workbook(BytesIO(data)).sheetnames == ["Sheet1"]


def test_encode_invalid_sheet_name():
    header = HeaderMap.from_names(["CODE", "DECODE", "FUNCTION"])
    # Excel のシート名に使えない文字
    with pytest.raises(WorkbookEncodeError):
        encode_workbook("bad/name?", header, [])
