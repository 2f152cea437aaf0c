# Shared pytest fixtures
from __future__ import annotations

import tempfile
import zipfile
from collections.abc import Callable
from io import BytesIO
from pathlib import Path

import pandas as pd
import pytest

from storefront_e2e.logging.init import reset_logging

UPLOAD_HEADER = ["CODE", "DECODE", "FUNCTION", "CATEGORY"]


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        (p / "fixtures").mkdir()
        (p / "logs").mkdir()
        monkeypatch.chdir(p)
        yield p


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    # 開発者の .env / シェル環境に依存しない
    monkeypatch.delenv("SUITE_EMAIL", raising=False)
    monkeypatch.delenv("SUITE_PASSWORD", raising=False)
    reset_logging()
    yield
    reset_logging()


@pytest.fixture()
def sample_config_yaml() -> str:
    return """base_url: https://shop.example.test/
fixtures_dir: ./fixtures
temp_dir: ./temp
upload:
  input_selector: "input[type=file]"
  filename_label: "label.filename-label"
  temp_file_name: temp.xlsx
browser:
  headless: true
  timeout_ms: 15000
credentials:
  email: qa@example.test
  password: secret
"""


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "suite.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg


def build_workbook(rows: list[list[object]], sheet_name: str = "CodeDecode") -> bytes:
    """Build .xlsx bytes with ``rows`` written verbatim (row 1 = header)."""
    buffer = BytesIO()
    with pd.ExcelWriter(buffer, engine="openpyxl") as writer:
        df = pd.DataFrame(rows)
        df.to_excel(writer, sheet_name=sheet_name, header=False, index=False)
    return buffer.getvalue()


@pytest.fixture()
def make_workbook() -> Callable[..., bytes]:
    return build_workbook


@pytest.fixture()
def upload_rows() -> list[list[object]]:
    return [
        UPLOAD_HEADER,
        ["A1", "B1", "Add", "Colors"],
        ["A2", "B2", "Update", "Colors"],
        ["A3", "B3", "Delete", "Sizes"],
    ]


@pytest.fixture()
def upload_fixture(temp_workdir: Path, upload_rows) -> Path:
    path = temp_workdir / "fixtures" / "code_decode.xlsx"
    path.write_bytes(build_workbook(upload_rows))
    return path


def break_sheet_xml(raw: bytes, part: str = "xl/worksheets/sheet1.xml") -> bytes:
    """Return a copy of ``raw`` whose worksheet ``part`` is not well-formed XML."""
    out = BytesIO()
    with zipfile.ZipFile(BytesIO(raw)) as src, zipfile.ZipFile(out, "w", zipfile.ZIP_DEFLATED) as dst:
        for item in src.infolist():
            data = b"<not-xml" if item.filename == part else src.read(item.filename)
            dst.writestr(item, data)
    return out.getvalue()


@pytest.fixture()
def broken_sheet_workbook(upload_rows) -> bytes:
    return break_sheet_xml(build_workbook(upload_rows))
