from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from ..config.loader import SuiteConfig
from ..excel.writer import XLSX_MIME_TYPE
from ..models.row_patch import RowPatch
from ..models.scenario_context import UPLOADED_EXCEL_PATH, ContextKeyError, ScenarioContext
from ..models.upload_type import UploadType
from .fixtures import load_fixture_bytes
from .row_patcher import patch_workbook

"""Bulk upload helpers for the browser layer.

The page argument is a Playwright ``Page`` (anything with ``set_input_files``
works). Playwright assigns the file to the input and fires the input/change
events itself, so one set_input_files call is the whole dispatch.
"""

logger = logging.getLogger(__name__)

__all__ = [
    "TEXT_MIME_TYPE",
    "dispatch_file",
    "write_temp_workbook",
    "upload_code_decode_excel",
    "upload_file",
    "upload_non_excel_file",
]

TEXT_MIME_TYPE = "text/plain"


def dispatch_file(page: Any, selector: str, file_name: str, payload: bytes, mime_type: str) -> None:
    """Select ``payload`` as file ``file_name`` on the file input at ``selector``."""
    page.set_input_files(
        selector,
        files=[{"name": file_name, "mimeType": mime_type, "buffer": payload}],
    )
    logger.info(f"dispatched {file_name} ({mime_type}, {len(payload)} bytes) to {selector}")


def write_temp_workbook(data: bytes, path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
    return path


def upload_code_decode_excel(
    page: Any,
    context: ScenarioContext,
    settings: SuiteConfig,
    file_name: str,
    new_code: str,
    new_decode: str,
    function: UploadType,
) -> Path:
    """Patch fixture ``file_name`` and upload the result.

    The patched workbook is also written to the temp file for inspection, and
    its path is stored in ``context`` under ``uploadedExcelPath``.
    Transform errors propagate unchanged; nothing is uploaded in that case.
    A second call with the same ``context`` raises ContextKeyError before the
    temp file is touched.
    """
    if UPLOADED_EXCEL_PATH in context:
        raise ContextKeyError(
            f"context key already set in scenario '{context.name}': {UPLOADED_EXCEL_PATH}"
        )
    raw = load_fixture_bytes(settings.fixtures_dir, file_name)
    result = patch_workbook(raw, RowPatch(code=new_code, decode=new_decode, function=function))

    temp_path = write_temp_workbook(result.data, settings.temp_file_path)
    context.set(UPLOADED_EXCEL_PATH, str(temp_path))
    logger.debug(f"patched workbook written to {temp_path}")

    dispatch_file(page, settings.upload.input_selector, file_name, result.data, XLSX_MIME_TYPE)
    return temp_path


def upload_file(page: Any, settings: SuiteConfig, file_name: str) -> None:
    """Upload fixture ``file_name`` unmodified as an .xlsx file."""
    payload = load_fixture_bytes(settings.fixtures_dir, file_name)
    dispatch_file(page, settings.upload.input_selector, file_name, payload, XLSX_MIME_TYPE)


def upload_non_excel_file(page: Any, settings: SuiteConfig, file_name: str) -> None:
    """Upload fixture ``file_name`` as text/plain (negative upload scenarios)."""
    payload = load_fixture_bytes(settings.fixtures_dir, file_name)
    dispatch_file(page, settings.upload.input_selector, file_name, payload, TEXT_MIME_TYPE)
