"""Domain models for the storefront e2e suite.

Upload workbook models (header, records, patch values, upload type) and the
scenario-scoped context used to hand values between steps.
"""

from .error_record import ErrorRecord
from .record import HeaderMap, Record, normalize_header
from .row_patch import CODE, DECODE, FUNCTION, REQUIRED_COLUMNS, RowPatch
from .scenario_context import (
    UPLOADED_CODE,
    UPLOADED_DECODE,
    UPLOADED_EXCEL_PATH,
    ContextKeyError,
    ScenarioContext,
)
from .upload_type import UnknownOperationError, UploadType

__all__ = [
    # Upload workbook models
    "HeaderMap",
    "Record",
    "RowPatch",
    "UploadType",
    "UnknownOperationError",
    "normalize_header",
    "CODE",
    "DECODE",
    "FUNCTION",
    "REQUIRED_COLUMNS",
    # Scenario hand-off
    "ScenarioContext",
    "ContextKeyError",
    "UPLOADED_CODE",
    "UPLOADED_DECODE",
    "UPLOADED_EXCEL_PATH",
    # Error logging
    "ErrorRecord",
]
