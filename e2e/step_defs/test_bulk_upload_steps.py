from __future__ import annotations

from pathlib import Path

import pytest
from pytest_bdd import given, parsers, scenarios, then, when

from storefront_e2e.config.loader import SuiteConfig
from storefront_e2e.excel.reader import decode_workbook, read_records, resolve_header
from storefront_e2e.models import (
    UPLOADED_CODE,
    UPLOADED_DECODE,
    UPLOADED_EXCEL_PATH,
    ScenarioContext,
    UploadType,
)
from storefront_e2e.pages import BulkUploadPage
from storefront_e2e.services.codes import generate_random_value

scenarios("../features/bulk_upload.feature")


@pytest.fixture()
def bulk_upload_page(page, settings: SuiteConfig) -> BulkUploadPage:
    return BulkUploadPage(page, settings)


@given("I am on the bulk upload page")
def on_bulk_upload_page(bulk_upload_page: BulkUploadPage):
    bulk_upload_page.visit()


@when(parsers.parse('User uploads Code Decode File "{file_name}" for "{operation}" operation'))
def upload_code_decode(
    bulk_upload_page: BulkUploadPage, scenario_context: ScenarioContext, file_name: str, operation: str
):
    code = generate_random_value()
    decode = generate_random_value()
    scenario_context.set(UPLOADED_CODE, code)
    scenario_context.set(UPLOADED_DECODE, decode)
    function = UploadType.from_operation(operation)
    bulk_upload_page.upload_code_decode(scenario_context, file_name, code, decode, function)


@then(parsers.parse('the file name "{file_name}" should be shown'))
def file_name_shown(bulk_upload_page: BulkUploadPage, file_name: str):
    bulk_upload_page.verify_filename_label(file_name)


@then("the uploaded workbook should contain the generated code")
def workbook_contains_code(scenario_context: ScenarioContext):
    data = Path(scenario_context.require(UPLOADED_EXCEL_PATH)).read_bytes()
    sheet = decode_workbook(data)
    first = read_records(sheet, resolve_header(sheet.rows[0]))[0]
    assert first["CODE"] == scenario_context.require(UPLOADED_CODE)
    assert first["DECODE"] == scenario_context.require(UPLOADED_DECODE)
