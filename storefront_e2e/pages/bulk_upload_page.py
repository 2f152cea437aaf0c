from __future__ import annotations

from pathlib import Path

from playwright.sync_api import Page, expect

from ..config.loader import SuiteConfig
from ..models.scenario_context import ScenarioContext
from ..models.upload_type import UploadType
from ..services import upload
from .base import BasePage

"""Bulk upload page object.

Thin wrapper that binds the upload services to a page and the suite settings.
"""

__all__ = [
    "BulkUploadPage",
]


class BulkUploadPage(BasePage):
    PATH = "/bulk-upload"

    def __init__(self, page: Page, settings: SuiteConfig) -> None:
        super().__init__(page, settings.base_url)
        self.settings = settings

    @property
    def file_input(self) -> str:
        return self.settings.upload.input_selector

    @property
    def filename_label(self) -> str:
        return self.settings.upload.filename_label

    def upload_code_decode(
        self, context: ScenarioContext, file_name: str, code: str, decode: str, function: UploadType
    ) -> Path:
        return upload.upload_code_decode_excel(
            self.page, context, self.settings, file_name, code, decode, function
        )

    def upload_file(self, file_name: str) -> None:
        upload.upload_file(self.page, self.settings, file_name)
        self.verify_filename_label(file_name)

    def upload_non_excel_file(self, file_name: str) -> None:
        upload.upload_non_excel_file(self.page, self.settings, file_name)
        self.verify_filename_label(file_name)

    def verify_filename_label(self, file_name: str) -> None:
        expect(self.page.locator(self.filename_label)).to_have_text(file_name)
