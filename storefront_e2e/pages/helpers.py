from __future__ import annotations

from playwright.sync_api import Locator, Page, expect

"""Small helpers shared by step definitions."""

__all__ = [
    "PageHelpers",
]


class PageHelpers:
    def __init__(self, page: Page) -> None:
        self.page = page

    def wait_for_element(self, selector: str, timeout: int = 5000) -> Locator:
        locator = self.page.locator(selector)
        locator.first.wait_for(state="visible", timeout=timeout)
        return locator

    def verify_texts(self, *expected_texts: str) -> None:
        for text in expected_texts:
            expect(self.page.get_by_text(text).first).to_be_visible()

    def element_text(self, selector: str) -> str:
        return self.page.locator(selector).first.inner_text()

    def element_texts(self, selector: str) -> list[str]:
        return self.page.locator(selector).all_inner_texts()
