from __future__ import annotations

import re

from playwright.sync_api import Page

"""Shared page-object plumbing."""

__all__ = [
    "BasePage",
    "parse_price",
]

_PRICE_RE = re.compile(r"(\d[\d,]*(?:\.\d+)?)")


def parse_price(text: str) -> float:
    """Extract the amount from a price label ("$12.50", "Rs. 1,500")."""
    m = _PRICE_RE.search(text)
    if m is None:
        raise ValueError(f"no price in text: {text!r}")
    return float(m.group(1).replace(",", ""))


class BasePage:
    """Page object bound to one Playwright page and the site base URL."""

    PATH = "/"

    def __init__(self, page: Page, base_url: str = "") -> None:
        self.page = page
        self.base_url = base_url.rstrip("/")

    @property
    def url(self) -> str:
        return f"{self.base_url}{self.PATH}"

    def visit(self) -> None:
        self.page.goto(self.url)

    def path_pattern(self) -> re.Pattern[str]:
        return re.compile(re.escape(self.PATH))
