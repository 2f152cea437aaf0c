# Browser fixtures and shared steps for the Gherkin suite.
#   pip install -e .[e2e] && playwright install chromium
#   E2E_BASE_URL=https://automationexercise.com pytest e2e
from __future__ import annotations

import os
from dataclasses import replace
from pathlib import Path

import pandas as pd
import pytest
from dotenv import load_dotenv
from playwright.sync_api import sync_playwright
from pytest_bdd import given

from storefront_e2e.config.loader import SuiteConfig, load_config, resolve_credentials
from storefront_e2e.logging.init import setup_logging
from storefront_e2e.models.scenario_context import ScenarioContext
from storefront_e2e.pages import LoginPage, login

BASE_URL_ENV = "E2E_BASE_URL"
UPLOAD_TEMPLATE = "code_decode_template.xlsx"


def pytest_collection_modifyitems(config, items):
    if os.getenv(BASE_URL_ENV):
        return
    skip = pytest.mark.skip(reason=f"{BASE_URL_ENV} not set (live site required)")
    for item in items:
        item.add_marker(pytest.mark.e2e)
        item.add_marker(skip)


@pytest.fixture(scope="session")
def settings() -> SuiteConfig:
    load_dotenv(Path(".env"), override=True)
    setup_logging()
    cfg = load_config()
    # .env 読み込み後に認証情報を解決し直す
    cfg = replace(cfg, credentials=resolve_credentials({
        "email": cfg.credentials.email,
        "password": cfg.credentials.password,
    }))
    base_url = os.getenv(BASE_URL_ENV)
    if base_url:
        cfg = replace(cfg, base_url=base_url.rstrip("/"))
    return cfg


@pytest.fixture(scope="session", autouse=True)
def upload_template(settings: SuiteConfig) -> Path:
    """Write the Code/Decode upload template into fixtures_dir when it is missing."""
    path = settings.fixtures_dir / UPLOAD_TEMPLATE
    if not path.exists():
        path.parent.mkdir(parents=True, exist_ok=True)
        rows = [
            ["CODE", "DECODE", "FUNCTION", "CATEGORY"],
            ["TMPL1", "Template one", "Add", "General"],
            ["TMPL2", "Template two", "Add", "General"],
        ]
        with pd.ExcelWriter(path, engine="openpyxl") as writer:
            pd.DataFrame(rows).to_excel(writer, sheet_name="CodeDecode", header=False, index=False)
    return path


@pytest.fixture(scope="session")
def browser(settings: SuiteConfig):
    with sync_playwright() as p:
        browser = p.chromium.launch(headless=settings.browser.headless)
        yield browser
        browser.close()


@pytest.fixture()
def page(browser, settings: SuiteConfig):
    context = browser.new_context(base_url=settings.base_url)
    page = context.new_page()
    page.set_default_timeout(settings.browser.timeout_ms)
    yield page
    context.close()


@pytest.fixture()
def scenario_context(request) -> ScenarioContext:
    return ScenarioContext(request.node.name)


@pytest.fixture()
def login_page(page, settings: SuiteConfig) -> LoginPage:
    return LoginPage(page, settings.base_url)


@given("I am logged in")
def logged_in(login_page: LoginPage, settings: SuiteConfig):
    login_page.visit()
    login(login_page.page, settings.credentials.email, settings.credentials.password)
    login_page.verify_login_success()


@given("I am on the login page")
def on_login_page(login_page: LoginPage):
    login_page.visit()
