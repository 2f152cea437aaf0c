from __future__ import annotations

from playwright.sync_api import Page, expect

from ..config.loader import Credentials
from .base import BasePage

"""Login page object and the login command used by the step definitions."""

__all__ = [
    "LoginPage",
    "login",
]


class LoginPage(BasePage):
    PATH = "/login"

    EMAIL_INPUT = '[data-qa="login-email"]'
    PASSWORD_INPUT = '[data-qa="login-password"]'
    LOGIN_BUTTON = '[data-qa="login-button"]'
    SIGNUP_LINK = '[data-qa="signup-button"]'
    ERROR_MESSAGE = ".login-form p"
    FORM_HEADING = ".login-form h2"
    LOGGED_IN_AS = "li a"
    LOGOUT_LINK = 'a[href="/logout"]'

    def is_loaded(self) -> None:
        expect(self.page.locator(self.LOGIN_BUTTON)).to_be_visible()
        expect(self.page).to_have_url(self.path_pattern())

    def enter_credentials(self, credentials: Credentials) -> None:
        self.page.fill(self.EMAIL_INPUT, credentials.email or "")
        self.page.fill(self.PASSWORD_INPUT, credentials.password or "")

    def enter_email(self, email: str) -> None:
        # fill() は既存の値を置き換える
        self.page.fill(self.EMAIL_INPUT, email)

    def enter_password(self, password: str) -> None:
        self.page.fill(self.PASSWORD_INPUT, password)

    def click_login(self) -> None:
        self.page.click(self.LOGIN_BUTTON)

    def click_logout(self) -> None:
        self.page.click(self.LOGOUT_LINK)

    def login(self, credentials: Credentials) -> None:
        self.enter_credentials(credentials)
        self.click_login()

    def error_message(self) -> str:
        return self.page.locator(self.ERROR_MESSAGE).inner_text()

    def verify_login_success(self, should_succeed: bool = True) -> None:
        if should_succeed:
            expect(self.page).not_to_have_url(self.path_pattern())
            expect(self.page.locator(self.LOGGED_IN_AS, has_text="Logged in as")).to_be_visible()
        else:
            expect(self.page.locator(self.ERROR_MESSAGE)).to_be_visible()


def login(page: Page, email: str | None, password: str | None) -> None:
    """Type credentials into the login form and submit.

    Empty values are rejected up front; typing None into the form would fail
    later with a much less useful Playwright error.
    """
    if not isinstance(email, str) or not email:
        raise ValueError(
            "login() requires a non-empty email string. Check that SUITE_EMAIL is set "
            "(environment or .env) or that credentials.email is present in config/suite.yml."
        )
    if not isinstance(password, str) or not password:
        raise ValueError(
            "login() requires a non-empty password string. Check that SUITE_PASSWORD is set "
            "(environment or .env) or that credentials.password is present in config/suite.yml."
        )
    page.fill(LoginPage.EMAIL_INPUT, email)
    page.fill(LoginPage.PASSWORD_INPUT, password)
    page.click(LoginPage.LOGIN_BUTTON)
