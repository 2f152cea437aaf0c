"""Playwright page objects for the storefront under test."""

from .base import BasePage, parse_price
from .bulk_upload_page import BulkUploadPage
from .cart_page import ShoppingCartPage
from .helpers import PageHelpers
from .login_page import LoginPage, login
from .product_page import Product, ProductPage

__all__ = [
    "BasePage",
    "BulkUploadPage",
    "LoginPage",
    "PageHelpers",
    "Product",
    "ProductPage",
    "ShoppingCartPage",
    "login",
    "parse_price",
]
