from __future__ import annotations

from dataclasses import dataclass

from playwright.sync_api import expect

from .base import BasePage, parse_price

"""Products page object (listing, search, add to cart)."""

__all__ = [
    "Product",
    "ProductPage",
]


@dataclass(frozen=True)
class Product:
    id: int
    name: str
    price: float
    category: str = "default"


class ProductPage(BasePage):
    PATH = "/products"

    NAV_LINK = 'a[href="/products"]'
    SEARCH_INPUT = "#search_product"
    SEARCH_BUTTON = "#submit_search"
    TITLE = ".title.text-center"
    PRODUCT_CARD = ".features_items .product-image-wrapper"
    PRODUCT_NAME = ".features_items .productinfo p"
    PRODUCT_TITLE = ".product-title"
    PRODUCT_PRICE = ".product-price"
    ADD_TO_CART = "a.add-to-cart"
    CATEGORY_FILTER = ".category-filter"
    QUANTITY_INPUT = '[data-qa="quantity"]'
    CART_MODAL = "#cartModal .modal-content"

    def is_loaded(self) -> None:
        expect(self.page.locator(self.PRODUCT_CARD).first).to_be_visible()
        expect(self.page).to_have_url(self.path_pattern())

    def navigate(self) -> None:
        """Open the listing through the header link instead of a direct goto."""
        self.page.click(self.NAV_LINK)

    def search(self, product_name: str) -> None:
        self.page.fill(self.SEARCH_INPUT, product_name)
        self.page.click(self.SEARCH_BUTTON)

    def product_names(self) -> list[str]:
        return self.page.locator(self.PRODUCT_NAME).all_inner_texts()

    def product_count(self) -> int:
        return self.page.locator(self.PRODUCT_CARD).count()

    def select_product_by_name(self, product_name: str) -> None:
        self.page.locator(self.PRODUCT_CARD, has_text=product_name).first.click()

    def select_product_by_id(self, product_id: int | str) -> None:
        self.page.click(f'[data-product-id="{product_id}"]')

    def filter_by_category(self, category: str) -> None:
        self.page.select_option(self.CATEGORY_FILTER, label=category)

    def product_data(self, product_id: int) -> Product:
        card = self.page.locator(f'[data-product-id="{product_id}"]')
        name = card.locator(self.PRODUCT_TITLE).inner_text()
        price = card.locator(self.PRODUCT_PRICE).inner_text()
        return Product(id=product_id, name=name.strip(), price=parse_price(price))

    def add_product_to_cart(self, product_name: str) -> None:
        """Click "Add to cart" on the card whose name matches.

        Each card has two buttons (one in the hover overlay); the first one is
        the visible one.
        """
        card = self.page.locator(self.PRODUCT_CARD, has_text=product_name).first
        card.locator(self.ADD_TO_CART).first.click()

    def add_to_cart(self, quantity: int = 1, size: str | None = None) -> None:
        """Add the currently opened product (detail page) to the cart."""
        if quantity < 1:
            raise ValueError(f"quantity must be >= 1: {quantity}")
        if size:
            self.page.click(f'[data-size="{size}"]')
        if quantity > 1:
            self.page.fill(self.QUANTITY_INPUT, str(quantity))
        self.page.click('[data-qa="add-to-cart"]')

    def click_modal_link(self, link_text: str) -> None:
        modal = self.page.locator(self.CART_MODAL)
        expect(modal).to_be_visible()
        modal.locator("a", has_text=link_text).click()
