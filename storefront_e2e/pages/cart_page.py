from __future__ import annotations

from playwright.sync_api import expect

from .base import BasePage, parse_price

"""Shopping cart page object."""

__all__ = [
    "ShoppingCartPage",
]


class ShoppingCartPage(BasePage):
    PATH = "/view_cart"

    CART_ITEM = ".cart-item"
    ITEM_NAME = "td.cart_description a"
    QUANTITY_INPUT = '[data-qa="quantity-input"]'
    TOTAL_PRICE = ".total-price"
    CHECKOUT_BUTTON = '[data-qa="checkout"]'

    def is_loaded(self) -> None:
        expect(self.page).to_have_url(self.path_pattern())

    def item_names(self) -> list[str]:
        return [n.strip() for n in self.page.locator(self.ITEM_NAME).all_inner_texts()]

    def cart_summary(self) -> tuple[int, float]:
        """Return (number of items, total price)."""
        count = self.page.locator(self.CART_ITEM).count()
        total = parse_price(self.page.locator(self.TOTAL_PRICE).inner_text())
        return count, total

    def update_quantities(self, updates: dict[str, int]) -> None:
        """Set the quantity input of each product id in ``updates``."""
        for product_id, quantity in updates.items():
            self.page.fill(f'[data-product-id="{product_id}"] {self.QUANTITY_INPUT}', str(quantity))

    def checkout(self) -> None:
        self.page.click(self.CHECKOUT_BUTTON)
