# product_actions.py

from typing import Dict
from base_actions import BaseActions, locator_name
from exceptions import InteractionFailed
from locators import ProductLocators
from parsers import normalize_price
from utils import log_debug, log_info


class ProductActions(BaseActions):
    """The product detail page reached from a grid card."""

    def get_product_name(self) -> str:
        name = self.read_text(ProductLocators.PRODUCT_NAME, self.policies.default)
        log_info(f"Product name: {name}")
        return name

    def get_product_price(self) -> str:
        price = self.read_text(ProductLocators.PRODUCT_PRICE, self.policies.default)
        log_info(f"Product price: {price}")
        return price

    def get_numeric_price(self) -> float:
        price = normalize_price(self.get_product_price())
        log_debug(f"Extracted numeric price: {price}")
        return price

    def get_product_description(self) -> str:
        return self.read_text(ProductLocators.PRODUCT_DESCRIPTION)

    def add_to_cart(self) -> str:
        """Click 'Add to cart' and accept the confirmation alert.

        Returns the alert text. Raises InteractionFailed when the site never
        confirms, since the cart would then be in an unknown state.
        """
        name = self.get_product_name()
        self.scroll_to(ProductLocators.ADD_TO_CART_BUTTON)
        self.click(ProductLocators.ADD_TO_CART_BUTTON)
        alert_text = self.wait_for_alert_text(self.policies.default)
        if not alert_text:
            raise InteractionFailed(locator_name(ProductLocators.ADD_TO_CART_BUTTON))
        log_info(f"Added {name} to cart: {alert_text}")
        return alert_text

    def is_add_to_cart_visible(self) -> bool:
        return self.is_visible(ProductLocators.ADD_TO_CART_BUTTON, self.policies.short)

    def is_product_image_displayed(self) -> bool:
        return self.is_visible(ProductLocators.PRODUCT_IMAGE, self.policies.short)

    def get_product_image_source(self) -> str:
        if not self.is_present(ProductLocators.PRODUCT_IMAGE):
            return ""
        return self.get_attribute(ProductLocators.PRODUCT_IMAGE, "src", self.policies.short) or ""

    def get_product_details(self) -> Dict[str, str]:
        details = {"name": self.get_product_name(), "price": self.get_product_price()}
        description = self.get_product_description()
        if description:
            details["description"] = description
        return details

    def navigate_back_home(self) -> None:
        log_info("Navigating back to home page")
        self.session.back()
        self.wait_for_page_ready()
