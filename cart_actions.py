# cart_actions.py

from dataclasses import dataclass
from typing import List
from selenium.common.exceptions import NoSuchElementException, StaleElementReferenceException
from selenium.webdriver.common.by import By
from base_actions import BaseActions, locator_name
from exceptions import ElementNotReady, InteractionFailed
from locators import BaseLocators, CartLocators
from parsers import normalize_price, prices_match
from utils import log_debug, log_info, log_warning


@dataclass(frozen=True)
class CartRow:
    title: str
    price: str

    @property
    def price_value(self) -> float:
        return normalize_price(self.price)


class CartActions(BaseActions):

    def open_cart(self) -> None:
        self.click(BaseLocators.CART_LINK)
        self.wait_for_page_ready(self.policies.default)
        self.is_visible(CartLocators.CART_TBODY, self.policies.short)
        # Rows arrive over AJAX after the table itself renders
        self.check_condition(lambda driver: self.find_all(CartLocators.CART_ROWS), self.policies.short, "cart rows")
        log_info("Cart page opened")

    def get_cart_rows(self) -> List[CartRow]:
        rows = []
        for row in self.find_all(CartLocators.CART_ROWS):
            try:
                title = row.find_element(By.XPATH, CartLocators.ROW_TITLE).text.strip()
                price = row.find_element(By.XPATH, CartLocators.ROW_PRICE).text.strip()
            except (NoSuchElementException, StaleElementReferenceException):
                continue
            if title:
                rows.append(CartRow(title, price))
        return rows

    def get_cart_items(self) -> List[str]:
        return [row.title for row in self.get_cart_rows()]

    def is_cart_empty(self) -> bool:
        return not self.get_cart_rows()

    def get_cart_item_count(self) -> int:
        return len(self.get_cart_rows())

    def is_item_in_cart(self, name: str) -> bool:
        """Case-insensitive substring match against every row title."""
        needle = name.lower()
        return any(needle in title.lower() for title in self.get_cart_items())

    def get_cart_total(self) -> str:
        return self.read_text(CartLocators.TOTAL_AMOUNT, self.policies.ultra_short, default="0") or "0"

    def get_numeric_cart_total(self) -> float:
        return normalize_price(self.get_cart_total())

    def get_item_price(self, name: str) -> str:
        needle = name.lower()
        for row in self.get_cart_rows():
            if needle in row.title.lower():
                return row.price
        return ""

    def items_total(self) -> float:
        return sum(row.price_value for row in self.get_cart_rows())

    def _row_title(self, name: str) -> str:
        """The row title ``name`` refers to, matched the way is_item_in_cart matches."""
        needle = name.lower()
        titles = self.get_cart_items()
        for title in titles:
            if title.lower() == needle:
                return title
        for title in titles:
            if needle in title.lower():
                return title
        return ""

    def _rows_named(self, name: str) -> int:
        return len(self.find_all(CartLocators.ITEM_ROW_BY_NAME, name=name))

    def remove_item(self, name: str) -> None:
        title = self._row_title(name)
        if not title:
            raise InteractionFailed(locator_name(CartLocators.ITEM_ROW_BY_NAME))
        before = self._rows_named(title)
        self.click(CartLocators.DELETE_ITEM_BY_NAME, self.policies.short, name=title)
        try:
            self.wait_for_condition(
                lambda driver: self._rows_named(title) < before,
                description=f"removal of {title}",
            )
        except ElementNotReady as e:
            raise InteractionFailed(locator_name(CartLocators.DELETE_ITEM_BY_NAME), e) from e
        log_info(f"Removed {title} from cart")

    def clear_cart(self) -> None:
        items = self.get_cart_items()
        if not items:
            log_debug("Cart already empty")
            return
        for item in items:
            self.remove_item(item)
        log_info(f"Cleared {len(items)} items from cart")

    def place_order(self) -> None:
        self.click(CartLocators.PLACE_ORDER_BUTTON)
        log_info("Place Order clicked")

    def verify_cart_total(self, expected: float) -> bool:
        actual = self.get_numeric_cart_total()
        if not prices_match(actual, expected):
            log_warning(f"Cart total {actual} does not match expected {expected}")
            return False
        return True
