# home_actions.py

from typing import List
from base_actions import BaseActions, locator_name
from exceptions import InteractionFailed
from locators import BaseLocators, HomeLocators
from utils import log_debug, log_info, log_warning


class HomeActions(BaseActions):
    """Category navigation and the product grid on the landing page."""

    def _wait_for_grid(self, previous_card=None) -> None:
        # Category and paging clicks replace the grid over AJAX
        if previous_card is not None:
            self.wait_until_stale(previous_card)
        self.wait_for_page_ready()
        self.wait_for_loading_to_complete()
        self.check_condition(
            lambda driver: len(self.find_all(HomeLocators.PRODUCT_TITLES)) > 0,
            self.policies.short,
            "product titles",
        )

    def _first_card(self):
        cards = self.find_all(HomeLocators.PRODUCT_CARDS)
        return cards[0] if cards else None

    def select_category(self, category: str) -> bool:
        locator = HomeLocators.CATEGORIES.get(category.strip().lower())
        if locator is None:
            log_warning(f"Unknown category: {category}")
            return False
        log_info(f"Clicking on {category} category")
        previous_card = self._first_card()
        self.click(locator)
        self._wait_for_grid(previous_card)
        log_info(f"{category} category selected")
        return True

    def filter_by_category(self, category: str) -> List[str]:
        if not self.select_category(category):
            return []
        products = self.get_all_product_titles()
        log_info(f"Category '{category}' filter returned {len(products)} products")
        return products

    def get_all_product_titles(self) -> List[str]:
        if not self.is_visible(HomeLocators.PRODUCTS_CONTAINER, self.policies.short):
            log_warning("Products container not visible")
        self._wait_for_grid()
        titles = self.read_texts(HomeLocators.PRODUCT_TITLES)
        if not titles:
            log_warning(
                f"No product titles found (cards: {len(self.find_all(HomeLocators.PRODUCT_CARDS))}, "
                f"url: {self.session.current_url})"
            )
        else:
            log_info(f"Retrieved {len(titles)} product titles")
        return titles

    def get_all_product_prices(self) -> List[str]:
        self._wait_for_grid()
        prices = self.read_texts(HomeLocators.PRODUCT_PRICES)
        log_info(f"Retrieved {len(prices)} product prices")
        return prices

    def click_product(self, name: str) -> None:
        log_info(f"Clicking on product: {name}")
        self.scroll_to(HomeLocators.PRODUCT_LINK_BY_NAME, name=name)
        self.click(HomeLocators.PRODUCT_LINK_BY_NAME, name=name)
        self.wait_for_page_ready(self.policies.default)

    def get_product_price(self, name: str) -> str:
        price = self.read_text(HomeLocators.PRODUCT_PRICE_BY_NAME, name=name)
        log_debug(f"Price for product {name}: {price}")
        return price

    def is_product_displayed(self, name: str) -> bool:
        return self.is_visible(HomeLocators.PRODUCT_LINK_BY_NAME, self.policies.short, name=name)

    def get_product_count(self) -> int:
        self._wait_for_grid()
        count = len(self.find_all(HomeLocators.PRODUCT_CARDS))
        log_info(f"Found {count} products on current page")
        return count

    def _page(self, locator) -> bool:
        if not self.is_visible(locator):
            log_warning(f"{locator_name(locator)} button not visible")
            return False
        previous_card = self._first_card()
        self.click(locator)
        self._wait_for_grid(previous_card)
        return True

    def next_page(self) -> bool:
        return self._page(HomeLocators.NEXT_BUTTON)

    def previous_page(self) -> bool:
        return self._page(HomeLocators.PREVIOUS_BUTTON)

    def search(self, text: str) -> List[str]:
        """Titles on the current grid containing ``text``, ignoring case."""
        needle = text.lower()
        matches = [title for title in self.get_all_product_titles() if needle in title.lower()]
        log_info(f"Found {len(matches)} products matching '{text}': {matches}")
        return matches

    def navigate_home(self) -> None:
        log_info("Navigating to home page")
        try:
            if not self.is_visible(BaseLocators.HOME_LINK, self.policies.short):
                raise InteractionFailed(locator_name(BaseLocators.HOME_LINK))
            self.click(BaseLocators.HOME_LINK, self.policies.short)
        except InteractionFailed:
            log_info(f"Home link not clickable, navigating to {self.session.base_url}")
            self.session.open_base_url()
        self._wait_for_grid()
