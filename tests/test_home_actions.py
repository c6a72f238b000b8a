import pytest
from fakes import FakeElement, xpath_of
from home_actions import HomeActions
from locators import BaseLocators, HomeLocators

CATALOG = {
    "all": [("Samsung galaxy s6", "$360"), ("Nexus 6", "$650"), ("Sony vaio i5", "$790")],
    "phones": [("Samsung galaxy s6", "$360"), ("Nexus 6", "$650")],
    "laptops": [("Sony vaio i5", "$790"), ("MacBook air", "$700")],
    "monitors": [("Apple monitor 24", "$400")],
}


class FakeGrid:
    """Product cards that get swapped out whenever a category is picked."""

    def __init__(self, driver):
        self.driver = driver
        self.cards = []
        self.rendered = []
        self.clicked = []
        for category, locator in HomeLocators.CATEGORIES.items():
            driver.add(xpath_of(locator), FakeElement(category.title(), on_click=lambda c=category: self.show(c)))
        driver.add(xpath_of(HomeLocators.PRODUCTS_CONTAINER), FakeElement())
        self.show("all")

    def show(self, category):
        for card in self.cards:
            card.stale = True
        for xpath in self.rendered:
            self.driver.remove(xpath)
        self.rendered = []

        products = CATALOG[category]
        self.cards = [FakeElement() for _ in products]
        self._add(xpath_of(HomeLocators.PRODUCT_CARDS), *self.cards)
        self._add(xpath_of(HomeLocators.PRODUCT_TITLES), *[FakeElement(title) for title, _ in products])
        self._add(xpath_of(HomeLocators.PRODUCT_PRICES), *[FakeElement(price) for _, price in products])
        for title, price in products:
            self._add(
                xpath_of(HomeLocators.PRODUCT_LINK_BY_NAME, name=title),
                FakeElement(title, on_click=lambda t=title: self.clicked.append(t)),
            )
            self._add(xpath_of(HomeLocators.PRODUCT_PRICE_BY_NAME, name=title), FakeElement(price))

    def _add(self, xpath, *elements):
        self.driver.add(xpath, *elements)
        self.rendered.append(xpath)


@pytest.fixture
def grid(driver):
    return FakeGrid(driver)


@pytest.fixture
def home(fake_session, fast_policies, grid):
    return HomeActions(fake_session, fast_policies)


def test_all_titles_and_prices(home):
    assert home.get_all_product_titles() == ["Samsung galaxy s6", "Nexus 6", "Sony vaio i5"]
    assert home.get_all_product_prices() == ["$360", "$650", "$790"]
    assert home.get_product_count() == 3


def test_filter_by_category_waits_for_new_grid(home, grid):
    first_card = grid.cards[0]

    assert home.filter_by_category("Laptops") == ["Sony vaio i5", "MacBook air"]
    assert first_card.stale


def test_unknown_category(home):
    assert home.select_category("tablets") is False
    assert home.filter_by_category("tablets") == []


def test_search_ignores_case(home):
    assert home.search("NEXUS") == ["Nexus 6"]
    assert home.search("s") == ["Samsung galaxy s6", "Nexus 6", "Sony vaio i5"]
    assert home.search("ipad") == []


def test_product_price_and_visibility(home):
    home.select_category("phones")

    assert home.get_product_price("Nexus 6") == "$650"
    assert home.is_product_displayed("Nexus 6")
    assert not home.is_product_displayed("MacBook air")


def test_click_product(home, grid, driver):
    home.click_product("Nexus 6")

    assert grid.clicked == ["Nexus 6"]
    assert any("scrollIntoView" in script for script in driver.scripts)


def test_paging_without_buttons(home):
    assert home.next_page() is False
    assert home.previous_page() is False


def test_next_page_swaps_grid(home, grid, driver):
    driver.add(xpath_of(HomeLocators.NEXT_BUTTON), FakeElement("Next", on_click=lambda: grid.show("monitors")))

    assert home.next_page() is True
    assert home.get_all_product_titles() == ["Apple monitor 24"]


def test_navigate_home_clicks_link(home, driver):
    link = driver.add(xpath_of(BaseLocators.HOME_LINK), FakeElement("Home"))

    home.navigate_home()

    assert link.clicks == 1
    assert driver.visited == []


def test_navigate_home_falls_back_to_base_url(home, driver):
    home.navigate_home()

    assert driver.visited == ["https://www.demoblaze.com"]
