import pytest
from cart_actions import CartActions, CartRow
from exceptions import InteractionFailed
from fakes import FakeElement, xpath_of
from locators import BaseLocators, CartLocators


class FakeCartPage:
    """The cart table, re-rendered after every delete like the store's AJAX refresh."""

    def __init__(self, driver, items, delete_works=True):
        self.driver = driver
        self.items = list(items)
        self.delete_works = delete_works
        self.rendered = []
        driver.add(xpath_of(BaseLocators.CART_LINK), FakeElement("Cart"))
        driver.add(xpath_of(CartLocators.CART_TBODY), FakeElement())
        driver.add(xpath_of(CartLocators.PLACE_ORDER_BUTTON), FakeElement("Place Order"))
        self.render()

    def render(self):
        for xpath in self.rendered:
            self.driver.remove(xpath)
        self.rendered = []

        rows = [
            FakeElement(children={
                CartLocators.ROW_TITLE: FakeElement(title),
                CartLocators.ROW_PRICE: FakeElement(price),
            })
            for title, price in self.items
        ]
        self._add(xpath_of(CartLocators.CART_ROWS), *rows)
        for title in {title for title, _ in self.items}:
            matching = [row for row, (name, _) in zip(rows, self.items) if name == title]
            self._add(xpath_of(CartLocators.ITEM_ROW_BY_NAME, name=title), *matching)
            self._add(
                xpath_of(CartLocators.DELETE_ITEM_BY_NAME, name=title),
                FakeElement("Delete", on_click=lambda title=title: self.delete(title)),
            )
        total = sum(int(price) for _, price in self.items)
        self._add(xpath_of(CartLocators.TOTAL_AMOUNT), FakeElement(str(total) if self.items else ""))

    def _add(self, xpath, *elements):
        self.driver.add(xpath, *elements)
        self.rendered.append(xpath)

    def delete(self, title):
        if not self.delete_works:
            return
        for index, (name, _) in enumerate(self.items):
            if name == title:
                del self.items[index]
                break
        self.render()


@pytest.fixture
def cart(fake_session, fast_policies):
    return CartActions(fake_session, fast_policies)


def test_cart_row_price_value():
    assert CartRow("Nexus 6", "650").price_value == 650.0


def test_open_cart_and_read_rows(driver, cart):
    FakeCartPage(driver, [("Samsung galaxy s6", "360"), ("Nexus 6", "650")])

    cart.open_cart()

    assert cart.get_cart_rows() == [CartRow("Samsung galaxy s6", "360"), CartRow("Nexus 6", "650")]
    assert cart.get_cart_items() == ["Samsung galaxy s6", "Nexus 6"]
    assert cart.get_cart_item_count() == 2
    assert not cart.is_cart_empty()


def test_item_lookup_ignores_case(driver, cart):
    FakeCartPage(driver, [("Samsung galaxy s6", "360")])

    assert cart.is_item_in_cart("samsung GALAXY")
    assert not cart.is_item_in_cart("Nexus")
    assert cart.get_item_price("SAMSUNG galaxy s6") == "360"
    assert cart.get_item_price("Nexus 6") == ""


def test_item_lookup_is_substring_not_exact(driver, cart):
    # Name lookups match substrings, so a shorter name also hits longer variants
    FakeCartPage(driver, [("Sony vaio i7", "790")])

    assert cart.is_item_in_cart("Sony vaio i")
    assert cart.get_item_price("sony VAIO") == "790"


def test_total_matches_sum_of_rows(driver, cart):
    FakeCartPage(driver, [("Samsung galaxy s6", "360"), ("Nexus 6", "650"), ("MacBook air", "700")])

    assert cart.get_cart_total() == "1710"
    assert cart.get_numeric_cart_total() == cart.items_total() == 1710.0
    assert cart.verify_cart_total(1710)
    assert not cart.verify_cart_total(1709)


def test_empty_cart_total_is_zero(driver, cart):
    FakeCartPage(driver, [])

    assert cart.is_cart_empty()
    assert cart.get_cart_total() == "0"
    assert cart.get_numeric_cart_total() == 0.0


def test_remove_item(driver, cart):
    page = FakeCartPage(driver, [("Samsung galaxy s6", "360"), ("Nexus 6", "650")])

    cart.remove_item("Nexus 6")

    assert page.items == [("Samsung galaxy s6", "360")]
    assert cart.get_cart_items() == ["Samsung galaxy s6"]
    assert cart.get_numeric_cart_total() == 360.0


def test_remove_item_ignores_case(driver, cart):
    page = FakeCartPage(driver, [("Samsung galaxy s6", "360"), ("Nexus 6", "650")])
    assert cart.is_item_in_cart("nexus 6")

    cart.remove_item("nexus 6")

    assert page.items == [("Samsung galaxy s6", "360")]
    assert not cart.is_item_in_cart("nexus 6")


def test_remove_item_prefers_exact_title(driver, cart):
    page = FakeCartPage(driver, [("Sony vaio i7", "790"), ("Sony vaio i5", "790")])

    cart.remove_item("SONY VAIO I5")

    assert page.items == [("Sony vaio i7", "790")]


def test_blocking_alert_is_drained_by_row_lookup(driver, cart):
    FakeCartPage(driver, [("Nexus 6", "650")])
    alert = driver.show_alert("Product added.", blocking=True)

    assert cart.is_present(CartLocators.CART_ROWS) is False
    assert alert.accepted
    assert cart.is_item_in_cart("Nexus 6")


def test_remove_one_of_duplicates(driver, cart):
    FakeCartPage(driver, [("Nexus 6", "650"), ("Nexus 6", "650")])

    cart.remove_item("Nexus 6")

    assert cart.get_cart_item_count() == 1


def test_remove_missing_item(driver, cart):
    FakeCartPage(driver, [("Nexus 6", "650")])

    with pytest.raises(InteractionFailed):
        cart.remove_item("Sony vaio i5")


def test_remove_that_never_lands(driver, cart):
    FakeCartPage(driver, [("Nexus 6", "650")], delete_works=False)

    with pytest.raises(InteractionFailed):
        cart.remove_item("Nexus 6")


def test_clear_cart_is_idempotent(driver, cart):
    page = FakeCartPage(driver, [("Samsung galaxy s6", "360"), ("Nexus 6", "650"), ("Nexus 6", "650")])

    cart.clear_cart()
    assert cart.is_cart_empty()
    assert page.items == []

    cart.clear_cart()
    assert cart.is_cart_empty()


def test_place_order(driver, cart):
    FakeCartPage(driver, [("Nexus 6", "650")])
    button = driver.elements[xpath_of(CartLocators.PLACE_ORDER_BUTTON)][0]

    cart.place_order()

    assert button.clicks == 1
