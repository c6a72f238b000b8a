# main.py

import sys
import argparse
from browser import new_session
from cart_actions import CartActions
from config import Config
from exceptions import AutomationError
from fixture_data import FixtureData, generate_unique_password, generate_unique_username
from home_actions import HomeActions
from login_actions import AuthState, LoginActions
from parsers import normalize_price, prices_match
from product_actions import ProductActions
from utils import log_error, log_info
from waits import WaitPolicies


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Smoke run against the storefront: register, log in, add and remove a product.")
    parser.add_argument("--browser", choices=("chrome", "firefox", "edge"), help="overrides the 'browser' property")
    parser.add_argument("--headless", action="store_true", default=None, help="run without a visible window")
    parser.add_argument("--config", help="path to the properties file")
    return parser.parse_args(argv)


def smoke(session, policies, data) -> None:
    login = LoginActions(session, policies)
    home = HomeActions(session, policies)
    product = ProductActions(session, policies)
    cart = CartActions(session, policies)

    username, password = generate_unique_username(), generate_unique_password()
    registered = login.register_user(username, password)
    if registered.state is not AuthState.REGISTERED:
        raise AssertionError(f"Registration failed: {registered.alert_text}")

    logged_in = login.login(username, password)
    if logged_in.state is not AuthState.LOGGED_IN or login.get_logged_in_username() != username:
        raise AssertionError(f"Login failed for {username}")
    log_info(f"Logged in as {username}")

    products = home.filter_by_category("phones") or data.products("phones")
    selected = products[0]
    displayed_price = normalize_price(home.get_product_price(selected))
    home.click_product(selected)
    product.add_to_cart()

    cart.open_cart()
    if cart.get_cart_item_count() != 1:
        raise AssertionError(f"Expected one item in cart, found {cart.get_cart_item_count()}")
    if not prices_match(cart.get_numeric_cart_total(), displayed_price):
        raise AssertionError(f"Cart total {cart.get_cart_total()} does not match {displayed_price}")

    cart.remove_item(selected)
    if not cart.is_cart_empty():
        raise AssertionError("Cart should be empty after removing the only item")
    log_info("Smoke run passed")


def main(argv=None) -> int:
    args = parse_args(argv)
    config = Config(args.config)
    policies = WaitPolicies.from_config(config)
    data = FixtureData.load(config.test_data_file)

    try:
        session = new_session(config, args.browser, args.headless)
    except AutomationError as e:
        log_error(f"Could not start browser: {e}")
        return 2

    with session:
        try:
            session.open_base_url()
            smoke(session, policies, data)
        except (AssertionError, AutomationError) as e:
            log_error(f"Smoke run failed: {e}")
            session.save_screenshot("smoke_failure")
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
