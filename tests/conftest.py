# conftest.py

import os
import base64
import pytest
from base_actions import BaseActions
from browser import BrowserSession, new_session
from cart_actions import CartActions
from checkout_actions import CheckoutActions
from config import Config
from fakes import FakeDriver
from fixture_data import FixtureData
from home_actions import HomeActions
from login_actions import LoginActions
from product_actions import ProductActions
from product_cache import ProductCache
from utils import log_info, log_warning
from waits import WaitPolicies, WaitPolicy

# Shared across the whole run; a cold cache must never change an outcome
_product_cache = ProductCache()


def pytest_addoption(parser):
    parser.addoption("--e2e", action="store_true", default=False, help="run the browser scenarios against the live store")
    parser.addoption("--browser", default=None, help="chrome, firefox or edge; overrides the 'browser' property")
    parser.addoption("--headless", action="store_true", default=None, help="run the browser without a window")


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config):
    # Every run writes an HTML report unless --html was given
    if hasattr(config.option, "htmlpath") and not config.option.htmlpath:
        config.option.htmlpath = os.path.join(Config().reports_directory, "report.html")


def pytest_collection_modifyitems(config, items):
    if config.getoption("--e2e"):
        return
    skip_e2e = pytest.mark.skip(reason="browser scenario, pass --e2e to run")
    for item in items:
        if "e2e" in item.keywords:
            item.add_marker(skip_e2e)


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    pytest_html = item.config.pluginmanager.getplugin("html")
    outcome = yield
    report = outcome.get_result()
    setattr(item, "rep_" + report.when, report)

    if report.when != "call" or not report.failed:
        return
    session = item.funcargs.get("browser_session")
    if not isinstance(session, BrowserSession) or session.closed:
        return

    path = session.save_screenshot(item.name)
    if path and pytest_html is not None:
        with open(path, "rb") as f:
            encoded = base64.b64encode(f.read()).decode("ascii")
        extras = getattr(report, "extras", [])
        extras.append(pytest_html.extras.png(encoded, name=item.name))
        report.extras = extras


# Unit test fixtures

@pytest.fixture
def fast_policies():
    return WaitPolicies(
        ultra_short=WaitPolicy("ultra_short", 0.05, 0.01),
        short=WaitPolicy("short", 0.1, 0.01),
        default=WaitPolicy("default", 0.2, 0.01),
    )


@pytest.fixture
def driver():
    return FakeDriver()


@pytest.fixture
def fake_session(driver, tmp_path):
    session = BrowserSession(driver, "https://www.demoblaze.com/", str(tmp_path / "screenshots"))
    yield session
    session.quit()


@pytest.fixture
def actions(fake_session, fast_policies):
    return BaseActions(fake_session, fast_policies)


# Browser fixtures

@pytest.fixture(scope="session")
def config():
    cfg = Config()
    log_info(f"Running against {cfg.base_url} ({cfg.environment})")
    return cfg


@pytest.fixture(scope="session")
def policies(config):
    return WaitPolicies.from_config(config)


@pytest.fixture(scope="session")
def fixture_data(config):
    return FixtureData.load(config.test_data_file)


@pytest.fixture(scope="session")
def product_cache():
    return _product_cache


@pytest.fixture
def browser_session(request, config):
    session = new_session(config, request.config.getoption("--browser"), request.config.getoption("--headless"))
    try:
        session.open_base_url()
        yield session
    finally:
        session.quit()


@pytest.fixture
def login_actions(browser_session, policies):
    return LoginActions(browser_session, policies)


@pytest.fixture
def home_actions(browser_session, policies):
    return HomeActions(browser_session, policies)


@pytest.fixture
def product_actions(browser_session, policies):
    return ProductActions(browser_session, policies)


@pytest.fixture
def cart_actions(browser_session, policies):
    return CartActions(browser_session, policies)


@pytest.fixture
def checkout_actions(browser_session, policies):
    return CheckoutActions(browser_session, policies)


@pytest.fixture
def pick_product(home_actions, fixture_data, product_cache):
    """Name of a product shown in ``category``, reusing the last one seen there."""

    def _pick(category):
        def compute():
            titles = home_actions.filter_by_category(category)
            if titles:
                return titles[0]
            log_warning(f"No {category} titles on the grid, falling back to test data")
            return fixture_data.random_product(category)

        def validate(name):
            return home_actions.select_category(category) and home_actions.is_product_displayed(name)

        return product_cache.get_or_compute(category, compute, validate)

    return _pick
