# browser.py

import os
import re
import datetime
from typing import Optional
from selenium import webdriver
from selenium.common.exceptions import WebDriverException
from exceptions import SessionClosed, SessionStartFailed
from utils import log_info, log_warning, log_error, log_debug

SUPPORTED_BROWSERS = ("chrome", "firefox", "edge")

_WINDOW_SIZE = re.compile(r"^(\d+)x(\d+)$")


def _chrome_options(headless: bool):
    options = webdriver.ChromeOptions()
    for argument in (
        "--disable-blink-features=AutomationControlled",
        "--disable-extensions",
        "--no-sandbox",
        "--disable-dev-shm-usage",
        "--disable-gpu",
        "--remote-allow-origins=*",
    ):
        options.add_argument(argument)
    if headless:
        options.add_argument("--headless=new")
    return options


def _firefox_options(headless: bool):
    options = webdriver.FirefoxOptions()
    if headless:
        options.add_argument("-headless")
    return options


def _edge_options(headless: bool):
    options = webdriver.EdgeOptions()
    for argument in ("--disable-blink-features=AutomationControlled", "--disable-extensions", "--remote-allow-origins=*"):
        options.add_argument(argument)
    if headless:
        options.add_argument("--headless=new")
    return options


def _launch(browser: str, headless: bool):
    if browser == "firefox":
        return webdriver.Firefox(options=_firefox_options(headless))
    if browser == "edge":
        return webdriver.Edge(options=_edge_options(headless))
    return webdriver.Chrome(options=_chrome_options(headless))


class BrowserSession:
    """One browser process, owned by one test.

    Page action sets keep a reference to the session rather than to the raw
    driver so that any use after ``quit()`` fails loudly.
    """

    def __init__(self, driver, base_url: str = "", screenshots_dir: str = "test-output/screenshots"):
        self._driver = driver
        self.base_url = base_url.rstrip("/")
        self.screenshots_dir = screenshots_dir
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def driver(self):
        if self._closed:
            raise SessionClosed()
        return self._driver

    def navigate(self, url: str) -> None:
        self.driver.get(url)
        log_info(f"Navigated to URL: {url}")

    def open_base_url(self) -> None:
        self.navigate(self.base_url)

    @property
    def current_url(self) -> str:
        return self.driver.current_url

    @property
    def title(self) -> str:
        return self.driver.title

    def execute_script(self, script: str, *args):
        return self.driver.execute_script(script, *args)

    def refresh(self) -> None:
        self.driver.refresh()
        log_debug("Page refreshed")

    def back(self) -> None:
        self.driver.back()

    def screenshot(self) -> bytes:
        return self.driver.get_screenshot_as_png()

    def save_screenshot(self, name: str) -> Optional[str]:
        """Write a PNG into the screenshots directory and return its path."""
        try:
            os.makedirs(self.screenshots_dir, exist_ok=True)
            stamp = datetime.datetime.now().strftime("%Y%m%d_%H%M%S")
            safe_name = re.sub(r"[^A-Za-z0-9_.-]+", "_", name)
            path = os.path.join(self.screenshots_dir, f"{safe_name}_{stamp}.png")
            with open(path, "wb") as f:
                f.write(self.screenshot())
            log_info(f"Screenshot saved: {path}")
            return path
        except (OSError, WebDriverException) as e:
            log_error(f"Failed to take screenshot: {e}")
            return None

    def quit(self) -> None:
        if self._closed:
            return
        self._closed = True
        try:
            self._driver.quit()
            log_info("WebDriver quit successfully")
        except WebDriverException as e:
            log_error(f"Error while quitting WebDriver: {e}")

    def __enter__(self) -> "BrowserSession":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.quit()


def configure_driver(driver, config) -> None:
    window_size = config.window_size
    match = _WINDOW_SIZE.match(window_size)
    if match:
        driver.set_window_size(int(match.group(1)), int(match.group(2)))
    elif window_size == "maximize":
        driver.maximize_window()
    else:
        log_warning(f"Unrecognised window.size '{window_size}', keeping browser default")
    driver.implicitly_wait(config.implicit_wait)
    driver.set_page_load_timeout(config.page_load_timeout)
    driver.delete_all_cookies()
    log_debug("Driver configured with timeouts and window settings")


def new_session(config, browser: Optional[str] = None, headless: Optional[bool] = None) -> BrowserSession:
    browser = (browser or config.browser).lower()
    headless = config.headless if headless is None else headless
    if browser not in SUPPORTED_BROWSERS:
        log_warning(f"Browser '{browser}' not supported. Using chrome as default.")
        browser = "chrome"

    try:
        driver = _launch(browser, headless)
    except WebDriverException as e:
        log_error(f"Failed to initialize WebDriver for browser: {browser}")
        raise SessionStartFailed(browser, e) from e

    try:
        configure_driver(driver, config)
    except WebDriverException as e:
        driver.quit()
        raise SessionStartFailed(browser, e) from e

    log_info(f"WebDriver initialized successfully for browser: {browser} (headless={headless})")
    return BrowserSession(driver, config.base_url, config.screenshots_directory)
