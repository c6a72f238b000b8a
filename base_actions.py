# base_actions.py

from typing import Callable, Dict, List, Optional, Tuple
from selenium.common.exceptions import (
    NoAlertPresentException,
    StaleElementReferenceException,
    TimeoutException,
    UnexpectedAlertPresentException,
    WebDriverException,
)
from selenium.webdriver.support import expected_conditions as EC
from selenium.webdriver.support.ui import WebDriverWait
from exceptions import AutomationError, ElementNotReady, InteractionFailed, SessionClosed, UnexpectedAlert
from locators import BaseLocators
from utils import log_debug, log_error, log_info, log_warning
from waits import WaitPolicies, WaitPolicy

_CONDITIONS = {
    "present": EC.presence_of_element_located,
    "visible": EC.visibility_of_element_located,
    "clickable": EC.element_to_be_clickable,
}

_PAGE_READY_JS = "return document.readyState"
_AJAX_IDLE_JS = "return typeof jQuery === 'undefined' || jQuery.active === 0"


def xpath_literal(value: str) -> str:
    """Quote ``value`` for use inside an XPath expression."""
    if "'" not in value:
        return f"'{value}'"
    if '"' not in value:
        return f'"{value}"'
    parts = value.split("'")
    return "concat(" + ", \"'\", ".join(f"'{part}'" for part in parts) + ")"


def locator_name(locator: Dict) -> str:
    return locator.get("name") or locator["primary"]["value"]


def candidates(locator: Dict, **params) -> List[Tuple[str, str]]:
    """Primary then fallbacks, with ``{param}`` placeholders filled in."""
    result = []
    for entry in [locator["primary"]] + list(locator.get("fallbacks", [])):
        value = entry["value"]
        for key, param in params.items():
            value = value.replace("{" + key + "}", xpath_literal(str(param)))
        result.append((entry["type"], value))
    return result


class BaseActions:
    """Wait, check and command primitives shared by every page action set.

    Checks (``is_*``, ``wait_for_*`` returning bool, ``read_*``) never raise on
    a timeout. Commands (``click``, ``type_text``, ``get_text``...) walk the
    locator's fallback chain and raise ``InteractionFailed`` when every
    candidate fails.
    """

    def __init__(self, session, policies: Optional[WaitPolicies] = None):
        if session.closed:
            raise SessionClosed()
        self.session = session
        self.policies = policies or WaitPolicies.robust()

    @property
    def driver(self):
        return self.session.driver

    def _wait(self, policy: WaitPolicy) -> WebDriverWait:
        return WebDriverWait(
            self.driver,
            policy.timeout,
            poll_frequency=policy.poll_interval,
            ignored_exceptions=policy.ignored_exceptions,
        )

    # ------------------------------------------------------------------ waits

    def resolve(self, locator: Dict, condition: str = "visible", policy: Optional[WaitPolicy] = None,
                warn: bool = True, **params):
        """Return the element of the first candidate that satisfies ``condition``."""
        policy = policy or self.policies.default
        name = locator_name(locator)
        expected = _CONDITIONS[condition]
        last_error = None

        for index, candidate in enumerate(candidates(locator, **params)):
            try:
                return self._wait(policy).until(expected(candidate))
            except TimeoutException as e:
                last_error = e
                if warn:
                    label = "Primary" if index == 0 else "Fallback"
                    log_warning(f"{label} locator failed for {name}: {candidate[1]}")

        raise ElementNotReady(name, policy.timeout, last_error)

    def wait_until_visible(self, locator: Dict, policy: Optional[WaitPolicy] = None, **params):
        return self.resolve(locator, "visible", policy, **params)

    def wait_until_clickable(self, locator: Dict, policy: Optional[WaitPolicy] = None, **params):
        return self.resolve(locator, "clickable", policy, **params)

    def wait_until_gone(self, locator: Dict, policy: Optional[WaitPolicy] = None, **params) -> None:
        policy = policy or self.policies.default
        conditions = [EC.invisibility_of_element_located(c) for c in candidates(locator, **params)]
        try:
            self._wait(policy).until(lambda driver: all(condition(driver) for condition in conditions))
        except TimeoutException as e:
            raise ElementNotReady(locator_name(locator), policy.timeout, e) from e
        log_debug(f"Element disappeared: {locator_name(locator)}")

    def wait_for_condition(self, predicate: Callable, policy: Optional[WaitPolicy] = None,
                           description: str = "condition"):
        policy = policy or self.policies.default
        try:
            return self._wait(policy).until(predicate)
        except TimeoutException as e:
            raise ElementNotReady(description, policy.timeout, e) from e

    def wait_for_page_ready(self, policy: Optional[WaitPolicy] = None) -> bool:
        def _ready(driver):
            if driver.execute_script(_PAGE_READY_JS) != "complete":
                return False
            return bool(driver.execute_script(_AJAX_IDLE_JS))

        return self.check_condition(_ready, policy or self.policies.short, "page ready")

    # ----------------------------------------------------------------- checks

    def check_condition(self, predicate: Callable, policy: Optional[WaitPolicy] = None,
                        description: str = "condition") -> bool:
        try:
            return bool(self.wait_for_condition(predicate, policy or self.policies.short, description))
        except ElementNotReady:
            log_debug(f"Timed out waiting for {description}")
            return False
        except UnexpectedAlertPresentException:
            self.dismiss_unexpected_alert()
            return False
        except WebDriverException as e:
            log_debug(f"Check '{description}' failed: {e}")
            return False

    def is_visible(self, locator: Dict, policy: Optional[WaitPolicy] = None, **params) -> bool:
        try:
            self.resolve(locator, "visible", policy or self.policies.ultra_short, warn=False, **params)
            return True
        except ElementNotReady:
            return False
        except UnexpectedAlertPresentException:
            self.dismiss_unexpected_alert()
            return False
        except WebDriverException as e:
            log_debug(f"Visibility check for {locator_name(locator)} failed: {e}")
            return False

    def is_present(self, locator: Dict, **params) -> bool:
        return bool(self.find_all(locator, **params))

    def is_gone(self, locator: Dict, policy: Optional[WaitPolicy] = None, **params) -> bool:
        try:
            self.wait_until_gone(locator, policy or self.policies.short, **params)
            return True
        except ElementNotReady:
            return False
        except WebDriverException as e:
            log_debug(f"Disappearance check for {locator_name(locator)} failed: {e}")
            return False

    def visible_now(self, locator: Dict, **params) -> bool:
        """Single non-waiting look, for use inside polled predicates."""
        for by, value in candidates(locator, **params):
            try:
                if any(element.is_displayed() for element in self.driver.find_elements(by, value)):
                    return True
            except StaleElementReferenceException:
                continue
        return False

    def any_visible(self, locators: List[Dict], policy: Optional[WaitPolicy] = None) -> bool:
        names = ", ".join(locator_name(locator) for locator in locators)
        return self.check_condition(
            lambda driver: any(self.visible_now(locator) for locator in locators),
            policy or self.policies.short,
            f"any of [{names}] visible",
        )

    def wait_for_url_contains(self, fragment: str, policy: Optional[WaitPolicy] = None) -> bool:
        return self.check_condition(EC.url_contains(fragment), policy, f"URL containing '{fragment}'")

    def wait_for_title_contains(self, fragment: str, policy: Optional[WaitPolicy] = None) -> bool:
        return self.check_condition(EC.title_contains(fragment), policy, f"title containing '{fragment}'")

    def wait_for_text_in_element(self, locator: Dict, text: str, policy: Optional[WaitPolicy] = None,
                                 **params) -> bool:
        def _has_text(driver):
            return any(text in element.text for element in self.find_all(locator, **params))

        return self.check_condition(_has_text, policy, f"'{text}' in {locator_name(locator)}")

    def wait_for_element_count(self, locator: Dict, count: int, policy: Optional[WaitPolicy] = None,
                               **params) -> bool:
        return self.check_condition(
            lambda driver: len(self.find_all(locator, **params)) == count,
            policy,
            f"{count} x {locator_name(locator)}",
        )

    def wait_for_loading_to_complete(self, policy: Optional[WaitPolicy] = None) -> bool:
        return self.is_gone(BaseLocators.LOADING_SPINNER, policy or self.policies.short)

    def wait_until_stale(self, element, policy: Optional[WaitPolicy] = None) -> bool:
        return self.check_condition(EC.staleness_of(element), policy, "element refresh")

    # ----------------------------------------------------------------- alerts

    def alert_text_now(self) -> Optional[str]:
        try:
            return self.driver.switch_to.alert.text
        except NoAlertPresentException:
            return None

    def wait_for_alert_text(self, policy: Optional[WaitPolicy] = None) -> str:
        """Wait for a native alert, accept it and return its text ('' if none)."""
        policy = policy or self.policies.ultra_short
        try:
            alert = self._wait(policy).until(EC.alert_is_present())
        except TimeoutException:
            return ""
        text = alert.text
        alert.accept()
        log_info(f"Alert accepted: {text}")
        return text

    def dismiss_unexpected_alert(self) -> str:
        try:
            alert = self.driver.switch_to.alert
        except NoAlertPresentException:
            return ""
        text = alert.text
        alert.accept()
        log_warning(f"Drained unexpected alert: {text}")
        return text

    # --------------------------------------------------------------- commands

    def _command(self, locator: Dict, condition: str, action: Callable, policy: Optional[WaitPolicy] = None,
                 **params):
        policy = policy or self.policies.default
        name = locator_name(locator)
        last_error = None
        options = candidates(locator, **params)

        for index, candidate in enumerate(options):
            try:
                element = self._wait(policy).until(_CONDITIONS[condition](candidate))
                return action(element)
            except UnexpectedAlertPresentException as e:
                text = self.dismiss_unexpected_alert() or e.alert_text or ""
                raise UnexpectedAlert(text) from e
            except WebDriverException as e:
                last_error = e
                label = "Primary" if index == 0 else "Fallback"
                log_warning(f"{label} locator failed for {name}: {candidate[1]}")

        log_error(f"All {len(options)} locators failed for {name}")
        raise InteractionFailed(name, last_error)

    def click(self, locator: Dict, policy: Optional[WaitPolicy] = None, **params) -> None:
        self._command(locator, "clickable", lambda element: element.click(), policy, **params)
        log_debug(f"Clicked {locator_name(locator)}")

    def type_text(self, locator: Dict, text: str, policy: Optional[WaitPolicy] = None, **params) -> None:
        def _type(element):
            element.clear()
            element.send_keys(text)

        self._command(locator, "visible", _type, policy, **params)

    def get_text(self, locator: Dict, policy: Optional[WaitPolicy] = None, **params) -> str:
        return self._command(locator, "visible", lambda element: element.text, policy, **params)

    def get_attribute(self, locator: Dict, attribute: str, policy: Optional[WaitPolicy] = None,
                      **params) -> Optional[str]:
        return self._command(locator, "present", lambda element: element.get_attribute(attribute), policy, **params)

    def scroll_to(self, locator: Dict, policy: Optional[WaitPolicy] = None, **params) -> None:
        self._command(
            locator,
            "present",
            lambda element: self.driver.execute_script("arguments[0].scrollIntoView(true);", element),
            policy,
            **params,
        )

    # ------------------------------------------------------------------ reads

    def read_text(self, locator: Dict, policy: Optional[WaitPolicy] = None, default: str = "", **params) -> str:
        try:
            return self.resolve(locator, "visible", policy or self.policies.short, warn=False, **params).text
        except (AutomationError, WebDriverException) as e:
            log_debug(f"No text for {locator_name(locator)}: {e}")
            return default

    def find_all(self, locator: Dict, **params) -> list:
        """Elements of the first candidate that matches anything; no waiting."""
        for by, value in candidates(locator, **params):
            try:
                elements = self.driver.find_elements(by, value)
            except UnexpectedAlertPresentException:
                self.dismiss_unexpected_alert()
                return []
            if elements:
                return elements
        return []

    def read_texts(self, locator: Dict, **params) -> List[str]:
        texts = []
        for element in self.find_all(locator, **params):
            try:
                text = element.text.strip()
            except StaleElementReferenceException:
                continue
            if text:
                texts.append(text)
        return texts

    def screenshot(self) -> bytes:
        return self.session.screenshot()
