# exceptions.py

from typing import Optional


class AutomationError(Exception):
    """Base class for every failure raised by the page action layer."""


class ElementNotReady(AutomationError):
    """A wait ran out of time before its condition held."""

    def __init__(self, locator: str, timeout: float, cause: Optional[BaseException] = None):
        self.locator = locator
        self.timeout = timeout
        self.cause = cause
        super().__init__(f"'{locator}' not ready after {timeout:g}s")


class InteractionFailed(AutomationError):
    """Every candidate locator of a command failed."""

    def __init__(self, locator: str, cause: Optional[BaseException] = None):
        self.locator = locator
        self.cause = cause
        message = f"Could not interact with '{locator}'"
        if cause is not None:
            message += f": {cause}"
        super().__init__(message)


class UnexpectedAlert(AutomationError):
    """A native dialog interrupted a command. It has been accepted already."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Unexpected alert: {text!r}")


class SessionClosed(AutomationError):
    def __init__(self):
        super().__init__("Browser session has already been quit")


class SessionStartFailed(AutomationError):
    def __init__(self, browser: str, cause: BaseException):
        self.browser = browser
        self.cause = cause
        super().__init__(f"Could not start {browser} session: {cause}")
