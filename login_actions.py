# login_actions.py

import enum
from dataclasses import dataclass
from selenium.common.exceptions import UnexpectedAlertPresentException
from base_actions import BaseActions
from exceptions import ElementNotReady
from locators import BaseLocators, LoginLocators
from utils import log_debug, log_info, log_warning


class AuthState(enum.Enum):
    ANONYMOUS = "anonymous"
    MODAL_OPEN = "modal_open"
    SUBMITTED = "submitted"
    LOGGED_IN = "logged_in"
    REGISTERED = "registered"
    ALERT_SHOWN = "alert_shown"


@dataclass(frozen=True)
class AuthResult:
    state: AuthState
    alert_text: str = ""

    @property
    def succeeded(self) -> bool:
        return self.state in (AuthState.LOGGED_IN, AuthState.REGISTERED)


class LoginActions(BaseActions):

    # Sign up

    def open_signup_modal(self) -> None:
        self.click(BaseLocators.SIGN_UP_LINK)
        self.wait_until_visible(LoginLocators.SIGNUP_MODAL)
        log_info("Sign up modal opened")

    def enter_signup_username(self, username: str) -> None:
        self.type_text(LoginLocators.SIGNUP_USERNAME, username)
        log_debug(f"Entered sign up username: {username}")

    def enter_signup_password(self, password: str) -> None:
        self.type_text(LoginLocators.SIGNUP_PASSWORD, password)

    def submit_signup(self) -> None:
        self.click(LoginLocators.SIGNUP_BUTTON)
        log_info("Sign up button clicked")

    def register_user(self, username: str, password: str) -> AuthResult:
        """Fill and submit the sign up form.

        The site answers with a native alert either way ("Sign up successful."
        or "This user already exist."). On success the modal closes itself; on
        failure it stays open and the result is ALERT_SHOWN.
        """
        log_info(f"Starting user registration for username: {username}")
        self.open_signup_modal()
        self.enter_signup_username(username)
        self.enter_signup_password(password)
        self.submit_signup()

        alert_text = self.wait_for_alert_text(self.policies.default)
        if not alert_text:
            log_warning(f"No registration response for {username}")
            return AuthResult(AuthState.MODAL_OPEN)

        if "success" not in alert_text.lower():
            log_warning(f"Registration rejected for {username}: {alert_text}")
            return AuthResult(AuthState.ALERT_SHOWN, alert_text)

        if not self.is_gone(LoginLocators.SIGNUP_MODAL):
            self.close_signup_modal()
        log_info(f"User registration completed for: {username}")
        return AuthResult(AuthState.REGISTERED, alert_text)

    def close_signup_modal(self) -> None:
        if self.is_visible(LoginLocators.SIGNUP_MODAL):
            self.click(LoginLocators.SIGNUP_MODAL_CLOSE, self.policies.short)
            self.wait_until_gone(LoginLocators.SIGNUP_MODAL, self.policies.short)
            log_info("Sign up modal closed")

    # Log in

    def open_login_modal(self) -> None:
        self.click(BaseLocators.LOGIN_LINK)
        self.wait_until_visible(LoginLocators.LOGIN_MODAL)
        log_info("Login modal opened")

    def enter_login_username(self, username: str) -> None:
        self.type_text(LoginLocators.LOGIN_USERNAME, username)
        log_debug(f"Entered login username: {username}")

    def enter_login_password(self, password: str) -> None:
        self.type_text(LoginLocators.LOGIN_PASSWORD, password)

    def submit_login(self) -> None:
        self.click(LoginLocators.LOGIN_BUTTON)
        log_info("Login button clicked")

    def _login_outcome(self, driver):
        if self.alert_text_now() is not None:
            return AuthState.ALERT_SHOWN
        try:
            if self.visible_now(BaseLocators.LOGGED_USER) and not self.visible_now(LoginLocators.LOGIN_MODAL):
                return AuthState.LOGGED_IN
        except UnexpectedAlertPresentException:
            # The alert opened between the two looks
            return AuthState.ALERT_SHOWN
        return False

    def login(self, username: str, password: str) -> AuthResult:
        log_info(f"Starting user login for username: {username}")
        self.open_login_modal()
        self.enter_login_username(username)
        self.enter_login_password(password)
        self.submit_login()

        # Success closes the modal and shows "Welcome <user>"; failure raises an alert
        try:
            state = self.wait_for_condition(self._login_outcome, description="login outcome")
        except ElementNotReady:
            log_warning(f"User login for {username} neither succeeded nor failed in time")
            return AuthResult(AuthState.MODAL_OPEN)

        if state is AuthState.ALERT_SHOWN:
            alert_text = self.wait_for_alert_text()
            log_warning(f"User login failed for {username}: {alert_text}")
            return AuthResult(AuthState.ALERT_SHOWN, alert_text)

        log_info(f"User logged in successfully: {username}")
        return AuthResult(AuthState.LOGGED_IN)

    def close_login_modal(self) -> None:
        if self.is_visible(LoginLocators.LOGIN_MODAL):
            self.click(LoginLocators.LOGIN_MODAL_CLOSE, self.policies.short)
            self.wait_until_gone(LoginLocators.LOGIN_MODAL, self.policies.short)
            log_info("Login modal closed")

    def is_user_logged_in(self) -> bool:
        logged_in = self.is_visible(BaseLocators.LOGGED_USER)
        log_debug(f"User logged in status: {logged_in}")
        return logged_in

    def get_logged_in_username(self) -> str:
        if not self.is_user_logged_in():
            return ""
        welcome = self.read_text(BaseLocators.LOGGED_USER)
        return welcome.replace("Welcome ", "", 1).strip()

    def logout(self) -> None:
        if not self.is_user_logged_in():
            log_warning("No user to logout")
            return
        username = self.get_logged_in_username()
        self.click(BaseLocators.LOGOUT_LINK)
        self.wait_until_gone(BaseLocators.LOGGED_USER)
        log_info(f"User logged out successfully: {username}")

    def is_signup_modal_displayed(self) -> bool:
        return self.is_visible(LoginLocators.SIGNUP_MODAL)

    def is_login_modal_displayed(self) -> bool:
        return self.is_visible(LoginLocators.LOGIN_MODAL)
