# checkout_actions.py

import enum
from dataclasses import dataclass, field
from selenium.common.exceptions import UnexpectedAlertPresentException
from base_actions import BaseActions
from exceptions import ElementNotReady
from locators import CheckoutLocators
from parsers import OrderConfirmation, parse_order_confirmation
from utils import log_debug, log_info, log_warning


class CheckoutState(enum.Enum):
    CART_VIEW = "cart_view"
    ORDER_MODAL_OPEN = "order_modal_open"
    FORM_FILLED = "form_filled"
    SUBMITTED = "submitted"
    CONFIRMED = "confirmed"
    VALIDATION_BLOCKED = "validation_blocked"


@dataclass(frozen=True)
class CheckoutResult:
    state: CheckoutState
    alert_text: str = ""
    confirmation: OrderConfirmation = field(default_factory=OrderConfirmation)

    @property
    def confirmed(self) -> bool:
        return self.state is CheckoutState.CONFIRMED


class CheckoutActions(BaseActions):
    """The 'Place order' modal and the purchase confirmation dialog."""

    def is_order_modal_displayed(self) -> bool:
        return self.any_visible([CheckoutLocators.ORDER_MODAL], self.policies.short)

    def wait_for_order_modal(self) -> None:
        self.wait_until_visible(CheckoutLocators.ORDER_MODAL)
        log_info("Place Order modal is now visible")

    def enter_customer_name(self, name: str) -> None:
        self.type_text(CheckoutLocators.CUSTOMER_NAME, name)
        log_debug(f"Customer name entered: {name}")

    def enter_country(self, country: str) -> None:
        self.type_text(CheckoutLocators.CUSTOMER_COUNTRY, country)

    def enter_city(self, city: str) -> None:
        self.type_text(CheckoutLocators.CUSTOMER_CITY, city)

    def enter_credit_card(self, card_number: str) -> None:
        self.type_text(CheckoutLocators.CREDIT_CARD, card_number)

    def enter_card_month(self, month: str) -> None:
        self.type_text(CheckoutLocators.CARD_MONTH, month)

    def enter_card_year(self, year: str) -> None:
        self.type_text(CheckoutLocators.CARD_YEAR, year)

    def fill_order_form(self, customer) -> None:
        log_info("Filling order form with customer details")
        self.wait_for_order_modal()
        self.enter_customer_name(customer.name)
        self.enter_country(customer.country)
        self.enter_city(customer.city)
        self.enter_credit_card(customer.credit_card)
        self.enter_card_month(customer.month)
        self.enter_card_year(customer.year)

    def get_order_total(self) -> str:
        total = self.read_text(CheckoutLocators.ORDER_TOTAL)
        log_info(f"Order total retrieved: {total}")
        return total

    def click_purchase(self) -> None:
        self.click(CheckoutLocators.PURCHASE_BUTTON)
        log_info("Purchase button clicked")

    def _purchase_outcome(self, driver):
        if self.alert_text_now() is not None:
            return CheckoutState.VALIDATION_BLOCKED
        try:
            if self.visible_now(CheckoutLocators.CONFIRMATION):
                return CheckoutState.CONFIRMED
        except UnexpectedAlertPresentException:
            return CheckoutState.VALIDATION_BLOCKED
        return False

    def submit_order(self) -> CheckoutResult:
        """Click Purchase and wait for either the confirmation or a validation alert."""
        self.click_purchase()
        try:
            state = self.wait_for_condition(self._purchase_outcome, description="purchase outcome")
        except ElementNotReady:
            log_warning("Purchase produced neither a confirmation nor a validation alert")
            return CheckoutResult(CheckoutState.SUBMITTED)

        if state is CheckoutState.VALIDATION_BLOCKED:
            alert_text = self.wait_for_alert_text()
            log_warning(f"Purchase blocked: {alert_text}")
            return CheckoutResult(state, alert_text)

        confirmation = self.get_order_confirmation()
        log_info(f"Order confirmed: id={confirmation.order_id} amount={confirmation.amount}")
        return CheckoutResult(state, confirmation=confirmation)

    def complete_purchase(self, customer) -> CheckoutResult:
        self.fill_order_form(customer)
        return self.submit_order()

    def is_order_confirmation_displayed(self) -> bool:
        return self.is_visible(CheckoutLocators.CONFIRMATION, self.policies.short)

    def get_confirmation_text(self) -> str:
        return self.read_text(CheckoutLocators.CONFIRMATION_MESSAGE)

    def get_order_confirmation(self) -> OrderConfirmation:
        return parse_order_confirmation(self.get_confirmation_text())

    def get_order_id(self) -> str:
        return self.get_order_confirmation().order_id

    def get_order_amount(self) -> str:
        return self.get_order_confirmation().amount

    def get_order_date(self) -> str:
        return self.get_order_confirmation().date

    def verify_order_completion(self) -> bool:
        confirmed = self.is_order_confirmation_displayed()
        confirmation = self.get_order_confirmation()
        log_info(
            f"Order completion: confirmation={confirmed}, id={confirmation.order_id or '-'}, "
            f"amount={confirmation.amount or '-'}"
        )
        return confirmed and bool(confirmation.order_id)

    def confirm_order(self) -> None:
        self.click(CheckoutLocators.OK_BUTTON, self.policies.short)
        self.is_gone(CheckoutLocators.CONFIRMATION)
        self.wait_for_page_ready()

    def close_order_modal(self) -> None:
        if not self.is_visible(CheckoutLocators.ORDER_MODAL):
            return
        self.click(CheckoutLocators.CLOSE_ORDER_MODAL, self.policies.short)
        self.wait_until_gone(CheckoutLocators.ORDER_MODAL, self.policies.short)
        log_info("Place order modal closed")
