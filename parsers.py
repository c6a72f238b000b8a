# parsers.py

"""Text scraped from the storefront, turned into values tests can compare."""

import re
from dataclasses import dataclass
from utils import log_warning

PRICE_TOLERANCE = 0.01

_NON_PRICE_CHARS = re.compile(r"[^0-9.]")
_NON_DIGITS = re.compile(r"[^0-9]")
_DIGIT_RUN = re.compile(r"\d+")


def normalize_price(text) -> float:
    """'$1,234.50' -> 1234.5; empty or unparsable text -> 0.0"""
    numeric = _NON_PRICE_CHARS.sub("", text or "")
    if not numeric:
        return 0.0
    try:
        return float(numeric)
    except ValueError:
        log_warning(f"Could not parse price from {text!r}")
        return 0.0


def prices_match(actual: float, expected: float, tolerance: float = PRICE_TOLERANCE) -> bool:
    return abs(actual - expected) <= tolerance


def label_value(text: str, label: str) -> str:
    """Return the rest of the line that follows ``label``, or '' if absent."""
    match = re.search(re.escape(label) + r"[ \t]*([^\r\n]*)", text or "")
    return match.group(1).strip() if match else ""


def extract_order_id(text: str) -> str:
    if not text:
        return ""
    if "Id:" in text:
        return _NON_DIGITS.sub("", label_value(text, "Id:"))
    match = _DIGIT_RUN.search(text)
    return match.group() if match else ""


def extract_order_amount(text: str) -> str:
    return label_value(text, "Amount:")


@dataclass(frozen=True)
class OrderConfirmation:
    order_id: str = ""
    amount: str = ""
    card_number: str = ""
    name: str = ""
    date: str = ""

    @property
    def amount_value(self) -> float:
        return normalize_price(self.amount)

    @property
    def is_empty(self) -> bool:
        return not (self.order_id or self.amount or self.date)


def parse_order_confirmation(text: str) -> OrderConfirmation:
    """Parse the multi-line 'Thank you for your purchase!' message.

    The message looks like::

        Id: 8472913
        Amount: 790 USD
        Card Number: 1234567890123456
        Name: John Doe
        Date: 19/9/2026
    """
    return OrderConfirmation(
        order_id=extract_order_id(text),
        amount=extract_order_amount(text),
        card_number=label_value(text, "Card Number:"),
        name=label_value(text, "Name:"),
        date=label_value(text, "Date:"),
    )
