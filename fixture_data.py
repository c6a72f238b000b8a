# fixture_data.py

import os
import json
import copy
import time
import random
from dataclasses import dataclass
from typing import Any, Dict, List, Optional
from utils import log_info, log_warning, log_debug

DEFAULT_DATA = {
    "users": {
        "validUser": {"username": "testuser123", "password": "testpass123"},
        "invalidUser": {"username": "invaliduser", "password": "wrongpass"},
    },
    "products": {
        "phones": ["Samsung galaxy s6", "Nokia lumia 1520", "Nexus 6"],
        "laptops": ["Sony vaio i5", "Sony vaio i7", "MacBook air"],
        "monitors": ["Apple monitor 24", "ASUS Full HD"],
    },
    "checkout": {
        "customerInfo": {
            "name": "John Doe",
            "country": "United States",
            "city": "New York",
            "creditCard": "1234567890123456",
            "month": "12",
            "year": "2025",
        }
    },
    "categories": ["Phones", "Laptops", "Monitors"],
}

_random = random.Random()


@dataclass(frozen=True)
class Credentials:
    username: str
    password: str


@dataclass(frozen=True)
class CustomerInfo:
    name: str
    country: str
    city: str
    credit_card: str
    month: str
    year: str


def generate_unique_username() -> str:
    username = f"user_{int(time.time() * 1000)}_{_random.randint(0, 999)}"
    log_debug(f"Generated unique username: {username}")
    return username


def generate_unique_password() -> str:
    return f"pass_{int(time.time() * 1000)}"


class FixtureData:
    """Read-only view over the JSON test data document."""

    def __init__(self, data: Dict[str, Any], source: str = "<defaults>"):
        self._data = copy.deepcopy(data)
        self.source = source

    @classmethod
    def load(cls, path: Optional[str]) -> "FixtureData":
        if not path or not os.path.exists(path):
            log_warning(f"Test data file '{path}' not found. Using default test data.")
            return cls(DEFAULT_DATA)
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            log_warning(f"Error loading test data from {path}: {e}. Using default test data.")
            return cls(DEFAULT_DATA)
        log_info(f"Test data loaded successfully from: {path}")
        return cls(data, path)

    def _lookup(self, path: str) -> Any:
        current = self._data
        for part in path.split("."):
            if not isinstance(current, dict) or part not in current:
                return None
            current = current[part]
        return current

    def get(self, path: str, default: str = "") -> str:
        value = self._lookup(path)
        if value is None or isinstance(value, (dict, list)):
            log_warning(f"Test data path '{path}' not found")
            return default
        return str(value)

    def valid_user(self) -> Credentials:
        return Credentials(self.get("users.validUser.username"), self.get("users.validUser.password"))

    def invalid_user(self) -> Credentials:
        return Credentials(self.get("users.invalidUser.username"), self.get("users.invalidUser.password"))

    def products(self, category: str) -> List[str]:
        products = self._lookup(f"products.{category.lower()}")
        return [str(p) for p in products] if isinstance(products, list) else []

    def random_product(self, category: str) -> str:
        products = self.products(category)
        if not products:
            log_warning(f"No {category} products in test data")
            return ""
        product = _random.choice(products)
        log_debug(f"Selected random {category} product: {product}")
        return product

    def customer_info(self) -> CustomerInfo:
        prefix = "checkout.customerInfo"
        return CustomerInfo(
            name=self.get(f"{prefix}.name"),
            country=self.get(f"{prefix}.country"),
            city=self.get(f"{prefix}.city"),
            credit_card=self.get(f"{prefix}.creditCard"),
            month=self.get(f"{prefix}.month"),
            year=self.get(f"{prefix}.year"),
        )

    def categories(self) -> List[str]:
        categories = self._lookup("categories")
        return [str(c) for c in categories] if isinstance(categories, list) else []

    def random_category(self) -> str:
        categories = self.categories()
        return _random.choice(categories) if categories else ""
