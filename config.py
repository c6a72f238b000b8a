# config.py

import os
from typing import Dict, Optional
from dotenv import dotenv_values
from utils import log_info, log_warning

DEFAULTS = {
    "base.url": "https://www.demoblaze.com",
    "browser": "chrome",
    "implicit.wait": "0",
    "explicit.wait": "10",
    "page.load.timeout": "30",
    "headless.mode": "false",
    "environment": "prod",
    "test.data.file": "testdata.json",
    "reports.directory": "test-output/reports",
    "screenshots.directory": "test-output/screenshots",
    "window.size": "maximize",
    "wait.profile": "robust",
}


ENV_PREFIX = "STOREFRONT_"


def env_name(key: str) -> str:
    """'page.load.timeout' -> 'STOREFRONT_PAGE_LOAD_TIMEOUT'"""
    return ENV_PREFIX + key.replace(".", "_").upper()


class Config:
    """Properties-style configuration.

    Values come from the built-in defaults, then the properties file, then
    environment variables (``base.url`` is overridden by ``STOREFRONT_BASE_URL``).
    """

    def __init__(self, path: Optional[str] = None, overrides: Optional[Dict[str, str]] = None):
        self.path = path or os.getenv(ENV_PREFIX + "CONFIG_FILE", "config.properties")
        self._properties = dict(DEFAULTS)
        self._load_file()
        self._load_environment()
        if overrides:
            self._properties.update({k: str(v) for k, v in overrides.items() if v is not None})

    def _load_file(self) -> None:
        if not os.path.exists(self.path):
            log_warning(f"Configuration file '{self.path}' not found. Using default values.")
            return
        for key, value in dotenv_values(self.path).items():
            if value is not None:
                self._properties[key] = value.strip()
        log_info(f"Configuration properties loaded from {self.path}")

    def _load_environment(self) -> None:
        for key in list(self._properties):
            value = os.getenv(env_name(key))
            if value is not None:
                log_info(f"{key} overridden by environment variable {env_name(key)}")
                self._properties[key] = value

    def get(self, key: str, default: str = "") -> str:
        return self._properties.get(key, default)

    def _get_int(self, key: str) -> int:
        value = self.get(key, DEFAULTS[key])
        try:
            return int(value)
        except ValueError:
            log_warning(f"Invalid {key} value '{value}', using default: {DEFAULTS[key]}")
            return int(DEFAULTS[key])

    def _get_bool(self, key: str) -> bool:
        return self.get(key, DEFAULTS[key]).strip().lower() in ("true", "1", "yes", "on")

    @property
    def base_url(self) -> str:
        return self.get("base.url").rstrip("/")

    @property
    def browser(self) -> str:
        return self.get("browser").lower()

    @property
    def implicit_wait(self) -> int:
        return self._get_int("implicit.wait")

    @property
    def explicit_wait(self) -> int:
        return self._get_int("explicit.wait")

    @property
    def page_load_timeout(self) -> int:
        return self._get_int("page.load.timeout")

    @property
    def headless(self) -> bool:
        return self._get_bool("headless.mode")

    @property
    def environment(self) -> str:
        return self.get("environment")

    @property
    def test_data_file(self) -> str:
        return self.get("test.data.file")

    @property
    def reports_directory(self) -> str:
        return self.get("reports.directory")

    @property
    def screenshots_directory(self) -> str:
        return self.get("screenshots.directory")

    @property
    def window_size(self) -> str:
        return self.get("window.size").lower()

    @property
    def wait_profile(self) -> str:
        return self.get("wait.profile").lower()

    def describe(self) -> str:
        lines = ["Configuration Properties:"]
        lines.extend(f"{key} = {value}" for key, value in sorted(self._properties.items()))
        return "\n".join(lines)
