# waits.py

from dataclasses import dataclass
from typing import Tuple, Type
from selenium.common.exceptions import NoSuchElementException, StaleElementReferenceException

TRANSIENT_ERRORS = (NoSuchElementException, StaleElementReferenceException)


@dataclass(frozen=True)
class WaitPolicy:
    """How long and how often a condition is polled before giving up."""
    name: str
    timeout: float
    poll_interval: float = 0.25
    ignored_exceptions: Tuple[Type[Exception], ...] = TRANSIENT_ERRORS


@dataclass(frozen=True)
class WaitPolicies:
    """The three timeout tiers a call site picks from.

    ``ultra_short`` is for cosmetic presence checks, ``short`` for checks that
    wait on an animation or a quick AJAX refresh, and ``default`` for commands
    and page transitions whose failure should fail the test.
    """
    ultra_short: WaitPolicy
    short: WaitPolicy
    default: WaitPolicy

    @classmethod
    def robust(cls, explicit_wait: float = 10) -> "WaitPolicies":
        return cls(
            ultra_short=WaitPolicy("ultra_short", 1, 0.1),
            short=WaitPolicy("short", 3, 0.25),
            default=WaitPolicy("default", explicit_wait, 0.25),
        )

    @classmethod
    def fast(cls, explicit_wait: float = 10) -> "WaitPolicies":
        return cls(
            ultra_short=WaitPolicy("ultra_short", 1, 0.1),
            short=WaitPolicy("short", 2, 0.1),
            default=WaitPolicy("default", min(explicit_wait, 5), 0.2),
        )

    @classmethod
    def for_profile(cls, profile: str, explicit_wait: float = 10) -> "WaitPolicies":
        if profile == "fast":
            return cls.fast(explicit_wait)
        if profile != "robust":
            raise ValueError(f"Unknown wait profile: {profile}")
        return cls.robust(explicit_wait)

    @classmethod
    def from_config(cls, config) -> "WaitPolicies":
        return cls.for_profile(config.wait_profile, config.explicit_wait)
