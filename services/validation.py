"""Field validators and the per-screen gates built from them.

Everything here is pure: the same credentials always give the same answer,
and invalid input is reported as False, never raised.
"""
from __future__ import annotations

import logging
import re
from typing import Callable, Optional

from domain.models import Credentials, ValidationResult
from domain.settings import DEFAULT_SETTINGS, Settings

logger = logging.getLogger(__name__)

# ASCII digits only; `\d` would also accept other scripts' digits
DATE_OF_BIRTH_RE = re.compile(r"[0-9]{2}/[0-9]{2}/[0-9]{4}")

# Same shape as android.util.Patterns.EMAIL_ADDRESS
EMAIL_RE = re.compile(
    r"[a-zA-Z0-9+._%\-]{1,256}"
    r"@"
    r"[a-zA-Z0-9][a-zA-Z0-9\-]{0,64}"
    r"(?:\.[a-zA-Z0-9][a-zA-Z0-9\-]{0,25})+"
)

EmailMatcher = Callable[[str], bool]


def is_name_valid(value: str,
                  min_length: int = DEFAULT_SETTINGS.name_min_length,
                  max_length: int = DEFAULT_SETTINGS.name_max_length) -> bool:
    """Length check shared by usernames, passwords and personal names (inclusive bounds)."""
    if not isinstance(value, str):
        return False
    return min_length <= len(value) <= max_length


def is_valid_date_of_birth(value: str) -> bool:
    # Shape only: 99/99/9999 passes.
    if not isinstance(value, str):
        return False
    return DATE_OF_BIRTH_RE.fullmatch(value) is not None


def _default_email_matcher(value: str) -> bool:
    return EMAIL_RE.fullmatch(value) is not None


def is_valid_email(value: str, matcher: Optional[EmailMatcher] = None) -> bool:
    """Return True if the whole of `value` looks like an email address.

    `matcher` lets callers plug in another heuristic. Any failure inside it
    counts as "not valid" rather than propagating.
    """
    if not isinstance(value, str):
        return False
    match = matcher or _default_email_matcher
    try:
        return bool(match(value))
    except Exception:
        logger.warning("Email matcher failed; treating value as invalid", exc_info=True)
        return False


def _name_ok(value: str, settings: Settings) -> bool:
    return is_name_valid(value, settings.name_min_length, settings.name_max_length)


def validate_login(credentials: Credentials,
                   settings: Settings = DEFAULT_SETTINGS) -> ValidationResult:
    return ValidationResult(fields={
        "username": _name_ok(credentials.username, settings),
        "password": _name_ok(credentials.password, settings),
    })


def validate_registration(credentials: Credentials,
                          settings: Settings = DEFAULT_SETTINGS,
                          email_matcher: Optional[EmailMatcher] = None) -> ValidationResult:
    # Every check runs so the per-field flags are complete.
    return ValidationResult(fields={
        "first_name": _name_ok(credentials.first_name, settings),
        "last_name": _name_ok(credentials.last_name, settings),
        "date_of_birth": is_valid_date_of_birth(credentials.date_of_birth),
        "email": is_valid_email(credentials.email, email_matcher),
        "password": _name_ok(credentials.password, settings),
    })


def login_gate(credentials: Credentials, settings: Settings = DEFAULT_SETTINGS) -> bool:
    return validate_login(credentials, settings).form_valid


def registration_gate(credentials: Credentials,
                      settings: Settings = DEFAULT_SETTINGS,
                      email_matcher: Optional[EmailMatcher] = None) -> bool:
    return validate_registration(credentials, settings, email_matcher).form_valid
