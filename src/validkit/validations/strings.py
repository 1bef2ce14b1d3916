"""String presence and e-mail predicates."""

from __future__ import annotations

import re

# HTML5 "valid e-mail address" production.
_EMAIL = re.compile(
    r"^[a-zA-Z0-9.!#$%&'*+/=?^_{|}~-]+@[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*$"
)


def is_present(value: str) -> bool:
    return value != ""


def is_blank(value: str) -> bool:
    return value == ""


def is_valid_email(value: str) -> bool:
    return _EMAIL.fullmatch(value) is not None
