"""
Format validators: encodings, financial identifiers, schedules and contact strings.

Every function here takes a single string and returns `None` when the value is
acceptable or a `ValidationError` instance describing the failed rule. Nothing
is raised for bad input.

The two checksum validators are the only ones that do real arithmetic:

- **Credit cards**: digits are extracted, the length is bounded, then the
  Luhn ("mod 10") checksum is applied.
- **Bitcoin addresses**: Base58Check. The string is decoded to a 25-byte
  payload whose last four bytes must equal the first four bytes of the double
  SHA-256 of the first 21.

Everything else is a compiled regex or a standard-library parse.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Optional, Sequence

from ..errors import (
    InvalidBase64,
    InvalidBase64RawURL,
    InvalidBase64URL,
    InvalidBCP47LanguageTag,
    InvalidBIC,
    InvalidBitcoinAddress,
    InvalidCreditCard,
    InvalidCron,
    InvalidDatetime,
    InvalidE164PhoneNumber,
    InvalidEmail,
    InvalidMongoID,
    ValidationError,
)
from .base58 import b58decode, double_sha256
from .cron import parse_cron

CARD_MIN_DIGITS = 13
CARD_MAX_DIGITS = 19

ADDRESS_MIN_LENGTH = 26
ADDRESS_MAX_LENGTH = 35
ADDRESS_PAYLOAD_LENGTH = 25
# 0x00 mainnet P2PKH, 0x6f testnet P2PKH.
ADDRESS_VERSIONS = (0x00, 0x6F)

DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"

# ---- Compiled patterns (built once, never mutated) ---------------------------------------

_BASE64_STD = re.compile(r"^(?:[A-Za-z0-9+/]{4})*(?:[A-Za-z0-9+/]{2}==|[A-Za-z0-9+/]{3}=)?$")
_BASE64_URL = re.compile(r"^(?:[A-Za-z0-9_-]{4})*(?:[A-Za-z0-9_-]{2}==|[A-Za-z0-9_-]{3}=)?$")
_BASE64_RAW_URL = re.compile(r"^[A-Za-z0-9_-]*$")
_BIC = re.compile(r"^[A-Z]{4}[A-Z]{2}[A-Z0-9]{2}(?:[A-Z0-9]{3})?$")
_BCP47 = re.compile(r"^[a-zA-Z]{1,8}(-[a-zA-Z0-9]{1,8})*$")
_MONGO_ID = re.compile(r"^[0-9a-fA-F]{24}$")
_DATETIME = re.compile(r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}$", re.ASCII)
_E164 = re.compile(r"^\+[1-9]\d{1,14}$", re.ASCII)
_EMAIL = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
_ALNUM = re.compile(r"^[0-9A-Za-z]*$")


def _digits_only(s: str) -> str:
    """
    Return only the ASCII digit characters from a string.

    Used by Luhn so that inputs like "4111-1111 1111-1111" normalize to "4111111111111111".
    """
    return "".join(ch for ch in s if "0" <= ch <= "9")


# ---- Encodings ---------------------------------------------------------------------------

def validate_base64(s: str) -> Optional[ValidationError]:
    """Standard alphabet with padding. CR/LF are ignored, as MIME encoders wrap lines."""
    s = s.replace("\r", "").replace("\n", "")
    if not _BASE64_STD.fullmatch(s):
        return InvalidBase64()
    return None


def validate_base64_url(s: str) -> Optional[ValidationError]:
    """URL-safe alphabet (`-`, `_`) with padding."""
    if not _BASE64_URL.fullmatch(s):
        return InvalidBase64URL()
    return None


def validate_base64_raw_url(s: str) -> Optional[ValidationError]:
    """URL-safe alphabet without padding."""
    # A single trailing symbol carries only 6 bits, never a whole byte.
    if not _BASE64_RAW_URL.fullmatch(s) or len(s) % 4 == 1:
        return InvalidBase64RawURL()
    return None


# ---- Financial identifiers ---------------------------------------------------------------

def validate_bic(s: str) -> Optional[ValidationError]:
    """ISO 9362 business identifier code: 8 or 11 characters."""
    if not _BIC.fullmatch(s):
        return InvalidBIC()
    return None


def validate_credit_card(
    s: str,
    *,
    min_digits: int = CARD_MIN_DIGITS,
    max_digits: int = CARD_MAX_DIGITS,
) -> Optional[ValidationError]:
    """
    Validate a payment card number using the Luhn checksum (a.k.a. "mod 10").

    Non-digit characters (spaces, dashes, letters) are dropped silently before
    anything else. The same rule applies to every card brand.

    Args:
        s: Candidate string (may include spaces/dashes).
        min_digits: Smallest accepted digit count after filtering.
        max_digits: Largest accepted digit count after filtering.

    Returns:
        None if the digits pass Luhn; `InvalidCreditCard` otherwise, with
        `reason` set to "length" or "checksum".
    """
    n = _digits_only(s)
    if not (min_digits <= len(n) <= max_digits):
        return InvalidCreditCard(reason="length")

    total = 0
    # Process digits from right to left; double every second digit.
    for i, ch in enumerate(reversed(n)):
        d = ord(ch) - 48  # '0' -> 48
        if i % 2 == 1:
            d *= 2
            if d > 9:
                d -= 9  # sum of digits for doubled value (e.g., 8*2 -> 16 -> 1+6 -> 7)
        total += d

    if total % 10 != 0:
        return InvalidCreditCard(reason="checksum")
    return None


def validate_bitcoin_address(
    s: str,
    *,
    versions: Sequence[int] = ADDRESS_VERSIONS,
) -> Optional[ValidationError]:
    """
    Validate a legacy (Base58Check, P2PKH) Bitcoin address.

    Steps:
      1) Length must be 26..35 characters.
      2) ASCII alphanumerics only (coarser than the base-58 alphabet).
      3) Base-58 decode; '0', 'O', 'I' and 'l' fail here.
      4) The payload, re-padded with one zero byte per leading '1', must be 25 bytes.
      5) The version byte must be one of `versions`.
      6) The first 4 bytes of sha256(sha256(payload[:21])) must equal payload[21:].

    Every failure is the same `InvalidBitcoinAddress`; `reason` tells the steps apart.
    """
    if not (ADDRESS_MIN_LENGTH <= len(s) <= ADDRESS_MAX_LENGTH):
        return InvalidBitcoinAddress(reason="length")

    if not _ALNUM.fullmatch(s):
        return InvalidBitcoinAddress(reason="charset")

    try:
        decoded = b58decode(s)
    except ValueError:
        return InvalidBitcoinAddress(reason="base58")

    if len(decoded) != ADDRESS_PAYLOAD_LENGTH:
        return InvalidBitcoinAddress(reason="payload_length")

    if decoded[0] not in versions:
        return InvalidBitcoinAddress(reason="version")

    if double_sha256(decoded[:21])[:4] != decoded[21:]:
        return InvalidBitcoinAddress(reason="checksum")

    return None


def validate_mongo_id(s: str) -> Optional[ValidationError]:
    if not _MONGO_ID.fullmatch(s):
        return InvalidMongoID()
    return None


# ---- Schedules & timestamps --------------------------------------------------------------

def validate_cron(s: str) -> Optional[ValidationError]:
    """Standard five-field cron expression (minute hour dom month dow)."""
    try:
        parse_cron(s)
    except ValueError:
        return InvalidCron()
    return None


def validate_datetime(s: str) -> Optional[ValidationError]:
    """`YYYY-MM-DD HH:MM:SS` with zero-padded fields and a real calendar date."""
    if not _DATETIME.fullmatch(s):
        return InvalidDatetime()
    try:
        datetime.strptime(s, DATETIME_FORMAT)
    except ValueError:
        return InvalidDatetime()
    return None


# ---- Language & contact ------------------------------------------------------------------

def validate_bcp47_language_tag(s: str) -> Optional[ValidationError]:
    # Syntax only; subtags are not checked against the IANA registry.
    if not _BCP47.fullmatch(s):
        return InvalidBCP47LanguageTag()
    return None


def validate_e164_phone_number(s: str) -> Optional[ValidationError]:
    if not _E164.fullmatch(s):
        return InvalidE164PhoneNumber()
    return None


def validate_email(s: str) -> Optional[ValidationError]:
    """Loose `local@domain.tld` shape. See `strings.is_valid_email` for the HTML5 rule."""
    if not _EMAIL.fullmatch(s):
        return InvalidEmail()
    return None
