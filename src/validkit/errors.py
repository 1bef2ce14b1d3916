"""
Typed validation errors.

Validators in this package *return* one of these instead of raising, so a
caller can write::

    err = validate_credit_card(value)
    if err is not None:
        ...

Each class has a stable `code` and a default message. `ensure()` turns a
returned error into an exception for callers that prefer raising.
"""

from __future__ import annotations

from typing import Optional


class ValidationError(ValueError):
    """
    Base class for every rejected input.

    Equality compares type and message only; `reason` is ignored, so two
    errors of one type with different causes compare equal. Read `reason`
    directly to tell causes apart.
    """

    code: str = "invalid"
    default_message: str = "invalid value"

    def __init__(self, message: Optional[str] = None, *, reason: Optional[str] = None) -> None:
        self.message = message or self.default_message
        # Finer-grained cause for validators that expose a single error type.
        self.reason = reason
        super().__init__(self.message)

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and self.message == other.message  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self.message))

    def __repr__(self) -> str:
        if self.reason:
            return f"{type(self).__name__}({self.message!r}, reason={self.reason!r})"
        return f"{type(self).__name__}({self.message!r})"


def ensure(error: Optional[Exception]) -> None:
    """Raise `error` if a validator returned one."""
    if error is not None:
        raise error


# ---- Format ------------------------------------------------------------------------------

class InvalidBase64(ValidationError):
    code = "base64"
    default_message = "invalid base64 encoding"


class InvalidBase64URL(ValidationError):
    code = "base64_url"
    default_message = "invalid base64url encoding"


class InvalidBase64RawURL(ValidationError):
    code = "base64_raw_url"
    default_message = "invalid base64rawurl encoding"


class InvalidBIC(ValidationError):
    code = "bic"
    default_message = "invalid BIC"


class InvalidBCP47LanguageTag(ValidationError):
    code = "bcp47_language_tag"
    default_message = "invalid BCP47 language tag"


class InvalidBitcoinAddress(ValidationError):
    """Single error for every address failure; `reason` names the failed step."""
    code = "bitcoin_address"
    default_message = "invalid Bitcoin address"


class InvalidCreditCard(ValidationError):
    """Bad digit count (reason="length") or Luhn mismatch (reason="checksum")."""
    code = "credit_card"
    default_message = "invalid credit card number"


class InvalidMongoID(ValidationError):
    code = "mongo_id"
    default_message = "invalid MongoDB object ID"


class InvalidCron(ValidationError):
    code = "cron"
    default_message = "invalid CRON expression"


class InvalidDatetime(ValidationError):
    code = "datetime"
    default_message = "invalid Datetime"


class InvalidE164PhoneNumber(ValidationError):
    code = "e164_phone_number"
    default_message = "invalid E.164 phone number"


class InvalidEmail(ValidationError):
    code = "email"
    default_message = "invalid email address"


# ---- Network -----------------------------------------------------------------------------

class EmptyIPAddress(ValidationError):
    code = "ip_address_empty"
    default_message = "IP address cannot be empty"


class InvalidIPAddress(ValidationError):
    code = "ip_address"
    default_message = "invalid IP address"


class InvalidIPv4Address(ValidationError):
    code = "ipv4_address"
    default_message = "invalid IPv4 address"


class ExpectedIPv4Address(ValidationError):
    code = "ipv4_expected"
    default_message = "IPv4 address expected"


class InvalidIPv6Address(ValidationError):
    code = "ipv6_address"
    default_message = "invalid IPv6 address"


class ExpectedIPv6Address(ValidationError):
    code = "ipv6_expected"
    default_message = "IPv6 address expected"


class EmptyHostname(ValidationError):
    code = "hostname_empty"
    default_message = "hostname cannot be empty"


class HostnameTooLong(ValidationError):
    code = "hostname_too_long"
    default_message = "hostname is too long"


class InvalidHostname(ValidationError):
    code = "hostname"
    default_message = "invalid hostname"


class EmptyMACAddress(ValidationError):
    code = "mac_address_empty"
    default_message = "MAC address cannot be empty"


class InvalidMACAddress(ValidationError):
    code = "mac_address"
    default_message = "invalid MAC address"


class EmptyURL(ValidationError):
    code = "url_empty"
    default_message = "URL cannot be empty"


class InvalidURL(ValidationError):
    code = "url"
    default_message = "invalid URL"


class InvalidCIDRv4(ValidationError):
    code = "cidr_v4"
    default_message = "invalid CIDRv4 address"


class InvalidCIDRv6(ValidationError):
    code = "cidr_v6"
    default_message = "invalid CIDRv6 address"


class InvalidDataURL(ValidationError):
    code = "data_url"
    default_message = "invalid data URL"


class InvalidFQDN(ValidationError):
    code = "fqdn"
    default_message = "invalid FQDN"


class InvalidRFC952Hostname(ValidationError):
    code = "rfc952_hostname"
    default_message = "invalid RFC 952 hostname"


class InvalidTCP4Addr(ValidationError):
    code = "tcp4_addr"
    default_message = "invalid TCPv4 address"


class InvalidTCP6Addr(ValidationError):
    code = "tcp6_addr"
    default_message = "invalid TCPv6 address"


class InvalidTCPAddr(ValidationError):
    code = "tcp_addr"
    default_message = "invalid TCP address"


class InvalidUDP4Addr(ValidationError):
    code = "udp4_addr"
    default_message = "invalid UDPv4 address"


class InvalidUDP6Addr(ValidationError):
    code = "udp6_addr"
    default_message = "invalid UDPv6 address"


class InvalidUDPAddr(ValidationError):
    code = "udp_addr"
    default_message = "invalid UDP address"
