"""
Named registry of single-string validators.

The CLI (and anything else that picks a rule by name at runtime) goes through
this table instead of importing validators directly. Config-driven options are
bound here with `functools.partial`, so every registered callable takes exactly
one string.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import partial
from typing import Callable, Dict, Optional

from .config import ValidkitConfig
from .errors import ValidationError
from .validations import format as fmt
from .validations import network as net

StringValidator = Callable[[str], Optional[ValidationError]]


@dataclass(frozen=True)
class Rule:
    name: str
    func: StringValidator
    description: str


# name -> (validator, description); tuned validators are bound in build_registry().
_STATIC: Dict[str, tuple] = {
    "base64": (fmt.validate_base64, "standard base64, padded"),
    "base64_url": (fmt.validate_base64_url, "URL-safe base64, padded"),
    "base64_raw_url": (fmt.validate_base64_raw_url, "URL-safe base64, unpadded"),
    "bic": (fmt.validate_bic, "ISO 9362 bank identifier code"),
    "bcp47": (fmt.validate_bcp47_language_tag, "BCP 47 language tag (syntax)"),
    "mongo_id": (fmt.validate_mongo_id, "24-hex-digit MongoDB ObjectId"),
    "cron": (fmt.validate_cron, "five-field cron expression"),
    "datetime": (fmt.validate_datetime, "YYYY-MM-DD HH:MM:SS"),
    "e164": (fmt.validate_e164_phone_number, "E.164 phone number"),
    "email": (fmt.validate_email, "e-mail address"),
    "ip": (net.validate_ip_address, "IPv4 or IPv6 address"),
    "ipv4": (net.validate_ipv4_address, "IPv4 address"),
    "ipv6": (net.validate_ipv6_address, "IPv6 address"),
    "hostname": (net.validate_hostname, "RFC 1123 hostname"),
    "rfc952": (net.validate_rfc952_hostname, "RFC 952 hostname"),
    "fqdn": (net.validate_fqdn, "resolvable domain name (DNS lookup)"),
    "mac": (net.validate_mac_address, "MAC address"),
    "url": (net.validate_url, "absolute URI or absolute path"),
    "data_url": (net.validate_data_url, "base64 data: URL"),
    "cidr_v4": (net.validate_cidr_v4, "IPv4 CIDR block"),
    "cidr_v6": (net.validate_cidr_v6, "IPv6 CIDR block"),
    "tcp4": (net.validate_tcp4_addr, "resolvable TCP/IPv4 host:port"),
    "tcp6": (net.validate_tcp6_addr, "resolvable TCP/IPv6 host:port"),
    "tcp": (net.validate_tcp_addr, "resolvable TCP host:port"),
    "udp4": (net.validate_udp4_addr, "resolvable UDP/IPv4 host:port"),
    "udp6": (net.validate_udp6_addr, "resolvable UDP/IPv6 host:port"),
    "udp": (net.validate_udp_addr, "resolvable UDP host:port"),
}


def build_registry(cfg: Optional[ValidkitConfig] = None) -> Dict[str, Rule]:
    """Return every rule, with card and address validators tuned from `cfg`."""
    cfg = cfg or ValidkitConfig()
    rules = {name: Rule(name, fn, desc) for name, (fn, desc) in _STATIC.items()}
    rules["credit_card"] = Rule(
        "credit_card",
        partial(
            fmt.validate_credit_card,
            min_digits=cfg.credit_card.min_digits,
            max_digits=cfg.credit_card.max_digits,
        ),
        "payment card number (Luhn)",
    )
    rules["btc_address"] = Rule(
        "btc_address",
        partial(fmt.validate_bitcoin_address, versions=tuple(cfg.bitcoin_address.versions)),
        "legacy Bitcoin address (Base58Check)",
    )
    return dict(sorted(rules.items()))


def run_rule(registry: Dict[str, Rule], name: str, value: str) -> Optional[ValidationError]:
    """
    Run the named rule against `value`.

    Raises:
        KeyError: if no rule has that name (the message lists the known names).
    """
    rule = registry.get(name)
    if rule is None:
        raise KeyError(f"unknown rule {name!r}; known rules: {', '.join(registry)}")
    return rule.func(value)
