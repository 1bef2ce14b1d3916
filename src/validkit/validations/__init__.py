"""
Stateless validation predicates.

- `format` / `network`: string validators returning `None` or a `ValidationError`.
- `numbers` / `sequences` / `strings`: boolean predicates.
"""

from . import numbers, sequences, strings
from .format import (
    validate_base64,
    validate_base64_raw_url,
    validate_base64_url,
    validate_bcp47_language_tag,
    validate_bic,
    validate_bitcoin_address,
    validate_credit_card,
    validate_cron,
    validate_datetime,
    validate_e164_phone_number,
    validate_email,
    validate_mongo_id,
)
from .network import (
    validate_cidr_v4,
    validate_cidr_v6,
    validate_data_url,
    validate_fqdn,
    validate_hostname,
    validate_ip_address,
    validate_ipv4_address,
    validate_ipv6_address,
    validate_mac_address,
    validate_rfc952_hostname,
    validate_tcp4_addr,
    validate_tcp6_addr,
    validate_tcp_addr,
    validate_udp4_addr,
    validate_udp6_addr,
    validate_udp_addr,
    validate_url,
)

__all__ = [
    "numbers",
    "sequences",
    "strings",
    "validate_base64",
    "validate_base64_raw_url",
    "validate_base64_url",
    "validate_bcp47_language_tag",
    "validate_bic",
    "validate_bitcoin_address",
    "validate_credit_card",
    "validate_cron",
    "validate_datetime",
    "validate_e164_phone_number",
    "validate_email",
    "validate_mongo_id",
    "validate_cidr_v4",
    "validate_cidr_v6",
    "validate_data_url",
    "validate_fqdn",
    "validate_hostname",
    "validate_ip_address",
    "validate_ipv4_address",
    "validate_ipv6_address",
    "validate_mac_address",
    "validate_rfc952_hostname",
    "validate_tcp4_addr",
    "validate_tcp6_addr",
    "validate_tcp_addr",
    "validate_udp4_addr",
    "validate_udp6_addr",
    "validate_udp_addr",
    "validate_url",
]
