"""
Network validators: IP addresses, hostnames, MACs, URLs, CIDRs and socket addresses.

All functions return `None` on success or a `ValidationError` naming the exact
failure (empty input, wrong address family, too long, ...).

The FQDN and TCP/UDP checks call the system resolver (`socket.getaddrinfo`)
and therefore block like any other lookup. IP literals are checked locally and
never hit the resolver.
"""

from __future__ import annotations

import ipaddress
import re
import socket
from typing import Optional, Tuple, Type, Union
from urllib.parse import urlsplit

import structlog

from ..errors import (
    EmptyHostname,
    EmptyIPAddress,
    EmptyMACAddress,
    EmptyURL,
    ExpectedIPv4Address,
    ExpectedIPv6Address,
    HostnameTooLong,
    InvalidCIDRv4,
    InvalidCIDRv6,
    InvalidDataURL,
    InvalidFQDN,
    InvalidHostname,
    InvalidIPAddress,
    InvalidIPv4Address,
    InvalidIPv6Address,
    InvalidMACAddress,
    InvalidRFC952Hostname,
    InvalidTCP4Addr,
    InvalidTCP6Addr,
    InvalidTCPAddr,
    InvalidUDP4Addr,
    InvalidUDP6Addr,
    InvalidUDPAddr,
    InvalidURL,
    ValidationError,
)

log = structlog.get_logger(__name__)

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]

MAX_HOSTNAME_LENGTH = 255
MAX_LABEL_LENGTH = 63

_HOSTNAME_LABEL = re.compile(r"^([a-zA-Z0-9]|[a-zA-Z0-9][a-zA-Z0-9\-]*[a-zA-Z0-9])$")
_MAC = re.compile(r"^([0-9A-Fa-f]{2}[:-]){5}([0-9A-Fa-f]{2})$")
_DATA_URL = re.compile(r"^data:[a-z]+/[a-z]+(;[a-z-]+=[a-z-]+)*;base64,[a-zA-Z0-9/+=]+$")
_RFC952 = re.compile(r"^[a-zA-Z][a-zA-Z0-9-]{0,22}[a-zA-Z0-9]$")
_URL_SCHEME = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.\-]*:")
_CONTROL_OR_SPACE = re.compile(r"[\x00-\x20\x7f]")


def _parse_ip(s: str) -> Optional[IPAddress]:
    """Parse an IPv4/IPv6 literal. Zone suffixes ("%eth0") are not addresses."""
    if "%" in s:
        return None
    try:
        return ipaddress.ip_address(s)
    except ValueError:
        return None


def _is_ipv4(ip: IPAddress) -> bool:
    # IPv4-mapped IPv6 (::ffff:a.b.c.d) counts as IPv4.
    return ip.version == 4 or ip.ipv4_mapped is not None  # type: ignore[union-attr]


# ---- IP addresses ------------------------------------------------------------------------

def validate_ip_address(s: str) -> Optional[ValidationError]:
    if s == "":
        return EmptyIPAddress()
    if _parse_ip(s) is None:
        return InvalidIPAddress()
    return None


def validate_ipv4_address(s: str) -> Optional[ValidationError]:
    if s == "":
        return EmptyIPAddress()
    ip = _parse_ip(s)
    if ip is None:
        return InvalidIPv4Address()
    if not _is_ipv4(ip):
        return ExpectedIPv4Address()
    return None


def validate_ipv6_address(s: str) -> Optional[ValidationError]:
    if s == "":
        return EmptyIPAddress()
    ip = _parse_ip(s)
    if ip is None:
        return InvalidIPv6Address()
    if _is_ipv4(ip):
        return ExpectedIPv6Address()
    return None


# ---- Names -------------------------------------------------------------------------------

def validate_hostname(s: str) -> Optional[ValidationError]:
    """
    RFC 1123 hostname: dot-separated labels of letters, digits and inner hyphens.

    A single trailing dot (the DNS root) is accepted.
    """
    if s == "":
        return EmptyHostname()
    if len(s) > MAX_HOSTNAME_LENGTH:
        return HostnameTooLong()
    if s.endswith("."):
        s = s[:-1]
    for label in s.split("."):
        if len(label) > MAX_LABEL_LENGTH or not _HOSTNAME_LABEL.fullmatch(label):
            return InvalidHostname()
    return None


def validate_rfc952_hostname(s: str) -> Optional[ValidationError]:
    """Single RFC 952 name: starts with a letter, at most 24 characters."""
    if not _RFC952.fullmatch(s):
        return InvalidRFC952Hostname()
    return None


def validate_fqdn(s: str) -> Optional[ValidationError]:
    """Accept a name only if the system resolver can look it up."""
    if s == "":
        return InvalidFQDN()
    try:
        socket.getaddrinfo(s, None)
    except (OSError, UnicodeError) as e:
        log.debug("fqdn_lookup_failed", host=s, error=str(e))
        return InvalidFQDN()
    return None


def validate_mac_address(s: str) -> Optional[ValidationError]:
    """Six hex octets separated by ':' or '-'."""
    if s == "":
        return EmptyMACAddress()
    if not _MAC.fullmatch(s):
        return InvalidMACAddress()
    return None


# ---- URLs --------------------------------------------------------------------------------

def validate_url(s: str) -> Optional[ValidationError]:
    """
    Request-URI check: an absolute URI with a scheme ("https://x/y", "mailto:a@b")
    or an absolute path ("/y"). Relative references are rejected.
    """
    if s == "":
        return EmptyURL()
    if _CONTROL_OR_SPACE.search(s):
        return InvalidURL()
    if not (s.startswith("/") or _URL_SCHEME.match(s)):
        return InvalidURL()
    try:
        # Touching .port validates bracketed IPv6 hosts and numeric ports.
        urlsplit(s).port
    except ValueError:
        return InvalidURL()
    return None


def validate_data_url(s: str) -> Optional[ValidationError]:
    """Base64 `data:` URL with a lowercase media type and optional parameters."""
    if not _DATA_URL.fullmatch(s):
        return InvalidDataURL()
    return None


# ---- CIDR --------------------------------------------------------------------------------

def _parse_cidr(s: str) -> Optional[Union[ipaddress.IPv4Network, ipaddress.IPv6Network]]:
    addr, slash, prefix = s.partition("/")
    if not slash or not prefix.isascii() or not prefix.isdigit() or "%" in addr:
        return None
    try:
        return ipaddress.ip_network(s, strict=False)
    except ValueError:
        return None


def validate_cidr_v4(s: str) -> Optional[ValidationError]:
    net = _parse_cidr(s)
    if net is None or net.version != 4:
        return InvalidCIDRv4()
    return None


def validate_cidr_v6(s: str) -> Optional[ValidationError]:
    net = _parse_cidr(s)
    if net is None or net.version != 6:
        return InvalidCIDRv6()
    return None


# ---- Socket addresses --------------------------------------------------------------------

def split_host_port(addr: str) -> Tuple[str, str]:
    """
    Split "host:port", "[v6]:port" or ":port" into (host, port).

    Raises:
        ValueError: missing port, unbalanced brackets or an unbracketed IPv6 host.
    """
    if addr.startswith("["):
        end = addr.find("]")
        if end < 0:
            raise ValueError(f"missing ']' in address: {addr!r}")
        host, rest = addr[1:end], addr[end + 1:]
        if not rest.startswith(":"):
            raise ValueError(f"missing port in address: {addr!r}")
        port = rest[1:]
    else:
        host, colon, port = addr.rpartition(":")
        if not colon:
            raise ValueError(f"missing port in address: {addr!r}")
        if ":" in host:
            raise ValueError(f"too many colons in address: {addr!r}")
    if "[" in host or "]" in host or "[" in port or "]" in port:
        raise ValueError(f"unexpected bracket in address: {addr!r}")
    return host, port


def _resolve_port(port: str, proto: str) -> int:
    if port == "":
        return 0
    if port.isascii() and port.isdigit():
        n = int(port)
        if n > 65535:
            raise ValueError(f"port out of range: {port}")
        return n
    return socket.getservbyname(port, proto)


def _resolve(addr: str, family: int, socktype: int) -> None:
    """Resolve "host:port" for one address family. Raises on any failure."""
    host, port_s = split_host_port(addr)
    proto = "tcp" if socktype == socket.SOCK_STREAM else "udp"
    port = _resolve_port(port_s, proto)

    if host == "":
        return
    ip = _parse_ip(host.partition("%")[0])
    if ip is not None:
        if family == socket.AF_INET and not _is_ipv4(ip):
            raise ValueError(f"not an IPv4 address: {host}")
        if family == socket.AF_INET6 and _is_ipv4(ip):
            raise ValueError(f"not an IPv6 address: {host}")
        return
    socket.getaddrinfo(host, port, family, socktype)


def _check_addr(
    addr: str, family: int, socktype: int, error: Type[ValidationError]
) -> Optional[ValidationError]:
    try:
        _resolve(addr, family, socktype)
    except (OSError, ValueError, UnicodeError) as e:
        log.debug("address_resolve_failed", addr=addr, family=family, error=str(e))
        return error()
    return None


def validate_tcp4_addr(addr: str) -> Optional[ValidationError]:
    return _check_addr(addr, socket.AF_INET, socket.SOCK_STREAM, InvalidTCP4Addr)


def validate_tcp6_addr(addr: str) -> Optional[ValidationError]:
    return _check_addr(addr, socket.AF_INET6, socket.SOCK_STREAM, InvalidTCP6Addr)


def validate_tcp_addr(addr: str) -> Optional[ValidationError]:
    return _check_addr(addr, socket.AF_UNSPEC, socket.SOCK_STREAM, InvalidTCPAddr)


def validate_udp4_addr(addr: str) -> Optional[ValidationError]:
    return _check_addr(addr, socket.AF_INET, socket.SOCK_DGRAM, InvalidUDP4Addr)


def validate_udp6_addr(addr: str) -> Optional[ValidationError]:
    return _check_addr(addr, socket.AF_INET6, socket.SOCK_DGRAM, InvalidUDP6Addr)


def validate_udp_addr(addr: str) -> Optional[ValidationError]:
    return _check_addr(addr, socket.AF_UNSPEC, socket.SOCK_DGRAM, InvalidUDPAddr)
