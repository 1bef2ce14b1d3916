"""
Base-58 decoding and the double SHA-256 used by Base58Check.

Python's `int` is unbounded, so the accumulator can grow past the 200 bits a
35-symbol address produces without any big-number helper.
"""

from __future__ import annotations

import hashlib

ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
INDEX = {c: i for i, c in enumerate(ALPHABET)}


def b58decode(s: str) -> bytes:
    """
    Decode a base-58 string into bytes.

    Each leading zero symbol ('1') becomes one leading zero byte; the rest is the
    minimal big-endian representation of the accumulated number.

    Raises:
        ValueError: on a character outside the base-58 alphabet.
    """
    n = 0
    for ch in s:
        if ch not in INDEX:
            raise ValueError(f"invalid base58 char: {ch!r}")
        n = n * 58 + INDEX[ch]

    b = n.to_bytes((n.bit_length() + 7) // 8, "big") if n > 0 else b""

    pad = len(s) - len(s.lstrip(ALPHABET[0]))
    return b"\x00" * pad + b


def double_sha256(data: bytes) -> bytes:
    return hashlib.sha256(hashlib.sha256(data).digest()).digest()
