"""Digest stage: input string to lowercase hex."""

from __future__ import annotations

import hashlib
import re

from .errors import InvalidInputError
from .models import DEFAULT_ALGORITHM

# Hex characters 0-5 carry the color, the grid reads from here on.
COLOR_HEX_LEN = 6

_HEX_PAIR = re.compile(r"[0-9a-fA-F]{2}")


def digest_hex(data: str | bytes, algorithm: str = DEFAULT_ALGORITHM) -> str:
    if isinstance(data, str):
        raw = data.encode("utf-8")
    elif isinstance(data, (bytes, bytearray, memoryview)):
        raw = bytes(data)
    else:
        raise TypeError(f"identicon input must be str or bytes, got {type(data).__name__}")
    return hashlib.new(algorithm, raw).hexdigest()


def required_hex_length(size: int) -> int:
    """Hex characters a digest needs to fill a grid of the given size."""
    return COLOR_HEX_LEN + 2 * size * (size // 2 + 1)


def parse_hex_byte(hex_str: str, offset: int) -> int:
    pair = hex_str[offset : offset + 2]
    if len(pair) < 2:
        raise InvalidInputError(f"digest exhausted at offset {offset} (length {len(hex_str)})")
    if not _HEX_PAIR.fullmatch(pair):
        raise InvalidInputError(f"invalid hex byte {pair!r} at offset {offset}")
    return int(pair, 16)
