"""Mirrored bit grid built from the digest stream."""

from __future__ import annotations

from .digest import COLOR_HEX_LEN, parse_hex_byte
from .models import Grid


def build_grid(digest: str, size: int) -> Grid:
    """Fill a size x size grid from digest bytes following the color prefix.

    Each row reads ``size // 2 + 1`` bytes in order; a byte's low bit turns
    the cell on, and the same bit is written to the mirrored column. Bytes
    are never reused, so the whole grid consumes ``size * (size // 2 + 1)``
    of them.
    """
    rows = [[0] * size for _ in range(size)]
    offset = COLOR_HEX_LEN
    for i in range(size):
        row = rows[i]
        for j in range(size // 2 + 1):
            bit = parse_hex_byte(digest, offset) & 1
            row[j] = bit
            row[size - 1 - j] = bit
            offset += 2
    return tuple(tuple(row) for row in rows)


def grid_rows(grid: Grid) -> list[str]:
    return ["".join(str(bit) for bit in row) for row in grid]
