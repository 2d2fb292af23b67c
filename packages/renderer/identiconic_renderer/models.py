"""Typed renderer models."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass

from .errors import ConfigurationError

MAX_SIZE = 10
DEFAULT_SIZE = 10
DEFAULT_CELL_SIZE = 20
DEFAULT_ALGORITHM = "sha512"

RGB = tuple[int, int, int]
Grid = tuple[tuple[int, ...], ...]

WHITE: RGB = (255, 255, 255)


@dataclass(frozen=True)
class IdenticonConfig:
    # Number of cells per side. Larger grids consume more of the digest.
    size: int = DEFAULT_SIZE
    # Pixel side length of one cell.
    cell_size: int = DEFAULT_CELL_SIZE
    # Fixed foreground color; None derives it from the digest.
    color: RGB | None = None
    algorithm: str = DEFAULT_ALGORITHM

    def __post_init__(self) -> None:
        if isinstance(self.size, bool) or not isinstance(self.size, int):
            raise ConfigurationError(f"size must be an integer, got {self.size!r}")
        if self.size <= 0 or self.size > MAX_SIZE:
            raise ConfigurationError(f"size {self.size} out of range [1, {MAX_SIZE}]")
        if isinstance(self.cell_size, bool) or not isinstance(self.cell_size, int) or self.cell_size <= 0:
            raise ConfigurationError(f"cell_size must be a positive integer, got {self.cell_size!r}")
        if self.color is not None:
            try:
                color = tuple(self.color)
            except TypeError as exc:
                raise ConfigurationError(f"color must be an (r, g, b) triple, got {self.color!r}") from exc
            if len(color) != 3 or any(
                isinstance(c, bool) or not isinstance(c, int) or not 0 <= c <= 255 for c in color
            ):
                raise ConfigurationError(f"color must be three channels in [0, 255], got {self.color!r}")
            object.__setattr__(self, "color", color)
        _check_algorithm(self.algorithm)

    @property
    def pixel_size(self) -> int:
        return self.size * self.cell_size


def _check_algorithm(name: str) -> None:
    try:
        digest_size = hashlib.new(name).digest_size
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"unknown digest algorithm: {name!r}") from exc
    # shake_* report a zero digest size and need an explicit output length.
    if digest_size <= 0:
        raise ConfigurationError(f"digest algorithm {name!r} has no fixed output length")


@dataclass(frozen=True)
class HSV:
    hue: float
    saturation: float
    value: float


@dataclass(frozen=True)
class FrameBuffer:
    width: int
    height: int
    pixel_format: str
    bytes: bytes
