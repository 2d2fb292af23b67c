"""Foreground color derivation and HSV to RGB conversion."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .digest import COLOR_HEX_LEN, parse_hex_byte
from .errors import HSVRangeError, InvalidInputError
from .models import HSV, RGB, IdenticonConfig


def extract_hsv(hex_str: str) -> HSV:
    """Map the first three digest bytes onto hue, saturation and value.

    Saturation lands in [45, 100) and value in [45, 80), which keeps the
    output away from greys and near-black. Hue is scaled by 365, so the
    three highest hue bytes produce a hue above 360 that ``hsv_to_rgb``
    rejects.
    """
    if len(hex_str) < COLOR_HEX_LEN:
        raise InvalidInputError(f"color needs {COLOR_HEX_LEN} hex characters, got {len(hex_str)}")

    hue = parse_hex_byte(hex_str, 0)
    sat = parse_hex_byte(hex_str, 2)
    val = parse_hex_byte(hex_str, 4)
    return HSV(
        hue=(hue / 256.0) * 365,
        saturation=(sat / 256.0) * 55 + 45,
        value=(val / 256.0) * 35 + 45,
    )


def _round_half_up(value: float) -> int:
    # Channels are never negative here, so floor(x + 0.5) rounds halves away from zero.
    return int(math.floor(value + 0.5))


def hsv_to_rgb(h: float, s: float, v: float) -> RGB:
    """Convert hue in degrees and saturation/value in percent to 8-bit RGB."""
    if h < 0 or h > 360 or s < 0 or s > 100 or v < 0 or v > 100:
        raise HSVRangeError(f"hue, saturation or value out of range: ({h}, {s}, {v})")

    s = s / 100
    v = v / 100

    hi = h / 60
    c = v * s
    x = c * (1 - abs(math.fmod(hi, 2) - 1))
    m = v - c

    # 360 degrees lands in sector 6, which wraps to sector 0.
    sector = int(hi) % 6
    if sector == 0:
        r, g, b = c, x, 0.0
    elif sector == 1:
        r, g, b = x, c, 0.0
    elif sector == 2:
        r, g, b = 0.0, c, x
    elif sector == 3:
        r, g, b = 0.0, x, c
    elif sector == 4:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x

    return (
        _round_half_up((r + m) * 255),
        _round_half_up((g + m) * 255),
        _round_half_up((b + m) * 255),
    )


def extract_color(hex_str: str) -> RGB:
    hsv = extract_hsv(hex_str)
    return hsv_to_rgb(hsv.hue, hsv.saturation, hsv.value)


def parse_hex_color(value: str) -> RGB:
    """Parse ``#RRGGBB`` (leading ``#`` optional) into an RGB tuple."""
    text = value.strip().lstrip("#")
    if len(text) != 6:
        raise InvalidInputError(f"expected a #RRGGBB color, got {value!r}")
    return (parse_hex_byte(text, 0), parse_hex_byte(text, 2), parse_hex_byte(text, 4))


def format_hex_color(color: RGB) -> str:
    return "#{:02X}{:02X}{:02X}".format(*color)


@dataclass(frozen=True)
class DerivedColor:
    def resolve(self, digest: str) -> RGB:
        return extract_color(digest[:COLOR_HEX_LEN])


@dataclass(frozen=True)
class FixedColor:
    rgb: RGB

    def resolve(self, digest: str) -> RGB:
        return self.rgb


ColorSource = DerivedColor | FixedColor


def color_source(config: IdenticonConfig) -> ColorSource:
    if config.color is None:
        return DerivedColor()
    return FixedColor(config.color)
