"""Renderer package: digest, color, grid and raster stages for identicons."""

from .color import (
    ColorSource,
    DerivedColor,
    FixedColor,
    color_source,
    extract_color,
    extract_hsv,
    format_hex_color,
    hsv_to_rgb,
    parse_hex_color,
)
from .digest import digest_hex, required_hex_length
from .errors import ConfigurationError, HSVRangeError, IdenticonError, InvalidInputError
from .generator import IdenticonRenderer, generate
from .grid import build_grid, grid_rows
from .models import HSV, MAX_SIZE, WHITE, FrameBuffer, IdenticonConfig
from .raster import rasterize

__all__ = [
    "ColorSource",
    "ConfigurationError",
    "DerivedColor",
    "FixedColor",
    "FrameBuffer",
    "HSV",
    "HSVRangeError",
    "IdenticonConfig",
    "IdenticonError",
    "IdenticonRenderer",
    "InvalidInputError",
    "MAX_SIZE",
    "WHITE",
    "build_grid",
    "color_source",
    "digest_hex",
    "extract_color",
    "extract_hsv",
    "format_hex_color",
    "generate",
    "grid_rows",
    "hsv_to_rgb",
    "parse_hex_color",
    "rasterize",
    "required_hex_length",
]
