"""Identicon generation entry points."""

from __future__ import annotations

import base64
import logging
from io import BytesIO

from PIL import Image

from .color import color_source, format_hex_color
from .digest import digest_hex
from .grid import build_grid
from .models import FrameBuffer, IdenticonConfig
from .raster import rasterize

_log = logging.getLogger("identiconic.renderer")


def generate(text: str | bytes, config: IdenticonConfig | None = None) -> Image.Image:
    """Build the identicon for ``text`` as an RGBA image.

    Color and grid are both resolved before any pixels are allocated, so a
    failure in either stage leaves nothing half-drawn.
    """
    config = config or IdenticonConfig()
    digest = digest_hex(text, config.algorithm)

    color = color_source(config).resolve(digest)
    grid = build_grid(digest, config.size)
    _log.debug(
        "identicon derived algorithm=%s size=%d color=%s",
        config.algorithm,
        config.size,
        format_hex_color(color),
    )
    return rasterize(grid, color, config.cell_size)


class IdenticonRenderer:
    """Renders identicons for one configuration in several output forms."""

    def __init__(self, config: IdenticonConfig | None = None) -> None:
        self.config = config or IdenticonConfig()

    def render_image(self, text: str | bytes) -> Image.Image:
        return generate(text, self.config)

    def render(self, text: str | bytes) -> FrameBuffer:
        image = self.render_image(text)
        return FrameBuffer(width=image.width, height=image.height, pixel_format="RGBA8888", bytes=image.tobytes())

    def png_bytes(self, text: str | bytes) -> bytes:
        buf = BytesIO()
        self.render_image(text).save(buf, format="PNG")
        return buf.getvalue()

    def preview_data_url(self, text: str | bytes) -> str:
        b64 = base64.b64encode(self.png_bytes(text)).decode("ascii")
        return f"data:image/png;base64,{b64}"
