"""Grid to RGBA pixel buffer."""

from __future__ import annotations

import numpy as np
from PIL import Image

from .models import RGB, WHITE, Grid


def rasterize(grid: Grid, color: RGB, cell_size: int, background: RGB = WHITE) -> Image.Image:
    cells = np.asarray(grid, dtype=np.uint8)
    palette = np.array([(*background, 255), (*color, 255)], dtype=np.uint8)
    pixels = palette[cells]
    pixels = pixels.repeat(cell_size, axis=0).repeat(cell_size, axis=1)
    return Image.fromarray(np.ascontiguousarray(pixels))
