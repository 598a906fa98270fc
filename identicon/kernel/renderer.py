"""
Tile compositor: code + settings -> RGBA image on a 3x3 grid.

Tiles are filled through coverage masks. A plain tile covers the template
interior, an inverted tile covers the rest of its cell, so the two always
partition the cell exactly.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from PIL import Image, ImageChops, ImageDraw

from .decoder import decode_code
from .palette import Settings, default_settings
from .patches import GRID, PATCHES, turn_points
from .sampler import RGBA, sample_colors

log = logging.getLogger(__name__)

SIDES = ((1, 0), (2, 1), (1, 2), (0, 1))     # N, E, S, W
CORNERS = ((0, 0), (2, 0), (2, 2), (0, 2))   # NW, NE, SE, SW


@dataclass(frozen=True)
class Tile:
    pos: Tuple[int, int]
    patch: int
    invert: bool
    turn: int
    color: RGBA


def _plan(code: int, settings: Settings):
    pc = decode_code(code)
    colors = sample_colors(code, settings, swap_cross=pc.swap_cross)

    tiles = [Tile((1, 1), pc.middle_type, pc.middle_invert, 0, colors.middle)]
    for i, pos in enumerate(SIDES):
        tiles.append(Tile(pos, pc.side_type, pc.side_invert, (pc.side_turn + 1 + i) % 4, colors.fore))
    for i, pos in enumerate(CORNERS):
        tiles.append(Tile(pos, pc.corner_type, pc.corner_invert, (pc.corner_turn + 1 + i) % 4, colors.other))
    return tiles, colors.background


def tile_layout(code: int, settings: Optional[Settings] = None) -> List[Tile]:
    """The nine tiles of an identicon in draw order: middle, sides, corners."""
    tiles, _ = _plan(code, settings or default_settings())
    return tiles


def cell_box(pos, patch_size: float):
    """Inclusive pixel box of a grid cell."""
    x0 = int(round(pos[0] * patch_size))
    y0 = int(round(pos[1] * patch_size))
    x1 = int(round((pos[0] + 1) * patch_size)) - 1
    y1 = int(round((pos[1] + 1) * patch_size)) - 1
    return x0, y0, x1, y1


def patch_mask(size: int, tile: Tile, patch_size: float) -> Image.Image:
    """L-mode mask (0/255) of the pixels a tile fills."""
    cell = Image.new("L", (size, size), 0)
    box = cell_box(tile.pos, patch_size)
    if box[2] >= box[0] and box[3] >= box[1]:
        ImageDraw.Draw(cell).rectangle(box, fill=255)

    shape = Image.new("L", (size, size), 0)
    points = PATCHES[tile.patch]
    if points:
        ox, oy = tile.pos[0] * patch_size, tile.pos[1] * patch_size
        scale = patch_size / GRID
        xy = [(ox + x * scale, oy + y * scale) for x, y in turn_points(points, tile.turn)]
        ImageDraw.Draw(shape).polygon(xy, fill=255)
    # clip to the cell so shared edges never bleed into a neighbour
    shape = ImageChops.multiply(shape, cell)

    if tile.invert:
        return ImageChops.subtract(cell, shape)
    return shape


def draw_patch(canvas: Image.Image, tile: Tile, patch_size: float) -> None:
    mask = patch_mask(canvas.width, tile, patch_size)
    layer = Image.new("RGBA", canvas.size, (0, 0, 0, 0))
    layer.paste(tile.color, mask=mask)
    canvas.alpha_composite(layer)


def render(code: int, total_size: int, settings: Optional[Settings] = None) -> Image.Image:
    settings = settings or default_settings()
    if int(total_size) <= 0:
        raise ValueError(f"total_size must be positive, got {total_size}")
    oversample = int(settings.oversample)
    if oversample < 1:
        raise ValueError(f"oversample must be >= 1, got {settings.oversample}")

    # colors resolve (and may raise ConfigError) before any drawing
    tiles, background = _plan(code, settings)

    size = int(total_size) * oversample
    patch_size = size / 3
    log.debug("render code=%016x size=%d patch=%.2f", int(code), size, patch_size)

    canvas = Image.new("RGBA", (size, size), background or (0, 0, 0, 0))
    for tile in tiles:
        draw_patch(canvas, tile, patch_size)

    if oversample > 1:
        canvas = canvas.resize((int(total_size), int(total_size)), Image.Resampling.LANCZOS)
    return canvas
