"""
Seeded color selection. Draw order is fixed: first color, second color,
then background (opaque backgrounds only).

The generator is Python's Mersenne Twister (random.Random); images are stable
for this implementation but do not match other tools pixel for pixel.
"""

import logging
import random
from dataclasses import dataclass
from typing import Optional, Tuple

from .palette import Settings, hex_to_rgb

log = logging.getLogger(__name__)

SEED_MODULUS = 0x7FFFFFFF

RGBA = Tuple[int, int, int, int]


@dataclass(frozen=True)
class ColorPick:
    fore: RGBA
    other: RGBA
    middle: RGBA
    background: Optional[RGBA]


def seed_for(code: int) -> int:
    return int(code) % SEED_MODULUS


def pick_index(rng: random.Random, seq) -> int:
    return rng.randrange(len(seq))


def resolve_colors(first: RGBA, second: RGBA, two_color: bool, swap_cross: bool):
    """Returns (fore, other, middle)."""
    fore = first
    other = second if two_color else fore
    middle = fore if swap_cross else other
    return fore, other, middle


def sample_colors(code: int, settings: Settings, swap_cross: bool = False) -> ColorPick:
    rng = random.Random(seed_for(code))
    alpha = int(settings.alpha)

    first = settings.color_palette[pick_index(rng, settings.color_palette)]
    first_rgba = hex_to_rgb(first.code) + (alpha,)
    second = settings.color_palette[pick_index(rng, settings.color_palette)]
    second_rgba = hex_to_rgb(second.code) + (alpha,)

    background = None
    if not settings.transparent_background:
        bg = settings.background_colors[pick_index(rng, settings.background_colors)]
        background = hex_to_rgb(bg) + (255,)

    log.debug("colors first=%s second=%s background=%s", first.name, second.name, background)
    fore, other, middle = resolve_colors(first_rgba, second_rgba, settings.two_color, swap_cross)
    return ColorPick(fore=fore, other=other, middle=middle, background=background)
