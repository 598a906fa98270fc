"""
Colors, render settings and hex parsing.
"""

import dataclasses
from dataclasses import dataclass
from typing import Tuple


class ConfigError(ValueError):
    """A configured color is not a 6-digit hex RGB value."""


@dataclass(frozen=True)
class Color:
    name: str
    code: str


DEFAULT_COLOR_PALETTE = (
    Color("lightBlack", "#2c2c2c"),
    Color("lightBlackIntense", "#232323"),
    Color("turquoise", "#00bf93"),
    Color("turquoiseIntense", "#16a086"),
    Color("mint", "#2dcc70"),
    Color("mintIntense", "#27ae61"),
    Color("green", "#42e453"),
    Color("greenIntense", "#24c333"),
    Color("yellow", "#ffff25"),
    Color("yellowIntense", "#d9d921"),
    Color("yellowOrange", "#f1c40f"),
    Color("yellowOrangeIntense", "#f39c11"),
    Color("brown", "#e67f22"),
    Color("brownIntense", "#d25400"),
    Color("orange", "#ff944e"),
    Color("orangeIntense", "#ff5500"),
    Color("red", "#e84c3d"),
    Color("redIntense", "#c1392b"),
    Color("blue", "#3598db"),
    Color("blueIntense", "#297fb8"),
    Color("darkBlue", "#34495e"),
    Color("darkBlueIntense", "#2d3e50"),
    Color("lightGrey", "#ecf0f1"),
    Color("lightGreyIntense", "#bec3c7"),
    Color("grey", "#95a5a5"),
    Color("greyIntense", "#7e8c8d"),
    Color("magenta", "#ef3e96"),
    Color("magentaIntense", "#e52383"),
    Color("violet", "#df21b9"),
    Color("violetIntense", "#be127e"),
    Color("purple", "#9a59b5"),
    Color("purpleIntense", "#8d44ad"),
    Color("lightBlue", "#7dc2d2"),
    Color("lightBlueIntense", "#1cabbb"),
    Color("white", "#ffffff"),
    Color("whiteIntense", "#f3f5f7"),
    Color("black", "#000000"),
)

DEFAULT_BACKGROUND_COLORS = ("#f3f5f7", "#ecf0f1", "#2d3e50", "#393939")

_HEX_DIGITS = set("0123456789abcdefABCDEF")


def hex_to_rgb(code: str) -> Tuple[int, int, int]:
    s = code[1:] if code.startswith("#") else code
    if len(s) != 6 or not set(s) <= _HEX_DIGITS:
        raise ConfigError(f"color {code!r} must be a 6 digit hex string")
    return int(s[0:2], 16), int(s[2:4], 16), int(s[4:6], 16)


@dataclass(frozen=True)
class Settings:
    # one color for every tile when False
    two_color: bool = True
    # opacity of the drawn tiles, the background stays opaque
    alpha: int = 255
    transparent_background: bool = False
    color_palette: Tuple[Color, ...] = DEFAULT_COLOR_PALETTE
    background_colors: Tuple[str, ...] = DEFAULT_BACKGROUND_COLORS
    # draw at N times the size and scale down for smooth edges
    oversample: int = 1

    def __post_init__(self):
        if not self.color_palette:
            raise ConfigError("color palette is empty")
        if not self.transparent_background and not self.background_colors:
            raise ConfigError("background color list is empty")
        if not 0 <= int(self.alpha) <= 255:
            raise ConfigError(f"alpha {self.alpha} out of range 0..255")

    def replace(self, **changes) -> "Settings":
        return dataclasses.replace(self, **changes)


def default_settings() -> Settings:
    """Recommended settings: two colors, opaque, random light/dark background."""
    return Settings()
