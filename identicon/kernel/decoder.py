"""
Bit-field decoding of a 64-bit code into shape selections.
"""

from dataclasses import dataclass

from .patches import MIDDLE_PATCHES


@dataclass(frozen=True)
class PatchCode:
    middle_type: int
    middle_invert: bool
    corner_type: int
    corner_invert: bool
    corner_turn: int
    side_type: int
    side_invert: bool
    side_turn: int
    swap_cross: bool


def _bits(code: int, shift: int, mask: int) -> int:
    return (code >> shift) & mask


def decode_code(code: int) -> PatchCode:
    code = int(code) & 0xFFFFFFFFFFFFFFFF
    return PatchCode(
        middle_type=MIDDLE_PATCHES[_bits(code, 0, 0x03)],
        middle_invert=_bits(code, 2, 0x01) == 1,
        corner_type=_bits(code, 3, 0x0F),
        corner_invert=_bits(code, 7, 0x01) == 1,
        corner_turn=_bits(code, 8, 0x03),
        side_type=_bits(code, 10, 0x0F),
        side_invert=_bits(code, 14, 0x01) == 1,
        side_turn=_bits(code, 15, 0x03),
        swap_cross=_bits(code, 47, 0x01) == 1,
    )
