from identicon.kernel.decoder import decode_code
from identicon.kernel.patches import MIDDLE_PATCHES, PATCHES, turn_points

HELLO = 0xDEF46F73BCDEC043

def test_hello_fields():
    pc = decode_code(HELLO)
    assert pc.middle_type == 15
    assert pc.middle_invert is False
    assert pc.corner_type == 8
    assert pc.corner_invert is False
    assert pc.corner_turn == 0
    assert pc.side_type == 0
    assert pc.side_invert is True
    assert pc.side_turn == 1
    assert pc.swap_cross is False

def test_single_bits():
    assert decode_code(1 << 2).middle_invert
    assert decode_code(1 << 7).corner_invert
    assert decode_code(1 << 14).side_invert
    assert decode_code(1 << 47).swap_cross
    assert decode_code(0b1111 << 3).corner_type == 15
    assert decode_code(0b11 << 8).corner_turn == 3
    assert decode_code(0b1011 << 10).side_type == 11
    assert decode_code(0b10 << 15).side_turn == 2

def test_middle_type_is_symmetric_shape():
    for raw in range(4):
        for high in (0, 1 << 20, HELLO & ~0x3, 0xFFFFFFFFFFFFFFFC):
            pc = decode_code(high | raw)
            assert pc.middle_type in (0, 4, 8, 15)
            assert pc.middle_type == MIDDLE_PATCHES[raw]

def test_bit_47_touches_nothing_else():
    a = decode_code(HELLO)
    b = decode_code(HELLO ^ (1 << 47))
    assert a.swap_cross != b.swap_cross
    for field in ("middle_type", "middle_invert", "corner_type", "corner_invert",
                  "corner_turn", "side_type", "side_invert", "side_turn"):
        assert getattr(a, field) == getattr(b, field)

def test_catalog_shape():
    assert len(PATCHES) == 16
    assert PATCHES[15] == ()
    assert len(PATCHES[6]) == 7
    assert len(PATCHES[9]) == 5
    for pts in PATCHES:
        for x, y in pts:
            assert 0 <= x <= 4 and 0 <= y <= 4

def test_turn_points():
    pts = [(0, 0), (4, 0), (0, 4)]
    assert turn_points(pts, 0) == pts
    assert turn_points(pts, 1) == [(4, 0), (4, 4), (0, 0)]
    assert turn_points(pts, 4) == pts
    assert turn_points(pts, 6) == turn_points(pts, 2)
