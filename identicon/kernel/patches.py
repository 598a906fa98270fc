"""
Patch catalog: 16 polygon outlines on a 4x4 grid, closed by the renderer.
"""

PATCHES = (
    # [0] full square
    ((0, 0), (4, 0), (4, 4), (0, 4)),
    # [1] right-angled triangle pointing top-left
    ((0, 0), (4, 0), (0, 4)),
    # [2] upward triangle
    ((2, 0), (4, 4), (0, 4)),
    # [3] left half, standing rectangle
    ((0, 0), (2, 0), (2, 4), (0, 4)),
    # [4] square standing on its diagonal
    ((2, 0), (4, 2), (2, 4), (0, 2)),
    # [5] kite pointing top-left
    ((0, 0), (4, 2), (4, 4), (2, 4)),
    # [6] sierpinski: triangle with an inner triangle cut out
    ((2, 0), (4, 4), (2, 4), (3, 2), (1, 2), (2, 4), (0, 4)),
    # [7] sharp triangle pointing top-left
    ((0, 0), (4, 2), (2, 4)),
    # [8] small centered square
    ((1, 1), (3, 1), (3, 3), (1, 3)),
    # [9] two small triangles touching at the center
    ((2, 0), (4, 0), (0, 4), (0, 2), (2, 2)),
    # [10] small top-left square
    ((0, 0), (2, 0), (2, 2), (0, 2)),
    # [11] down-pointing triangle on the bottom half
    ((0, 2), (4, 2), (2, 4)),
    # [12] up-pointing triangle on the bottom half
    ((2, 2), (4, 4), (0, 4)),
    # [13] small triangle, right angle bottom-right of the top-left quadrant
    ((2, 0), (2, 2), (0, 2)),
    # [14] small triangle, right angle top-left
    ((0, 0), (2, 0), (0, 2)),
    # [15] empty
    (),
)

GRID = 4

# rotationally symmetric shapes only: full, diamond, centered square, empty
MIDDLE_PATCHES = (0, 4, 8, 15)


def turn_points(points, turns: int):
    """Rotate grid points by quarter turns (clockwise on screen) about the grid center."""
    turns %= 4
    out = []
    for x, y in points:
        for _ in range(turns):
            x, y = GRID - y, x
        out.append((x, y))
    return out
