
"""Piece catalog and pivot rotation"""
from typing import Callable, List, Sequence, Tuple

from tetris_block import Block, new_block, moved_to
from tetris_layout import center_x, cell_width, cell_height
from tetris_state import State

# Cell offsets from the pivot; the pivot is always listed first.
OFFSETS = {
    "O": [(0, 0), (1, 0), (0, 1), (1, 1)],
    "T": [(0, 0), (0, -1), (-1, 0), (1, 0)],
    "I": [(0, 0), (-1, 0), (1, 0), (2, 0)],
    "S": [(0, 0), (0, -1), (1, -1), (-1, 0)],
    "Z": [(0, 0), (-1, -1), (0, -1), (1, 0)],
    "J": [(0, 0), (-1, -1), (-1, 0), (1, 0)],
    "L": [(0, 0), (1, -1), (-1, 0), (1, 0)],
}


def _build(s: State, kind: str) -> List[Block]:
    offsets = OFFSETS[kind]
    top = min(dy for _, dy in offsets)
    cx, cw, ch = center_x(), cell_width(), cell_height()
    group = s.big_block_count
    return [
        new_block(s.block_count + i, group, cx + dx * cw, (dy - top) * ch, kind)
        for i, (dx, dy) in enumerate(offsets)
    ]

def square(s: State) -> List[Block]:
    return _build(s, "O")

def t_shape(s: State) -> List[Block]:
    return _build(s, "T")

def straight(s: State) -> List[Block]:
    return _build(s, "I")

def skew_s(s: State) -> List[Block]:
    return _build(s, "S")

def skew_z(s: State) -> List[Block]:
    return _build(s, "Z")

def j_shape(s: State) -> List[Block]:
    return _build(s, "J")

def l_shape(s: State) -> List[Block]:
    return _build(s, "L")

# Indexed by the random sequence; order matches KINDS
CATALOG: List[Callable[[State], List[Block]]] = [
    square, t_shape, straight, skew_s, skew_z, j_shape, l_shape,
]

def spawn_piece(s: State, index: int) -> List[Block]:
    return CATALOG[index](s)

# ---------- rotation ----------

# Pure translations in cells, applied `n` times for a block n cells from the pivot
ABOVE = (1, 1)
RIGHT = (-1, 1)
BELOW = (-1, -1)
LEFT = (1, -1)


def _translate(b: Block, step: Tuple[int, int], n: int) -> Block:
    return moved_to(b, b.x + step[0] * n * b.width, b.y + step[1] * n * b.height)

def rotate_block(pivot: Block, b: Block) -> Block:
    """Quarter turn clockwise around the pivot, by relative position."""
    dx = (b.x - pivot.x) // b.width
    dy = (b.y - pivot.y) // b.height
    n = max(abs(dx), abs(dy))
    if n == 0:
        return b
    left, right = dx < 0, dx > 0
    above, below = dy < 0, dy > 0

    # diagonal cases: two pure moves in a row
    if above and right:
        return _translate(_translate(b, ABOVE, n), RIGHT, n)
    if above and left:
        return _translate(_translate(b, ABOVE, n), LEFT, n)
    if below and right:
        return _translate(_translate(b, BELOW, n), RIGHT, n)
    if below and left:
        return _translate(_translate(b, BELOW, n), LEFT, n)

    if above:
        return _translate(b, ABOVE, n)
    if right:
        return _translate(b, RIGHT, n)
    if below:
        return _translate(b, BELOW, n)
    return _translate(b, LEFT, n)

def rotate(group: Sequence[Block]) -> Tuple[Block, ...]:
    """Rotated copy of a piece; the caller still has to validate it."""
    group = tuple(group)
    if not group or group[0].kind == "O":
        return group
    pivot = group[0]
    # blocks may end up above row 0; only walls, floor and overlaps are checked
    return (pivot,) + tuple(rotate_block(pivot, b) for b in group[1:])
