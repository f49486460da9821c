
"""Board helpers: move validation, occupancy, row clearing"""
import logging
from typing import Iterable, List, Sequence, Tuple

from tetris_block import Block, same_group, shifted_down
from tetris_layout import columns, rows, right_edge_x, floor_y, column_of, row_of
from tetris_state import Rows, empty_rows

log = logging.getLogger(__name__)


def blockers(candidate: Block, blocks: Iterable[Block]) -> List[Block]:
    """Blocks outside the candidate's group sitting on its cell."""
    return [
        other for other in blocks
        if not same_group(candidate, other) and other.x == candidate.x and other.y == candidate.y
    ]

def _occupied_by_other(candidate: Block, blocks: Iterable[Block]) -> bool:
    return bool(blockers(candidate, blocks))

def horizontal_ok(candidate: Block, blocks: Iterable[Block]) -> bool:
    if candidate.x < 0 or candidate.x > right_edge_x():
        return False
    return not _occupied_by_other(candidate, blocks)

def vertical_ok(candidate: Block, blocks: Iterable[Block]) -> bool:
    if candidate.y > floor_y():
        return False
    return not _occupied_by_other(candidate, blocks)

def group_horizontal_ok(group: Sequence[Block], blocks: Sequence[Block]) -> bool:
    """A group moves atomically: one blocked block blocks them all."""
    return all(horizontal_ok(b, blocks) for b in group)

def group_vertical_ok(group: Sequence[Block], blocks: Sequence[Block]) -> bool:
    return all(vertical_ok(b, blocks) for b in group)

def fits(group: Sequence[Block], blocks: Sequence[Block]) -> bool:
    return group_horizontal_ok(group, blocks) and group_vertical_ok(group, blocks)

def held_by_falling(group: Sequence[Block], blocks: Sequence[Block]) -> bool:
    """True when a downward move is blocked only by blocks that are still
    falling themselves; the mover should wait rather than settle."""
    if any(b.y > floor_y() for b in group):
        return False
    hits = [o for b in group for o in blockers(b, blocks)]
    return bool(hits) and all(not o.placed for o in hits)

# ---------- occupancy & clearing ----------

def occupancy(blocks: Iterable[Block]) -> Rows:
    """Row-major grid, True where a placed clearable block sits."""
    grid = [[False] * columns() for _ in range(rows())]
    for b in blocks:
        if not (b.placed and b.clearable):
            continue
        r, c = row_of(b.y), column_of(b.x)
        if 0 <= r < rows() and 0 <= c < columns():
            grid[r][c] = True
    return tuple(tuple(r) for r in grid)

def full_rows(all_rows: Rows) -> List[int]:
    return [r for r, row in enumerate(all_rows) if all(row)]

def clear_rows(blocks: Sequence[Block], cleared: Sequence[int]) -> Tuple[Block, ...]:
    """Remove blocks on the cleared rows and drop everything above each of them
    by one cell per cleared row beneath it."""
    if not cleared:
        return tuple(blocks)
    cleared = set(cleared)
    out = []
    for b in blocks:
        r = row_of(b.y)
        if r in cleared:
            continue
        drop = sum(1 for c in cleared if r < c)
        out.append(shifted_down(b, drop) if drop else b)
    log.debug("cleared rows %s, %d blocks removed", sorted(cleared), len(blocks) - len(out))
    return tuple(out)

def sweep(blocks: Sequence[Block]) -> Tuple[Tuple[Block, ...], Rows, int]:
    """Rebuild occupancy after a lock and clear what is full.
    Returns (blocks, occupancy, rows cleared); occupancy resets when anything clears."""
    grid = occupancy(blocks)
    cleared = full_rows(grid)
    if not cleared:
        return tuple(blocks), grid, 0
    return clear_rows(blocks, cleared), empty_rows(), len(cleared)
