
"""Level progression and the rising grey floor"""
import logging
from dataclasses import replace

from tetris_block import GREY, NO_GROUP, new_block, shifted_up
from tetris_board import occupancy
from tetris_config import CONFIG
from tetris_layout import columns, cell_width, cell_height, floor_y
from tetris_state import State

log = logging.getLogger(__name__)


def level_for(score: int) -> int:
    level = score // int(CONFIG["LEVEL_UP_SCORE"]) + 1
    return min(level, int(CONFIG["MAX_LEVEL"]))

def grey_target(level: int) -> int:
    return (level - 1) * columns()

def update_level(s: State) -> State:
    level = level_for(s.score)
    if level != s.level:
        log.debug("level %d -> %d at score %d", s.level, level, s.score)
        s = replace(s, level=level)
    if s.grey_block_count < grey_target(s.level):
        s = build_floor(s)
    return s

def build_floor(s: State) -> State:
    """Add grey blocks one at a time until the floor matches the level.

    Each new grey row starts by lifting every non-grey block one cell, so the
    row slides in under the stack.
    """
    blocks = list(s.blocks)
    grey_count = s.grey_block_count
    block_count = s.block_count
    game_end = s.game_end
    target = grey_target(s.level)
    cw, ch = cell_width(), cell_height()

    while grey_count < target:
        col = grey_count % columns()
        height = grey_count // columns()
        if col == 0:
            blocks = [b if b.kind == GREY else shifted_up(b) for b in blocks]
            if any(b.placed and b.y < 0 for b in blocks):
                game_end = True
            log.debug("grey row %d started", height + 1)
        blocks.append(new_block(block_count, NO_GROUP, col * cw, floor_y() - height * ch, GREY, placed=True))
        block_count += 1
        grey_count += 1

    if game_end and not s.game_end:
        log.info("stack pushed past the top by the grey floor, score %d", s.score)
    return replace(
        s,
        blocks=tuple(blocks),
        all_rows=occupancy(blocks),
        grey_block_count=grey_count,
        block_count=block_count,
        game_end=game_end,
    )
