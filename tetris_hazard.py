
"""Bedrock: single ungrouped hazard blocks dropped on a fixed cadence"""
import logging
from dataclasses import replace

from tetris_block import BEDROCK, NO_GROUP, new_block, locked, shifted_down
from tetris_board import vertical_ok, held_by_falling
from tetris_config import CONFIG
from tetris_layout import columns, cell_width
from tetris_rng import RandomSequence
from tetris_state import State

log = logging.getLogger(__name__)


def drop_column(s: State) -> int:
    return min(RandomSequence.scale(s.random_value, columns()), columns() - 1)

def count_down(s: State) -> State:
    """Advance the countdown by one; drop a bedrock block when it runs out.
    An occupied top cell holds the drop back until a later spawn."""
    remaining = s.time_drop_bedrock - 1
    if remaining > 0:
        return replace(s, time_drop_bedrock=remaining)
    col = drop_column(s)
    rock = new_block(-(s.bedrock_count + 1), NO_GROUP, col * cell_width(), 0, BEDROCK)
    if not vertical_ok(rock, s.blocks):
        log.debug("column %d blocked, bedrock held back", col)
        return replace(s, time_drop_bedrock=1)
    log.debug("bedrock %d dropped in column %d", rock.id, col)
    return replace(
        s,
        blocks=s.blocks + (rock,),
        bedrock_count=s.bedrock_count + 1,
        time_drop_bedrock=int(CONFIG["DROP_BED_ROCK"]),
    )

def fall(s: State) -> State:
    """One gravity step for every falling bedrock block; blocked ones settle."""
    blocks = list(s.blocks)
    game_end = s.game_end
    for i, b in enumerate(blocks):
        if b.placed or b.kind != BEDROCK:
            continue
        down = shifted_down(b)
        if vertical_ok(down, blocks):
            blocks[i] = down
        elif held_by_falling([down], blocks):
            # resting on the falling piece; wait for it to move on
            continue
        else:
            blocks[i] = locked(b)
            if b.y <= 0:
                game_end = True
                log.info("bedrock settled on the top row, game over at score %d", s.score)
    return replace(s, blocks=tuple(blocks), game_end=game_end)
