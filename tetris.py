
"""
Bedrock Tetris: simulation core
==============================

The whole game is a pure reducer: ``reduce_state(state, event) -> state``.
Every tick, key press or random sample arrives as one event; the reducer
builds a brand-new State and never mutates the old one. Rendering and input
capture live outside (see main.py / tetris_render.py).

-------------------------------------------------------------
PIPELINE PER EVENT
-------------------------------------------------------------

  1. Restart / RandomTick are handled on their own.
  2. No active piece  -> spawn one (preview first) and count down the
     bedrock cadence.
  3. Rotate           -> rotate around the pivot, keep it only if it fits.
  4. Move / SoftDrop / GravityTick
                      -> optional sideways shift (dropped if blocked), then
                         one step down. A blocked step locks the piece,
                         scores it, clears full rows and checks game over.
  5. GravityTick also lets falling bedrock drop one cell. A piece resting
     on falling bedrock waits for it instead of locking.
  6. Level and grey floor are brought up to date.

-------------------------------------------------------------
MODULES
-------------------------------------------------------------

  • tetris_block  : Block record + builders
  • tetris_state  : State snapshot + views
  • tetris_piece  : piece catalog and pivot rotation
  • tetris_rng    : LCG for piece indices
  • tetris_board  : collision checks, occupancy, row clearing
  • tetris_level  : level and grey floor
  • tetris_hazard : bedrock countdown and fall
  • tetris_events : events and the bounded queue
"""
from __future__ import annotations

import logging
from dataclasses import replace
from itertools import accumulate
from typing import Iterable, Iterator, List, Optional, Tuple

from tetris_block import Block, moved_to, locked, shifted_down
from tetris_board import group_horizontal_ok, group_vertical_ok, fits, held_by_falling, sweep
from tetris_config import CONFIG
from tetris_events import (
    EVENT_TYPES, Event, EventQueue, LEFT, RIGHT,
    Move, Rotate, Restart, GravityTick, RandomTick,
)
from tetris_hazard import count_down, fall
from tetris_level import update_level
from tetris_piece import rotate, spawn_piece
from tetris_rng import RandomSequence
from tetris_state import State, active_group, initial_state

log = logging.getLogger(__name__)


def halted(s: State) -> bool:
    return s.game_end and bool(CONFIG["HALT_ON_GAME_OVER"])

# -------------------------------------------------------------
# TRANSITIONS
# -------------------------------------------------------------

def restart(s: State) -> State:
    high = max(s.high_score, s.score)
    if high > s.high_score:
        log.info("new high score %d", high)
    log.info("restart")
    return initial_state(high_score=high)

def take_random(s: State, value: int) -> State:
    """Remember the latest random sample unless it maps to the no-op index."""
    if not RandomSequence.is_valid_index(RandomSequence.scale(value)):
        return s
    return replace(s, random_value=value)

def spawn(s: State) -> State:
    index = s.next_shape if s.next_shape is not None else RandomSequence.scale(s.random_value)
    if not RandomSequence.is_valid_index(index):
        return s
    piece = spawn_piece(s, index)
    if not fits(piece, s.blocks):
        log.info("no room to spawn, game over at score %d", s.score)
        return replace(s, game_end=True)
    upcoming = RandomSequence.scale(s.random_value)
    s = replace(
        s,
        blocks=s.blocks + tuple(piece),
        block_count=s.block_count + len(piece),
        big_block_count=s.big_block_count + 1,
        next_shape=upcoming if RandomSequence.is_valid_index(upcoming) else None,
    )
    log.debug("spawned %s as group %d", piece[0].kind, piece[0].group)
    return count_down(s)

def _without(s: State, group: Tuple[Block, ...]) -> Tuple[Block, ...]:
    ids = {b.id for b in group}
    return tuple(b for b in s.blocks if b.id not in ids)

def rotate_active(s: State, group: Tuple[Block, ...]) -> State:
    turned = rotate(group)
    if turned == group or not fits(turned, s.blocks):
        return s
    return replace(s, blocks=_without(s, group) + turned)

def lock(s: State, group: Tuple[Block, ...]) -> State:
    """Freeze the piece where it stands, score it and clear full rows."""
    blocks = _without(s, group) + tuple(locked(b) for b in group)
    score = s.score + int(CONFIG["DROP_BLOCK_SCORE"])
    blocks, all_rows, cleared = sweep(blocks)
    score += cleared * int(CONFIG["CLEAR_ROW_SCORE"])
    if cleared:
        log.debug("%d row(s) cleared, score %d", cleared, score)
    game_end = s.game_end or any(b.placed and b.y <= 0 for b in blocks)
    if game_end and not s.game_end:
        log.info("game over, score %d", score)
    return replace(s, blocks=blocks, all_rows=all_rows, score=score, game_end=game_end)

def step(s: State, group: Tuple[Block, ...], dx: int = 0) -> State:
    """Sideways shift (if any and if valid) followed by one step down."""
    moved = group
    if dx:
        trial = tuple(moved_to(b, b.x + dx * b.width, b.y) for b in group)
        if group_horizontal_ok(trial, s.blocks):
            moved = trial
    down = tuple(shifted_down(b) for b in moved)
    if group_vertical_ok(down, s.blocks):
        return replace(s, blocks=_without(s, group) + down)
    if held_by_falling(down, s.blocks):
        # sitting on falling bedrock; hold position until it settles
        return replace(s, blocks=_without(s, group) + moved)
    return lock(s, moved)

# -------------------------------------------------------------
# REDUCER
# -------------------------------------------------------------

def reduce_state(s: State, e: Event) -> State:
    if not isinstance(e, EVENT_TYPES):
        raise TypeError(f"not a game event: {e!r}")
    if isinstance(e, Move) and e.direction not in (LEFT, RIGHT):
        raise ValueError(f"unknown move direction: {e.direction!r}")

    if isinstance(e, Restart):
        return restart(s)
    if halted(s):
        return s
    if isinstance(e, RandomTick):
        return take_random(s, e.value)

    group = active_group(s)
    if not group:
        s = spawn(s)
    elif isinstance(e, Rotate):
        s = rotate_active(s, group)
    else:
        dx = e.direction if isinstance(e, Move) else 0
        s = step(s, group, dx)

    if isinstance(e, GravityTick):
        s = fall(s)
    return update_level(s)

def run(events: Iterable[Event], s: Optional[State] = None) -> State:
    final = s if s is not None else initial_state()
    for final in states(events, final):
        pass
    return final

def states(events: Iterable[Event], s: Optional[State] = None) -> Iterator[State]:
    """Every snapshot, starting with the one passed in."""
    return accumulate(events, reduce_state, initial=s if s is not None else initial_state())

def preview_blocks(s: State) -> List[Block]:
    if s.next_shape is None:
        return []
    return spawn_piece(s, s.next_shape)

# -------------------------------------------------------------
# DRIVER
# -------------------------------------------------------------

class Game:
    """
    Feeds queued events through the reducer one at a time and hands each new
    snapshot to the renderer (anything with draw / update_text /
    show_game_over). Closing the queue is the only way to cancel.
    """
    def __init__(self, state: Optional[State] = None, renderer=None, queue: Optional[EventQueue] = None):
        self.state = state if state is not None else initial_state()
        self.renderer = renderer
        self.queue = queue if queue is not None else EventQueue()

    @property
    def running(self) -> bool:
        return not self.queue.closed and not halted(self.state)

    def post(self, e: Event) -> bool:
        return self.queue.offer(e)

    def step(self, e: Event) -> State:
        self.state = reduce_state(self.state, e)
        self.render()
        return self.state

    def pump(self) -> int:
        n = 0
        for e in self.queue.drain():
            self.step(e)
            n += 1
        return n

    def stop(self):
        self.queue.close()

    def render(self):
        if self.renderer is None:
            return
        self.renderer.draw(self.state, preview_blocks(self.state))
        self.renderer.update_text(self.state)
        self.renderer.show_game_over(self.state.game_end)
