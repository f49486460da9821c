
"""Immutable game snapshot and read-only views over it"""
from dataclasses import dataclass
from typing import Optional, Tuple

from tetris_block import Block, NO_GROUP
from tetris_config import CONFIG
from tetris_layout import columns, rows
from tetris_rng import RandomSequence

Rows = Tuple[Tuple[bool, ...], ...]


@dataclass(frozen=True)
class State:
    blocks: Tuple[Block, ...]
    score: int
    level: int
    high_score: int
    all_rows: Rows
    next_shape: Optional[int]
    time_drop_bedrock: int
    random_value: int
    block_count: int
    big_block_count: int
    grey_block_count: int
    bedrock_count: int
    game_end: bool


def empty_rows() -> Rows:
    return tuple(tuple(False for _ in range(columns())) for _ in range(rows()))

def initial_state(high_score: int = 0, seed: Optional[int] = None) -> State:
    if seed is None:
        seed = 0 if CONFIG["SEED"] is None else int(CONFIG["SEED"])
    return State(
        blocks=(),
        score=0,
        level=1,
        high_score=high_score,
        all_rows=empty_rows(),
        next_shape=None,
        time_drop_bedrock=int(CONFIG["DROP_BED_ROCK"]),
        random_value=RandomSequence.hash(seed),
        block_count=0,
        big_block_count=0,
        grey_block_count=0,
        bedrock_count=0,
        game_end=False,
    )

# ---------- views ----------

def active_group(s: State) -> Tuple[Block, ...]:
    """Blocks of the controllable piece, pivot first; empty when none is falling."""
    return tuple(b for b in s.blocks if not b.placed and b.group != NO_GROUP)
