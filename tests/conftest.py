from dataclasses import replace

import pytest

from tetris_block import NO_GROUP, new_block
from tetris_config import CONFIG
from tetris_layout import cell_width, cell_height
from tetris_state import initial_state


@pytest.fixture(autouse=True)
def restore_config():
    saved = dict(CONFIG)
    yield
    CONFIG.clear()
    CONFIG.update(saved)


def cell(id, col, row, kind="T", group=NO_GROUP, placed=True):
    """Block at a grid cell rather than a pixel position."""
    return new_block(id, group, col * cell_width(), row * cell_height(), kind, placed=placed)


def board_state(blocks, **changes):
    blocks = tuple(blocks)
    ids = [b.id for b in blocks if b.id >= 0]
    s = replace(initial_state(), blocks=blocks, block_count=max(ids, default=-1) + 1)
    return replace(s, **changes) if changes else s


@pytest.fixture
def make_cell():
    return cell


@pytest.fixture
def make_state():
    return board_state
