from tetris_block import BEDROCK, NO_GROUP
from tetris_config import CONFIG
from tetris_hazard import count_down, drop_column, fall
from tetris_rng import RandomSequence

# scales onto column 3 of 10
COLUMN_3 = 644245095


def test_countdown_only_ticks(make_state):
    s = make_state([], time_drop_bedrock=5)
    s = count_down(s)
    assert s.time_drop_bedrock == 4
    assert s.blocks == ()


def test_bedrock_drops_when_countdown_runs_out(make_state):
    s = make_state([], time_drop_bedrock=1, random_value=COLUMN_3)
    s = count_down(s)
    [rock] = s.blocks
    assert rock.kind == BEDROCK
    assert rock.id == -1
    assert rock.group == NO_GROUP
    assert not rock.placed
    assert rock.cell == (60, 0)
    assert s.bedrock_count == 1
    assert s.time_drop_bedrock == CONFIG["DROP_BED_ROCK"]


def test_drop_column_scales_the_random_value(make_state):
    assert drop_column(make_state([], random_value=0)) == 0
    assert drop_column(make_state([], random_value=COLUMN_3)) == 3
    assert drop_column(make_state([], random_value=RandomSequence.M - 1)) == 9


def test_occupied_drop_cell_holds_the_bedrock_back(make_cell, make_state):
    s = make_state([make_cell(0, 3, 0, group=0, placed=False)], time_drop_bedrock=1, random_value=COLUMN_3)
    held = count_down(s)
    assert held.blocks == s.blocks
    assert held.bedrock_count == 0
    assert held.time_drop_bedrock == 1
    s = count_down(make_state([], time_drop_bedrock=held.time_drop_bedrock, random_value=COLUMN_3))
    assert [b.cell for b in s.blocks] == [(60, 0)]


def test_bedrock_falls_and_settles(make_cell, make_state):
    rock = make_cell(-1, 2, 17, kind=BEDROCK, placed=False)
    s = make_state([rock, make_cell(0, 2, 19)])
    s = fall(s)
    assert s.blocks[0].y == 18 * 20 and not s.blocks[0].placed
    s = fall(s)
    assert s.blocks[0].y == 18 * 20 and s.blocks[0].placed
    assert not s.game_end


def test_bedrock_waits_on_a_falling_piece(make_cell, make_state):
    rock = make_cell(-1, 5, 0, kind=BEDROCK, placed=False)
    piece = make_cell(0, 5, 1, group=0, placed=False)
    s = fall(make_state([rock, piece]))
    assert s.blocks[0] == rock
    assert not s.game_end


def test_bedrock_stuck_on_top_row_ends_game(make_cell, make_state):
    rock = make_cell(-1, 5, 0, kind=BEDROCK, placed=False)
    s = fall(make_state([rock, make_cell(0, 5, 1)]))
    assert s.blocks[0].placed
    assert s.game_end
