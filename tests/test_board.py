from tetris_block import BEDROCK, GREY, moved_to, shifted_down
from tetris_board import (
    blockers, horizontal_ok, vertical_ok, group_horizontal_ok, group_vertical_ok, held_by_falling,
    occupancy, full_rows, clear_rows, sweep,
)
from tetris_layout import right_edge_x, floor_y


def test_horizontal_bounds(make_cell):
    assert horizontal_ok(make_cell(0, 0, 5, placed=False), [])
    assert horizontal_ok(make_cell(0, 9, 5, placed=False), [])
    b = make_cell(0, 0, 5, placed=False)
    assert not horizontal_ok(moved_to(b, -20, b.y), [])
    assert not horizontal_ok(moved_to(b, right_edge_x() + 20, b.y), [])


def test_overlap_with_other_group_blocks(make_cell):
    wall = make_cell(1, 3, 5)
    mover = make_cell(2, 3, 5, group=4, placed=False)
    assert not horizontal_ok(mover, [wall])
    assert not vertical_ok(mover, [wall])


def test_own_group_is_ignored(make_cell):
    a = make_cell(1, 3, 5, group=4, placed=False)
    b = make_cell(2, 3, 5, group=4, placed=False)
    assert horizontal_ok(a, [a, b])


def test_ungrouped_blocks_still_collide_with_each_other(make_cell):
    rock = make_cell(-1, 2, 2, kind=BEDROCK, placed=False)
    other = make_cell(-2, 2, 2, kind=BEDROCK)
    assert not vertical_ok(rock, [other])
    assert vertical_ok(rock, [rock])


def test_blockers_lists_other_groups_on_the_cell(make_cell):
    mover = make_cell(0, 3, 5, group=4, placed=False)
    rock = make_cell(-1, 3, 5, kind=BEDROCK, placed=False)
    assert blockers(mover, [mover, rock, make_cell(1, 4, 5)]) == [rock]


def test_held_only_by_falling_blocks(make_cell):
    piece = [make_cell(0, 2, 9, group=0, placed=False), make_cell(1, 3, 9, group=0, placed=False)]
    rock = make_cell(-1, 2, 9, kind=BEDROCK, placed=False)
    assert held_by_falling(piece, [rock])
    assert not held_by_falling(piece, [rock, make_cell(2, 3, 9)])
    assert not held_by_falling(piece, [])
    below_floor = [shifted_down(make_cell(0, 2, 19, group=0, placed=False))]
    assert not held_by_falling(below_floor, [rock])


def test_floor(make_cell):
    b = make_cell(0, 4, 19, placed=False)
    assert b.y == floor_y()
    assert vertical_ok(b, [])
    assert not vertical_ok(shifted_down(b), [])


def test_one_blocked_block_blocks_the_group(make_cell):
    group = [make_cell(i, i, 10, group=1, placed=False) for i in range(4)]
    blocker = make_cell(9, 3, 11)
    down = [shifted_down(b) for b in group]
    assert not group_vertical_ok(down, group + [blocker])
    assert group_horizontal_ok(group, group + [blocker])


def test_occupancy_only_counts_placed_clearable(make_cell):
    blocks = [
        make_cell(0, 0, 19),
        make_cell(1, 1, 19, placed=False, group=2),
        make_cell(2, 2, 19, kind=GREY),
        make_cell(-1, 3, 19, kind=BEDROCK),
    ]
    grid = occupancy(blocks)
    assert len(grid) == 20 and len(grid[0]) == 10
    assert grid[19][:4] == (True, False, False, False)
    assert sum(map(sum, grid)) == 1


def test_clearing_a_row_drops_only_what_is_above(make_cell):
    row = [make_cell(i, i, 18) for i in range(10)]
    above = make_cell(20, 4, 10)
    below = make_cell(21, 4, 19)
    blocks = row + [above, below]
    assert full_rows(occupancy(blocks)) == [18]
    out = clear_rows(blocks, [18])
    assert not [b for b in out if b.y == 18 * 20 and b.id < 10]
    assert {b.id: b.y for b in out} == {20: 11 * 20, 21: 19 * 20}


def test_two_rows_clear_without_eating_survivors(make_cell):
    blocks = [make_cell(i, i, 18) for i in range(10)]
    blocks += [make_cell(10 + i, i, 19) for i in range(10)]
    blocks += [make_cell(30, 0, 17), make_cell(31, 5, 16)]
    out, grid, cleared = sweep(blocks)
    assert cleared == 2
    assert {b.id: b.y for b in out} == {30: 19 * 20, 31: 18 * 20}
    assert not any(any(r) for r in grid)


def test_sweep_without_full_rows_keeps_blocks(make_cell):
    blocks = tuple(make_cell(i, i, 19) for i in range(9))
    out, grid, cleared = sweep(blocks)
    assert cleared == 0
    assert out == blocks
    assert sum(grid[19]) == 9


def test_grey_or_bedrock_hole_stops_a_clear(make_cell):
    blocks = [make_cell(i, i, 19) for i in range(9)] + [make_cell(-1, 9, 19, kind=BEDROCK)]
    assert full_rows(occupancy(blocks)) == []
