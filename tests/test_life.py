import random

import pytest

from quadsim.life import CellState, LifeGrid, next_state

A = CellState.ALIVE
D = CellState.DEAD


def grid_from(rows):
    cells = [[A if ch == "#" else D for ch in row] for row in rows]
    return LifeGrid(len(rows[0]), len(rows), cells)


@pytest.mark.parametrize(
    "state, count, expected",
    [
        (A, 0, D),
        (A, 1, D),
        (A, 2, A),
        (A, 3, A),
        (A, 4, D),
        (D, 3, A),
        (D, 2, D),
        (D, 4, D),
    ],
)
def test_next_state_rules(state, count, expected):
    assert next_state(state, count) is expected


def test_blinker_oscillates():
    horizontal = grid_from([".....", ".....", ".###.", ".....", "....."])
    vertical = grid_from([".....", "..#..", "..#..", "..#..", "....."])
    grid = grid_from([".....", ".....", ".###.", ".....", "....."])
    grid.step()
    assert grid.cells == vertical.cells
    grid.step()
    assert grid.cells == horizontal.cells


def test_block_is_still_life():
    rows = ["....", ".##.", ".##.", "...."]
    grid = grid_from(rows)
    grid.step()
    assert grid.cells == grid_from(rows).cells


def test_neighbors_ignore_outside_cells():
    grid = grid_from(["###", "###", "###"])
    assert grid.neighbors(0, 0) == 3
    assert grid.neighbors(1, 1) == 8


def test_random_is_reproducible_and_sized():
    a = LifeGrid.random(7, 4, random.Random(42))
    b = LifeGrid.random(7, 4, random.Random(42))
    assert a.cells == b.cells
    assert len(a.cells) == 4
    assert all(len(row) == 7 for row in a.cells)


def test_wrong_shape_raises():
    with pytest.raises(ValueError):
        LifeGrid(3, 2, [[D, D, D]])


def test_empty_grid_stays_empty():
    grid = grid_from(["...", "..."])
    grid.step()
    assert all(cell is D for row in grid.cells for cell in row)