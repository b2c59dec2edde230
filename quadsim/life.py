"""Conway's Game of Life on a bounded grid."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum

_OFFSETS = tuple(
    (dx, dy) for dy in (-1, 0, 1) for dx in (-1, 0, 1) if (dx, dy) != (0, 0)
)


class CellState(Enum):
    """State of one cell."""

    ALIVE = "alive"
    DEAD = "dead"


def next_state(state: CellState, neighbors: int) -> CellState:
    """The state a cell takes in the next generation."""
    if state is CellState.ALIVE:
        return CellState.ALIVE if neighbors in (2, 3) else CellState.DEAD
    return CellState.ALIVE if neighbors == 3 else CellState.DEAD


@dataclass
class LifeGrid:
    """A grid of cells stored as rows; cells outside the grid count as dead."""

    width: int
    height: int
    cells: list[list[CellState]]

    def __post_init__(self) -> None:
        if len(self.cells) != self.height or any(len(row) != self.width for row in self.cells):
            raise ValueError("cells do not match the grid dimensions")

    @classmethod
    def random(cls, width: int, height: int, rng: random.Random | None = None) -> LifeGrid:
        """A grid where each cell is alive with probability 1 in 5."""
        rng = rng if rng is not None else random.Random()
        cells = [
            [CellState.ALIVE if rng.randrange(5) == 0 else CellState.DEAD for _ in range(width)]
            for _ in range(height)
        ]
        return cls(width, height, cells)

    def neighbors(self, x: int, y: int) -> int:
        """Number of live cells around (x, y) that lie inside the grid."""
        return sum(
            1
            for dx, dy in _OFFSETS
            if 0 <= x + dx < self.width
            and 0 <= y + dy < self.height
            and self.cells[y + dy][x + dx] is CellState.ALIVE
        )

    def step(self) -> None:
        """Advance the whole grid by one generation."""
        self.cells = [
            [next_state(state, self.neighbors(x, y)) for x, state in enumerate(row)]
            for y, row in enumerate(self.cells)
        ]