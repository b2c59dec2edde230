"""Snake on a square board."""

from __future__ import annotations

import random
from collections import deque
from enum import Enum

SQUARES = 16
INITIAL_SPEED = 0.3
FRUIT_SCORE = 100


class Direction(Enum):
    """A unit step on the board."""

    UP = (0, -1)
    DOWN = (0, 1)
    RIGHT = (1, 0)
    LEFT = (-1, 0)

    @property
    def opposite(self) -> Direction:
        dx, dy = self.value
        return Direction((-dx, -dy))


class SnakeGame:
    """Game state; `tick` moves the snake one square, `speed` is seconds per tick."""

    def __init__(self, squares: int = SQUARES, rng: random.Random | None = None) -> None:
        self.squares = squares
        self.rng = rng if rng is not None else random.Random()
        self.restart()

    def _random_square(self) -> tuple[int, int]:
        return (self.rng.randrange(self.squares), self.rng.randrange(self.squares))

    def restart(self) -> None:
        """Start a new game."""
        self.head: tuple[int, int] = (0, 0)
        self.body: deque[tuple[int, int]] = deque()
        self.direction = Direction.RIGHT
        self.fruit = self._random_square()
        self.score = 0
        self.speed = INITIAL_SPEED
        self.game_over = False

    def steer(self, direction: Direction) -> None:
        """Turn, unless that would reverse into the snake's own body."""
        if not self.game_over and self.direction is not direction.opposite:
            self.direction = direction

    def tick(self) -> bool:
        """Move one square; returns whether the game is over."""
        if self.game_over:
            return True
        self.body.appendleft(self.head)
        dx, dy = self.direction.value
        self.head = (self.head[0] + dx, self.head[1] + dy)
        if self.head == self.fruit:
            self.fruit = self._random_square()
            self.score += FRUIT_SCORE
            self.speed *= 0.9
        else:
            self.body.pop()
        x, y = self.head
        if not (0 <= x < self.squares and 0 <= y < self.squares) or self.head in self.body:
            self.game_over = True
        return self.game_over