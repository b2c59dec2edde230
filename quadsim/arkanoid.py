"""Breakout-style game logic in a 20x20 world."""

from __future__ import annotations

from dataclasses import dataclass, field

BLOCKS_W = 10
BLOCKS_H = 10
SCR_W = 20.0
SCR_H = 20.0
PLATFORM_SPEED = 3.0


def _full_wall() -> list[list[bool]]:
    return [[True] * BLOCKS_W for _ in range(BLOCKS_H)]


@dataclass
class ArkanoidGame:
    """Ball, paddle and a wall of blocks; `blocks[row][column]` is True while standing."""

    blocks: list[list[bool]] = field(default_factory=_full_wall)
    ball_x: float = 12.0
    ball_y: float = 7.0
    dx: float = 3.5
    dy: float = -3.5
    platform_x: float = 10.0
    stick: bool = True
    platform_width: float = 5.0
    platform_height: float = 0.2

    @property
    def blocks_left(self) -> int:
        return sum(sum(row) for row in self.blocks)

    @staticmethod
    def block_rect(column: int, row: int) -> tuple[float, float, float, float]:
        """(x, y, w, h) of the block's hit area."""
        block_w = SCR_W / BLOCKS_W
        block_h = 7.0 / BLOCKS_H
        return (column * block_w + 0.05, row * block_h + 0.05, block_w, block_h)

    def update(self, dt: float, left: bool = False, right: bool = False,
               space: bool = False) -> None:
        """Advance one frame with the given keys held."""
        half = self.platform_width / 2.0
        if right and self.platform_x < SCR_W - half:
            self.platform_x += PLATFORM_SPEED * dt
        if left and self.platform_x > half:
            self.platform_x -= PLATFORM_SPEED * dt

        if not self.stick:
            self.ball_x += self.dx * dt
            self.ball_y += self.dy * dt
        else:
            self.ball_x = self.platform_x
            self.ball_y = SCR_H - 0.5
            self.stick = not space

        if self.ball_x <= 0.0 or self.ball_x > SCR_W:
            self.dx = -self.dx
        on_platform = (
            self.ball_y > SCR_H - self.platform_height - 0.15 / 2.0
            and self.platform_x - half <= self.ball_x <= self.platform_x + half
        )
        if self.ball_y <= 0.0 or on_platform:
            self.dy = -self.dy
        if self.ball_y >= SCR_H:
            self.ball_y = 10.0
            self.dy = -abs(self.dy)
            self.stick = True

        for row, standing in enumerate(self.blocks):
            for column, alive in enumerate(standing):
                if not alive:
                    continue
                x, y, w, h = self.block_rect(column, row)
                if x <= self.ball_x < x + w and y <= self.ball_y < y + h:
                    self.dy = -self.dy
                    standing[column] = False