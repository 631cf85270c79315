"""The playing board: bricks, paddle, ball and the death zone."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Protocol

from superbowl.ball import Ball
from superbowl.settings import SCREEN_HEIGHT, SCREEN_WIDTH, Progress
from superbowl.shapes import BRICK_LIVES, Brick, DeathZone, Paddle

MIN_ROWS = 1
MAX_ROWS = 5
COLUMNS = 4

BRICK_ORIGIN = (30.0, 30.0)
BRICK_GAP = (110.0, 50.0)
BRICK_SIZE = (100.0, 20.0)


class RandomSource(Protocol):
    def randint(self, a: int, b: int) -> int: ...


def _start_paddle() -> Paddle:
    return Paddle(SCREEN_WIDTH // 2 - 50, SCREEN_HEIGHT - 50, 100.0, 20.0, 0.1)


def _start_ball() -> Ball:
    return Ball(SCREEN_WIDTH // 2 + 25, SCREEN_HEIGHT // 2 - 100, 0.05, 0.05, 10.0, 1)


def _death_zone() -> DeathZone:
    return DeathZone(0.0, 590.0, 800.0, 20.0)


def _brick_grid(rows: int) -> list[Brick]:
    origin_x, origin_y = BRICK_ORIGIN
    gap_x, gap_y = BRICK_GAP
    width, height = BRICK_SIZE
    return [
        Brick(
            origin_x + column * (width + gap_x),
            origin_y + row * (height + gap_y),
            width,
            height,
            lives=BRICK_LIVES,
        )
        for column in range(COLUMNS)
        for row in range(rows)
    ]


@dataclass
class Game:
    """Everything on the board while a round is being played."""

    bricks: list[Brick] = field(default_factory=list)
    death_zone: DeathZone = field(default_factory=_death_zone)
    paddle: Paddle = field(default_factory=_start_paddle)
    ball: Ball = field(default_factory=_start_ball)
    _lost: bool = field(default=False, repr=False)

    def reset(self, rng: RandomSource | None = None) -> None:
        """Lay out a fresh board with a random number of brick rows."""
        rng = rng if rng is not None else random.Random()
        rows = rng.randint(MIN_ROWS, MAX_ROWS)
        self.bricks = _brick_grid(rows)
        self.death_zone = _death_zone()
        self.paddle = _start_paddle()
        self.ball = _start_ball()
        self._lost = False

    def step(self, progress: Progress, left: bool = False, right: bool = False) -> None:
        """Advance the board by one frame."""
        if left:
            self.paddle.move_left()
        if right:
            self.paddle.move_right()
        if self.ball.touches(self.death_zone):
            self._lost = True
        self.ball.update()
        self.ball.collide_paddle(self.paddle)
        self.ball.bounce_x(SCREEN_WIDTH)
        self.ball.bounce_y(SCREEN_HEIGHT)
        for brick in self.bricks:
            self.ball.hit_brick(brick, progress)

    def lost(self) -> bool:
        """Whether the ball has reached the death zone."""
        return self._lost