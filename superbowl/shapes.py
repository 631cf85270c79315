"""Paddle, bricks and the deadly strip at the bottom of the board."""

from __future__ import annotations

from dataclasses import dataclass, field

Color = tuple[int, int, int]

PADDLE_COLOR: Color = (234, 54, 128)
YELLOW: Color = (255, 255, 0)
ORANGE: Color = (255, 127, 39)
RED: Color = (255, 0, 0)
DEATH_ZONE_COLOR: Color = YELLOW

BRICK_LIVES = 3
_LIFE_COLORS: dict[int, Color] = {3: YELLOW, 2: ORANGE, 1: RED}


@dataclass
class Paddle:
    """The player's paddle, moved sideways by a fixed speed."""

    x: float
    y: float
    width: float
    height: float
    speed: float
    color: Color = PADDLE_COLOR

    def move_left(self) -> None:
        self.x -= self.speed

    def move_right(self) -> None:
        self.x += self.speed


@dataclass
class Brick:
    """A brick that loses lives when hit and changes colour with them."""

    x: float
    y: float
    width: float
    height: float
    lives: int = BRICK_LIVES
    _color: Color = field(default=YELLOW, init=False, repr=False)

    def __post_init__(self) -> None:
        self._refresh_color()

    def _refresh_color(self) -> None:
        # Lives outside 1..3 keep whatever colour the brick last had.
        self._color = _LIFE_COLORS.get(self.lives, self._color)

    def take_damage(self, amount: int) -> None:
        self.lives -= amount
        self._refresh_color()

    def alive(self) -> bool:
        return self.lives > 0

    def color(self) -> Color:
        return self._color


@dataclass
class DeathZone:
    """The strip along the bottom edge; touching it loses the game."""

    x: float
    y: float
    width: float
    height: float
    color: Color = DEATH_ZONE_COLOR