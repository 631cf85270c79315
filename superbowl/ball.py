"""The ball and its collisions with walls, paddle, bricks and the death zone."""

from __future__ import annotations

from dataclasses import dataclass

from superbowl.settings import Progress
from superbowl.shapes import Brick, DeathZone, Paddle

BALL_COLOR = (255, 255, 255)


@dataclass
class Ball:
    """A ball with a position, a velocity and a radius."""

    x: float
    y: float
    vx: float
    vy: float
    radius: float
    strength: int = 1
    color: tuple[int, int, int] = BALL_COLOR

    def update(self) -> None:
        self.x += self.vx
        self.y += self.vy

    def shift_right(self) -> None:
        self.x += self.vx

    def shift_left(self) -> None:
        self.x -= self.vx

    def _hits_box(self, x: float, y: float, width: float, height: float) -> bool:
        # The hit point sits off-centre, so the left margin is widened by a tenth.
        bottom = self.y + self.radius
        return x - width / 10 <= self.x <= x + width and y <= bottom <= y + height

    def collide_paddle(self, paddle: Paddle) -> bool:
        """Reverse vertical motion when the ball lands on the paddle."""
        if self._hits_box(paddle.x, paddle.y, paddle.width, paddle.height):
            self.vy = -self.vy
            return True
        return False

    def bounce_x(self, width: float) -> None:
        if self.vx < 0 and self.x <= self.radius:
            self.vx = -self.vx
        if self.vx > 0 and self.x >= width - self.radius:
            self.vx = -self.vx

    def bounce_y(self, height: float) -> None:
        if self.vy < 0 and self.y <= self.radius:
            self.vy = -self.vy
        if self.vy > 0 and self.y >= height - self.radius:
            self.vy = -self.vy

    def hit_brick(self, brick: Brick, progress: Progress) -> bool:
        """Damage a live brick the ball touches, scoring a point."""
        if not brick.alive():
            return False
        if not self._hits_box(brick.x, brick.y, brick.width, brick.height):
            return False
        self.vy = -self.vy
        brick.take_damage(1 + progress.strength)
        progress.points += 1
        return True

    def touches(self, zone: DeathZone) -> bool:
        """Whether the ball has reached the death zone."""
        bottom = abs(self.y + self.radius)
        return (
            zone.x - zone.width <= self.x <= abs(zone.x + zone.width)
            and zone.y <= bottom <= zone.y + zone.height
        )