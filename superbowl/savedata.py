"""Saving and loading progress, and snapshots of the board taken on pause."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from superbowl.ball import Ball
from superbowl.settings import Progress
from superbowl.shapes import Brick, Paddle

SAVE_FILE = "pilkaskills.txt"


@dataclass(frozen=True)
class PauseSnapshot:
    """State of the board recorded when the game is paused."""

    paddle_size: tuple[float, float]
    ball_position: tuple[float, float]
    ball_velocity: tuple[float, float]
    brick_position: tuple[float, float]


def take_snapshot(paddle: Paddle, ball: Ball, brick: Brick) -> PauseSnapshot:
    return PauseSnapshot(
        paddle_size=(paddle.width, paddle.height),
        ball_position=(ball.x, ball.y),
        ball_velocity=(ball.vx, ball.vy),
        brick_position=(brick.x, brick.y),
    )


def save_progress(progress: Progress, path: str | Path = SAVE_FILE) -> None:
    """Write points and strength as two space-separated integers."""
    Path(path).write_text(f"{progress.points} {progress.strength}")


def _read_values(path: str | Path, defaults: tuple[int, int]) -> tuple[int, int]:
    values = list(defaults)
    try:
        tokens = Path(path).read_text().split()
    except FileNotFoundError:
        return defaults
    for index, token in enumerate(tokens[:2]):
        try:
            values[index] = int(token)
        except ValueError:
            break
    return values[0], values[1]


def load_progress(path: str | Path = SAVE_FILE) -> Progress:
    """Read saved progress; a missing or unreadable file gives a fresh start."""
    points, strength = _read_values(path, (0, 0))
    return Progress(points=points, strength=strength)


def read_points(path: str | Path = SAVE_FILE) -> int:
    """Read only the saved point count."""
    return _read_values(path, (0, 0))[0]