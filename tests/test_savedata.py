from superbowl.ball import Ball
from superbowl.savedata import (
    PauseSnapshot,
    load_progress,
    read_points,
    save_progress,
    take_snapshot,
)
from superbowl.settings import Progress
from superbowl.shapes import Brick, Paddle


def test_save_format(tmp_path):
    path = tmp_path / "save.txt"
    save_progress(Progress(points=7, strength=2), path)
    assert path.read_text() == "7 2"


def test_round_trip(tmp_path):
    path = tmp_path / "save.txt"
    original = Progress(points=42, strength=3)
    save_progress(original, path)
    assert load_progress(path) == original


def test_read_points(tmp_path):
    path = tmp_path / "save.txt"
    save_progress(Progress(points=31, strength=5), path)
    assert read_points(path) == 31


def test_missing_file_gives_defaults(tmp_path):
    path = tmp_path / "absent.txt"
    assert load_progress(path) == Progress()
    assert read_points(path) == 0


def test_malformed_second_value_keeps_default(tmp_path):
    path = tmp_path / "save.txt"
    path.write_text("12 abc")
    assert load_progress(path) == Progress(points=12, strength=0)


def test_take_snapshot():
    paddle = Paddle(350.0, 550.0, 100.0, 20.0, 0.1)
    ball = Ball(425.0, 200.0, 0.05, -0.05, 10.0)
    brick = Brick(30.0, 30.0, 100.0, 20.0)
    snapshot = take_snapshot(paddle, ball, brick)
    assert snapshot == PauseSnapshot(
        paddle_size=(100.0, 20.0),
        ball_position=(425.0, 200.0),
        ball_velocity=(0.05, -0.05),
        brick_position=(30.0, 30.0),
    )