import pygame
import pytest

from superbowl.app import App, Screen
from superbowl.savedata import load_progress
from superbowl.settings import Progress


class FixedRng:
    def randint(self, a, b):
        return 2


@pytest.fixture
def save_path(tmp_path):
    return tmp_path / "progress.txt"


def make_app(save_path, points=0, strength=0):
    return App(Progress(points=points, strength=strength), save_path, FixedRng())


def test_starts_in_menu(save_path):
    app = make_app(save_path)
    assert app.screen is Screen.MENU
    assert app.running is True


def test_key_one_starts_game(save_path):
    app = make_app(save_path)
    app.handle_key(pygame.K_1)
    assert app.screen is Screen.PLAYING
    assert len(app.game.bricks) == 8


def test_key_two_opens_skills(save_path):
    app = make_app(save_path)
    app.handle_key(pygame.K_2)
    assert app.screen is Screen.SKILLS


def test_key_three_exits_and_saves(save_path):
    app = make_app(save_path, points=4, strength=2)
    app.handle_key(pygame.K_3)
    assert app.screen is Screen.EXITING
    assert load_progress(save_path) == Progress(4, 2)
    app.tick()
    assert app.running is False


def test_skills_back_to_menu(save_path):
    app = make_app(save_path, points=3)
    app.handle_key(pygame.K_2)
    app.handle_key(pygame.K_3)
    assert app.screen is Screen.MENU
    assert load_progress(save_path) == Progress(3, 0)


def test_upgrade_with_enough_saved_points(save_path):
    save_path.write_text("30 0")
    app = App(save_path=save_path, rng=FixedRng())
    app.handle_key(pygame.K_2)
    app.handle_key(pygame.K_1)
    assert app.progress == Progress(0, 1)
    assert save_path.read_text() == "0 1"


def test_upgrade_refused_shows_missing(save_path):
    save_path.write_text("0 0")
    app = App(save_path=save_path, rng=FixedRng())
    app.handle_key(pygame.K_2)
    app.handle_key(pygame.K_1)
    assert app.progress == Progress(0, 0)
    assert app.skills_menu.points_text.text == "Brakuje ci: 30"


def test_pause_toggles_and_snapshots(save_path):
    app = make_app(save_path)
    app.handle_key(pygame.K_1)
    app.handle_key(pygame.K_p)
    assert app.paused is True
    first = app.game.bricks[0]
    assert app.snapshot.brick_position == (first.x, first.y)
    assert app.snapshot.ball_position == (app.game.ball.x, app.game.ball.y)
    app.handle_key(pygame.K_p)
    assert app.paused is False


def test_paused_game_does_not_move(save_path):
    app = make_app(save_path)
    app.handle_key(pygame.K_1)
    app.handle_key(pygame.K_p)
    before = (app.game.ball.x, app.game.ball.y)
    app.tick()
    assert (app.game.ball.x, app.game.ball.y) == before


def test_losing_saves_and_stops(save_path, capsys):
    app = make_app(save_path, points=9)
    app.handle_key(pygame.K_1)
    app.game.ball.x, app.game.ball.y = 400.0, 585.0
    app.tick()
    assert app.game.lost() is True
    assert app.running is True
    app.tick()
    assert app.running is False
    assert load_progress(save_path).points == 9
    assert "przegrales" in capsys.readouterr().out


def test_menu_tick_shows_points(save_path):
    app = make_app(save_path, points=11)
    app.tick()
    assert app.main_menu.points_text.text == "Twoje Punkty: 11"