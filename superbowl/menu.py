"""The main menu and the ball upgrade menu."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

import pygame

from superbowl.settings import SCREEN_HEIGHT, SCREEN_WIDTH, UPGRADE_COST

Color = tuple[int, int, int]

YELLOW: Color = (255, 255, 0)
RED: Color = (255, 0, 0)
GREEN: Color = (0, 255, 0)


@dataclass
class MenuText:
    """A line of text with its size, colour and top-left position."""

    text: str
    size: int
    color: Color
    position: tuple[float, float]


@lru_cache(maxsize=None)
def _font(size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.SysFont("arial", size)


def _draw_text(surface: pygame.Surface, item: MenuText) -> None:
    if not item.text:
        return
    rendered = _font(item.size).render(item.text, True, item.color)
    surface.blit(rendered, item.position)


class MainMenu:
    """The title screen listing play, upgrade and exit choices."""

    def __init__(self, width: int = SCREEN_WIDTH, height: int = SCREEN_HEIGHT) -> None:
        self.width = width
        self.height = height
        self.background: Color = GREEN
        self.info_text = MenuText(
            "Kliknij 1, by grac, 2, aby ulepszyc pilke lub 3, by wyjsc",
            30,
            YELLOW,
            (35.0, 20.0),
        )
        self.play_text = MenuText("1.Graj", 50, YELLOW, (320.0, 200.0))
        self.skills_text = MenuText("2.Ulepszenia", 50, YELLOW, (260.0, 275.0))
        self.exit_text = MenuText("3.Wyjdz", 50, YELLOW, (310.0, 350.0))
        self.points_text = MenuText("", 25, RED, (500.0, 540.0))

    def set_points(self, points: int) -> None:
        self.points_text.text = f"Twoje Punkty: {points}"

    def draw(self, surface: pygame.Surface) -> None:
        surface.fill(self.background, pygame.Rect(0, 0, self.width, self.height))
        for item in (
            self.skills_text,
            self.play_text,
            self.exit_text,
            self.info_text,
            self.points_text,
        ):
            _draw_text(surface, item)


class SkillsMenu:
    """The screen where points are spent on ball strength."""

    def __init__(self) -> None:
        self.points_text = MenuText("", 25, GREEN, (600.0, 540.0))
        self.info_text = MenuText("Kliknij 1, aby ulepszyc pilke", 50, RED, (100.0, 40.0))
        self.upgrade_text = MenuText("1.Zwieksz sile- 30pkt", 50, RED, (160.0, 300.0))
        self.back_text = MenuText("3.Wroc do menu", 50, RED, (210.0, 500.0))

    def show_missing(self, points: int) -> None:
        """Show how many points are still needed for an upgrade."""
        self.points_text.text = f"Brakuje ci: {UPGRADE_COST - points}"

    def draw(self, surface: pygame.Surface) -> None:
        for item in (self.info_text, self.upgrade_text, self.back_text, self.points_text):
            _draw_text(surface, item)