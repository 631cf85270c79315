"""The game window, its screens and the keyboard handling between them."""

from __future__ import annotations

import argparse
import enum
import random
from pathlib import Path

import pygame

from superbowl.game import Game, RandomSource
from superbowl.menu import MainMenu, SkillsMenu
from superbowl.savedata import (
    SAVE_FILE,
    PauseSnapshot,
    load_progress,
    read_points,
    save_progress,
    take_snapshot,
)
from superbowl.settings import SCREEN_HEIGHT, SCREEN_WIDTH, UPGRADE_COST, Progress

TITLE = "Super Bowl"
BOARD_COLOR = (0, 0, 255)
SKILLS_COLOR = (0, 0, 0)


class Screen(enum.Enum):
    MENU = enum.auto()
    PLAYING = enum.auto()
    SKILLS = enum.auto()
    EXITING = enum.auto()


class App:
    """Holds the current screen and reacts to keys and frames."""

    def __init__(
        self,
        progress: Progress | None = None,
        save_path: str | Path = SAVE_FILE,
        rng: RandomSource | None = None,
    ) -> None:
        self.save_path = save_path
        self.progress = progress if progress is not None else load_progress(save_path)
        self.rng = rng if rng is not None else random.Random()
        self.screen = Screen.MENU
        self.paused = False
        self.running = True
        self.snapshot: PauseSnapshot | None = None
        self.game = Game()
        self.main_menu = MainMenu(SCREEN_WIDTH, SCREEN_HEIGHT)
        self.skills_menu = SkillsMenu()

    def _save(self) -> None:
        save_progress(self.progress, self.save_path)

    def quit(self) -> None:
        """Save and stop the main loop."""
        self._save()
        self.running = False

    def handle_key(self, key: int) -> None:
        """React to one key press."""
        if self.screen is Screen.MENU:
            if key == pygame.K_1:
                self.screen = Screen.PLAYING
                self.game.reset(self.rng)
            elif key == pygame.K_2:
                self.screen = Screen.SKILLS
            elif key == pygame.K_3:
                self._save()
                self.screen = Screen.EXITING

        if self.screen is Screen.SKILLS:
            if key == pygame.K_3:
                self._save()
                self.screen = Screen.MENU
            if key == pygame.K_1:
                if read_points(self.save_path) >= UPGRADE_COST:
                    self.progress.points -= UPGRADE_COST
                    self.progress.strength += 1
                    self._save()
                else:
                    self.skills_menu.show_missing(self.progress.points)

        if key == pygame.K_p:
            self.paused = not self.paused
            if self.paused and self.game.bricks:
                self.snapshot = take_snapshot(
                    self.game.paddle, self.game.ball, self.game.bricks[0]
                )

    def tick(self, left: bool = False, right: bool = False) -> None:
        """Advance one frame with the given arrow keys held."""
        if self.screen is Screen.EXITING:
            self.quit()
            return
        if self.screen is Screen.PLAYING and not self.paused:
            if self.game.lost():
                self.quit()
                print("przegrales")
                return
            self.game.step(self.progress, left, right)
        if self.screen is Screen.MENU:
            self.main_menu.set_points(self.progress.points)

    def _render(self, surface: pygame.Surface) -> None:
        if self.screen is Screen.SKILLS:
            surface.fill(SKILLS_COLOR)
            self.skills_menu.draw(surface)
        elif self.screen is Screen.MENU:
            self.main_menu.draw(surface)
        elif self.screen is Screen.PLAYING:
            surface.fill(BOARD_COLOR)
            zone = self.game.death_zone
            pygame.draw.rect(surface, zone.color, (zone.x, zone.y, zone.width, zone.height))
            for brick in self.game.bricks:
                if brick.alive():
                    pygame.draw.rect(
                        surface, brick.color(), (brick.x, brick.y, brick.width, brick.height)
                    )
            paddle = self.game.paddle
            pygame.draw.rect(
                surface, paddle.color, (paddle.x, paddle.y, paddle.width, paddle.height)
            )
            ball = self.game.ball
            pygame.draw.circle(
                surface, ball.color, (ball.x + ball.radius, ball.y + ball.radius), ball.radius
            )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="superbowl", description="Brick-breaking arcade game.")
    parser.add_argument("--save-file", default=SAVE_FILE, help="where progress is kept")
    args = parser.parse_args(argv)

    app = App(save_path=args.save_file)
    pygame.init()
    try:
        window = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption(TITLE)
        while app.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    app.quit()
                elif event.type == pygame.KEYDOWN:
                    app.handle_key(event.key)
            if not app.running:
                break
            keys = pygame.key.get_pressed()
            app.tick(keys[pygame.K_LEFT], keys[pygame.K_RIGHT])
            if not app.running:
                break
            app._render(window)
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())