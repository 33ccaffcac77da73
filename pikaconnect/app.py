"""The top-level game loop and the screen-to-screen state machine."""

from __future__ import annotations

import argparse
import os
import random
from enum import Enum, auto
from pathlib import Path
from typing import Callable, Optional, Sequence, Tuple, Union

import pygame

from .constants import FPS, SCREEN_HEIGHT, SCREEN_WIDTH
from .screen import GameScreen
from .widgets import ASSETS, Menu, SubMenu

PathLike = Union[str, "os.PathLike[str]"]

LAST_LEVEL = 7
_CLEAR_COLOUR = (255, 255, 255)


class GameState(Enum):
    """Which screen is showing."""

    MENU = auto()
    PLAYING = auto()
    WON = auto()
    PAUSED = auto()
    LEVEL_CLEARED = auto()
    LOST = auto()
    QUIT = auto()


class App:
    """Routes clicks to the current screen and moves between screens."""

    def __init__(
        self,
        assets: PathLike = ASSETS,
        *,
        rng: Optional[random.Random] = None,
        clock: Optional[Callable[[], int]] = None,
    ) -> None:
        screens = Path(assets) / "pokemon_screen"
        self.menu = Menu(assets)
        self.game = GameScreen(assets, rng=rng, clock=clock)
        self.winning_menu = SubMenu(
            screens / f"{LAST_LEVEL}-sub-win.png", screens / "play_again_button.png", assets
        )
        self.state = GameState.MENU
        self.level = 0
        self._resume: Optional[Tuple[GameState, int]] = None
        self._next_level = 0
        self._carried_chances = 0

    @property
    def running(self) -> bool:
        return self.state is not GameState.QUIT

    def _start(self, level: int, chances: int = 0) -> None:
        self.state = GameState.PLAYING
        self.level = level
        self.game.start(level, chances)

    def handle_click(self, pos: Tuple[int, int]) -> None:
        """React to a mouse press at ``pos`` on the current screen."""
        if self.state is GameState.MENU:
            if self.menu.handle(pos):
                self._start(1)

        elif self.state is GameState.PLAYING:
            self._handle_playing(pos)

        elif self.state is GameState.WON:
            if self.winning_menu.play(pos):
                self._start(1)
            elif self.winning_menu.main_menu(pos):
                self.state = GameState.MENU

        elif self.state is GameState.PAUSED:
            if self.game.pause_menu.play(pos):
                self.game.session.unpause()
                self.state, self.level = self._resume
                self._resume = None
            elif self.game.pause_menu.main_menu(pos):
                self.state = GameState.MENU
                self._resume = None

        elif self.state is GameState.LEVEL_CLEARED:
            if self.game.win_menu.play(pos):
                self._start(self._next_level, self._carried_chances)
            if self.game.win_menu.main_menu(pos):
                self.state = GameState.MENU

        elif self.state is GameState.LOST:
            if self.game.lose_menu.play(pos):
                self._start(1)
            if self.game.lose_menu.main_menu(pos):
                self.state = GameState.MENU

    def _handle_playing(self, pos: Tuple[int, int]) -> None:
        game = self.game
        if game.session.chances < 0:
            self.state = GameState.LOST
        if game.new_button.contains(pos):
            self._start(1)
        if game.pause_button.contains(pos):
            game.session.pause()
            self._resume = (self.state, self.level)
            self.state = GameState.PAUSED
        if game.menu_button.contains(pos):
            self.state = GameState.MENU

        game.handle_click(pos)

        if game.session.is_complete():
            if self.level != LAST_LEVEL:
                self._carried_chances = game.session.chances
                self._next_level = self.level + 1
                self.state = GameState.LEVEL_CLEARED
            else:
                self.state = GameState.WON

    def handle_quit(self) -> None:
        self.state = GameState.QUIT

    def check_timeout(self) -> None:
        """End the level when its clock has run out."""
        if self.state is GameState.PLAYING and self.game.session.time_left() <= 0:
            self.state = GameState.LOST

    def draw(self, surface: pygame.Surface) -> None:
        """Clear ``surface`` and draw the current screen onto it."""
        surface.fill(_CLEAR_COLOUR)
        if self.state is GameState.MENU:
            self.menu.draw(surface)
        elif self.state is GameState.PLAYING:
            self.game.draw(surface)
        elif self.state is GameState.WON:
            self.winning_menu.draw(surface)
        elif self.state is GameState.PAUSED:
            self.game.draw_pause(surface)
        elif self.state is GameState.LEVEL_CLEARED:
            self.game.draw_win(surface)
        elif self.state is GameState.LOST:
            self.game.draw_lose(surface)


def _play_soundtrack(assets: Path) -> None:
    if pygame.mixer.get_init():
        pygame.mixer.music.load(os.fspath(assets / "audio" / "soundtrack.wav"))
        pygame.mixer.music.play(-1)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the game window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="pikaconnect", description="Tile-matching puzzle game.")
    parser.add_argument("--assets", default=str(ASSETS), help="directory holding the game data")
    parser.add_argument("--fullscreen", action="store_true", help="run in full-screen mode")
    args = parser.parse_args(argv)
    assets = Path(args.assets)

    pygame.init()
    try:
        flags = pygame.FULLSCREEN if args.fullscreen else 0
        window = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT), flags)
        pygame.display.set_caption("PIKACHU")
        app = App(assets)
        _play_soundtrack(assets)

        frame_clock = pygame.time.Clock()
        while app.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    app.handle_quit()
                elif event.type == pygame.MOUSEBUTTONDOWN and app.running:
                    app.handle_click(event.pos)
            app.check_timeout()
            if app.running:
                app.draw(window)
                pygame.display.flip()
            frame_clock.tick(FPS)
    except pygame.error as exc:
        parser.exit(1, f"pikaconnect: {exc}\n")
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())