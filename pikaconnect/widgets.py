"""Image loading, clickable buttons and the menu screens."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Sequence, Tuple, Union

import pygame

from .constants import MAIN_MENU_RECT, PLAY_RECT

ASSETS = Path("data")

Image = Union[pygame.Surface, str, "os.PathLike[str]"]


def load_texture(path: Union[str, "os.PathLike[str]"]) -> pygame.Surface:
    """Load an image file as a surface."""
    return pygame.image.load(os.fspath(path))


def _surface(image: Image) -> pygame.Surface:
    return image if isinstance(image, pygame.Surface) else load_texture(image)


def _draw_fullscreen(surface: pygame.Surface, image: pygame.Surface) -> None:
    surface.blit(pygame.transform.scale(image, surface.get_size()), (0, 0))


class Button:
    """A rectangle with a normal and a pressed image, stretched to fit."""

    def __init__(self, rect: Sequence[int], up: Image, down: Image = None) -> None:
        self.rect = pygame.Rect(rect)
        up_image = _surface(up)
        down_image = up_image if down is None else _surface(down)
        self._up = pygame.transform.scale(up_image, self.rect.size)
        self._down = pygame.transform.scale(down_image, self.rect.size)

    def contains(self, pos: Tuple[int, int]) -> bool:
        """Whether a point lies on the button, edges included."""
        x, y = pos
        return (
            self.rect.x <= x <= self.rect.x + self.rect.w
            and self.rect.y <= y <= self.rect.y + self.rect.h
        )

    def draw_up(self, surface: pygame.Surface) -> None:
        surface.blit(self._up, self.rect.topleft)

    def draw_down(self, surface: pygame.Surface) -> None:
        surface.blit(self._down, self.rect.topleft)

    def set_alpha(self, alpha: int) -> None:
        """Set the opacity of the normal image."""
        self._up.set_alpha(alpha)


class Menu:
    """The title screen with its play button."""

    def __init__(self, assets: Union[str, "os.PathLike[str]"] = ASSETS) -> None:
        screens = Path(assets) / "pokemon_screen"
        self._background = load_texture(screens / "mewtwo.png")
        self.play_button = Button(PLAY_RECT, screens / "play_button.png")

    def handle(self, pos: Tuple[int, int]) -> bool:
        """Whether a click at ``pos`` hits the play button."""
        return self.play_button.contains(pos)

    def draw(self, surface: pygame.Surface) -> None:
        _draw_fullscreen(surface, self._background)
        self.play_button.draw_up(surface)


class SubMenu:
    """An overlay screen with a play-style button and a main-menu button."""

    def __init__(
        self,
        background: Image,
        play_image: Image,
        assets: Union[str, "os.PathLike[str]"] = ASSETS,
    ) -> None:
        self._background = _surface(background)
        self.play_button = Button(PLAY_RECT, play_image)
        self.main_menu_button = Button(
            MAIN_MENU_RECT, Path(assets) / "pokemon_screen" / "main_menu_button.png"
        )

    def play(self, pos: Tuple[int, int]) -> bool:
        return self.play_button.contains(pos)

    def main_menu(self, pos: Tuple[int, int]) -> bool:
        return self.main_menu_button.contains(pos)

    def draw(self, surface: pygame.Surface) -> None:
        _draw_fullscreen(surface, self._background)
        self.play_button.draw_up(surface)
        self.main_menu_button.draw_up(surface)