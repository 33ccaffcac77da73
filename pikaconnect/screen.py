"""The level screen: drawing the board and turning clicks into moves."""

from __future__ import annotations

import os
import random
from pathlib import Path
from typing import Callable, Dict, Optional, Set, Tuple, Union

import pygame

from .constants import (
    BOARD_LEFT,
    BOARD_TOP,
    CHANCE_RECT,
    ICON_SIZE,
    MENU_RECT,
    NEW_RECT,
    PAUSE_RECT,
    TIME_LIMIT,
)
from .session import Selection, Session, cell_at
from .widgets import ASSETS, Button, SubMenu, load_texture

PathLike = Union[str, "os.PathLike[str]"]

_TIME_BAR_LEFT = 180
_TIME_BAR_TOP = 50
_TIME_SEGMENT_SIZE = (2, 30)
_CHANCE_ALPHA = 200

_SOUND_FILES = {
    Selection.FIRST: "first_move.wav",
    Selection.MATCHED: "delete.wav",
    Selection.MISMATCHED: "no_delete.wav",
}
# Only one sound plays per frame; the others wait for later frames.
_SOUND_PRIORITY = (Selection.FIRST, Selection.MATCHED, Selection.MISMATCHED)


class GameScreen:
    """Everything shown while a level is played, plus its overlay menus."""

    def __init__(
        self,
        assets: PathLike = ASSETS,
        *,
        rng: Optional[random.Random] = None,
        clock: Optional[Callable[[], int]] = None,
    ) -> None:
        self._assets = Path(assets)
        self._rng = rng
        self._clock = clock
        self._images: Dict[Path, pygame.Surface] = {}
        self._icons: Dict[int, Tuple[pygame.Surface, pygame.Surface]] = {}
        self._chance_buttons: Dict[int, Button] = {}

        self.new_button = Button(NEW_RECT, self._image("pokemon_screen", "new_button.png"))
        self.pause_button = Button(PAUSE_RECT, self._image("pokemon_screen", "pause_button.png"))
        self.menu_button = Button(MENU_RECT, self._image("pokemon_screen", "menu_button.png"))
        self._time_segment = pygame.transform.scale(
            self._image("time", "run_time.png"), _TIME_SEGMENT_SIZE
        )

        self._sounds = self._load_sounds()
        self._pending: Set[Selection] = set()

        self._session: Optional[Session] = None
        self._background: Optional[pygame.Surface] = None
        self.win_menu: Optional[SubMenu] = None
        self.lose_menu: Optional[SubMenu] = None
        self.pause_menu: Optional[SubMenu] = None

    @property
    def session(self) -> Session:
        """The level in play; raises RuntimeError before the first start()."""
        if self._session is None:
            raise RuntimeError("no level has been started")
        return self._session

    def start(self, level: int, chances: int = 0) -> None:
        """Deal a new board for ``level`` with ``chances`` carried over."""
        session = Session(level, chances, rng=self._rng, clock=self._clock)
        screens = self._assets / "pokemon_screen"
        self._background = self._image("pokemon_screen", f"{level}.png")
        self.win_menu = SubMenu(
            self._image("pokemon_screen", f"{level}-sub-win.png"),
            screens / "next_level_button.png",
            self._assets,
        )
        self.lose_menu = SubMenu(
            self._image("pokemon_screen", f"{level}-sub-lose.png"),
            screens / "play_again_button.png",
            self._assets,
        )
        self.pause_menu = SubMenu(
            self._image("pokemon_screen", f"{level}-pause.png"),
            screens / "continue_button.png",
            self._assets,
        )
        self._pending.clear()
        self._session = session

    def handle_click(self, pos: Tuple[int, int]) -> Selection:
        """Apply a click at screen point ``pos`` to the board."""
        px, py = pos
        result = self.session.click_cell(*cell_at(px, py))
        if result in _SOUND_FILES:
            self._pending.add(result)
        return result

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the level: background, controls, time bar and tiles."""
        session = self.session
        surface.blit(pygame.transform.scale(self._background, surface.get_size()), (0, 0))
        self._play_pending_sound()

        for button in (self.new_button, self.pause_button, self.menu_button):
            button.draw_up(surface)
        if session.chances >= 0:
            self._chance_button(session.chances).draw_up(surface)

        segment_width = _TIME_SEGMENT_SIZE[0]
        for second in range(max(0, min(TIME_LIMIT, session.time_left()))):
            surface.blit(self._time_segment, (_TIME_BAR_LEFT + segment_width * second, _TIME_BAR_TOP))

        selected = session.selected
        for x, row in enumerate(session.board.cells[1:-1], start=1):
            for y, kind in enumerate(row[1:-1], start=1):
                if kind and (selected is None or (selected.x, selected.y) != (x, y)):
                    surface.blit(self._icon(kind)[0], _cell_origin(x, y))
        if selected is not None:
            kind = session.board[selected.x, selected.y]
            surface.blit(self._icon(kind)[1], _cell_origin(selected.x, selected.y))

    def draw_pause(self, surface: pygame.Surface) -> None:
        self._require(self.pause_menu).draw(surface)

    def draw_win(self, surface: pygame.Surface) -> None:
        self._require(self.win_menu).draw(surface)

    def draw_lose(self, surface: pygame.Surface) -> None:
        self._require(self.lose_menu).draw(surface)

    @staticmethod
    def _require(menu: Optional[SubMenu]) -> SubMenu:
        if menu is None:
            raise RuntimeError("no level has been started")
        return menu

    def _image(self, *parts: str) -> pygame.Surface:
        path = self._assets.joinpath(*parts)
        if path not in self._images:
            self._images[path] = load_texture(path)
        return self._images[path]

    def _icon(self, kind: int) -> Tuple[pygame.Surface, pygame.Surface]:
        if kind not in self._icons:
            size = (ICON_SIZE, ICON_SIZE)
            self._icons[kind] = (
                pygame.transform.scale(self._image("pokemon_icon", f"{kind}-up.png"), size),
                pygame.transform.scale(self._image("pokemon_icon", f"{kind}-down.png"), size),
            )
        return self._icons[kind]

    def _chance_button(self, count: int) -> Button:
        if count not in self._chance_buttons:
            button = Button(CHANCE_RECT, self._image("chance", f"{count}-chance.png"))
            button.set_alpha(_CHANCE_ALPHA)
            self._chance_buttons[count] = button
        return self._chance_buttons[count]

    def _load_sounds(self) -> Dict[Selection, "pygame.mixer.Sound"]:
        if not pygame.mixer.get_init():
            return {}
        audio = self._assets / "audio"
        return {
            selection: pygame.mixer.Sound(os.fspath(audio / name))
            for selection, name in _SOUND_FILES.items()
        }

    def _play_pending_sound(self) -> None:
        for selection in _SOUND_PRIORITY:
            if selection in self._pending:
                self._pending.discard(selection)
                sound = self._sounds.get(selection)
                if sound is not None:
                    sound.play()
                return


def _cell_origin(x: int, y: int) -> Tuple[int, int]:
    return BOARD_LEFT + ICON_SIZE * (y - 1), BOARD_TOP + ICON_SIZE * (x - 1)