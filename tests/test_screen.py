import random

import pygame
import pytest

from pikaconnect.board import Board
from pikaconnect.constants import (
    BOARD_LEFT,
    BOARD_TOP,
    GAME_COLUMN,
    GAME_ROW,
    ICON_SIZE,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    TIME_LIMIT,
    Coordinate,
)
from pikaconnect.screen import GameScreen
from pikaconnect.session import Selection

BACKGROUND = (200, 0, 0)
ICON_UP = (0, 200, 0)
ICON_DOWN = (0, 0, 200)
TIME = (220, 220, 0)
PAUSE = (10, 20, 30)
WIN = (40, 50, 60)
LOSE = (70, 80, 90)
BUTTON = (100, 100, 100)
MENU_BG = (1, 2, 3)


def _solid(path, color):
    path.parent.mkdir(parents=True, exist_ok=True)
    surf = pygame.Surface((2, 2), 0, 32)
    surf.fill(color)
    pygame.image.save(surf, str(path))


@pytest.fixture(scope="module")
def assets(tmp_path_factory):
    root = tmp_path_factory.mktemp("data")
    for kind in range(1, 25):
        _solid(root / "pokemon_icon" / f"{kind}-up.png", ICON_UP)
        _solid(root / "pokemon_icon" / f"{kind}-down.png", ICON_DOWN)
    screens = root / "pokemon_screen"
    for level in range(1, 8):
        _solid(screens / f"{level}.png", BACKGROUND)
        _solid(screens / f"{level}-sub-win.png", WIN)
        _solid(screens / f"{level}-sub-lose.png", LOSE)
        _solid(screens / f"{level}-pause.png", PAUSE)
    for name in (
        "new_button",
        "pause_button",
        "menu_button",
        "next_level_button",
        "play_again_button",
        "continue_button",
        "main_menu_button",
        "play_button",
    ):
        _solid(screens / f"{name}.png", BUTTON)
    _solid(screens / "mewtwo.png", MENU_BG)
    for count in range(10):
        _solid(root / "chance" / f"{count}-chance.png", BUTTON)
    _solid(root / "time" / "run_time.png", TIME)
    return root


class FakeClock:
    def __init__(self):
        self.now = 0

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def screen(assets, clock):
    game = GameScreen(assets, rng=random.Random(7), clock=clock)
    game.start(1)
    return game


def _center(x, y):
    return BOARD_LEFT + ICON_SIZE * (y - 1) + ICON_SIZE // 2, BOARD_TOP + ICON_SIZE * (x - 1) + ICON_SIZE // 2


def _two_pairs():
    cells = [[0] * GAME_COLUMN for _ in range(GAME_ROW)]
    cells[1][1] = 5
    cells[1][2] = 5
    cells[3][3] = 7
    cells[5][5] = 7
    return Board(cells)


def _canvas():
    return pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT), 0, 32)


def _rgb(surface, pos):
    return tuple(surface.get_at(pos))[:3]


def test_session_before_start_raises(assets, clock):
    game = GameScreen(assets, clock=clock)
    with pytest.raises(RuntimeError):
        game.session
    with pytest.raises(RuntimeError):
        game.draw_pause(_canvas())


def test_start_carries_chances(assets, clock):
    game = GameScreen(assets, rng=random.Random(1), clock=clock)
    game.start(3, 2)
    assert game.session.level == 3
    assert game.session.chances == 3
    assert game.session.selected is None


def test_start_rejects_unknown_level(assets, clock):
    game = GameScreen(assets, clock=clock)
    with pytest.raises(ValueError):
        game.start(8)


def test_fresh_board_is_full(screen):
    cells = [kind for row in screen.session.board.cells[1:-1] for kind in row[1:-1]]
    assert all(kind != 0 for kind in cells)
    assert screen.session.time_left() == TIME_LIMIT


def test_click_outside_board_is_ignored(screen):
    assert screen.handle_click((10, 10)) is Selection.IGNORED
    assert screen.session.selected is None


def test_select_and_cancel(screen):
    screen.session.board = _two_pairs()
    assert screen.handle_click(_center(1, 1)) is Selection.FIRST
    assert screen.session.selected == Coordinate(1, 1)
    assert screen.handle_click(_center(1, 1)) is Selection.CANCELLED
    assert screen.session.selected is None


def test_match_removes_pair(screen):
    screen.session.board = _two_pairs()
    screen.handle_click(_center(1, 1))
    assert screen.handle_click(_center(1, 2)) is Selection.MATCHED
    assert screen.session.board[1, 1] == 0
    assert screen.session.board[1, 2] == 0
    assert screen.session.board[3, 3] == 7


def test_mismatch_keeps_tiles(screen):
    screen.session.board = _two_pairs()
    screen.handle_click(_center(1, 1))
    assert screen.handle_click(_center(3, 3)) is Selection.MISMATCHED
    assert screen.session.board[1, 1] == 5
    assert screen.session.selected is None


def test_click_on_empty_cell_is_ignored(screen):
    screen.session.board = _two_pairs()
    assert screen.handle_click(_center(2, 2)) is Selection.IGNORED


def test_draw_tiles_and_selection(screen):
    screen.session.board = _two_pairs()
    screen.handle_click(_center(1, 1))
    canvas = _canvas()
    screen.draw(canvas)
    assert _rgb(canvas, _center(1, 1)) == ICON_DOWN
    assert _rgb(canvas, _center(1, 2)) == ICON_UP
    assert _rgb(canvas, _center(2, 2)) == BACKGROUND
    assert _rgb(canvas, (10, 10)) == BACKGROUND


def test_time_bar_shrinks(screen, clock):
    canvas = _canvas()
    screen.draw(canvas)
    assert _rgb(canvas, (181, 60)) == TIME
    assert _rgb(canvas, (183, 60)) == TIME

    clock.now += (TIME_LIMIT - 1) * 1000
    screen.draw(canvas)
    assert screen.session.time_left() == 1
    assert _rgb(canvas, (181, 60)) == TIME
    assert _rgb(canvas, (183, 60)) == BACKGROUND


def test_overlays(screen):
    canvas = _canvas()
    screen.draw_pause(canvas)
    assert _rgb(canvas, (10, 10)) == PAUSE
    screen.draw_win(canvas)
    assert _rgb(canvas, (10, 10)) == WIN
    screen.draw_lose(canvas)
    assert _rgb(canvas, (10, 10)) == LOSE


def test_start_resets_selection(screen):
    screen.session.board = _two_pairs()
    screen.handle_click(_center(1, 1))
    screen.start(2)
    assert screen.session.selected is None
    assert screen.session.level == 2