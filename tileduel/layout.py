"""Geometry, colours, labels and outcome rules for the two-board screen."""

from __future__ import annotations

import enum
from typing import Protocol

Color = tuple[int, int, int]
Dimensions = tuple[int, int]
Point = tuple[int, int]

BOARD_SIZE = 4
OFFSET_FROM_TOP = 100
OFFSET_FROM_BOTTOM = 50
OFFSET_FROM_SIDES = 50
TILE_SIZE = 150
SPACE_BETWEEN_TILES = 10
TEXT_NUDGE = 10

TIME_LIMIT = 60
WINDOW_TITLE = "2048 Versus"
FONT_NAME = "sans.ttf"

FULL_BACKGROUND_COLOR: Color = (0, 0, 0)
MAIN_MENU_BACKGROUND_COLOR: Color = (242, 171, 145)
INSTRUCTIONS_BACKGROUND_COLOR: Color = (100, 203, 129)
FIRST_BOARD_BACKGROUND_COLOR: Color = (242, 171, 145)
SECOND_BOARD_BACKGROUND_COLOR: Color = (255, 239, 203)
TEXT_COLOR: Color = (0, 0, 0)
WIN_COLOR: Color = (0, 200, 0)
LOSE_COLOR: Color = (200, 0, 0)

BACKGROUND_TILE_COLOR: Color = (231, 225, 235)
LARGEST_TILE = 2048

_TILE_COLORS: dict[int, Color] = {
    0: BACKGROUND_TILE_COLOR,
    2: (126, 197, 235),
    4: (120, 130, 241),
    8: (158, 107, 238),
    16: (195, 84, 235),
    32: (236, 70, 136),
    64: (250, 80, 7),
    128: (250, 224, 77),
    256: (244, 214, 56),
    512: (239, 203, 34),
    1024: (233, 193, 13),
    LARGEST_TILE: (0, 120, 0),
}

MAIN_MENU_TITLE = "2048 Duel"
GAME_TITLE = "2048 Duel"
PRESS_SPACE_TEXT = "Press the 'Space Bar' to Start"
PRESS_I_TEXT = "Press 'i' to see Instructions"
PRESS_M_TEXT = "Press 'm' to go back to Main Menu"
INSTRUCTION_LINES: tuple[str, ...] = (
    "HOW TO PLAY:",
    "Player 1 use 'w', 's', 'a', 'd' to move the tiles on the left board.",
    "Player 2 use the arrow keys to move the tiles on the right board.",
    "Tiles with the same number merge into one when they touch.",
    "First person to reach game over loses, or highest score after timer ends wins!",
)


class Screen(enum.IntEnum):
    """Which page the window is showing."""

    MAIN_MENU = 0
    INSTRUCTIONS = 1
    GAME = 3
    END = 4


class Outcome(enum.Enum):
    """Result of a finished duel; the value is the banner shown for it."""

    PLAYER_1 = "Player 1 Wins!"
    PLAYER_2 = "Player 2 Wins"
    TIE = "It's a Tie!"

    @property
    def message(self) -> str:
        return self.value


class _Board(Protocol):
    score: int
    over: bool


def tile_color(value: int) -> Color:
    """Colour of a tile; values beyond the known set use the largest tile's colour."""
    return _TILE_COLORS.get(value, _TILE_COLORS[LARGEST_TILE])


def tile_label(value: int) -> str:
    """Text drawn on a tile; empty cells show a blank."""
    if value == 0:
        return " "
    if value in _TILE_COLORS:
        return str(value)
    return str(LARGEST_TILE)


def window_dimensions() -> Dimensions:
    """Width and height of the whole window holding both boards."""
    width = 2 * BOARD_SIZE * TILE_SIZE + 4 * OFFSET_FROM_SIDES
    height = BOARD_SIZE * TILE_SIZE + OFFSET_FROM_TOP + OFFSET_FROM_BOTTOM
    return width, height


def tile_dimensions() -> Dimensions:
    """Width and height of one drawn tile, leaving a gap to its neighbours."""
    side = TILE_SIZE - SPACE_BETWEEN_TILES
    return side, side


def tile_position(board: int, column: int, row: int) -> Point:
    """Top-left corner of a tile on the left (0) or right (1) board."""
    if board not in (0, 1):
        raise ValueError(f"board must be 0 or 1, not {board}")
    if not (0 <= column < BOARD_SIZE and 0 <= row < BOARD_SIZE):
        raise ValueError(f"tile ({column}, {row}) is off the board")
    left = board * (window_dimensions()[0] // 2)
    return (
        left + OFFSET_FROM_SIDES + column * TILE_SIZE,
        OFFSET_FROM_TOP + row * TILE_SIZE,
    )


def decide_outcome(model_1: _Board, model_2: _Board) -> Outcome:
    """Who won: a stuck board loses, otherwise the higher score wins."""
    if model_1.over:
        return Outcome.PLAYER_2
    if model_2.over or model_1.score > model_2.score:
        return Outcome.PLAYER_1
    if model_1.score < model_2.score:
        return Outcome.PLAYER_2
    return Outcome.TIE