"""Rendering of the menu, instruction, game and end screens onto a pygame surface."""

from __future__ import annotations

import time
from collections.abc import Callable
from typing import Protocol

import pygame

from tileduel.layout import (
    BOARD_SIZE,
    FIRST_BOARD_BACKGROUND_COLOR,
    GAME_TITLE,
    INSTRUCTION_LINES,
    INSTRUCTIONS_BACKGROUND_COLOR,
    LOSE_COLOR,
    MAIN_MENU_BACKGROUND_COLOR,
    MAIN_MENU_TITLE,
    OFFSET_FROM_SIDES,
    OFFSET_FROM_TOP,
    PRESS_I_TEXT,
    PRESS_M_TEXT,
    PRESS_SPACE_TEXT,
    SECOND_BOARD_BACKGROUND_COLOR,
    TEXT_COLOR,
    TEXT_NUDGE,
    TILE_SIZE,
    TIME_LIMIT,
    WIN_COLOR,
    WINDOW_TITLE,
    Color,
    Dimensions,
    Outcome,
    Screen,
    decide_outcome,
    tile_color,
    tile_dimensions,
    tile_label,
    tile_position,
    window_dimensions,
)

DEFAULT_TEXT_COLOR: Color = (255, 255, 255)

TILE_FONT_SIZE = 45
MENU_TITLE_FONT_SIZE = 140
PRESS_SPACE_FONT_SIZE = 35
HINT_FONT_SIZE = 25
INSTRUCTION_TITLE_FONT_SIZE = 80
INSTRUCTION_FONT_SIZE = 40
GAME_TITLE_FONT_SIZE = 35
STATUS_FONT_SIZE = 25
BANNER_FONT_SIZE = 45
INSTRUCTIONS_TOP = 100


class _Board(Protocol):
    tiles: list[int]
    score: int
    over: bool


class View:
    """Draws both boards and the surrounding screens; tracks the duel's timer."""

    def __init__(
        self,
        model_1: _Board,
        model_2: _Board,
        clock: Callable[[], float] | None = None,
    ) -> None:
        self.model_1 = model_1
        self.model_2 = model_2
        self.screen = Screen.MAIN_MENU
        self._clock = clock if clock is not None else time.monotonic
        self._start = self._clock()
        self._fonts: dict[int, pygame.font.Font] = {}

    # -- public interface -------------------------------------------------

    def draw(self, surface: pygame.Surface) -> None:
        """Render the current screen onto ``surface``."""
        if self.screen is Screen.MAIN_MENU:
            self._draw_main_menu(surface)
        elif self.screen is Screen.INSTRUCTIONS:
            self._draw_instructions(surface)
        elif self.screen is Screen.GAME:
            self._draw_game(surface)
        else:
            self._draw_end_game(surface)

    def initial_window_dimensions(self) -> Dimensions:
        """Size of the window that holds both boards."""
        return window_dimensions()

    def initial_window_title(self) -> str:
        """Title of the game window."""
        return WINDOW_TITLE

    def timer_text(self) -> str:
        """Text of the countdown shown above the boards."""
        if self._not_started():
            return f"Time: {TIME_LIMIT}"
        if self.screen is Screen.GAME:
            return f"Time: {int(TIME_LIMIT - self._elapsed())}"
        return "Time: 0"

    def winner_text(self) -> str:
        """Banner naming the winner of the duel."""
        return decide_outcome(self.model_1, self.model_2).message

    # -- helpers ----------------------------------------------------------

    def _not_started(self) -> bool:
        return self.model_1.score == 0 and self.model_2.score == 0

    def _elapsed(self) -> float:
        return self._clock() - self._start

    def _font(self, size: int) -> pygame.font.Font:
        font = self._fonts.get(size)
        if font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            font = pygame.font.Font(None, size)
            self._fonts[size] = font
        return font

    def _text(self, text: str, size: int, color: Color = DEFAULT_TEXT_COLOR) -> pygame.Surface:
        return self._font(size).render(text, True, color)

    def _centered_x(self, sprite: pygame.Surface) -> int:
        return window_dimensions()[0] // 2 - sprite.get_width() // 2

    # -- screens ----------------------------------------------------------

    def _draw_main_menu(self, surface: pygame.Surface) -> None:
        width, height = window_dimensions()
        surface.fill(MAIN_MENU_BACKGROUND_COLOR)

        title = self._text(MAIN_MENU_TITLE, MENU_TITLE_FONT_SIZE)
        surface.blit(title, (self._centered_x(title), height // 5))

        press_space = self._text(PRESS_SPACE_TEXT, PRESS_SPACE_FONT_SIZE)
        surface.blit(press_space, (self._centered_x(press_space), height // 2))

        press_i = self._text(PRESS_I_TEXT, HINT_FONT_SIZE)
        surface.blit(
            press_i,
            (self._centered_x(press_i), height // 2 + press_space.get_height()),
        )

    def _draw_instructions(self, surface: pygame.Surface) -> None:
        _, height = window_dimensions()
        surface.fill(INSTRUCTIONS_BACKGROUND_COLOR)

        y = INSTRUCTIONS_TOP
        heading, *body = INSTRUCTION_LINES
        sprites = [self._text(heading, INSTRUCTION_TITLE_FONT_SIZE)]
        sprites.extend(self._text(line, INSTRUCTION_FONT_SIZE) for line in body)
        for sprite in sprites:
            surface.blit(sprite, (self._centered_x(sprite), y))
            y += sprite.get_height()

        press_space = self._text(PRESS_SPACE_TEXT, PRESS_SPACE_FONT_SIZE)
        surface.blit(
            press_space,
            (self._centered_x(press_space), height - press_space.get_height() * 3),
        )

        press_m = self._text(PRESS_M_TEXT, HINT_FONT_SIZE)
        surface.blit(press_m, (20, height - press_m.get_height() * 2))

    def _draw_game(
        self,
        surface: pygame.Surface,
        board_colors: tuple[Color, Color] = (
            FIRST_BOARD_BACKGROUND_COLOR,
            SECOND_BOARD_BACKGROUND_COLOR,
        ),
    ) -> None:
        width, height = window_dimensions()
        half = width // 2

        # The countdown starts with the first scoring move.
        if self._not_started():
            self._start = self._clock()

        if self.model_1.over or self.model_2.over or self._elapsed() > TIME_LIMIT:
            self.screen = Screen.END

        surface.fill(board_colors[0], pygame.Rect(0, 0, half, height))
        surface.fill(board_colors[1], pygame.Rect(half, 0, half, height))

        for board, model in enumerate((self.model_1, self.model_2)):
            self._draw_board(surface, board, model)

        title = self._text(GAME_TITLE, GAME_TITLE_FONT_SIZE, TEXT_COLOR)
        surface.blit(title, (self._centered_x(title), 0))

        timer = self._text(self.timer_text(), STATUS_FONT_SIZE, TEXT_COLOR)
        surface.blit(
            timer, (self._centered_x(timer), OFFSET_FROM_TOP - title.get_height())
        )

        score_1 = self._text(f"Score: {self.model_1.score}", STATUS_FONT_SIZE, TEXT_COLOR)
        score_2 = self._text(f"Score: {self.model_2.score}", STATUS_FONT_SIZE, TEXT_COLOR)
        score_x = OFFSET_FROM_SIDES + 2 * TILE_SIZE - score_1.get_width() // 2
        score_y = OFFSET_FROM_TOP - score_1.get_height()
        surface.blit(score_1, (score_x, score_y))
        surface.blit(score_2, (half + score_x, score_y))

    def _draw_board(self, surface: pygame.Surface, board: int, model: _Board) -> None:
        tile_size = tile_dimensions()
        for index, value in enumerate(model.tiles):
            row, column = divmod(index, BOARD_SIZE)
            x, y = tile_position(board, column, row)
            surface.fill(tile_color(value), pygame.Rect((x, y), tile_size))
            label = self._text(tile_label(value), TILE_FONT_SIZE)
            surface.blit(
                label,
                (
                    x + TILE_SIZE // 2 - label.get_width() // 2 - TEXT_NUDGE,
                    y + TILE_SIZE // 2 - label.get_height() // 2 - TEXT_NUDGE,
                ),
            )

    def _draw_end_game(self, surface: pygame.Surface) -> None:
        width, height = window_dimensions()
        outcome = decide_outcome(self.model_1, self.model_2)
        if outcome is Outcome.PLAYER_1:
            colors = (WIN_COLOR, LOSE_COLOR)
        elif outcome is Outcome.PLAYER_2:
            colors = (LOSE_COLOR, WIN_COLOR)
        else:
            colors = (WIN_COLOR, WIN_COLOR)

        self._draw_game(surface, colors)

        banner = self._text(outcome.message, BANNER_FONT_SIZE)
        surface.blit(banner, (self._centered_x(banner), height - banner.get_height()))

        press_m = self._text(PRESS_M_TEXT, HINT_FONT_SIZE)
        surface.blit(press_m, (20, height - press_m.get_height()))