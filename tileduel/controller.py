"""Keyboard handling and the main loop tying two boards to the view."""

from __future__ import annotations

import argparse
import random
from collections.abc import Callable, Sequence

import pygame

from tileduel.layout import Dimensions, Screen
from tileduel.model import GameOverError, Model
from tileduel.view import View

FRAMES_PER_SECOND = 60

_PLAYER_1_KEYS: dict[int, str] = {
    pygame.K_a: "move_left",
    pygame.K_w: "move_up",
    pygame.K_s: "move_down",
    pygame.K_d: "move_right",
}

_PLAYER_2_KEYS: dict[int, str] = {
    pygame.K_LEFT: "move_left",
    pygame.K_UP: "move_up",
    pygame.K_DOWN: "move_down",
    pygame.K_RIGHT: "move_right",
}

_MENU_KEYS: dict[int, Screen] = {
    pygame.K_m: Screen.MAIN_MENU,
    pygame.K_i: Screen.INSTRUCTIONS,
    pygame.K_SPACE: Screen.GAME,
}


class Controller:
    """Owns both players' boards and the view, and routes key presses."""

    def __init__(
        self,
        rng: random.Random | None = None,
        clock: Callable[[], float] | None = None,
    ) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.model_1 = Model(self._rng)
        self.model_2 = Model(self._rng)
        self.view = View(self.model_1, self.model_2, clock)

    def draw(self, surface: pygame.Surface) -> None:
        """Update both boards' game-over flags and render the current screen."""
        self.model_1.refresh_over()
        self.model_2.refresh_over()
        self.view.draw(surface)

    def on_key(self, key: int) -> None:
        """React to a pygame key code."""
        screen = self.view.screen
        if screen is Screen.GAME:
            self._play(key)
        elif screen is Screen.END:
            if key == pygame.K_m:
                self._new_duel()
                self.view.screen = Screen.MAIN_MENU
        elif key in _MENU_KEYS:
            self.view.screen = _MENU_KEYS[key]

    def initial_window_dimensions(self) -> Dimensions:
        """Size of the game window."""
        return self.view.initial_window_dimensions()

    def initial_window_title(self) -> str:
        """Title of the game window."""
        return self.view.initial_window_title()

    def run(self) -> None:
        """Open the window and run the event loop until it is closed."""
        pygame.init()
        try:
            surface = pygame.display.set_mode(self.initial_window_dimensions())
            pygame.display.set_caption(self.initial_window_title())
            ticker = pygame.time.Clock()
            running = True
            while running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                    elif event.type == pygame.KEYDOWN:
                        self.on_key(event.key)
                self.draw(surface)
                pygame.display.flip()
                ticker.tick(FRAMES_PER_SECOND)
        finally:
            pygame.quit()

    def _play(self, key: int) -> None:
        for model, bindings in ((self.model_1, _PLAYER_1_KEYS), (self.model_2, _PLAYER_2_KEYS)):
            action = bindings.get(key)
            if action is not None:
                try:
                    getattr(model, action)()
                except GameOverError:
                    pass
                return

    def _new_duel(self) -> None:
        self.model_1 = Model(self._rng)
        self.model_2 = Model(self._rng)
        self.view.model_1 = self.model_1
        self.view.model_2 = self.model_2


def main(argv: Sequence[str] | None = None) -> int:
    """Start a two-player duel in a window."""
    parser = argparse.ArgumentParser(
        prog="tileduel", description="Two-player sliding-tile duel."
    )
    parser.parse_args(argv)
    Controller().run()
    return 0