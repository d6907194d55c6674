"""Board state and move rules for one player's 4x4 sliding-tile board."""

from __future__ import annotations

import random
from collections.abc import Sequence

SIZE = 4
CELLS = SIZE * SIZE
INITIAL_TILES = 3


class GameOverError(RuntimeError):
    """Raised when a move is attempted on a board that has no moves left."""


def _rows() -> list[tuple[int, ...]]:
    return [tuple(row * SIZE + col for col in range(SIZE)) for row in range(SIZE)]


def _columns() -> list[tuple[int, ...]]:
    return [tuple(row * SIZE + col for row in range(SIZE)) for col in range(SIZE)]


# Each line lists board indices starting at the wall the tiles move towards.
_LEFT_LINES = _rows()
_RIGHT_LINES = [line[::-1] for line in _rows()]
_UP_LINES = _columns()
_DOWN_LINES = [line[::-1] for line in _columns()]


def _collapse(line: list[int]) -> int:
    """Slide and merge one line towards index 0 in place; return points gained.

    Tiles are handled one at a time from the wall outwards. Each slides
    towards the wall across empty cells and then merges with its neighbour
    if the two are equal. A freshly merged tile may merge again with the
    next tile that reaches it.
    """
    gained = 0
    for start in range(1, len(line)):
        pos = start
        while pos > 0 and line[pos - 1] == 0:
            line[pos - 1], line[pos] = line[pos], 0
            pos -= 1
        if pos > 0 and line[pos] == line[pos - 1]:
            line[pos - 1] *= 2
            gained += line[pos - 1]
            line[pos] = 0
    return gained


class Model:
    """One player's board: sixteen tiles in row-major order, a score and an over flag."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.tiles: list[int] = [0] * CELLS
        self.score = 0
        self.over = False
        for _ in range(INITIAL_TILES):
            self._add_random_tile()

    def refresh_over(self) -> None:
        """Recompute whether the board has run out of moves."""
        self.over = self._game_over()

    def move_left(self) -> None:
        """Slide all tiles left, merging equal neighbours."""
        self._move(_LEFT_LINES)

    def move_up(self) -> None:
        """Slide all tiles up, merging equal neighbours."""
        self._move(_UP_LINES)

    def move_down(self) -> None:
        """Slide all tiles down, merging equal neighbours."""
        self._move(_DOWN_LINES)

    def move_right(self) -> None:
        """Slide all tiles right, merging equal neighbours."""
        self._move(_RIGHT_LINES)

    def _move(self, lines: Sequence[tuple[int, ...]]) -> None:
        if self._game_over():
            raise GameOverError("Model.move: game over")
        before = list(self.tiles)
        for indices in lines:
            line = [self.tiles[i] for i in indices]
            self.score += _collapse(line)
            for index, value in zip(indices, line):
                self.tiles[index] = value
        if self.tiles != before:
            self._add_random_tile()

    def _add_random_tile(self) -> None:
        empty = [i for i, value in enumerate(self.tiles) if value == 0]
        if not empty:
            return
        cell = empty[self._rng.randrange(len(empty))]
        self.tiles[cell] = 4 if self._rng.randrange(10) == 0 else 2

    def _game_over(self) -> bool:
        if 0 in self.tiles:
            return False
        for index, value in enumerate(self.tiles):
            row, col = divmod(index, SIZE)
            if col + 1 < SIZE and value == self.tiles[index + 1]:
                return False
            if row + 1 < SIZE and value == self.tiles[index + SIZE]:
                return False
        return True