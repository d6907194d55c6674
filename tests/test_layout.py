import itertools
import random

import pytest

from tileduel.layout import (
    BOARD_SIZE,
    Outcome,
    Screen,
    decide_outcome,
    tile_color,
    tile_dimensions,
    tile_label,
    tile_position,
    window_dimensions,
)
from tileduel.model import Model

KNOWN_VALUES = [2, 4, 8, 16, 32, 64, 128, 256, 512, 1024, 2048]


def _model(score=0, over=False):
    model = Model(random.Random(0))
    model.score = score
    model.over = over
    return model


def test_window_dimensions_pinned():
    assert window_dimensions() == (1400, 750)


def test_tile_colors_from_source():
    assert tile_color(0) == (231, 225, 235)
    assert tile_color(2) == (126, 197, 235)
    assert tile_color(2048) == (0, 120, 0)


def test_large_values_use_largest_tile_style():
    assert tile_color(4096) == tile_color(2048)
    assert tile_label(4096) == "2048"


def test_tile_colors_are_distinct():
    colors = [tile_color(v) for v in [0] + KNOWN_VALUES]
    assert len(set(colors)) == len(colors)


@pytest.mark.parametrize("value", KNOWN_VALUES)
def test_labels_match_values(value):
    assert tile_label(value) == str(value)


def test_empty_label_is_blank():
    assert tile_label(0) == " "


def test_tile_dimensions_square_and_smaller_than_step():
    width, height = tile_dimensions()
    step = tile_position(0, 1, 0)[0] - tile_position(0, 0, 0)[0]
    assert width == height
    assert 0 < width < step


def test_first_tile_position_from_source_offsets():
    assert tile_position(0, 0, 0) == (50, 100)


def test_right_board_offset_by_half_window():
    half = window_dimensions()[0] // 2
    for col, row in itertools.product(range(BOARD_SIZE), repeat=2):
        lx, ly = tile_position(0, col, row)
        rx, ry = tile_position(1, col, row)
        assert rx - lx == half
        assert ry == ly


def test_tiles_fit_in_window_and_do_not_overlap():
    width, height = window_dimensions()
    tw, th = tile_dimensions()
    positions = [
        tile_position(b, c, r)
        for b in (0, 1)
        for c, r in itertools.product(range(BOARD_SIZE), repeat=2)
    ]
    assert len(set(positions)) == len(positions)
    for x, y in positions:
        assert 0 <= x and x + tw <= width
        assert 0 <= y and y + th <= height
    for (x1, y1), (x2, y2) in itertools.combinations(positions, 2):
        assert x1 + tw <= x2 or x2 + tw <= x1 or y1 + th <= y2 or y2 + th <= y1


@pytest.mark.parametrize("args", [(2, 0, 0), (-1, 0, 0), (0, 4, 0), (0, 0, -1)])
def test_tile_position_rejects_bad_arguments(args):
    with pytest.raises(ValueError):
        tile_position(*args)


@pytest.mark.parametrize("number", [0, 1, 3, 4])
def test_screen_lookup_by_number(number):
    assert Screen(number).value == number


@pytest.mark.parametrize("number", [2, 5, -1])
def test_screen_lookup_rejects_unknown_numbers(number):
    with pytest.raises(ValueError):
        Screen(number)


def test_outcome_messages():
    assert decide_outcome(_model(score=8), _model(score=4)).message == "Player 1 Wins!"
    assert decide_outcome(_model(score=4), _model(score=8)).message == "Player 2 Wins"
    assert decide_outcome(_model(score=4), _model(score=4)).message == "It's a Tie!"


def test_first_player_stuck_loses_even_with_higher_score():
    assert decide_outcome(_model(score=100, over=True), _model(score=0)) is Outcome.PLAYER_2


def test_second_player_stuck_loses():
    assert decide_outcome(_model(score=0), _model(score=100, over=True)) is Outcome.PLAYER_1


def test_both_stuck_counts_against_first_player():
    assert decide_outcome(_model(over=True), _model(over=True)) is Outcome.PLAYER_2


def test_higher_score_wins():
    assert decide_outcome(_model(score=8), _model(score=4)) is Outcome.PLAYER_1
    assert decide_outcome(_model(score=4), _model(score=8)) is Outcome.PLAYER_2


def test_equal_scores_tie():
    assert decide_outcome(_model(score=16), _model(score=16)) is Outcome.TIE