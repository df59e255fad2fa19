"""Tests for snakes_ladders.board."""

import pytest

from snakes_ladders.board import (
    DEFAULT_LAYOUT,
    LADDERS,
    SNAKES,
    BoardLayout,
    BoardLayoutError,
    coordinates_to_square,
    iter_grid,
    square_to_coordinates,
)


# ── constants ────────────────────────────────────────────────────────

def test_default_layout_has_8_ladders_and_8_snakes():
    assert len(DEFAULT_LAYOUT.ladders) == 8
    assert len(DEFAULT_LAYOUT.snakes) == 8


def test_default_layout_size():
    assert DEFAULT_LAYOUT.size == 10
    assert DEFAULT_LAYOUT.square_count == 100


def test_ladders_go_up_and_snakes_go_down():
    for base, top in LADDERS.items():
        assert base < top
    for head, tail in SNAKES.items():
        assert head > tail


def test_all_squares_in_range():
    for mapping in (LADDERS, SNAKES):
        for sq, dest in mapping.items():
            assert 1 <= sq <= 100
            assert 1 <= dest <= 100


def test_layout_maps_are_read_only():
    with pytest.raises(TypeError):
        DEFAULT_LAYOUT.ladders[2] = 50


def test_is_ladder_and_is_snake():
    assert DEFAULT_LAYOUT.is_ladder(4) is True      # 4 → 14
    assert DEFAULT_LAYOUT.is_ladder(17) is False    # snake, not ladder
    assert DEFAULT_LAYOUT.is_snake(17) is True      # 17 → 7
    assert DEFAULT_LAYOUT.is_snake(4) is False
    assert DEFAULT_LAYOUT.is_snake(50) is False


def test_special_dest():
    assert DEFAULT_LAYOUT.special_dest(28) == 84
    assert DEFAULT_LAYOUT.special_dest(99) == 78
    assert DEFAULT_LAYOUT.special_dest(50) is None


# ── geometry ─────────────────────────────────────────────────────────

def test_square_one_is_bottom_left():
    assert square_to_coordinates(1) == (9, 0)


def test_first_row_runs_left_to_right():
    assert square_to_coordinates(10) == (9, 9)


def test_second_row_runs_right_to_left():
    assert square_to_coordinates(11) == (8, 9)
    assert square_to_coordinates(20) == (8, 0)


def test_square_100_is_on_the_top_row():
    # Top row is the tenth from the bottom, so it runs right to left
    assert square_to_coordinates(100) == (0, 0)
    assert square_to_coordinates(91) == (0, 9)


def test_round_trip_every_square():
    for s in range(1, 101):
        row, col = square_to_coordinates(s)
        assert 0 <= row <= 9
        assert 0 <= col <= 9
        assert coordinates_to_square(row, col) == s


def test_round_trip_every_cell():
    for row in range(10):
        for col in range(10):
            assert square_to_coordinates(coordinates_to_square(row, col)) == (row, col)


def test_round_trip_odd_size():
    layout = BoardLayout(size=5, ladders={2: 9}, snakes={20: 3})
    for s in range(1, layout.square_count + 1):
        assert layout.coordinates_to_square(*layout.square_to_coordinates(s)) == s
    assert layout.square_to_coordinates(25) == (0, 4)


def test_iter_grid_covers_board_top_row_first():
    cells = list(iter_grid())
    assert len(cells) == 100
    assert cells[0] == (0, 0, 100)
    assert cells[-1] == (9, 9, 10)
    assert sorted(sq for _, _, sq in cells) == list(range(1, 101))


# ── validation ───────────────────────────────────────────────────────

def test_ladder_must_go_up():
    with pytest.raises(BoardLayoutError, match="must go up"):
        BoardLayout(ladders={30: 10}, snakes={})


def test_snake_must_go_down():
    with pytest.raises(BoardLayoutError, match="must go down"):
        BoardLayout(ladders={}, snakes={10: 30})


def test_square_cannot_be_its_own_destination():
    with pytest.raises(BoardLayoutError):
        BoardLayout(ladders={10: 10}, snakes={})


def test_square_off_the_board():
    with pytest.raises(BoardLayoutError, match="off the board"):
        BoardLayout(ladders={90: 101}, snakes={})
    with pytest.raises(BoardLayoutError, match="off the board"):
        BoardLayout(ladders={}, snakes={10: 0})


def test_ladder_and_snake_on_same_square():
    with pytest.raises(BoardLayoutError, match="both a ladder base and a snake head"):
        BoardLayout(ladders={50: 60}, snakes={50: 40})


def test_start_and_finish_squares_may_be_special():
    layout = BoardLayout(ladders={1: 38, 80: 100}, snakes={100: 2})
    assert layout.special_dest(1) == 38
    assert layout.special_dest(100) == 2


def test_non_positive_size():
    with pytest.raises(BoardLayoutError):
        BoardLayout(size=0, ladders={}, snakes={})


def test_layout_error_is_a_value_error():
    assert issubclass(BoardLayoutError, ValueError)


def test_destination_may_be_another_special():
    layout = BoardLayout(ladders={4: 14}, snakes={14: 3})
    assert layout.special_dest(layout.special_dest(4)) == 3
