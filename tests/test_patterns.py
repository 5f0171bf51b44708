"""Tests for built-in patterns and inline board parsing."""
import pytest

from conway.core.errors import InvalidBoardError, InvalidCellStateError
from conway.core.life_engine import Board, compute_next_generation
from conway.core.patterns import get_pattern, parse_board, pattern_names


def test_pattern_names():
    assert pattern_names() == ['demo', 'blinker', 'block', 'beacon', 'glider']


@pytest.mark.parametrize("name", pattern_names())
def test_every_pattern_builds_a_board(name):
    board = get_pattern(name)
    assert isinstance(board, Board)
    assert board.live_count > 0


def test_unknown_pattern_raises():
    with pytest.raises(KeyError):
        get_pattern('spaceship')


def test_block_is_still_life():
    block = get_pattern('block')
    assert compute_next_generation(block) == block


def test_beacon_has_period_two():
    beacon = get_pattern('beacon')
    first = compute_next_generation(beacon)
    assert first != beacon
    assert compute_next_generation(first) == beacon


def test_glider_moves_one_cell_diagonally_in_four_generations():
    glider = get_pattern('glider')
    board = glider
    for _ in range(4):
        board = compute_next_generation(board)
    assert board.to_list() == [
        [0, 0, 0, 0, 0, 0],
        [0, 0, 1, 0, 0, 0],
        [0, 0, 0, 1, 0, 0],
        [0, 1, 1, 1, 0, 0],
        [0, 0, 0, 0, 0, 0],
        [0, 0, 0, 0, 0, 0],
    ]


@pytest.mark.parametrize("text", [
    "010/111/010",
    "010;111;010",
    "0,1,0/1,1,1/0,1,0",
    "0,1,0,/1,1,1,/0,1,0,",
    " 0, 1, 0 / 1, 1, 1 / 0, 1, 0 ",
])
def test_parse_board_formats(text):
    assert parse_board(text).to_list() == [[0, 1, 0], [1, 1, 1], [0, 1, 0]]


@pytest.mark.parametrize("text", ["", "   ", "/", "01/1"])
def test_parse_board_bad_shape_raises(text):
    with pytest.raises(InvalidBoardError):
        parse_board(text)


@pytest.mark.parametrize("text", ["012", "0,x,1", "0,2"])
def test_parse_board_bad_cell_raises(text):
    with pytest.raises(InvalidCellStateError):
        parse_board(text)
