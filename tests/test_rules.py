"""Tests for cell states and the transition rule."""
import pytest

from conway.core.errors import InvalidCellStateError
from conway.core.rules import Cell, TRANSITION_TABLE, get_transition_table, next_cell_state


def test_cell_values_match_integer_encoding():
    assert Cell.DEAD == 0
    assert Cell.ALIVE == 1
    assert len(Cell) == 2


@pytest.mark.parametrize("count", range(9))
def test_dead_cell_is_born_only_with_three_neighbors(count):
    expected = Cell.ALIVE if count == 3 else Cell.DEAD
    assert next_cell_state(Cell.DEAD, count) is expected


@pytest.mark.parametrize("count", range(9))
def test_live_cell_survives_only_with_two_or_three_neighbors(count):
    expected = Cell.ALIVE if count in (2, 3) else Cell.DEAD
    assert next_cell_state(Cell.ALIVE, count) is expected


def test_integer_states_are_accepted():
    assert next_cell_state(1, 2) is Cell.ALIVE
    assert next_cell_state(0, 3) is Cell.ALIVE
    assert next_cell_state(1, 1) is Cell.DEAD


@pytest.mark.parametrize("state", [2, -1, "1", None])
def test_invalid_state_raises(state):
    with pytest.raises(InvalidCellStateError):
        next_cell_state(state, 2)


def test_invalid_state_is_a_value_error():
    with pytest.raises(ValueError):
        next_cell_state(2, 3)


@pytest.mark.parametrize("count", [-1, 9])
def test_neighbor_count_out_of_range_raises(count):
    with pytest.raises(ValueError):
        next_cell_state(Cell.ALIVE, count)


def test_transition_table_matches_rule():
    table = get_transition_table()
    assert table.shape == (2, 9)
    for state in Cell:
        for count in range(9):
            assert table[state][count] == next_cell_state(state, count)


def test_shared_transition_table_is_read_only():
    with pytest.raises(ValueError):
        TRANSITION_TABLE[0][0] = 1
