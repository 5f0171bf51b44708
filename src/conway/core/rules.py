"""Cell states and the B3/S23 transition rule."""
from enum import IntEnum

import numpy as np

from .errors import InvalidCellStateError


class Cell(IntEnum):
    """State of a single cell."""
    DEAD = 0
    ALIVE = 1


# Conway's Life: B3/S23
BIRTH_COUNTS = (3,)
SURVIVE_COUNTS = (2, 3)

MAX_NEIGHBORS = 8


def get_transition_table() -> np.ndarray:
    """Get the next-state lookup table for Conway's rule.

    Returns:
        A (2, 9) uint8 array indexed by [current_state, live_neighbors]
    """
    table = np.zeros((len(Cell), MAX_NEIGHBORS + 1), dtype=np.uint8)

    for count in BIRTH_COUNTS:
        table[Cell.DEAD][count] = Cell.ALIVE
    for count in SURVIVE_COUNTS:
        table[Cell.ALIVE][count] = Cell.ALIVE

    return table


TRANSITION_TABLE = get_transition_table()
TRANSITION_TABLE.setflags(write=False)


def next_cell_state(state, live_neighbors: int) -> Cell:
    """Apply the transition rule to a single cell.

    Args:
        state: Current cell value, a Cell or its 0/1 integer value
        live_neighbors: Number of live neighbors, 0 to 8

    Returns:
        The cell's state in the next generation
    """
    try:
        current = Cell(state)
    except ValueError:
        raise InvalidCellStateError(
            f"State of cell must be either ALIVE or DEAD, got {state!r}") from None

    if not 0 <= live_neighbors <= MAX_NEIGHBORS:
        raise ValueError(f"Live neighbor count must be in [0, {MAX_NEIGHBORS}], got {live_neighbors}")

    if current is Cell.ALIVE:
        if live_neighbors < 2:
            return Cell.DEAD  # underpopulation
        if live_neighbors > 3:
            return Cell.DEAD  # overcrowding
        return Cell.ALIVE

    return Cell.ALIVE if live_neighbors == 3 else Cell.DEAD
