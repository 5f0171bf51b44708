"""Core module for the Game of Life engine."""
from .errors import LifeError, InvalidBoardError, InvalidCellStateError
from .rules import Cell, get_transition_table, next_cell_state
from .life_engine import (Board, LifeEngine, compute_next_generation, count_live_neighbors,
                          neighbor_counts)
from .patterns import get_pattern, parse_board, pattern_names

__all__ = ['Board', 'Cell', 'LifeEngine', 'compute_next_generation', 'count_live_neighbors',
           'neighbor_counts', 'get_transition_table', 'next_cell_state',
           'get_pattern', 'parse_board', 'pattern_names',
           'LifeError', 'InvalidBoardError', 'InvalidCellStateError']
