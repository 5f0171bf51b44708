"""Conway's Game of Life - console implementation."""

__version__ = "0.1.0"
__author__ = "Life Game"

from .core.errors import InvalidBoardError, InvalidCellStateError, LifeError
from .core.life_engine import Board, LifeEngine, compute_next_generation, count_live_neighbors
from .core.rules import Cell

__all__ = ['Board', 'Cell', 'LifeEngine', 'compute_next_generation', 'count_live_neighbors',
           'LifeError', 'InvalidBoardError', 'InvalidCellStateError', '__version__']
