"""Game of Life engine: immutable boards and the generation step."""
import numpy as np
from typing import Iterator, List, Tuple
import logging

from .errors import InvalidBoardError, InvalidCellStateError
from .rules import Cell, TRANSITION_TABLE

LOG = logging.getLogger(__name__)

# Offsets of the 8 surrounding cells
NEIGHBOR_OFFSETS = tuple((dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1)
                         if not (dr == 0 and dc == 0))


def _to_cell_array(cells) -> np.ndarray:
    """Validate a grid of cell values and convert it to a uint8 array.

    Args:
        cells: Nested sequence of 0/1 values or a 2-D numpy array

    Returns:
        A fresh uint8 array with the same shape
    """
    if isinstance(cells, np.ndarray):
        if cells.ndim != 2:
            raise InvalidBoardError(f"Board must be two-dimensional, got {cells.ndim} dimension(s)")
        array = cells
    else:
        try:
            rows = [list(row) for row in cells]
        except TypeError:
            raise InvalidBoardError("Board must be a two-dimensional grid of cells") from None
        if not rows or not rows[0]:
            raise InvalidBoardError("Board must have a positive number of rows and columns")
        width = len(rows[0])
        for index, row in enumerate(rows):
            if len(row) != width:
                raise InvalidBoardError(
                    f"Board must be rectangular: row {index} has {len(row)} cells, expected {width}")
        try:
            array = np.array(rows)
        except ValueError:
            raise InvalidBoardError("Board must be a two-dimensional grid of cells") from None
        if array.ndim != 2:
            raise InvalidBoardError(f"Board must be two-dimensional, got {array.ndim} dimension(s)")

    if array.shape[0] == 0 or array.shape[1] == 0:
        raise InvalidBoardError("Board must have a positive number of rows and columns")

    if array.dtype.kind not in "biuf":
        raise InvalidCellStateError(f"Cell values must be 0 or 1, got values of type {array.dtype}")

    invalid = (array != Cell.DEAD) & (array != Cell.ALIVE)
    if invalid.any():
        row, col = np.argwhere(invalid)[0]
        raise InvalidCellStateError(
            f"State of cell ({row}, {col}) must be either ALIVE or DEAD, got {array[row, col].item()!r}")

    return array.astype(np.uint8)


class Board:
    """Immutable rectangular grid of cells."""

    def __init__(self, cells):
        """Create a board, validating shape and cell values.

        Args:
            cells: Nested sequence of 0/1 (or Cell) values, a 2-D numpy
                array, or another Board

        Raises:
            InvalidBoardError: Zero rows or columns, or ragged rows
            InvalidCellStateError: A value other than 0 or 1
        """
        if isinstance(cells, Board):
            self._cells = cells._cells
            return

        self._cells = _to_cell_array(cells)
        self._cells.setflags(write=False)

    @classmethod
    def dead(cls, rows: int, cols: int) -> "Board":
        """Create a board with every cell dead."""
        return cls(np.zeros((rows, cols), dtype=np.uint8))

    @property
    def rows(self) -> int:
        return self._cells.shape[0]

    @property
    def cols(self) -> int:
        return self._cells.shape[1]

    @property
    def shape(self) -> Tuple[int, int]:
        """Board dimensions as (rows, cols)."""
        return self._cells.shape

    @property
    def cells(self) -> np.ndarray:
        """Read-only uint8 view of the cell values."""
        return self._cells

    @property
    def live_count(self) -> int:
        """Number of live cells on the board."""
        return int(np.count_nonzero(self._cells))

    def to_list(self) -> List[List[int]]:
        """Get the cell values as nested lists of 0/1 integers."""
        return self._cells.tolist()

    def __getitem__(self, position: Tuple[int, int]) -> Cell:
        row, col = position
        return Cell(int(self._cells[row, col]))

    def __iter__(self) -> Iterator[Tuple[int, ...]]:
        for row in self._cells.tolist():
            yield tuple(row)

    def __len__(self) -> int:
        return self.rows

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return np.array_equal(self._cells, other._cells)

    def __hash__(self) -> int:
        return hash((self.shape, self._cells.tobytes()))

    def __repr__(self) -> str:
        return f"Board({self.to_list()!r})"


def neighbor_counts(board: Board) -> np.ndarray:
    """Count live neighbors of every cell at once.

    The board is padded with dead cells, so positions outside the grid
    never count.

    Args:
        board: Board to inspect

    Returns:
        Integer array with the board's shape, values in [0, 8]
    """
    rows, cols = board.shape
    padded = np.pad(board.cells.astype(np.intp), 1)

    counts = np.zeros((rows, cols), dtype=np.intp)
    for dr, dc in NEIGHBOR_OFFSETS:
        counts += padded[1 + dr:1 + dr + rows, 1 + dc:1 + dc + cols]
    return counts


def count_live_neighbors(board, row: int, col: int) -> int:
    """Count live cells in the 3x3 block around (row, col), excluding itself.

    Args:
        board: Board to inspect, or a raw grid that is validated into one
        row: Row of the cell
        col: Column of the cell

    Returns:
        Number of live neighbors, 0 to 8
    """
    if not isinstance(board, Board):
        board = Board(board)

    if not (0 <= row < board.rows and 0 <= col < board.cols):
        raise IndexError(f"Position ({row}, {col}) is outside a {board.rows}x{board.cols} board")

    block = board.cells[max(0, row - 1):row + 2, max(0, col - 1):col + 2]
    return int(np.count_nonzero(block)) - int(board.cells[row, col])


def compute_next_generation(board) -> Board:
    """Compute the next generation of a board.

    Args:
        board: Current Board, or a raw grid that is validated into one

    Returns:
        A new Board of identical dimensions; the input is left untouched

    Raises:
        InvalidBoardError: The board has a zero dimension
        InvalidCellStateError: A cell holds a value other than 0 or 1
    """
    if not isinstance(board, Board):
        board = Board(board)

    next_cells = TRANSITION_TABLE[board.cells, neighbor_counts(board)]
    return Board(next_cells)


class LifeEngine:
    """Drives a board through successive generations."""

    def __init__(self, board):
        """Initialize the engine.

        Args:
            board: Starting Board or raw grid
        """
        self.board = board if isinstance(board, Board) else Board(board)
        self.generation = 0
        LOG.debug(f"Engine created with {self.board.rows}x{self.board.cols} board, "
                  f"live_cells={self.board.live_count}")

    def step(self, steps: int = 1) -> Board:
        """Advance simulation by specified number of steps.

        Args:
            steps: Number of simulation steps to perform

        Returns:
            The board after the last step
        """
        for _ in range(steps):
            self.board = compute_next_generation(self.board)
            self.generation += 1
            LOG.debug(f"Step {self.generation}: live_cells={self.board.live_count}")
        return self.board

    def run(self, iterations: int) -> Iterator[Board]:
        """Yield the current board followed by the next `iterations` generations."""
        if iterations < 0:
            raise ValueError(f"Iteration count must be >= 0, got {iterations}")
        return self._generations(iterations)

    def _generations(self, iterations: int) -> Iterator[Board]:
        yield self.board
        for _ in range(iterations):
            yield self.step()
