"""Exceptions raised by the Game of Life engine."""


class LifeError(Exception):
    """Base class for all engine errors."""


class InvalidBoardError(LifeError, ValueError):
    """Board has zero rows or columns, or is not rectangular."""


class InvalidCellStateError(LifeError, ValueError):
    """Cell holds a value other than dead (0) or alive (1)."""
