"""Plain-text rendering of boards to the console."""
from typing import Callable, Iterable

import click

from ..core.life_engine import Board
from ..utils.config import Config


def format_board(board: Board, separator: str = Config.CELL_SEPARATOR) -> str:
    """Render a board as text.

    Each cell is written as its integer value followed by the separator,
    one line per row.

    Args:
        board: Board to render
        separator: Text written after every cell

    Returns:
        Rendered board without a trailing newline
    """
    return "\n".join("".join(f"{value}{separator}" for value in row) for row in board)


def print_generations(boards: Iterable[Board],
                      echo: Callable[[str], None] = click.echo,
                      separator: str = Config.CELL_SEPARATOR) -> int:
    """Print a header followed by each generation, separated by blank lines.

    Args:
        boards: Boards to print, in generation order
        echo: Line writer
        separator: Text written after every cell

    Returns:
        Number of boards printed
    """
    echo(Config.GENERATION_HEADER)

    printed = 0
    for board in boards:
        if printed:
            echo("")
        echo(format_board(board, separator))
        printed += 1
    return printed
