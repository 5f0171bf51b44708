"""Built-in starting boards and inline board parsing."""
import re
from typing import Dict, List, Tuple

from .errors import InvalidBoardError, InvalidCellStateError
from .life_engine import Board

# Each pattern is a tuple of row strings of 0/1 digits
PATTERNS: Dict[str, Tuple[str, ...]] = {
    # Start board of the classic console demo
    'demo': (
        "00000",
        "00010",
        "00110",
        "00010",
        "00000",
    ),
    'blinker': (
        "00000",
        "00000",
        "01110",
        "00000",
        "00000",
    ),
    'block': (
        "0000",
        "0110",
        "0110",
        "0000",
    ),
    'beacon': (
        "000000",
        "011000",
        "011000",
        "000110",
        "000110",
        "000000",
    ),
    'glider': (
        "010000",
        "001000",
        "111000",
        "000000",
        "000000",
        "000000",
    ),
}

ROW_SEPARATORS = re.compile(r"[/;]")


def pattern_names() -> List[str]:
    """Get names of all built-in patterns."""
    return list(PATTERNS)


def get_pattern(name: str) -> Board:
    """Build the board for a built-in pattern.

    Args:
        name: Pattern name, see pattern_names()

    Returns:
        Starting board for the pattern
    """
    if name not in PATTERNS:
        raise KeyError(f"Unknown pattern {name!r}, expected one of: {', '.join(PATTERNS)}")
    return parse_board("/".join(PATTERNS[name]))


def _parse_row(row: str) -> List[int]:
    row = row.strip()
    if "," in row:
        tokens = [token.strip() for token in row.split(",")]
        # Printed boards end every cell with a separator
        if tokens and tokens[-1] == "":
            tokens.pop()
    else:
        tokens = list(row)

    values = []
    for token in tokens:
        try:
            values.append(int(token))
        except ValueError:
            raise InvalidCellStateError(
                f"State of cell must be either ALIVE or DEAD, got {token!r}") from None
    return values


def parse_board(text: str) -> Board:
    """Parse an inline board description.

    Rows are separated by '/' or ';'. Cells are either comma separated
    ("0,1,0") or written as a run of digits ("010").

    Args:
        text: Board description, e.g. "000/111/000"

    Returns:
        Parsed board
    """
    if not text or not text.strip():
        raise InvalidBoardError("Board must have a positive number of rows and columns")

    return Board([_parse_row(row) for row in ROW_SEPARATORS.split(text.strip())])
