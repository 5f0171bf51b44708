"""Main entry point for the Game of Life console application."""
from typing import Optional

import click

from . import __version__
from .core import LifeEngine, LifeError, get_pattern, parse_board, pattern_names
from .output.printer import print_generations
from .utils.config import Config, setup_logging


@click.command()
@click.version_option(version=__version__, prog_name="conway")
@click.argument("iterations", type=click.IntRange(min=0), default=Config.DEFAULT_ITERATIONS)
@click.option("-p", "--pattern", type=click.Choice(pattern_names()), default=Config.DEFAULT_PATTERN,
              show_default=True, help="Built-in starting board.")
@click.option("-b", "--board", "board_text", default=None,
              help="Inline starting board, rows separated by '/', e.g. '000/111/000'.")
@click.option("-s", "--separator", default=Config.CELL_SEPARATOR, show_default=True,
              help="Text printed after every cell.")
@click.option("-v", "--verbose", is_flag=True, help="Log each generation step to stderr.")
def main(iterations: int, pattern: str, board_text: Optional[str], separator: str, verbose: bool) -> None:
    """Run Conway's Game of Life for ITERATIONS generations and print each one."""
    log = setup_logging(verbose)

    try:
        board = parse_board(board_text) if board_text is not None else get_pattern(pattern)
        engine = LifeEngine(board)
        count = print_generations(engine.run(iterations), separator=separator)
    except LifeError as e:
        log.debug(f"Simulation aborted: {e}")
        raise click.ClickException(str(e))

    log.debug(f"Printed {count} generation(s)")


if __name__ == "__main__":
    main()
