"""Configuration constants for the Game of Life console application."""
from dataclasses import dataclass
import logging
import sys


@dataclass
class Config:
    """Application configuration."""

    # Simulation settings
    DEFAULT_ITERATIONS: int = 5
    DEFAULT_PATTERN: str = 'demo'

    # Console output
    CELL_SEPARATOR: str = ","
    GENERATION_HEADER: str = "Cell generation:"

    # Logging
    LOG_FORMAT: str = '%(levelname)s: %(message)s'
    LOGGER_NAME: str = 'conway'


class StderrHandler(logging.StreamHandler):
    """Stream handler that writes to whatever sys.stderr is at emit time."""

    @property
    def stream(self):
        return sys.stderr

    @stream.setter
    def stream(self, value):
        pass


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Attach a stderr handler to the package logger.

    Replaces the handler from any earlier call, so repeated setup never
    stacks handlers.

    Args:
        verbose: Log debug messages when True, warnings and above otherwise

    Returns:
        The configured package logger
    """
    log = logging.getLogger(Config.LOGGER_NAME)
    log.setLevel(logging.DEBUG if verbose else logging.WARNING)

    for handler in list(log.handlers):
        if handler.get_name() == Config.LOGGER_NAME:
            log.removeHandler(handler)

    handler = StderrHandler()
    handler.set_name(Config.LOGGER_NAME)
    handler.setFormatter(logging.Formatter(Config.LOG_FORMAT))
    log.addHandler(handler)
    log.propagate = False

    return log
