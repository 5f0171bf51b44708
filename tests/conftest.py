"""Shared pytest fixtures for the Game of Life tests."""
import pytest
from click.testing import CliRunner

from conway.core import Board, get_pattern


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def demo_board() -> Board:
    """5x5 start board of the console demo."""
    return get_pattern('demo')


@pytest.fixture
def blinker() -> Board:
    """Horizontal period-2 blinker centred on a 5x5 board."""
    return get_pattern('blinker')
