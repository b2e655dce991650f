"""
Pytest configuration and shared fixtures.
"""
import random
import sys
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import Board, CellState, Difficulty, BEGINNER


class FakeClock:
    """Manually advanced clock for timer tests."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def default_board() -> Board:
    """Create a beginner 8x8 board with 10 mines."""
    return Board(BEGINNER, rng=random.Random(1234))


@pytest.fixture
def small_board(clock: FakeClock) -> Board:
    """3x3 board with a single mine forced at the bottom-right corner."""
    board = Board(Difficulty.custom(3, 3, 1), clock=clock)
    board.start_with_mines([(2, 2)])
    return board


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for cascade testing."""
    return Board(Difficulty.custom(5, 5, 0))


@pytest.fixture
def wall_board() -> Board:
    """
    5x5 board with a wall of mines down column 2.

    Opening the left side can never reach the right side.
    """
    board = Board(Difficulty.custom(5, 5, 5))
    board.start_with_mines([(row, 2) for row in range(5)])
    return board


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> CellState:
    """Create a closed cell."""
    return CellState()


@pytest.fixture
def mine_cell() -> CellState:
    """Create a cell containing a mine."""
    cell = CellState()
    cell.set_mine(True)
    return cell


@pytest.fixture
def numbered_cell() -> CellState:
    """Create an opened cell with adjacent mines."""
    cell = CellState()
    cell.set_adjacent_mines(3)
    cell.set_opened(True)
    return cell
