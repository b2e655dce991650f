"""
Unit tests for CellState and Cell.

Tests setter guards, flag/open behavior, and display tokens.
"""
import itertools

import pytest
from minesweeper import Cell, CellState, BLANK, FLAGGED, MINE, UNOPENED


# ============================================================================
# Cell Initialization Tests
# ============================================================================

class TestCellInitialization:
    """Test cell creation and default values."""

    def test_default_cell_is_not_mine(self, hidden_cell: CellState) -> None:
        """New cell should not be a mine by default."""
        assert hidden_cell.is_mine is False

    def test_default_cell_is_closed_and_unflagged(
        self, hidden_cell: CellState
    ) -> None:
        """New cell should be closed and unflagged."""
        assert hidden_cell.is_opened is False
        assert hidden_cell.is_flagged is False

    def test_default_cell_has_zero_adjacent_mines(
        self, hidden_cell: CellState
    ) -> None:
        """New cell should have 0 adjacent mines by default."""
        assert hidden_cell.adjacent_mines == 0

    def test_default_display_is_unopened(self, hidden_cell: CellState) -> None:
        """New cell should display the unopened marker."""
        assert hidden_cell.display_value() == UNOPENED

    def test_cell_keeps_position(self) -> None:
        """Cell exposes its row and column."""
        cell = Cell(2, 5)
        assert cell.position == (2, 5)
        assert cell.state.is_opened is False


# ============================================================================
# Set Mine Tests
# ============================================================================

class TestSetMine:
    """Test mine placement on a cell."""

    def test_set_mine_marks_mine(self, mine_cell: CellState) -> None:
        """set_mine(True) should make the cell a mine."""
        assert mine_cell.is_mine is True

    def test_set_mine_reinitializes_other_fields(self) -> None:
        """set_mine should clear opened, flagged and count."""
        cell = CellState()
        cell.set_adjacent_mines(4)
        cell.set_flagged(True)
        cell.set_mine(True)
        assert cell.is_flagged is False
        assert cell.is_opened is False
        assert cell.adjacent_mines == 0

    def test_set_mine_false_resets_opened_cell(
        self, numbered_cell: CellState
    ) -> None:
        """set_mine(False) is a full reset, even on an opened cell."""
        numbered_cell.set_mine(False)
        assert numbered_cell.is_opened is False
        assert numbered_cell.adjacent_mines == 0
        assert numbered_cell.display_value() == UNOPENED


# ============================================================================
# Flag Tests
# ============================================================================

class TestCellFlag:
    """Test cell flagging behavior."""

    def test_flag_closed_cell(self, hidden_cell: CellState) -> None:
        """Flagging a closed cell should succeed."""
        hidden_cell.set_flagged(True)
        assert hidden_cell.is_flagged is True
        assert hidden_cell.display_value() == FLAGGED

    def test_unflag_returns_to_unopened(self, hidden_cell: CellState) -> None:
        """Unflagging should show the unopened marker again."""
        hidden_cell.set_flagged(True)
        hidden_cell.set_flagged(False)
        assert hidden_cell.is_flagged is False
        assert hidden_cell.display_value() == UNOPENED

    def test_flag_opened_cell_is_ignored(self, numbered_cell: CellState) -> None:
        """Flagging an opened cell never changes its flag."""
        numbered_cell.set_flagged(True)
        assert numbered_cell.is_flagged is False
        numbered_cell.set_flagged(True)
        assert numbered_cell.is_flagged is False

    def test_flag_frozen_after_open(self, hidden_cell: CellState) -> None:
        """A flag set before opening cannot be removed afterwards."""
        hidden_cell.set_flagged(True)
        hidden_cell.set_opened(True)
        hidden_cell.set_flagged(False)
        assert hidden_cell.is_flagged is True


# ============================================================================
# Adjacent Mines Tests
# ============================================================================

class TestAdjacentMines:
    """Test adjacent count guards."""

    def test_set_count(self, hidden_cell: CellState) -> None:
        """A non-negative count is stored."""
        hidden_cell.set_adjacent_mines(5)
        assert hidden_cell.adjacent_mines == 5

    def test_negative_count_is_ignored(self, hidden_cell: CellState) -> None:
        """Negative counts are silently ignored."""
        hidden_cell.set_adjacent_mines(2)
        hidden_cell.set_adjacent_mines(-1)
        assert hidden_cell.adjacent_mines == 2

    def test_count_on_mine_is_ignored(self, mine_cell: CellState) -> None:
        """A mine's count never changes."""
        mine_cell.set_adjacent_mines(3)
        assert mine_cell.adjacent_mines == 0

    def test_count_update_shows_on_opened_cell(
        self, numbered_cell: CellState
    ) -> None:
        """Display follows the stored count on an opened cell."""
        numbered_cell.set_adjacent_mines(0)
        assert numbered_cell.display_value() == BLANK


# ============================================================================
# Display Value Tests
# ============================================================================

class TestDisplayValue:
    """Test display tokens derived from cell state."""

    def test_opened_empty_cell_is_blank(self, hidden_cell: CellState) -> None:
        """Opened cell with 0 adjacent mines is blank."""
        hidden_cell.set_opened(True)
        assert hidden_cell.display_value() == BLANK

    @pytest.mark.parametrize("count", range(1, 9))
    def test_opened_cell_shows_digit(self, count: int) -> None:
        """Opened cell shows its adjacent mine count."""
        cell = CellState()
        cell.set_adjacent_mines(count)
        cell.set_opened(True)
        assert cell.display_value() == str(count)

    def test_opened_mine_shows_mine(self, mine_cell: CellState) -> None:
        """Opened mine shows the mine marker."""
        mine_cell.set_opened(True)
        assert mine_cell.display_value() == MINE

    def test_closed_mine_looks_unopened(self, mine_cell: CellState) -> None:
        """A closed mine is indistinguishable from any closed cell."""
        assert mine_cell.display_value() == UNOPENED

    def test_flagged_mine_revealed_shows_mine(self, mine_cell: CellState) -> None:
        """Opening a flagged mine shows the mine marker."""
        mine_cell.set_flagged(True)
        mine_cell.set_opened(True)
        assert mine_cell.display_value() == MINE

    def test_close_again_shows_unopened(self, numbered_cell: CellState) -> None:
        """set_opened(False) returns to the unopened marker."""
        numbered_cell.set_opened(False)
        assert numbered_cell.display_value() == UNOPENED

    def test_display_is_pure_function_of_fields(self) -> None:
        """Same stored fields always yield the same token."""
        for is_mine, opened, flagged, count in itertools.product(
            (False, True), (False, True), (False, True), (0, 1, 8)
        ):
            tokens = set()
            for _ in range(2):
                cell = CellState()
                cell.set_mine(is_mine)
                cell.set_adjacent_mines(count)
                cell.set_flagged(flagged)
                cell.set_opened(opened)
                tokens.add(cell.display_value())
            assert len(tokens) == 1

    def test_different_paths_same_state_same_token(self) -> None:
        """Reaching a state via different setter orders gives one token."""
        first = CellState()
        first.set_adjacent_mines(2)
        first.set_opened(True)

        second = CellState()
        second.set_opened(True)
        second.set_adjacent_mines(2)

        assert first == second
        assert first.display_value() == second.display_value() == "2"


# ============================================================================
# Cell Observation Tests
# ============================================================================

class TestCellObservation:
    """Test numeric observation values."""

    def test_closed_cell_observation_is_negative_one(
        self, hidden_cell: CellState
    ) -> None:
        assert hidden_cell.to_observation() == -1

    def test_flagged_cell_observation_is_negative_two(
        self, hidden_cell: CellState
    ) -> None:
        hidden_cell.set_flagged(True)
        assert hidden_cell.to_observation() == -2

    def test_opened_cell_observation_matches_count(
        self, numbered_cell: CellState
    ) -> None:
        assert numbered_cell.to_observation() == 3

    def test_opened_mine_observation_is_nine(self, mine_cell: CellState) -> None:
        mine_cell.set_opened(True)
        assert mine_cell.to_observation() == 9
