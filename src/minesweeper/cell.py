"""
Cell module for Minesweeper game.

Holds the per-cell state machine (mine, opened, flagged, adjacent count)
and the display tokens derived from it.
"""
from dataclasses import dataclass, field


# ============================================================================
# Constants
# ============================================================================

UNOPENED = "X"
FLAGGED = "F"
MINE = "M"
BLANK = " "


# ============================================================================
# Cell State
# ============================================================================

@dataclass
class CellState:
    """
    State of a single grid position.

    Fields are private; use the setters below, which silently ignore
    invalid input instead of raising.
    """

    _is_mine: bool = False
    _is_opened: bool = False
    _is_flagged: bool = False
    _adjacent_mines: int = 0

    @property
    def is_mine(self) -> bool:
        return self._is_mine

    @property
    def is_opened(self) -> bool:
        return self._is_opened

    @property
    def is_flagged(self) -> bool:
        return self._is_flagged

    @property
    def adjacent_mines(self) -> int:
        return self._adjacent_mines

    def set_mine(self, value: bool) -> None:
        """
        Set the mine flag and re-initialize everything else.

        Only meant for board setup.
        """
        self._is_mine = value
        self._is_opened = False
        self._is_flagged = False
        self._adjacent_mines = 0

    def set_flagged(self, value: bool) -> None:
        """Set the flag. Ignored once the cell is opened."""
        if self._is_opened:
            return
        self._is_flagged = value

    def set_opened(self, value: bool) -> None:
        """Open (or, during reset, close) the cell."""
        self._is_opened = value

    def set_adjacent_mines(self, value: int) -> None:
        """Store the neighbour mine count. Ignored for mines and negatives."""
        if self._is_mine or value < 0:
            return
        self._adjacent_mines = value

    def display_value(self) -> str:
        """
        Get the rendering token for this cell.

        Returns:
            UNOPENED or FLAGGED while closed; MINE, BLANK or a digit
            "1"-"8" once opened.
        """
        if not self._is_opened:
            return FLAGGED if self._is_flagged else UNOPENED
        if self._is_mine:
            return MINE
        if self._adjacent_mines == 0:
            return BLANK
        return str(self._adjacent_mines)

    def to_observation(self) -> int:
        """
        Convert cell to a numeric observation value.

        Returns:
            -1: Closed cell
            -2: Flagged cell
            0-8: Opened cell with adjacent mine count
            9: Opened mine (game over state)
        """
        if not self._is_opened:
            return -2 if self._is_flagged else -1
        if self._is_mine:
            return 9
        return self._adjacent_mines


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    A grid position and its state.

    Attributes:
        row: Row index.
        col: Column index.
        state: Mutable state of the cell.
    """

    row: int
    col: int
    state: CellState = field(default_factory=CellState)

    @property
    def position(self):
        return self.row, self.col
