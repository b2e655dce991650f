"""
Board module for Minesweeper game.

Implements the game board with mine placement, flood-fill opening,
flag bookkeeping, and win/loss detection.
"""
import math
import random
import time
from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional, Tuple

import numpy as np

from .cell import Cell
from .render import render_board


Position = Tuple[int, int]


# ============================================================================
# Errors
# ============================================================================

class OutOfRangeError(IndexError):
    """Raised when a coordinate lies outside the board."""

    def __init__(self, row: int, col: int) -> None:
        super().__init__(f"Invalid cell position: row: {row}, col: {col}")
        self.row = row
        self.col = col


# ============================================================================
# Difficulty
# ============================================================================

@dataclass(frozen=True)
class Difficulty:
    """
    Board size and mine count for a game.

    Attributes:
        name: Label shown to the player.
        rows: Number of rows.
        cols: Number of columns.
        mines: Total mines to place.
    """

    name: str
    rows: int
    cols: int
    mines: int

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.rows < 1 or self.cols < 1:
            raise ValueError("Board dimensions must be positive")
        if self.mines < 0:
            raise ValueError("Number of mines cannot be negative")
        max_mines = self.rows * self.cols - 1
        if self.mines > max_mines:
            raise ValueError(f"Too many mines (max {max_mines})")

    @property
    def total_cells(self) -> int:
        return self.rows * self.cols

    @classmethod
    def custom(cls, rows: int, cols: int, mines: int) -> "Difficulty":
        """Create a user-defined difficulty."""
        return cls("Custom", rows, cols, mines)


# Preset difficulty levels
BEGINNER = Difficulty("Beginner", 8, 8, 10)
INTERMEDIATE = Difficulty("Intermediate", 16, 16, 40)
EXPERT = Difficulty("Expert", 30, 16, 99)

PRESETS = (BEGINNER, INTERMEDIATE, EXPERT)


# ============================================================================
# Game Snapshot
# ============================================================================

@dataclass(frozen=True)
class GameStatus:
    is_over: bool
    is_won: bool


@dataclass(frozen=True)
class GameStats:
    flagged_count: int
    opened_count: int
    remaining_mines: int
    elapsed_seconds: int


@dataclass(frozen=True)
class GameInfo:
    """
    Read-only snapshot of a board, as consumed by renderers.

    Attributes:
        difficulty: Difficulty name.
        status: Terminal flags.
        stats: Counters and elapsed time.
        board: Grid of display tokens, indexed [row][col].
    """

    difficulty: str
    status: GameStatus
    stats: GameStats
    board: List[List[str]]


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Manages the grid of cells, mine placement, opening logic,
    and win/lose conditions. Coordinates are 0-based (row, col).
    """

    difficulty: Difficulty = BEGINNER
    rng: random.Random = field(default_factory=random.Random, repr=False)
    clock: Callable[[], float] = field(default=time.time, repr=False)
    _grid: List[List[Cell]] = field(default_factory=list, repr=False)
    _mines_list: List[Position] = field(default_factory=list, repr=False)
    _flagged_count: int = 0
    _opened_count: int = 0
    _is_over: bool = False
    _is_won: bool = False
    _start_time: Optional[float] = None
    _end_time: Optional[float] = None

    def __post_init__(self) -> None:
        """Initialize the grid after dataclass creation."""
        self.reset()

    def __str__(self) -> str:
        return render_board(self.get_game_info(), color=False)

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create empty grid of cells."""
        self._grid = [
            [Cell(row, col) for col in range(self.cols)]
            for row in range(self.rows)
        ]

    def _place_mines(self, start_row: int, start_col: int) -> None:
        """
        Place mines randomly, keeping the start cell and a random
        cluster of its neighbours mine-free.
        """
        exclude = {(start_row, start_col)}
        exclude.update(self._pick_safe_cluster(start_row, start_col))

        positions = [
            (row, col)
            for row in range(self.rows)
            for col in range(self.cols)
            if (row, col) not in exclude
        ]
        self.rng.shuffle(positions)
        self._arm_mines(positions[:self.mines])

    def _pick_safe_cluster(self, row: int, col: int) -> List[Position]:
        """
        Choose 1..N neighbours of the start cell to keep mine-free.

        The cluster shrinks (possibly to nothing) when the board is too
        dense to leave that many cells empty.
        """
        neighbors = self._get_neighbors(row, col)
        spare_cells = self.difficulty.total_cells - 1 - self.mines
        limit = min(len(neighbors), spare_cells)
        if limit < 1:
            return []
        self.rng.shuffle(neighbors)
        return neighbors[:self.rng.randint(1, limit)]

    def _arm_mines(self, positions: Iterable[Position]) -> None:
        for row, col in positions:
            self._grid[row][col].state.set_mine(True)
            self._mines_list.append((row, col))
        self._calculate_adjacent_mines()

    def _calculate_adjacent_mines(self) -> None:
        """Calculate adjacent mine counts for all cells."""
        for row in range(self.rows):
            for col in range(self.cols):
                state = self._grid[row][col].state
                if not state.is_mine:
                    state.set_adjacent_mines(self._count_adjacent_mines(row, col))

    def _count_adjacent_mines(self, row: int, col: int) -> int:
        """Count mines adjacent to a specific cell."""
        count = 0
        for neighbor_row, neighbor_col in self._get_neighbors(row, col):
            if self._grid[neighbor_row][neighbor_col].state.is_mine:
                count += 1
        return count

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def _get_neighbors(self, row: int, col: int) -> List[Position]:
        """
        Get valid neighboring cell positions.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for in-bounds neighbors.
        """
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self._is_valid_position(new_row, new_col):
                    neighbors.append((new_row, new_col))
        return neighbors

    def _is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.rows and 0 <= col < self.cols

    def _check_position(self, row: int, col: int) -> None:
        if not self._is_valid_position(row, col):
            raise OutOfRangeError(row, col)

    # ========================================================================
    # Game Lifecycle (Mid-level)
    # ========================================================================

    def reset(self) -> None:
        """Reset board to its configured, not-yet-started state."""
        self._init_grid()
        self._mines_list = []
        self._flagged_count = 0
        self._opened_count = 0
        self._is_over = False
        self._is_won = False
        self._start_time = None
        self._end_time = None

    def start_game(self, row: int, col: int) -> None:
        """
        Start a new game with (row, col) as the first move.

        Resets the board, places mines away from the start cell and
        starts the timer.

        Raises:
            OutOfRangeError: If (row, col) is outside the board.
        """
        self._check_position(row, col)
        self.reset()
        self._place_mines(row, col)
        self._start_time = self.clock()

    def start_with_mines(self, positions: Iterable[Position]) -> None:
        """
        Start a new game with mines at fixed positions.

        Args:
            positions: (row, col) pairs; duplicates are collapsed.

        Raises:
            OutOfRangeError: If any position is outside the board.
            ValueError: If the number of distinct positions does not
                match the difficulty's mine count.
        """
        unique = list(dict.fromkeys(positions))
        for row, col in unique:
            self._check_position(row, col)
        if len(unique) != self.mines:
            raise ValueError(
                f"Expected {self.mines} mine positions, got {len(unique)}"
            )
        self.reset()
        self._arm_mines(unique)
        self._start_time = self.clock()

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def open_cell(self, row: int, col: int) -> bool:
        """
        Open the cell at the given position.

        On an unstarted board this starts the game first. Opening a mine
        ends the game and reveals every mine. Opening a cell with no
        adjacent mines opens the surrounding region. A flag on the
        target is cleared.

        Args:
            row: Row index to open.
            col: Column index to open.

        Returns:
            True if the board changed, False if the call was a no-op.

        Raises:
            OutOfRangeError: If (row, col) is outside the board.
        """
        if self.is_finished:
            return False
        self._check_position(row, col)

        if not self.is_started:
            self.start_game(row, col)

        state = self._grid[row][col].state
        if state.is_opened:
            return False

        if state.is_flagged:
            state.set_flagged(False)
            self._flagged_count -= 1

        if state.is_mine:
            self._lose()
            return True

        self._flood_open(row, col)
        self._check_win_condition()
        return True

    def _flood_open(self, row: int, col: int) -> None:
        """Open a safe cell and cascade through zero-count neighbors."""
        self._open_safe_cell(row, col)
        stack = [(row, col)]
        while stack:
            current_row, current_col = stack.pop()
            if self._grid[current_row][current_col].state.adjacent_mines:
                continue
            for neighbor_row, neighbor_col in self._get_neighbors(
                current_row, current_col
            ):
                neighbor = self._grid[neighbor_row][neighbor_col].state
                if neighbor.is_opened or neighbor.is_flagged or neighbor.is_mine:
                    continue
                self._open_safe_cell(neighbor_row, neighbor_col)
                stack.append((neighbor_row, neighbor_col))

    def _open_safe_cell(self, row: int, col: int) -> None:
        self._grid[row][col].state.set_opened(True)
        self._opened_count += 1

    def _lose(self) -> None:
        """Mark the game over and reveal every mine."""
        self._is_over = True
        self._end_time = self.clock()
        for row, col in self._mines_list:
            self._grid[row][col].state.set_opened(True)

    def _check_win_condition(self) -> None:
        """Check if all non-mine cells are opened."""
        if self._is_over:
            return
        if self._opened_count == self.difficulty.total_cells - self.mines:
            self._is_won = True
            self._end_time = self.clock()

    def toggle_flag(self, row: int, col: int) -> bool:
        """
        Toggle flag on a cell.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            True if flag was toggled, False otherwise.

        Raises:
            OutOfRangeError: If (row, col) is outside the board.
        """
        self._check_position(row, col)
        if self.is_finished:
            return False

        state = self._grid[row][col].state
        if state.is_opened:
            return False

        state.set_flagged(not state.is_flagged)
        self._flagged_count += 1 if state.is_flagged else -1
        return True

    def chord(self, row: int, col: int) -> bool:
        """
        Chord action: open all unflagged neighbors if flag count matches.

        Args:
            row: Row index of an opened, numbered cell.
            col: Column index.

        Returns:
            True if any neighbor was opened, False otherwise.

        Raises:
            OutOfRangeError: If (row, col) is outside the board.
        """
        self._check_position(row, col)
        if not self._can_chord(row, col):
            return False

        opened_any = False
        for neighbor_row, neighbor_col in self._get_neighbors(row, col):
            neighbor = self._grid[neighbor_row][neighbor_col].state
            if neighbor.is_opened or neighbor.is_flagged:
                continue
            opened_any = self.open_cell(neighbor_row, neighbor_col) or opened_any
        return opened_any

    def _can_chord(self, row: int, col: int) -> bool:
        """Check if chord action is valid."""
        if self.is_finished or not self.is_started:
            return False
        state = self._grid[row][col].state
        if not state.is_opened or state.is_mine or state.adjacent_mines == 0:
            return False
        return self._count_adjacent_flags(row, col) == state.adjacent_mines

    def _count_adjacent_flags(self, row: int, col: int) -> int:
        """Count flagged cells adjacent to position."""
        count = 0
        for neighbor_row, neighbor_col in self._get_neighbors(row, col):
            if self._grid[neighbor_row][neighbor_col].state.is_flagged:
                count += 1
        return count

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def rows(self) -> int:
        return self.difficulty.rows

    @property
    def cols(self) -> int:
        return self.difficulty.cols

    @property
    def mines(self) -> int:
        return self.difficulty.mines

    @property
    def is_over(self) -> bool:
        """Check if a mine was opened."""
        return self._is_over

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self._is_won

    @property
    def is_finished(self) -> bool:
        return self._is_over or self._is_won

    @property
    def is_started(self) -> bool:
        return self._start_time is not None

    @property
    def is_playing(self) -> bool:
        """Check if game is in progress."""
        return self.is_started and not self.is_finished

    @property
    def flagged_count(self) -> int:
        return self._flagged_count

    @property
    def opened_count(self) -> int:
        return self._opened_count

    @property
    def remaining_mines(self) -> int:
        """Mines minus flags; negative when over-flagged."""
        return self.mines - self._flagged_count

    @property
    def mine_positions(self) -> Tuple[Position, ...]:
        return tuple(self._mines_list)

    @property
    def elapsed_seconds(self) -> int:
        """Whole seconds since the game started, 0 if not started."""
        if self._start_time is None:
            return 0
        end_time = self._end_time if self._end_time is not None else self.clock()
        return math.floor(end_time - self._start_time)

    def get_cell(self, row: int, col: int) -> Cell:
        """
        Get cell at position.

        Raises:
            OutOfRangeError: If (row, col) is outside the board.
        """
        self._check_position(row, col)
        return self._grid[row][col]

    def get_game_board(self) -> List[List[str]]:
        """Get a fresh grid of display tokens."""
        return [
            [cell.state.display_value() for cell in grid_row]
            for grid_row in self._grid
        ]

    def get_game_info(self) -> GameInfo:
        """Get a read-only snapshot of the game."""
        return GameInfo(
            difficulty=self.difficulty.name,
            status=GameStatus(is_over=self._is_over, is_won=self._is_won),
            stats=GameStats(
                flagged_count=self._flagged_count,
                opened_count=self._opened_count,
                remaining_mines=self.remaining_mines,
                elapsed_seconds=self.elapsed_seconds,
            ),
            board=self.get_game_board(),
        )

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array.

        Returns:
            2D int8 array where:
                -1 = closed
                -2 = flagged
                0-8 = opened with adjacent count
                9 = opened mine
        """
        obs = np.zeros((self.rows, self.cols), dtype=np.int8)
        for row in range(self.rows):
            for col in range(self.cols):
                obs[row, col] = self._grid[row][col].state.to_observation()
        return obs
