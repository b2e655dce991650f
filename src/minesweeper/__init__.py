"""
Minesweeper game module.

Provides the board engine (cells, mine placement, flood fill, flags,
win/loss) plus a reference text renderer and console driver.
"""
from .cell import Cell, CellState, UNOPENED, FLAGGED, MINE, BLANK
from .board import (
    Board,
    Difficulty,
    GameInfo,
    GameStats,
    GameStatus,
    OutOfRangeError,
    BEGINNER,
    INTERMEDIATE,
    EXPERT,
    PRESETS,
)
from .render import render_board, render_game, render_status

__all__ = [
    "Cell",
    "CellState",
    "UNOPENED",
    "FLAGGED",
    "MINE",
    "BLANK",
    "Board",
    "Difficulty",
    "GameInfo",
    "GameStats",
    "GameStatus",
    "OutOfRangeError",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "PRESETS",
    "render_board",
    "render_game",
    "render_status",
]
