"""
Text rendering for Minesweeper game snapshots.

Works only on the data returned by ``Board.get_game_info()``; the engine
itself carries no presentation detail.
"""
from typing import List

from .cell import BLANK, FLAGGED, MINE, UNOPENED


# ============================================================================
# Constants
# ============================================================================

RESET = "\x1b[0m"
TOKEN_COLORS = {
    FLAGGED: "\x1b[33m",
    MINE: "\x1b[31m",
}
DIGIT_COLOR = "\x1b[34m"

CELL_WIDTH = 6


# ============================================================================
# Cell Tokens
# ============================================================================

def colorize(token: str) -> str:
    """Wrap a display token in its ANSI colour, if it has one."""
    if token in (UNOPENED, BLANK):
        return token
    if token.isdigit():
        return f"{DIGIT_COLOR}{token}{RESET}"
    color = TOKEN_COLORS.get(token)
    if color is None:
        return token
    return f"{color}{token}{RESET}"


# ============================================================================
# Board Table
# ============================================================================

def _column_indices(cols: int) -> str:
    line = "    "
    for col in range(1, cols + 1):
        line += f"{col}".ljust(CELL_WIDTH)
    return line


def _row_line(cols: int) -> str:
    return "  " + "+".join("-----" for _ in range(cols))


def render_board(info, color: bool = True) -> str:
    """
    Format the snapshot grid as a table with 1-based row/column indices.

    Args:
        info: Snapshot from ``Board.get_game_info()``.
        color: Whether to add ANSI colours to flags, mines and digits.

    Returns:
        Multi-line string, no trailing newline.
    """
    grid = info.board
    cols = len(grid[0]) if grid else 0
    lines: List[str] = [_column_indices(cols), _row_line(cols)]

    for row, tokens in enumerate(grid):
        cells = [colorize(token) if color else token for token in tokens]
        lines.append(f"{row + 1}".ljust(3) + "  | ".join(f" {cell}" for cell in cells))
        if row < len(grid) - 1:
            lines.append(_row_line(cols))

    return "\n".join(lines)


# ============================================================================
# Status Block
# ============================================================================

def status_label(info) -> str:
    if info.status.is_over:
        return "Game Over"
    if info.status.is_won:
        return "Game Won"
    return "In Progress"


def render_status(info) -> str:
    """Format difficulty, status and counters, one per line."""
    stats = info.stats
    return "\n".join([
        f"Difficulty: {info.difficulty}",
        f"Game Status: {status_label(info)}",
        f"Game Time: {stats.elapsed_seconds} seconds",
        f"Opened Cells: {stats.opened_count}",
        f"Remaining Mines: {stats.remaining_mines}",
        f"Flags: {stats.flagged_count}",
    ])


def render_game(info, color: bool = True) -> str:
    """Status block followed by the board table."""
    return render_status(info) + "\n\n\n" + render_board(info, color=color)
