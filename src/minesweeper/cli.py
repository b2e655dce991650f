"""
Console driver for Minesweeper.

Usage:
    minesweeper [--difficulty {beginner,intermediate,expert}]
    minesweeper --rows R --cols C --mines M [--seed N] [--no-color]
"""
import argparse
import os
import random
from typing import Callable, Dict, List, Optional

from .board import Board, Difficulty, OutOfRangeError, PRESETS
from .render import render_game


Reader = Callable[[str], str]

ACTIONS: Dict[int, Callable[[Board, int, int], bool]] = {
    1: Board.open_cell,
    2: Board.toggle_flag,
    3: Board.chord,
}

MENU: List[str] = [preset.name for preset in PRESETS] + ["Custom", "Exit"]


def clear_screen() -> None:
    os.system('cls' if os.name == 'nt' else 'clear')


def prompt_int(message: str, read: Reader) -> Optional[int]:
    """Read an integer, or None if the input is not a number."""
    try:
        return int(read(message).strip())
    except ValueError:
        return None


# ============================================================================
# Difficulty Menu
# ============================================================================

def prompt_custom(read: Reader) -> Optional[Difficulty]:
    """Ask for a custom board size; None if the input is unusable."""
    rows = prompt_int("Enter number of rows: ", read)
    cols = prompt_int("Enter number of columns: ", read)
    mines = prompt_int("Enter number of mines: ", read)
    if rows is None or cols is None or mines is None:
        print("Invalid number. Please try again.\n")
        return None
    try:
        return Difficulty.custom(rows, cols, mines)
    except ValueError as error:
        print(f"Invalid board: {error}. Please try again.\n")
        return None


def choose_difficulty(read: Reader) -> Optional[Difficulty]:
    """
    Show the difficulty menu until a valid choice is made.

    Returns:
        The chosen difficulty, or None if the player chose to exit.
    """
    while True:
        print("Welcome to Minesweeper Game\n")
        print("Choose a difficulty level:")
        for number, name in enumerate(MENU, start=1):
            print(f"{number}. {name}")

        choice = prompt_int("Enter your choice: ", read)
        if choice is not None and 1 <= choice <= len(PRESETS):
            return PRESETS[choice - 1]
        if choice == len(PRESETS) + 1:
            difficulty = prompt_custom(read)
            if difficulty is not None:
                return difficulty
            continue
        if choice == len(MENU):
            return None
        print("Invalid choice. Please try again.\n")


# ============================================================================
# Game Loop
# ============================================================================

def play(
    board: Board,
    read: Optional[Reader] = None,
    color: bool = True,
    clear: bool = False,
) -> bool:
    """
    Run one game to completion.

    The first valid move starts the game at that cell before the
    chosen action is applied.

    Returns:
        True if the game was won.
    """
    read = read or input
    first_move = not board.is_started

    while not board.is_finished:
        if clear:
            clear_screen()
        print(render_game(board.get_game_info(), color=color) + "\n")

        row = prompt_int("Enter row number: ", read)
        col = prompt_int("Enter column number: ", read)
        action = prompt_int("Enter action (1: Open, 2: Flag, 3: Chord): ", read)

        if row is None or col is None:
            print("Invalid cell position. Please try again.")
            continue
        if action not in ACTIONS:
            print("Invalid action. Please try again.")
            continue

        try:
            if first_move:
                board.start_game(row - 1, col - 1)
                first_move = False
            ACTIONS[action](board, row - 1, col - 1)
        except OutOfRangeError:
            print("Invalid cell position. Please try again.")

    if clear:
        clear_screen()
    print(render_game(board.get_game_info(), color=color) + "\n")
    return board.is_won


def run(
    difficulty: Optional[Difficulty] = None,
    read: Optional[Reader] = None,
    rng: Optional[random.Random] = None,
    color: bool = True,
    clear: bool = True,
) -> None:
    """Play games until the player exits or declines a replay."""
    read = read or input
    while True:
        chosen = difficulty or choose_difficulty(read)
        if chosen is None:
            print("\nExiting Minesweeper Game...")
            return

        board = Board(chosen) if rng is None else Board(chosen, rng=rng)
        won = play(board, read=read, color=color, clear=clear)
        if won:
            print("Congratulations! You won the game.")
        else:
            print("Game Over! You lost the game.")

        again = read("Do you want to play again? (Y/N): ")
        if again.strip().lower() != "y":
            print("\nExiting Minesweeper Game...")
            return


# ============================================================================
# Entry Point
# ============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Minesweeper - play in the terminal"
    )
    parser.add_argument(
        "--difficulty",
        choices=[preset.name.lower() for preset in PRESETS],
        help="Skip the menu and play this preset",
    )
    parser.add_argument("--rows", type=int, help="Rows for a custom board")
    parser.add_argument("--cols", type=int, help="Columns for a custom board")
    parser.add_argument("--mines", type=int, help="Mines for a custom board")
    parser.add_argument(
        "--seed", type=int, default=None, help="Random seed for mine placement"
    )
    parser.add_argument(
        "--no-color", action="store_true", help="Disable ANSI colours"
    )
    parser.add_argument(
        "--no-clear", action="store_true", help="Do not clear the screen"
    )
    return parser


def difficulty_from_args(
    parser: argparse.ArgumentParser, args: argparse.Namespace
) -> Optional[Difficulty]:
    """Resolve --difficulty or --rows/--cols/--mines; None means ask."""
    custom = (args.rows, args.cols, args.mines)
    if any(value is not None for value in custom):
        if args.difficulty:
            parser.error("--difficulty cannot be combined with a custom size")
        if any(value is None for value in custom):
            parser.error("--rows, --cols and --mines must be given together")
        try:
            return Difficulty.custom(args.rows, args.cols, args.mines)
        except ValueError as error:
            parser.error(str(error))

    if args.difficulty:
        for preset in PRESETS:
            if preset.name.lower() == args.difficulty:
                return preset
    return None


def main(argv: Optional[List[str]] = None) -> None:
    """Parse arguments and run the game."""
    parser = build_parser()
    args = parser.parse_args(argv)
    difficulty = difficulty_from_args(parser, args)
    rng = random.Random(args.seed) if args.seed is not None else None

    try:
        run(
            difficulty=difficulty,
            rng=rng,
            color=not args.no_color,
            clear=not args.no_clear,
        )
    except (KeyboardInterrupt, EOFError):
        print("\nExiting Minesweeper Game...")


if __name__ == "__main__":
    main()
