"""Command-line interface for playing a puzzle in the terminal."""

import argparse
import logging
import sys
from typing import Callable, List, Optional

from .core.errors import ConfigurationError, SaveFileError
from .core.grid import parse_symbol
from .game import GameConfig, GameState

MENU = """Please select an option:
[M] make move
[S] save game
[L] load saved game
[U] undo move
[C] clear game
[Q] quit game
"""

Prompt = Callable[[str], str]


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser with the play and show commands."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--config", "-c", type=str, default=None,
        help="JSON file with level_path, solution_path and save_path"
    )
    common.add_argument(
        "--level", "-l", type=str, default=None,
        help="Level file (default: levels/su1.txt)"
    )
    common.add_argument(
        "--solution", type=str, default=None,
        help="Solution file (default: solutions/su1_solution.txt)"
    )
    common.add_argument(
        "--save", type=str, default=None,
        help="Save file (default: saves/save_game.txt)"
    )
    common.add_argument(
        "--verbose", "-v", action="store_true",
        help="Log every move and file operation"
    )

    parser = argparse.ArgumentParser(
        description="Fill-the-grid puzzle game",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Play the default level
  python -m sudoku_game.cli play

  # Play a 4x4 level
  python -m sudoku_game.cli play --level levels/su4.txt --solution solutions/su4_solution.txt

  # Show the saved game
  python -m sudoku_game.cli show --saved
        """
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("play", parents=[common], help="Play interactively")

    show_parser = subparsers.add_parser("show", parents=[common], help="Print a level or saved game")
    show_parser.add_argument(
        "--saved", action="store_true",
        help="Show the saved game instead of the fresh level"
    )

    return parser


def config_from_args(args: argparse.Namespace) -> GameConfig:
    """Combine the optional JSON config with per-path command-line overrides."""
    config = GameConfig.from_json(args.config) if args.config else GameConfig()
    return config.with_overrides(
        level_path=args.level,
        solution_path=args.solution,
        save_path=args.save,
    )


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = config_from_args(args)
        if args.command == "play":
            cmd_play(config)
        elif args.command == "show":
            cmd_show(config, saved=args.saved)
    except (ConfigurationError, SaveFileError) as e:
        print(f"Error: {e}")
        sys.exit(1)


def cmd_show(config: GameConfig, saved: bool = False) -> None:
    """Handle the show command."""
    state = GameState.load(config) if saved else GameState.from_config(config)
    print(state.cells())


def cmd_play(config: GameConfig, prompt: Prompt = input) -> None:
    """
    Handle the play command: redraw, show the menu, run one choice, check for a win.

    Args:
        config: File locations for the session.
        prompt: Line reader, replaceable in tests.
    """
    state = GameState.from_config(config)

    while True:
        print(state.cells())
        print(MENU)
        try:
            choice = prompt("> ").strip().upper()
        except EOFError:
            break

        if choice == "Q":
            break
        elif choice == "M":
            if not make_move(state, prompt):
                break
        elif choice == "S":
            try:
                path = state.save()
                print(f"Game saved to {path}.")
            except SaveFileError as e:
                print(f"Could not save: {e}")
        elif choice == "L":
            try:
                state = GameState.load(config)
                print("Game loaded successfully.")
            except (SaveFileError, ConfigurationError) as e:
                print(f"Could not load: {e}")
        elif choice == "U":
            if state.undo():
                print("Last move undone.")
            else:
                print("No move to undo.")
        elif choice == "C":
            state.clear()
            print("Game has been cleared.")
        else:
            print("Invalid choice. Please try again.")

        if state.has_won():
            print(state.cells())
            print("Congratulations, you solved the puzzle!")
            break


def read_move(state: GameState, prompt: Prompt) -> Optional[tuple]:
    """Ask for row, column and value; None if any of them does not parse."""
    row_text = prompt("Which row is the cell you wish to fill? ")
    col_text = prompt("Which column is the cell you wish to fill? ")
    value_text = prompt("Which number do you want to enter? ")
    try:
        row, col = int(row_text), int(col_text)
        value = parse_symbol(value_text)
    except ValueError:
        return None
    if value > state.grid_size:
        return None
    return row, col, value


def make_move(state: GameState, prompt: Prompt) -> bool:
    """
    Keep asking until a move is accepted.

    Returns:
        False if input ran out before a move was accepted.
    """
    while True:
        try:
            move = read_move(state, prompt)
        except EOFError:
            return False
        if move is not None and state.apply_move(*move):
            return True
        print("Invalid move. Please try again.")


if __name__ == "__main__":
    main()
