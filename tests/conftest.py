"""Shared fixtures: small level/solution files written into tmp_path."""

import pytest

from sudoku_game.game import GameConfig, GameState


# A known 9x9 puzzle (0 = empty) and its solution
PUZZLE_9 = (
    "530070000"
    "600195000"
    "098000060"
    "800060003"
    "400803001"
    "700020006"
    "060000280"
    "000419005"
    "000080079"
)

SOLUTION_9 = (
    "534678912"
    "672195348"
    "198342567"
    "859761423"
    "426853791"
    "713924856"
    "961537284"
    "287419635"
    "345286179"
)

PUZZLE_4 = "1030" "0402" "2040" "0301"
SOLUTION_4 = "1234" "3412" "2143" "4321"


def triples(grid_str: str, size: int) -> str:
    """Render the non-empty cells of a grid string as 'row col value' lines."""
    lines = []
    for idx, ch in enumerate(grid_str):
        if ch != "0":
            lines.append(f"{idx // size} {idx % size} {ch}")
    return "\n".join(lines) + "\n"


def write_game_files(directory, puzzle: str, solution: str, size: int) -> GameConfig:
    level = directory / "level.txt"
    sol = directory / "solution.txt"
    level.write_text(f"{size}\n" + triples(puzzle, size))
    sol.write_text(triples(solution, size))
    return GameConfig(level, sol, directory / "saves" / "save_game.txt")


@pytest.fixture
def config9(tmp_path):
    return write_game_files(tmp_path, PUZZLE_9, SOLUTION_9, 9)


@pytest.fixture
def config4(tmp_path):
    return write_game_files(tmp_path, PUZZLE_4, SOLUTION_4, 4)


@pytest.fixture
def game9(config9):
    return GameState.from_config(config9)


@pytest.fixture
def game4(config4):
    return GameState.from_config(config4)
