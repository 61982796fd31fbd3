"""Unit tests for GameState: moves, undo, clear and win check."""

import pytest

from conftest import PUZZLE_9, SOLUTION_9, SOLUTION_4
from sudoku_game.core.errors import ConfigurationError, InvalidOperationError
from sudoku_game.core.grid import EMPTY, Grid
from sudoku_game.game import GameConfig, GameState


def fill_with(game: GameState, grid_str: str) -> None:
    """Write every editable cell from a grid string."""
    size = game.grid_size
    for idx, ch in enumerate(grid_str):
        row, col = divmod(idx, size)
        if game.is_editable(row, col):
            game.apply_move(row, col, int(ch))


class TestConstruction:
    """Tests for building a state from files and grids."""

    def test_from_config(self, game9):
        assert game9.grid_size == 9
        assert game9.cell_value(0, 0) == 5
        assert game9.cell_value(0, 2) == EMPTY
        assert game9.cell_symbol(0, 2) == "-"
        assert game9.undo_depth == 0

    def test_fixed_and_blank_cells(self, game9):
        assert not game9.is_editable(0, 0)
        assert game9.is_editable(0, 2)

    def test_size_mismatch(self):
        with pytest.raises(ConfigurationError):
            GameState(Grid(4), Grid(4), Grid(9))

    def test_cell_value_out_of_range(self, game4):
        with pytest.raises(InvalidOperationError):
            game4.cell_value(4, 0)


class TestApplyMove:
    """Tests for apply_move."""

    def test_move_then_read(self, game9):
        for row, col in game9.cells().iter_positions():
            if game9.is_editable(row, col):
                assert game9.apply_move(row, col, 4)
                assert game9.cell_value(row, col) == 4

    def test_fixed_cell_rejected(self, game9):
        before = game9.cell_value(0, 0)
        assert not game9.apply_move(0, 0, 1)
        assert game9.cell_value(0, 0) == before
        assert game9.undo_depth == 0

    def test_out_of_range_position_rejected(self, game4):
        assert not game4.apply_move(4, 0, 1)
        assert not game4.apply_move(0, -1, 1)
        assert game4.undo_depth == 0

    def test_out_of_range_value_raises(self, game4):
        with pytest.raises(InvalidOperationError):
            game4.apply_move(0, 1, 5)
        assert game4.cell_value(0, 1) == EMPTY
        assert game4.undo_depth == 0

    def test_each_move_adds_two_log_entries(self, game4):
        game4.apply_move(0, 1, 2)
        game4.apply_move(0, 3, 4)
        assert game4.undo_depth == 4

    def test_empty_value_clears_cell(self, game4):
        game4.apply_move(0, 1, 2)
        assert game4.apply_move(0, 1, EMPTY)
        assert game4.cell_value(0, 1) == EMPTY


class TestUndo:
    """Tests for the two-entries-per-move undo bookkeeping."""

    def test_undo_empty_log(self, game4):
        assert not game4.undo()

    def test_single_undo_reverts_then_next_is_noop(self, game4):
        assert game4.apply_move(0, 1, 2)

        assert game4.undo()
        assert game4.cell_value(0, 1) == EMPTY
        assert game4.undo_depth == 1

        # The checkpoint left by the same move is consumed without any change
        snapshot = game4.cells().copy()
        assert game4.undo()
        assert game4.cells() == snapshot
        assert game4.undo_depth == 0

        assert not game4.undo()

    def test_undo_alternates_across_moves(self, game4):
        game4.apply_move(0, 1, 2)
        game4.apply_move(0, 1, 3)
        game4.apply_move(0, 3, 4)

        assert game4.undo()
        assert game4.cell_value(0, 3) == EMPTY
        assert game4.undo()  # checkpoint
        assert game4.cell_value(0, 1) == 3

        assert game4.undo()
        assert game4.cell_value(0, 1) == 2
        assert game4.undo()  # checkpoint
        assert game4.cell_value(0, 1) == 2

        assert game4.undo()
        assert game4.cell_value(0, 1) == EMPTY
        assert game4.undo()  # checkpoint
        assert not game4.undo()

    def test_end_to_end_9x9(self, game9):
        before = game9.cell_value(0, 6)
        assert game9.apply_move(0, 6, 7)
        assert game9.cell_value(0, 6) == 7
        assert game9.undo()
        assert game9.cell_value(0, 6) == before


class TestClear:
    """Tests for clear."""

    def test_clear_restores_defaults(self, game9):
        game9.apply_move(0, 3, 5)
        game9.apply_move(0, 2, 4)
        game9.apply_move(0, 2, 1)

        game9.clear()

        assert game9.cell_value(0, 3) == EMPTY
        assert game9.cell_value(0, 2) == EMPTY
        for idx, ch in enumerate(PUZZLE_9):
            row, col = divmod(idx, 9)
            assert game9.cell_value(row, col) == int(ch)

    def test_clear_leaves_fixed_cells(self, game4):
        game4.clear()
        assert game4.cell_value(0, 0) == 1
        assert not game4.is_editable(0, 0)

    def test_clear_resets_log_to_one_checkpoint(self, game4):
        game4.apply_move(0, 1, 2)
        game4.apply_move(0, 3, 4)
        game4.clear()
        assert game4.undo_depth == 1

        assert game4.undo()
        assert game4.cell_value(0, 1) == EMPTY
        assert not game4.undo()

    def test_clear_on_loaded_game_restores_loaded_values(self, game4):
        game4.apply_move(0, 1, 2)
        game4.save()
        loaded = GameState.load(game4.config)
        loaded.apply_move(0, 1, 3)
        loaded.clear()
        assert loaded.cell_value(0, 1) == 2


class TestHasWon:
    """Tests for the win check."""

    def test_fresh_game_not_won(self, game9):
        assert not game9.has_won()

    def test_filled_with_solution(self, game9):
        fill_with(game9, SOLUTION_9)
        assert game9.has_won()

    def test_one_cell_different(self, game4):
        fill_with(game4, SOLUTION_4)
        assert game4.has_won()

        assert game4.apply_move(3, 2, 1)
        assert not game4.has_won()

        game4.undo()
        assert game4.has_won()

    def test_empty_solution_never_wins(self, tmp_path):
        level = tmp_path / "level.txt"
        solution = tmp_path / "solution.txt"
        level.write_text("4\n")
        solution.write_text("")
        game = GameState.from_config(GameConfig(level, solution, tmp_path / "save.txt"))
        assert not game.has_won()

    def test_partial_solution_never_wins(self, tmp_path):
        level = tmp_path / "level.txt"
        solution = tmp_path / "solution.txt"
        level.write_text("2\n0 0 1\n")
        solution.write_text("0 0 1\n")
        game = GameState.from_config(GameConfig(level, solution, tmp_path / "save.txt"))
        assert not game.has_won()

        game.apply_move(1, 1, 2)
        game.undo()
        assert not game.has_won()

    def test_has_won_does_not_change_state(self, game4):
        game4.apply_move(0, 1, 2)
        depth = game4.undo_depth
        game4.has_won()
        assert game4.undo_depth == depth
        assert game4.cell_value(0, 1) == 2


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
