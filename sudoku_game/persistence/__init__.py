"""Persistence module for level, solution and save files."""

from .files import load_level, load_solution, load_game, save_game, format_save, parse_save

__all__ = ["load_level", "load_solution", "load_game", "save_game", "format_save", "parse_save"]
