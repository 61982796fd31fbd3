"""File locations for one game session."""

from __future__ import annotations
import json
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Union

from ..core.errors import ConfigurationError

DEFAULT_LEVEL_PATH = Path("levels/su1.txt")
DEFAULT_SOLUTION_PATH = Path("solutions/su1_solution.txt")
DEFAULT_SAVE_PATH = Path("saves/save_game.txt")


@dataclass(frozen=True)
class GameConfig:
    """Where the level, its solution and the save file live."""
    level_path: Path = DEFAULT_LEVEL_PATH
    solution_path: Path = DEFAULT_SOLUTION_PATH
    save_path: Path = DEFAULT_SAVE_PATH

    def __post_init__(self):
        for f in fields(self):
            object.__setattr__(self, f.name, Path(getattr(self, f.name)))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> GameConfig:
        """Build a config from a mapping with any subset of the path keys."""
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ConfigurationError(f"Unknown config keys: {', '.join(sorted(unknown))}")
        return cls(**data)

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> GameConfig:
        """
        Load a config from a JSON object such as
        {"level_path": "...", "solution_path": "...", "save_path": "..."}.
        """
        try:
            with open(path, "r") as f:
                data = json.load(f)
        except OSError as e:
            raise ConfigurationError(f"Cannot read config file {path}: {e}") from e
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Config file {path} is not valid JSON: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Config file {path} must contain a JSON object")
        return cls.from_dict(data)

    def with_overrides(
        self,
        level_path: Optional[Union[str, Path]] = None,
        solution_path: Optional[Union[str, Path]] = None,
        save_path: Optional[Union[str, Path]] = None,
    ) -> GameConfig:
        """Return a copy with the given paths replaced; None keeps the current one."""
        changes = {
            name: value
            for name, value in (
                ("level_path", level_path),
                ("solution_path", solution_path),
                ("save_path", save_path),
            )
            if value is not None
        }
        return replace(self, **changes)
