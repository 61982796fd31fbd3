"""Reading level/solution files and reading/writing save files."""

from __future__ import annotations
import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Iterator, List, Tuple, Type, Union

from ..core.errors import ConfigurationError, SaveFileError, SudokuGameError
from ..core.grid import EMPTY, MAX_SIZE, Grid, parse_symbol

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


def _read_text(path: PathLike, error: Type[SudokuGameError], what: str) -> str:
    try:
        return Path(path).read_text()
    except OSError as e:
        raise error(f"Cannot read {what} file {path}: {e}") from e


def _parse_int(token: str, path: PathLike, what: str) -> int:
    try:
        return int(token)
    except ValueError as e:
        raise ConfigurationError(f"{path}: expected {what}, got {token!r}") from e


def _iter_triples(tokens: List[str], size: int, path: PathLike) -> Iterator[Tuple[int, int, int]]:
    """Yield validated (row, col, value) triples from a flat token list."""
    if len(tokens) % 3 != 0:
        raise ConfigurationError(
            f"{path}: trailing tokens {tokens[-(len(tokens) % 3):]} do not form a (row col value) triple"
        )

    for i in range(0, len(tokens), 3):
        row = _parse_int(tokens[i], path, "a row index")
        col = _parse_int(tokens[i + 1], path, "a column index")
        if not (0 <= row < size and 0 <= col < size):
            raise ConfigurationError(
                f"{path}: position ({row}, {col}) is outside a {size}x{size} grid"
            )
        try:
            value = parse_symbol(tokens[i + 2])
        except ValueError as e:
            raise ConfigurationError(f"{path}: {e}") from e
        if value > size:
            raise ConfigurationError(f"{path}: value {tokens[i + 2]!r} exceeds grid size {size}")
        yield row, col, value


def load_level(path: PathLike) -> Tuple[Grid, Grid]:
    """
    Read a level file.

    The first token is the grid size N, followed by (row col value)
    triples. Unlisted cells are empty and editable; listed cells are
    editable only when their value is the empty marker.

    Returns:
        Tuple of (working, default) grids, built identically.

    Raises:
        ConfigurationError: If the file is unreadable or malformed.
    """
    tokens = _read_text(path, ConfigurationError, "level").split()
    if not tokens:
        raise ConfigurationError(f"{path}: level file is empty, expected a grid size")

    size = _parse_int(tokens[0], path, "a grid size")
    if not 0 < size <= MAX_SIZE:
        raise ConfigurationError(f"{path}: grid size must be 1-{MAX_SIZE}, got {size}")

    grid = Grid(size)
    for row, col, value in _iter_triples(tokens[1:], size, path):
        grid.place(row, col, value, editable=(value == EMPTY))

    logger.info("Loaded %dx%d level from %s (%d fixed cells)",
                size, size, path, int((~grid.editable).sum()))
    return grid, grid.copy()


def load_solution(path: PathLike, size: int) -> Grid:
    """
    Read a solution file of (row col value) triples into a locked grid.

    Args:
        path: Solution file path.
        size: Grid size, taken from the level the solution belongs to.

    Raises:
        ConfigurationError: If the file is missing, unreadable or malformed.
    """
    tokens = _read_text(path, ConfigurationError, "solution").split()

    solution = Grid(size)
    solution.editable[:, :] = False
    for row, col, value in _iter_triples(tokens, size, path):
        solution.place(row, col, value, editable=False)

    missing = solution.count_empty()
    if missing:
        logger.warning("Solution %s leaves %d cells uncovered; the puzzle cannot be won", path, missing)
    else:
        logger.info("Loaded %dx%d solution from %s", size, size, path)
    return solution


def format_save(grid: Grid) -> str:
    """Render a grid in save-file format: size line, then one line per row."""
    lines = [f"{grid.size}\n"]
    for row in grid.to_rows():
        lines.append("".join(f"{token} " for token in row) + "\n")
    return "".join(lines)


def parse_save(text: str, source: PathLike = "<save>") -> Tuple[Grid, Grid]:
    """
    Parse save-file text.

    Every loaded cell is editable; the fixed/blank distinction of the
    original level is not stored in the format.

    Returns:
        Tuple of (working, default) grids, built identically.

    Raises:
        SaveFileError: If the text is not a well-formed save.
    """
    lines = text.splitlines()
    if not lines or not lines[0].strip():
        raise SaveFileError(f"{source}: save file is empty, expected a grid size")

    try:
        size = int(lines[0].strip())
    except ValueError as e:
        raise SaveFileError(f"{source}: expected a grid size, got {lines[0].strip()!r}") from e
    if not 0 < size <= MAX_SIZE:
        raise SaveFileError(f"{source}: grid size must be 1-{MAX_SIZE}, got {size}")
    if len(lines) < size + 1:
        raise SaveFileError(f"{source}: expected {size} rows, found {len(lines) - 1}")

    grid = Grid(size)
    for row in range(size):
        tokens = lines[row + 1].split()
        if len(tokens) < size:
            raise SaveFileError(
                f"{source}: row {row} has {len(tokens)} values, expected {size}"
            )
        for col, token in enumerate(tokens[:size]):
            try:
                value = parse_symbol(token)
            except ValueError as e:
                raise SaveFileError(f"{source}: row {row}: {e}") from e
            if value > size:
                raise SaveFileError(f"{source}: row {row}: value {token!r} exceeds grid size {size}")
            grid.values[row, col] = value

    return grid, grid.copy()


def _match_mode(tmp_name: str, target: Path) -> None:
    """Give the temporary file the mode a plain open(..., "w") would have produced."""
    if target.exists():
        shutil.copymode(target, tmp_name)
    else:
        umask = os.umask(0)
        os.umask(umask)
        os.chmod(tmp_name, 0o666 & ~umask)


def save_game(grid: Grid, path: PathLike) -> Path:
    """
    Write the grid to a save file, replacing any previous save.

    The text goes to a temporary file in the same directory which is
    then renamed over the target, so a failed write leaves the old save
    untouched.

    Raises:
        SaveFileError: If the file cannot be written.
    """
    target = Path(path)
    content = format_save(grid)
    tmp_name = None
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            "w", dir=target.parent, prefix=f".{target.name}.", suffix=".tmp", delete=False
        ) as f:
            tmp_name = f.name
            f.write(content)
        _match_mode(tmp_name, target)
        os.replace(tmp_name, target)
    except OSError as e:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise SaveFileError(f"Cannot write save file {target}: {e}") from e

    logger.info("Saved %dx%d game to %s", grid.size, grid.size, target)
    return target


def load_game(path: PathLike) -> Tuple[Grid, Grid]:
    """Read a save file. See parse_save for the format rules."""
    text = _read_text(path, SaveFileError, "save")
    working, default = parse_save(text, source=path)
    logger.info("Loaded %dx%d saved game from %s", working.size, working.size, path)
    return working, default
