"""
Maze Parser for Labyrinth.

Loads and validates maze files from the filesystem.

Maze Format:
    The first line holds two odd, positive integers: "<rows> <cols>".
    It is followed by exactly <rows> lines of exactly <cols> characters.

    # = Wall (impassable)
    S = Start position
    E = Exit (goal)
    . = Reserved, treated as open path
      = Open path (space)
"""

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


class MazeErrorKind(Enum):
    """The distinct ways a maze load can fail."""
    NOT_FOUND = "not_found"
    MALFORMED_FORMAT = "malformed_format"
    SIZE_MISMATCH = "size_mismatch"
    INVALID_CHARACTER = "invalid_character"


class MazeLoadError(Exception):
    """Base exception for a failed maze load."""

    kind: MazeErrorKind


class MazeNotFoundError(MazeLoadError, FileNotFoundError):
    """Exception raised when the maze source cannot be opened or read."""

    kind = MazeErrorKind.NOT_FOUND


class MazeMalformedError(MazeLoadError):
    """Exception raised when the header or the markers are malformed."""

    kind = MazeErrorKind.MALFORMED_FORMAT


class MazeSizeMismatchError(MazeLoadError):
    """Exception raised when the grid does not match the declared size."""

    kind = MazeErrorKind.SIZE_MISMATCH


class MazeInvalidCharacterError(MazeLoadError):
    """Exception raised when a cell uses a symbol outside the valid set."""

    kind = MazeErrorKind.INVALID_CHARACTER

    def __init__(self, char: str, row: int, col: int):
        self.char = char
        self.row = row
        self.col = col
        super().__init__(
            f"Invalid character {char!r} at row {row}, column {col}. "
            f"Valid characters: {', '.join(repr(c) for c in sorted(VALID_CHARS))}"
        )


@dataclass
class ParsedMaze:
    """Raw maze grid exactly as declared by the file."""

    name: str
    rows: int
    cols: int
    cells: list[list[str]]


VALID_CHARS = {"#", " ", "S", ".", "E"}


def _parse_dimension(token: str, label: str) -> int:
    # int() alone would take "1_1" and non-ASCII digits
    if not (token.isascii() and token.isdigit()):
        raise MazeMalformedError(
            f"Maze {label} must be a positive integer, got {token!r}"
        )
    value = int(token)

    if value <= 0:
        raise MazeMalformedError(f"Maze {label} must be positive, got {value}")
    if value % 2 == 0:
        raise MazeMalformedError(f"Maze {label} must be odd, got {value}")
    return value


def parse_maze_text(maze_text: str, name: str = "Unnamed") -> ParsedMaze:
    """
    Parse maze text, header line included.

    Args:
        maze_text: Header line followed by the maze rows.
        name: Name of the maze.

    Returns:
        ParsedMaze holding the rows x cols character grid.

    Raises:
        MazeMalformedError: If the header is missing or invalid.
        MazeSizeMismatchError: If a row or the row count disagrees with the header.
        MazeInvalidCharacterError: If a cell holds an unknown symbol.
    """
    lines = maze_text.replace("\r\n", "\n").split("\n")

    header = lines[0].split()
    if len(header) != 2:
        raise MazeMalformedError(
            f"Maze header must be '<rows> <cols>', got {lines[0]!r}"
        )
    rows = _parse_dimension(header[0], "row count")
    cols = _parse_dimension(header[1], "column count")

    body = lines[1:]
    # A final newline is not an extra row
    while body and body[-1] == "":
        body.pop()

    cells: list[list[str]] = []
    for y, line in enumerate(body[:rows]):
        if len(line) != cols:
            raise MazeSizeMismatchError(
                f"Row {y} has {len(line)} characters, expected {cols}"
            )
        for x, char in enumerate(line):
            if char not in VALID_CHARS:
                raise MazeInvalidCharacterError(char, y, x)
        cells.append(list(line))

    if len(body) < rows:
        raise MazeSizeMismatchError(
            f"Maze declares {rows} rows but only {len(body)} were found"
        )
    if any(body[rows:]):
        raise MazeSizeMismatchError(
            f"Maze declares {rows} rows but has extra content after them"
        )

    return ParsedMaze(name=name, rows=rows, cols=cols, cells=cells)


def check_markers(parsed: ParsedMaze) -> tuple[tuple[int, int], tuple[int, int]]:
    """
    Find the single start (S) and single exit (E) of a parsed maze.

    Returns:
        ((start_row, start_col), (exit_row, exit_col))

    Raises:
        MazeMalformedError: If there is not exactly one S and exactly one E.
    """
    starts = []
    exits = []
    for row, line in enumerate(parsed.cells):
        for col, char in enumerate(line):
            if char == "S":
                starts.append((row, col))
            elif char == "E":
                exits.append((row, col))

    if not starts:
        raise MazeMalformedError("Maze must have a start position (S)")
    if len(starts) > 1:
        raise MazeMalformedError(
            f"Multiple start positions found: "
            f"{', '.join(f'({r}, {c})' for r, c in starts)}"
        )
    if not exits:
        raise MazeMalformedError("Maze must have an exit position (E)")
    if len(exits) > 1:
        raise MazeMalformedError(
            f"Multiple exit positions found: "
            f"{', '.join(f'({r}, {c})' for r, c in exits)}"
        )

    return starts[0], exits[0]


def load_maze_file(file_path: Path | str, name: Optional[str] = None) -> ParsedMaze:
    """
    Load and parse a maze file from the filesystem.

    Args:
        file_path: Path to the maze file.
        name: Optional name override. If not provided, uses the file stem.

    Returns:
        ParsedMaze with grid data and metadata.

    Raises:
        MazeNotFoundError: If the file doesn't exist or cannot be read.
        MazeMalformedError: If the header is invalid.
        MazeSizeMismatchError: If the grid disagrees with the header.
        MazeInvalidCharacterError: If the maze holds an unknown symbol.
    """
    file_path = Path(file_path)

    if not file_path.is_file():
        raise MazeNotFoundError(f"Maze file not found: {file_path}")

    try:
        maze_text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise MazeNotFoundError(f"Failed to read maze file {file_path}: {e}") from e

    if name is None:
        name = file_path.stem

    logger.debug("Parsing maze file %s", file_path)
    return parse_maze_text(maze_text, name=name)


def list_maze_files(mazes_dir: Path | str) -> list[Path]:
    """
    List maze files in a directory, sorted by name.

    Raises:
        MazeNotFoundError: If the directory doesn't exist.
    """
    mazes_dir = Path(mazes_dir)

    if not mazes_dir.is_dir():
        raise MazeNotFoundError(f"Mazes directory not found: {mazes_dir}")

    return sorted(mazes_dir.glob("*.txt"))


def load_all_mazes(mazes_dir: Path | str) -> list[ParsedMaze]:
    """
    Load all maze files from a directory.

    Files that fail to parse are logged and skipped.

    Args:
        mazes_dir: Path to the directory containing maze files.

    Returns:
        List of ParsedMaze objects.

    Raises:
        MazeNotFoundError: If the directory doesn't exist.
    """
    mazes = []
    for maze_file in list_maze_files(mazes_dir):
        try:
            mazes.append(load_maze_file(maze_file))
        except MazeLoadError as e:
            logger.warning("Failed to load %s (%s): %s", maze_file, e.kind.value, e)

    return mazes


def validate_maze_text(maze_text: str) -> tuple[bool, Optional[str]]:
    """
    Validate maze text without raising exceptions.

    Applies the grammar checks and the start/exit checks, so text that is
    reported valid can always be loaded as a game.

    Args:
        maze_text: Header line followed by the maze rows.

    Returns:
        Tuple of (is_valid, error_message).
        error_message is None if valid.
    """
    try:
        check_markers(parse_maze_text(maze_text))
        return True, None
    except MazeLoadError as e:
        return False, str(e)
