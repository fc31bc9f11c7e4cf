"""
Labyrinth Maze Grid

Semantic view of a parsed maze:
- Translation of raw file symbols into gameplay cells
- Start and exit tracking
- Passability and bounds queries
- Player overlay and solution path markers
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterable, Optional, TYPE_CHECKING

from .maze_parser import ParsedMaze, check_markers, load_maze_file

if TYPE_CHECKING:
    from .player import PlayerState


class MazeConfigurationError(RuntimeError):
    """Raised when a validated raw grid holds a symbol the grid cannot translate."""

    pass


class CellType(Enum):
    """Types of cells in the maze."""
    WALL = "#"
    OPEN = " "
    PLAYER = "@"
    EXIT = "E"
    PATH = "*"


class Direction(Enum):
    """Movement directions."""
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def delta(self) -> tuple[int, int]:
        """Get (drow, dcol) for this direction."""
        deltas = {
            Direction.UP: (-1, 0),
            Direction.DOWN: (1, 0),
            Direction.LEFT: (0, -1),
            Direction.RIGHT: (0, 1),
        }
        return deltas[self]

    @property
    def opposite(self) -> "Direction":
        opposites = {
            Direction.UP: Direction.DOWN,
            Direction.DOWN: Direction.UP,
            Direction.LEFT: Direction.RIGHT,
            Direction.RIGHT: Direction.LEFT,
        }
        return opposites[self]

    @property
    def key(self) -> str:
        """Keyboard alias used by the text controls."""
        return {
            Direction.UP: "w",
            Direction.DOWN: "s",
            Direction.LEFT: "a",
            Direction.RIGHT: "d",
        }[self]

    @classmethod
    def parse(cls, value: "Direction | str") -> "Direction":
        """Accept a Direction, its name ("up") or its key ("w")."""
        if isinstance(value, cls):
            return value
        text = value.strip().lower()
        for direction in cls:
            if text in (direction.value, direction.key):
                return direction
        raise ValueError(f"Unknown direction: {value!r}")

    @classmethod
    def between(cls, source: "Position", target: "Position") -> Optional["Direction"]:
        """Direction of a single step from source to target, None for no step."""
        if target.row < source.row:
            return cls.UP
        if target.row > source.row:
            return cls.DOWN
        if target.col < source.col:
            return cls.LEFT
        if target.col > source.col:
            return cls.RIGHT
        return None


@dataclass(frozen=True)
class Position:
    """(row, col) position in the maze, 0-indexed."""
    row: int
    col: int

    def move(self, direction: Direction) -> "Position":
        """Return new position after moving in direction."""
        drow, dcol = direction.delta
        return Position(self.row + drow, self.col + dcol)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {"row": self.row, "col": self.col}


class MazeGrid:
    """
    Gameplay grid built once from a ParsedMaze.

    The grid is mutable: the player marker moves between cells and solution
    paths can be drawn onto open cells. The symbol hidden under the player
    marker is remembered so that leaving a cell restores it.

    Example usage:
        player = PlayerState()
        grid = MazeGrid.from_file("mazes/maze001.txt", player)

        grid.is_passable(Position(1, 2))
        grid.exit_position
    """

    def __init__(
        self,
        cells: list[list[CellType]],
        start_position: Position,
        exit_position: Position,
    ):
        self._cells = cells
        self._start_position = start_position
        self._exit_position = exit_position
        self._player_position = start_position
        self._covered = CellType.OPEN
        self.rows = len(cells)
        self.cols = len(cells[0]) if cells else 0

    @classmethod
    def from_raw(
        cls,
        parsed: ParsedMaze,
        player: Optional["PlayerState"] = None,
    ) -> "MazeGrid":
        """
        Translate a parsed maze into gameplay cells.

        Args:
            parsed: Output of the maze parser.
            player: If given, placed on the start cell with the start recorded
                in its visited history.

        Raises:
            MazeMalformedError: If the maze lacks exactly one start or exit.
            MazeConfigurationError: If a cell holds an untranslatable symbol.
        """
        start, exit_ = check_markers(parsed)

        cells: list[list[CellType]] = []
        for row, line in enumerate(parsed.cells):
            translated = []
            for col, char in enumerate(line):
                if char == "#":
                    translated.append(CellType.WALL)
                elif char == "S":
                    translated.append(CellType.PLAYER)
                elif char == "E":
                    translated.append(CellType.EXIT)
                elif char in (" ", "."):
                    translated.append(CellType.OPEN)
                else:
                    raise MazeConfigurationError(
                        f"Cannot translate symbol {char!r} at ({row}, {col})"
                    )
            cells.append(translated)

        grid = cls(cells, start_position=Position(*start), exit_position=Position(*exit_))
        if player is not None:
            player.position = grid.start_position
            player.add_visited(grid.start_position)
        return grid

    @classmethod
    def from_file(
        cls,
        file_path: Path | str,
        player: Optional["PlayerState"] = None,
    ) -> "MazeGrid":
        """Load a maze file through the parser and translate it."""
        return cls.from_raw(load_maze_file(file_path), player)

    @property
    def start_position(self) -> Position:
        return self._start_position

    @property
    def exit_position(self) -> Position:
        return self._exit_position

    @property
    def player_position(self) -> Position:
        return self._player_position

    def in_bounds(self, position: Position) -> bool:
        """Check that position lies inside the grid."""
        return 0 <= position.row < self.rows and 0 <= position.col < self.cols

    def is_passable(self, position: Position) -> bool:
        """Anything but a wall is passable. Callers bounds-check first."""
        return self._cells[position.row][position.col] != CellType.WALL

    def symbol_at(self, position: Position) -> CellType:
        """Get cell type at position."""
        return self._cells[position.row][position.col]

    def set_symbol_at(self, position: Position, symbol: CellType) -> None:
        """Set cell type at position."""
        self._cells[position.row][position.col] = symbol

    def place_player(self, position: Position) -> None:
        """
        Move the player marker to position.

        The cell being left gets back whatever the marker covered.

        Raises:
            ValueError: If position is out of bounds or a wall.
        """
        if not self.in_bounds(position) or not self.is_passable(position):
            raise ValueError(f"Cannot place player on ({position.row}, {position.col})")

        self.set_symbol_at(self._player_position, self._covered)
        self._covered = self.symbol_at(position)
        self.set_symbol_at(position, CellType.PLAYER)
        self._player_position = position

    def mark_path(self, path: Iterable[Position]) -> None:
        """Draw path markers on the open cells of path."""
        for position in path:
            if position == self._player_position:
                if self._covered == CellType.OPEN:
                    self._covered = CellType.PATH
            elif self.symbol_at(position) == CellType.OPEN:
                self.set_symbol_at(position, CellType.PATH)

    def clear_path(self) -> None:
        """Remove all path markers."""
        for row in self._cells:
            for col, cell in enumerate(row):
                if cell == CellType.PATH:
                    row[col] = CellType.OPEN
        if self._covered == CellType.PATH:
            self._covered = CellType.OPEN

    def count_passable(self) -> int:
        """Number of non-wall cells."""
        return sum(cell != CellType.WALL for row in self._cells for cell in row)

    def rows_as_text(self) -> list[str]:
        """Grid as one string per row, player marker included."""
        return ["".join(cell.value for cell in row) for row in self._cells]
