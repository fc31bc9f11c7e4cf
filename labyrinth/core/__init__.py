# Core module
from .maze_engine import MazeGame, MoveEngine, MoveResult
from .maze_grid import CellType, Direction, MazeConfigurationError, MazeGrid, Position
from .maze_parser import (
    MazeErrorKind,
    MazeInvalidCharacterError,
    MazeLoadError,
    MazeMalformedError,
    MazeNotFoundError,
    MazeSizeMismatchError,
    ParsedMaze,
    check_markers,
    parse_maze_text,
    load_maze_file,
    load_all_mazes,
    list_maze_files,
    validate_maze_text,
)
from .player import PlayerState
from .solver import PathSolver, SolutionPath

__all__ = [
    "MazeGame",
    "MoveEngine",
    "MoveResult",
    "CellType",
    "Direction",
    "MazeConfigurationError",
    "MazeGrid",
    "Position",
    "MazeErrorKind",
    "MazeInvalidCharacterError",
    "MazeLoadError",
    "MazeMalformedError",
    "MazeNotFoundError",
    "MazeSizeMismatchError",
    "ParsedMaze",
    "check_markers",
    "parse_maze_text",
    "load_maze_file",
    "load_all_mazes",
    "list_maze_files",
    "validate_maze_text",
    "PlayerState",
    "PathSolver",
    "SolutionPath",
]
