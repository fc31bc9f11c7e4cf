"""
Labyrinth Maze Engine

Core maze navigation logic including:
- Directional moves with wall blocking
- Player overlay and traversal history updates
- Move counting
- Exit detection
- Solving and replaying a solution
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Literal, Optional

from .maze_grid import Direction, MazeGrid, Position
from .maze_parser import ParsedMaze, load_maze_file
from .player import PlayerState
from .solver import PathSolver, SolutionPath

logger = logging.getLogger(__name__)


@dataclass
class MoveResult:
    """Result of a move action."""
    status: Literal["moved", "blocked", "completed"]
    position: Position
    moves: int
    message: Optional[str] = None

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        result = {
            "status": self.status,
            "position": self.position.to_dict(),
            "moves": self.moves,
        }
        if self.message:
            result["message"] = self.message
        return result


class MoveEngine:
    """Applies directional moves to a grid and its player."""

    def __init__(self):
        self.move_count = 0

    def apply_move(
        self,
        grid: MazeGrid,
        player: PlayerState,
        direction: Direction,
    ) -> MoveResult:
        """
        Move the player one cell in direction.

        Walls and the grid edge block the move without raising. Either way the
        resulting position is recorded in the player's history.
        """
        self.move_count += 1
        target = player.position.move(direction)

        if grid.in_bounds(target) and grid.is_passable(target):
            grid.place_player(target)
            player.position = target
            player.record(target)
            if target == grid.exit_position:
                return MoveResult(
                    status="completed",
                    position=target,
                    moves=self.move_count,
                    message="You escaped the maze!",
                )
            return MoveResult(status="moved", position=target, moves=self.move_count)

        if grid.in_bounds(target):
            message = f"Cannot move {direction.value} - wall blocking"
        else:
            message = f"Cannot move {direction.value} - edge of the maze"

        player.record(player.position)
        return MoveResult(
            status="blocked",
            position=player.position,
            moves=self.move_count,
            message=message,
        )


class MazeGame:
    """
    Single-player game over one maze.

    Bundles the grid, the player, the move engine and the solver, and answers
    everything a renderer needs: the grid, the player position and history,
    the exit, moves, solutions and resets.

    Example usage:
        game = MazeGame.from_file("mazes/maze001.txt")

        game.move("right")
        solution = game.solve(mark_path=True)
        game.follow(solution)
    """

    def __init__(self, parsed: ParsedMaze, solver_max_depth: Optional[int] = None):
        self.name = parsed.name
        self.player = PlayerState()
        self.grid = MazeGrid.from_raw(parsed, self.player)
        self.engine = MoveEngine()
        self.solver = PathSolver(max_depth=solver_max_depth)

    @classmethod
    def from_file(
        cls,
        file_path: Path | str,
        solver_max_depth: Optional[int] = None,
    ) -> "MazeGame":
        """Load a maze file and start a game on it."""
        return cls(load_maze_file(file_path), solver_max_depth=solver_max_depth)

    @property
    def position(self) -> Position:
        return self.player.position

    @property
    def exit_position(self) -> Position:
        return self.grid.exit_position

    @property
    def visited(self) -> list[Position]:
        return list(self.player.visited)

    @property
    def revisited(self) -> list[Position]:
        return list(self.player.revisited)

    def is_finished(self) -> bool:
        """Returns True if the player is on the exit."""
        return self.player.position == self.grid.exit_position

    def move(self, direction: Direction | str) -> MoveResult:
        """
        Move the player.

        Raises:
            ValueError: If direction is not a known direction name or key.
        """
        return self.engine.apply_move(self.grid, self.player, Direction.parse(direction))

    def solve(self, mark_path: bool = False) -> SolutionPath:
        """Solve from the player's current position."""
        solution = self.solver.solve(self.grid, self.player.position)
        if not solution.solved:
            logger.info("Maze %s has no solution from %s", self.name, self.player.position)
        elif mark_path:
            self.grid.mark_path(solution.path)
        return solution

    def follow(self, solution: SolutionPath) -> list[MoveResult]:
        """Replay a solution move by move."""
        return [self.move(direction) for direction in solution.moves]

    def reset(self) -> None:
        """Prepare for a replay: fresh history and no path markers."""
        self.player.reset()
        self.grid.clear_path()

    def snapshot(self) -> dict:
        """Get the full game state."""
        return {
            "name": self.name,
            "rows": self.grid.rows,
            "cols": self.grid.cols,
            "grid": self.grid.rows_as_text(),
            "exit_position": self.grid.exit_position.to_dict(),
            "finished": self.is_finished(),
            **self.player.to_dict(),
        }

    def visualize(self) -> str:
        """ASCII view of the grid."""
        return "\n".join(self.grid.rows_as_text())

