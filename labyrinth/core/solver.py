"""
Depth-first backtracking maze solver.

The search commits to one cell at a time, trying up, down, left and right in
that order. A candidate is rejected when it is off the grid, a wall, already
on the current path, or the cell we just came from. When every direction out
of a cell fails, the cell and the move that reached it are dropped and the
search resumes from the previous cell.

Because cells on the current path are never re-entered, a maze whose only
route has to cross itself is reported as unsolvable.
"""

import logging
from dataclasses import dataclass, field
from typing import Literal, Optional

from .maze_grid import Direction, MazeGrid, Position

logger = logging.getLogger(__name__)

SEARCH_ORDER = (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT)


@dataclass
class SolutionPath:
    """Result of a solve attempt."""
    status: Literal["solved", "unsolvable"]
    path: list[Position] = field(default_factory=list)
    moves: list[Direction] = field(default_factory=list)

    @property
    def solved(self) -> bool:
        return self.status == "solved"

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "status": self.status,
            "path": [p.to_dict() for p in self.path],
            "moves": [m.value for m in self.moves],
        }


@dataclass
class _Frame:
    position: Position
    arrived_by: Optional[Direction] = None
    next_direction: int = 0


class PathSolver:
    """
    Finds a path from a start cell to the exit of a MazeGrid.

    Each solve() call works on its own path and move lists, so one solver
    can be reused across mazes.

    Example usage:
        solution = PathSolver().solve(grid, grid.start_position)
        if solution.solved:
            for direction in solution.moves:
                ...
    """

    def __init__(self, max_depth: Optional[int] = None):
        """
        Args:
            max_depth: Longest path (in cells) the search may build.
                Defaults to the number of passable cells of the grid.
        """
        self.max_depth = max_depth

    def solve(self, grid: MazeGrid, start: Position) -> SolutionPath:
        """
        Search for a path from start to grid.exit_position.

        Returns:
            SolutionPath with status "solved" and the path/moves, or status
            "unsolvable" with both lists empty.
        """
        limit = self.max_depth if self.max_depth is not None else grid.count_passable()
        path: list[Position] = []
        moves: list[Direction] = []
        on_path: set[Position] = set()

        if not grid.in_bounds(start) or not grid.is_passable(start) or limit < 1:
            logger.debug("Start %s is not a usable cell", start)
            return SolutionPath(status="unsolvable")

        path.append(start)
        on_path.add(start)
        if start == grid.exit_position:
            return SolutionPath(status="solved", path=path, moves=moves)

        stack = [_Frame(position=start)]
        while stack:
            frame = stack[-1]

            if frame.next_direction == len(SEARCH_ORDER):
                # Dead end: backtrack
                stack.pop()
                on_path.discard(path.pop())
                if moves:
                    moves.pop()
                continue

            direction = SEARCH_ORDER[frame.next_direction]
            frame.next_direction += 1
            candidate = frame.position.move(direction)

            if frame.arrived_by is not None and direction == frame.arrived_by.opposite:
                continue
            if not grid.in_bounds(candidate) or not grid.is_passable(candidate):
                continue
            if candidate in on_path:
                continue
            if len(path) >= limit:
                continue

            path.append(candidate)
            on_path.add(candidate)
            moves.append(Direction.between(frame.position, candidate))

            if candidate == grid.exit_position:
                logger.debug("Solved in %d moves", len(moves))
                return SolutionPath(status="solved", path=path, moves=moves)

            stack.append(_Frame(position=candidate, arrived_by=direction))

        logger.debug("No path from %s to %s", start, grid.exit_position)
        return SolutionPath(status="unsolvable")
