"""Tests for the depth-first path solver."""

import pytest
from pathlib import Path

from labyrinth.core.maze_engine import MoveEngine
from labyrinth.core.maze_grid import Direction, MazeGrid, Position
from labyrinth.core.maze_parser import load_maze_file, parse_maze_text
from labyrinth.core.player import PlayerState
from labyrinth.core.solver import PathSolver, SolutionPath


SIMPLE_MAZE = """7 7
#######
#S    #
##### #
#     #
# #####
#    E#
#######"""

# S and E separated by a full column of walls
SPLIT_MAZE = """5 5
#####
#S# #
# # #
# #E#
#####"""

# Open room with many routes
ROOM_MAZE = """5 5
#####
#S  #
#   #
#  E#
#####"""

MAZES_DIR = Path(__file__).parent.parent / "mazes"


def build(text: str) -> MazeGrid:
    return MazeGrid.from_raw(parse_maze_text(text))


def assert_valid_path(grid: MazeGrid, start: Position, solution: SolutionPath):
    assert solution.path[0] == start
    assert solution.path[-1] == grid.exit_position
    assert len(solution.moves) == len(solution.path) - 1
    for (a, b), move in zip(zip(solution.path, solution.path[1:]), solution.moves):
        assert abs(a.row - b.row) + abs(a.col - b.col) == 1
        assert grid.is_passable(b)
        assert a.move(move) == b
    assert len(set(solution.path)) == len(solution.path)


class TestSolve:
    """Tests for finding paths."""

    def test_simple_maze(self):
        """Test the 7x7 example: S at (1,1), E at (5,5)."""
        grid = build(SIMPLE_MAZE)
        solution = PathSolver().solve(grid, grid.start_position)

        assert solution.status == "solved"
        assert solution.solved
        assert grid.exit_position == Position(5, 5)
        assert_valid_path(grid, Position(1, 1), solution)
        assert solution.moves == (
            [Direction.RIGHT] * 4
            + [Direction.DOWN] * 2
            + [Direction.LEFT] * 4
            + [Direction.DOWN] * 2
            + [Direction.RIGHT] * 4
        )

    def test_unsolvable(self):
        """Test that walled-off start and exit report unsolvable."""
        grid = build(SPLIT_MAZE)
        solution = PathSolver().solve(grid, grid.start_position)

        assert solution.status == "unsolvable"
        assert not solution.solved
        assert solution.path == []
        assert solution.moves == []

    def test_search_order_is_up_down_left_right(self):
        """Test the exact path chosen in an open room."""
        grid = build(ROOM_MAZE)
        solution = PathSolver().solve(grid, grid.start_position)

        assert solution.path == [
            Position(1, 1),
            Position(2, 1),
            Position(3, 1),
            Position(3, 2),
            Position(2, 2),
            Position(1, 2),
            Position(1, 3),
            Position(2, 3),
            Position(3, 3),
        ]
        assert [m.value for m in solution.moves] == [
            "down", "down", "right", "up", "up", "right", "down", "down",
        ]

    def test_backtracks_out_of_dead_ends(self):
        """Test that a dead end tried first is abandoned."""
        grid = build("5 7\n#######\n# #   #\n#S# # #\n#   #E#\n#######")
        solution = PathSolver().solve(grid, grid.start_position)

        assert solution.solved
        assert_valid_path(grid, grid.start_position, solution)
        assert Position(1, 1) not in solution.path

    def test_start_on_exit(self):
        grid = build(SIMPLE_MAZE)
        solution = PathSolver().solve(grid, grid.exit_position)

        assert solution.solved
        assert solution.path == [Position(5, 5)]
        assert solution.moves == []

    def test_start_on_wall_is_unsolvable(self):
        grid = build(SIMPLE_MAZE)
        assert not PathSolver().solve(grid, Position(0, 0)).solved
        assert not PathSolver().solve(grid, Position(-1, 0)).solved

    def test_solve_from_other_cell(self):
        grid = build(SIMPLE_MAZE)
        solution = PathSolver().solve(grid, Position(3, 3))

        assert_valid_path(grid, Position(3, 3), solution)

    def test_depth_bound(self):
        """Test that a path longer than max_depth is not found."""
        grid = build(SIMPLE_MAZE)

        assert not PathSolver(max_depth=16).solve(grid, grid.start_position).solved
        assert PathSolver(max_depth=17).solve(grid, grid.start_position).solved

    @pytest.mark.parametrize("maze_file", sorted(MAZES_DIR.glob("*.txt")), ids=lambda p: p.name)
    def test_bundled_mazes_are_solvable(self, maze_file):
        grid = MazeGrid.from_raw(load_maze_file(maze_file))
        solution = PathSolver().solve(grid, grid.start_position)

        assert_valid_path(grid, grid.start_position, solution)


class TestDeterminism:
    """Tests for repeatable, independent solves."""

    def test_same_result_twice(self):
        grid = build(ROOM_MAZE)
        solver = PathSolver()

        first = solver.solve(grid, grid.start_position)
        second = solver.solve(grid, grid.start_position)

        assert first.path == second.path
        assert first.moves == second.moves
        assert first is not second

    def test_no_state_leaks_between_mazes(self):
        """Test that an unsolvable attempt does not affect the next maze."""
        solver = PathSolver()
        split = build(SPLIT_MAZE)
        simple = build(SIMPLE_MAZE)

        solver.solve(split, split.start_position)
        after = solver.solve(simple, simple.start_position)
        fresh = PathSolver().solve(simple, simple.start_position)

        assert after.path == fresh.path
        assert after.moves == fresh.moves

    def test_previous_result_is_not_mutated(self):
        solver = PathSolver()
        simple = build(SIMPLE_MAZE)
        first = solver.solve(simple, simple.start_position)
        snapshot = list(first.path)

        solver.solve(build(ROOM_MAZE), Position(1, 1))

        assert first.path == snapshot


class TestReplay:
    """Tests that a solution replays through the move engine."""

    @pytest.mark.parametrize("text", [SIMPLE_MAZE, ROOM_MAZE])
    def test_replay_reproduces_path(self, text):
        player = PlayerState()
        grid = MazeGrid.from_raw(parse_maze_text(text), player)
        solution = PathSolver().solve(grid, player.position)

        engine = MoveEngine()
        cells = [player.position]
        for move in solution.moves:
            cells.append(engine.apply_move(grid, player, move).position)

        assert cells == solution.path
        assert player.position == grid.exit_position

    def test_to_dict(self):
        grid = build(ROOM_MAZE)
        data = PathSolver().solve(grid, grid.start_position).to_dict()

        assert data["status"] == "solved"
        assert data["path"][0] == {"row": 1, "col": 1}
        assert data["moves"][0] == "down"
