"""Player position and traversal history."""

from dataclasses import dataclass, field

from .maze_grid import Position


@dataclass
class PlayerState:
    """
    Current position plus the ordered traversal history.

    visited holds each cell the first time it is reached, revisited holds
    every later arrival on an already visited cell.
    """
    position: Position = field(default_factory=lambda: Position(0, 0))
    visited: list[Position] = field(default_factory=list)
    revisited: list[Position] = field(default_factory=list)

    def add_visited(self, position: Position) -> None:
        self.visited.append(position)

    def add_revisited(self, position: Position) -> None:
        self.revisited.append(position)

    def record(self, position: Position) -> None:
        """Record an arrival on position in the matching history list."""
        if position in self.visited:
            self.add_revisited(position)
        else:
            self.add_visited(position)

    def reset(self) -> None:
        """Clear the history, keeping only the current position."""
        self.visited.clear()
        self.revisited.clear()
        self.visited.append(self.position)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "position": self.position.to_dict(),
            "visited": [p.to_dict() for p in self.visited],
            "revisited": [p.to_dict() for p in self.revisited],
        }
