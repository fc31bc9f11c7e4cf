"""Game schemas for request/response validation."""

from typing import Literal, Optional

from pydantic import BaseModel, Field


class GamePosition(BaseModel):
    """Schema for a (row, col) position in the maze."""

    row: int
    col: int


class GameState(BaseModel):
    """Schema for the current game state."""

    name: str
    rows: int
    cols: int
    grid: list[str]
    position: GamePosition
    exit_position: GamePosition
    visited: list[GamePosition]
    revisited: list[GamePosition]
    finished: bool


class MoveRequest(BaseModel):
    """Schema for move request."""

    direction: str = Field(..., pattern="^(up|down|left|right)$")


class MoveResponse(BaseModel):
    """Schema for move response."""

    status: str  # moved, blocked, completed
    position: GamePosition
    moves: int
    message: Optional[str] = None


class SolveRequest(BaseModel):
    """Schema for solve request."""

    apply: bool = False
    mark_path: bool = False


class SolveResponse(BaseModel):
    """Schema for solve response."""

    status: Literal["solved", "unsolvable"]
    path: list[GamePosition]
    moves: list[str]
    position: GamePosition
