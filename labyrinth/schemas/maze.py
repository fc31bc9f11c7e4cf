"""Maze schemas for request/response validation."""

from typing import Optional

from pydantic import BaseModel, Field


class MazeListItem(BaseModel):
    """Schema for maze list item."""

    name: str
    filename: str


class MazeListResponse(BaseModel):
    """Schema for maze list response."""

    mazes: list[MazeListItem]
    total: int


class MazeValidateRequest(BaseModel):
    """Schema for validating maze text, header line included."""

    maze_text: str = Field(..., min_length=1)


class MazeValidateResponse(BaseModel):
    """Schema for maze validation result."""

    valid: bool
    error: Optional[str] = None
