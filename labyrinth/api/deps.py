"""API dependencies for dependency injection."""

from typing import Annotated

from fastapi import Depends, HTTPException, Request

from labyrinth.config import Settings, get_settings
from labyrinth.core import MazeGame, MazeLoadError, MazeErrorKind

# Status codes for each kind of maze load failure
LOAD_ERROR_STATUS = {
    MazeErrorKind.NOT_FOUND: 404,
    MazeErrorKind.MALFORMED_FORMAT: 422,
    MazeErrorKind.SIZE_MISMATCH: 422,
    MazeErrorKind.INVALID_CHARACTER: 422,
}


def get_game(request: Request) -> MazeGame:
    """Get the game currently loaded on the application."""
    game = getattr(request.app.state, "game", None)
    if game is None:
        raise HTTPException(
            status_code=409,
            detail="No maze loaded",
        )
    return game


def load_error_to_http(error: MazeLoadError) -> HTTPException:
    """Convert a maze load failure into an HTTP error."""
    return HTTPException(
        status_code=LOAD_ERROR_STATUS[error.kind],
        detail={"kind": error.kind.value, "message": str(error)},
    )


# Type aliases for cleaner dependency injection
CurrentGame = Annotated[MazeGame, Depends(get_game)]
AppSettings = Annotated[Settings, Depends(get_settings)]
