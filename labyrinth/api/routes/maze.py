"""Maze routes for listing, validating and loading mazes."""

import logging

from fastapi import APIRouter, Path, Request, status
from starlette.concurrency import run_in_threadpool

from labyrinth.api.deps import AppSettings, load_error_to_http
from labyrinth.core import MazeGame, MazeLoadError, list_maze_files, validate_maze_text
from labyrinth.schemas.game import GameState
from labyrinth.schemas.maze import (
    MazeListItem,
    MazeListResponse,
    MazeValidateRequest,
    MazeValidateResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/maze", tags=["Mazes"])


@router.get(
    "",
    response_model=MazeListResponse,
)
async def list_mazes(settings: AppSettings) -> MazeListResponse:
    """List the maze files available in the configured directory."""
    try:
        files = list_maze_files(settings.mazes_dir)
    except MazeLoadError as e:
        raise load_error_to_http(e) from e

    maze_items = [MazeListItem(name=f.stem, filename=f.name) for f in files]
    return MazeListResponse(mazes=maze_items, total=len(maze_items))


@router.post(
    "/validate",
    response_model=MazeValidateResponse,
)
async def validate_maze(request: MazeValidateRequest) -> MazeValidateResponse:
    """Check maze text against the file format without loading it."""
    is_valid, error = validate_maze_text(request.maze_text)
    return MazeValidateResponse(valid=is_valid, error=error)


@router.post(
    "/{name}/load",
    response_model=GameState,
    status_code=status.HTTP_201_CREATED,
)
async def load_maze(
    request: Request,
    settings: AppSettings,
    name: str = Path(..., pattern=r"^[A-Za-z0-9_\-]+$"),
) -> GameState:
    """Load a maze file and make it the current game.

    Any previously loaded game is replaced. The file is read in the
    threadpool; the game is only swapped in back on the event loop.
    """
    try:
        game = await run_in_threadpool(
            MazeGame.from_file,
            settings.mazes_dir / f"{name}.txt",
            solver_max_depth=settings.solver_max_depth,
        )
    except MazeLoadError as e:
        logger.warning(f"Failed to load maze {name} ({e.kind.value}): {e}")
        raise load_error_to_http(e) from e

    request.app.state.game = game
    logger.info(f"Loaded maze {name} ({game.grid.rows}x{game.grid.cols})")
    return GameState(**game.snapshot())
