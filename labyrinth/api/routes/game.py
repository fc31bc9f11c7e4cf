"""Game routes for playing and solving the loaded maze.

Handlers are async and never await while touching the game, so all
mutation happens on the event loop one request at a time.
"""

import logging

from fastapi import APIRouter

from labyrinth.api.deps import CurrentGame
from labyrinth.schemas.game import (
    GamePosition,
    GameState,
    MoveRequest,
    MoveResponse,
    SolveRequest,
    SolveResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/game", tags=["Game"])


@router.get(
    "",
    response_model=GameState,
)
async def get_game_state(game: CurrentGame) -> GameState:
    """Get the grid, player position, history and exit."""
    return GameState(**game.snapshot())


@router.post(
    "/move",
    response_model=MoveResponse,
)
async def move(request: MoveRequest, game: CurrentGame) -> MoveResponse:
    """Move the player one cell.

    Moving into a wall is not an error: the position stays the same and the
    status is "blocked".
    """
    result = game.move(request.direction)
    if result.status == "completed":
        logger.info(f"Maze {game.name} completed in {result.moves} moves")
    return MoveResponse(**result.to_dict())


@router.post(
    "/solve",
    response_model=SolveResponse,
)
async def solve(request: SolveRequest, game: CurrentGame) -> SolveResponse:
    """Solve the maze from the player's current position.

    With apply=true the solution is replayed through the move engine, leaving
    the player on the exit.
    """
    solution = game.solve(mark_path=request.mark_path)
    if solution.solved and request.apply:
        game.follow(solution)

    data = solution.to_dict()
    return SolveResponse(
        status=data["status"],
        path=[GamePosition(**p) for p in data["path"]],
        moves=data["moves"],
        position=GamePosition(**game.position.to_dict()),
    )


@router.post(
    "/reset",
    response_model=GameState,
)
async def reset(game: CurrentGame) -> GameState:
    """Reset the traversal history for a replay."""
    game.reset()
    return GameState(**game.snapshot())
