"""Pytest configuration and fixtures."""

from pathlib import Path
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from labyrinth.config import Settings, get_settings
from labyrinth.main import app


SIMPLE_MAZE = """7 7
#######
#S    #
##### #
#     #
# #####
#    E#
#######
"""

SPLIT_MAZE = """5 5
#####
#S# #
# # #
# #E#
#####
"""


@pytest.fixture
def mazes_dir(tmp_path) -> Path:
    """Directory with a few valid and invalid maze files."""
    (tmp_path / "simple.txt").write_text(SIMPLE_MAZE)
    (tmp_path / "split.txt").write_text(SPLIT_MAZE)
    (tmp_path / "even.txt").write_text(SIMPLE_MAZE.replace("7 7", "6 7", 1))
    (tmp_path / "short_row.txt").write_text(SIMPLE_MAZE.replace("#     #", "#     ", 1))
    (tmp_path / "bad_char.txt").write_text(SIMPLE_MAZE.replace("#S", "XS", 1))
    (tmp_path / "no_exit.txt").write_text(SIMPLE_MAZE.replace("E", " ", 1))
    return tmp_path


@pytest.fixture
def test_settings(mazes_dir) -> Settings:
    """Settings pointing at the temporary maze directory."""
    return Settings(mazes_dir=mazes_dir)


@pytest_asyncio.fixture(scope="function")
async def client(test_settings) -> AsyncGenerator[AsyncClient, None]:
    """Create a test HTTP client with no maze loaded."""
    app.dependency_overrides[get_settings] = lambda: test_settings
    app.state.game = None

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac

    app.dependency_overrides.clear()
    app.state.game = None
