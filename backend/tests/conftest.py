# Ensure backend is at sys.path[0] when pytest runs (from repo root or from backend dir)
import sys
from pathlib import Path

_tests_dir = Path(__file__).resolve().parent
_backend = _tests_dir.parent
_str_backend = str(_backend)
if sys.path[0:1] != [_str_backend]:
    sys.path.insert(0, _str_backend)

from typing import List

import pytest
import pytest_asyncio

from core.context import FootballContext
from core.database import dispose_database, get_database_manager, init_database
from core.retry import RetryPolicy


class RecordingSleep:
    """Stand-in for asyncio.sleep that records the requested waits."""

    def __init__(self) -> None:
        self.waits: List[float] = []

    async def __call__(self, seconds: float) -> None:
        self.waits.append(seconds)


@pytest_asyncio.fixture
async def test_db():
    """In-memory SQLite with every football table created."""
    await init_database("sqlite+aiosqlite:///:memory:")
    manager = get_database_manager()
    await manager.create_all()
    yield manager
    await dispose_database()


@pytest_asyncio.fixture
async def context(test_db):
    async with test_db.session() as session:
        yield FootballContext(session)


@pytest.fixture
def sleep() -> RecordingSleep:
    return RecordingSleep()


@pytest.fixture
def retry(sleep) -> RetryPolicy:
    """Retry policy with the production schedule but no real waiting."""
    return RetryPolicy(sleep=sleep)
