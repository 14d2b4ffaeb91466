"""
Reset local SQLite database: delete file and recreate schema from models.
For local/dev only. Refuses to run if DATABASE_URL is not SQLite file-based.
Usage: python -m tools.reset_local_db (from backend dir) or python backend/tools/reset_local_db.py (from repo root).
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

# Allow running from repo root or backend
_backend = Path(__file__).resolve().parent.parent
if str(_backend) not in sys.path:
    sys.path.insert(0, str(_backend))

from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError

from core.config import get_settings
from core.database import DatabaseManager
import models  # noqa: F401 - register all models


def _get_sqlite_path(database_url: str) -> Path | None:
    """Extract SQLite file path from URL. Returns None if not sqlite file (e.g. :memory: or non-sqlite)."""
    url = (database_url or "").strip()
    if not url.startswith("sqlite"):
        return None
    if ":memory:" in url:
        return None
    # sqlite+aiosqlite:///./football_manager.db or sqlite+aiosqlite:///C:/path/to/db
    try:
        db = (make_url(url).database or "").strip()
    except ArgumentError:
        return None
    return Path(db) if db else None


async def _main() -> int:
    settings = get_settings()
    url = settings.database_url or ""

    if "sqlite" not in url.lower():
        print("Refusing: DATABASE_URL is not SQLite. Reset is only for local SQLite file DBs.", file=sys.stderr)
        return 1

    path = _get_sqlite_path(url)
    if path is None:
        print("Refusing: DATABASE_URL appears to be in-memory or invalid. Use a file path for reset.", file=sys.stderr)
        return 1

    path = path.resolve()
    if path.exists():
        try:
            path.unlink()
        except OSError as e:
            print(f"Failed to delete database file {path}: {e}", file=sys.stderr)
            return 1

    manager = DatabaseManager(url)
    await manager.init()
    try:
        await manager.create_all()
    finally:
        await manager.dispose()

    print("OK: reset complete")
    return 0


def main() -> None:
    sys.exit(asyncio.run(_main()))


if __name__ == "__main__":
    main()
