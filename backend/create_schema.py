import asyncio
import sys

from core.config import get_settings
from core.database import DatabaseManager
import models  # noqa: F401
from tools.schema_check import check_sqlite_schema_mismatch


def _is_sqlite_file_url(url: str) -> bool:
    if not url or "sqlite" not in url.lower():
        return False
    if ":memory:" in url:
        return False
    return True


async def main() -> int:
    settings = get_settings()
    manager = DatabaseManager(settings.database_url)
    await manager.init()

    try:
        if _is_sqlite_file_url(settings.database_url or ""):
            async with manager.engine.connect() as conn:
                has_mismatch, message = await conn.run_sync(check_sqlite_schema_mismatch)
            if has_mismatch:
                print(f"Schema mismatch: {message}", file=sys.stderr)
                return 1

        await manager.create_all()
    finally:
        await manager.dispose()

    print("schema ok")
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
