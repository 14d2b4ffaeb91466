"""CLI entry: run demo seed. Usage: python -m seed (from backend dir)."""
from __future__ import annotations

import asyncio
import sys

from core.config import get_settings
from core.context import FootballContext
from core.database import DatabaseManager
from core.logging import setup_logging
from seed.seed_demo import seed_demo


async def _main() -> int:
    settings = get_settings()
    setup_logging(settings)
    manager = DatabaseManager(settings.database_url)
    await manager.init()
    try:
        await manager.create_all()
        async with manager.session() as session:
            counts = await seed_demo(FootballContext(session))
    finally:
        await manager.dispose()
    print("Seed complete:", counts)
    return 0


def main() -> None:
    exit_code = asyncio.run(_main())
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
