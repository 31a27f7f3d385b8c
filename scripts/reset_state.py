import asyncio
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from config import settings  # noqa: E402
from infrastructure.database.database import (  # noqa: E402
    Base,
    create_tables,
    dispose_engine,
    drop_tables,
)

logger = logging.getLogger("reset_state")


async def reset_database() -> None:
    logger.info("Dropping database tables...")
    await drop_tables()

    logger.info("Recreating database tables...")
    await create_tables()
    logger.info("Tables ready: %s", ", ".join(sorted(Base.metadata.tables)))


async def main() -> None:
    try:
        await reset_database()
        logger.info("State reset complete.")
    finally:
        await dispose_engine()


if __name__ == "__main__":
    logging.basicConfig(level=settings.LOG_LEVEL, format="%(levelname)s:%(name)s:%(message)s")
    asyncio.run(main())
