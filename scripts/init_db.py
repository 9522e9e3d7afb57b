"""
Create the schema directly from the models, without alembic.

    python scripts/init_db.py           # create missing tables
    python scripts/init_db.py --reset   # drop every table first (local development)
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from core.config import get_settings
from core.database import build_engine
from core.logging import setup_logging
# Importing the package registers every model on Base.metadata
from models import Base

logger = logging.getLogger("scripts.init_db")


async def init_database(reset: bool = False):
    settings = get_settings()
    engine = build_engine(settings)
    logger.info(f"Connecting to {settings.DB_HOST if not settings.DATABASE_URL else 'DATABASE_URL'}")

    try:
        async with engine.begin() as conn:
            if reset:
                logger.warning("Dropping all tables")
                await conn.run_sync(Base.metadata.drop_all)
            await conn.run_sync(Base.metadata.create_all)
    finally:
        await engine.dispose()

    logger.info(f"Tables ready: {', '.join(sorted(Base.metadata.tables))}")


def main():
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("--reset", action="store_true", help="drop all tables before creating them")
    args = parser.parse_args()

    setup_logging()
    asyncio.run(init_database(reset=args.reset))


if __name__ == "__main__":
    main()
