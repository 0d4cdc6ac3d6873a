"""
Create database tables directly from the SQLModel metadata
"""
import asyncio
import logging

from sqlmodel import SQLModel

import access_control.domain.entities  # noqa: F401  registers the tables
from access_control.depends import engine

logger = logging.getLogger(__name__)


async def create_tables():
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    await engine.dispose()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(create_tables())
    logger.info("Tables created")
