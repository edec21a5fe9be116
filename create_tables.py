"""
create_tables.py
----------------
One-shot script to create all database tables and load the demo building.

Usage:
    python create_tables.py [--no-seed]
"""

import asyncio
import logging
import sys

from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

import src.domain.entities  # noqa: F401  (registers every table on the metadata)
from config import ApplicationConfig
from src.adapter.seed import seed_demo_data
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork

logger = logging.getLogger("create_tables")


async def create_all_tables(seed: bool) -> None:
    engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    logger.info("All tables created")

    if seed:
        Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
        async with Session() as session:
            await seed_demo_data(SqlAlchemyUnitOfWork(session))

    await engine.dispose()


if __name__ == "__main__":
    logging.basicConfig(level=ApplicationConfig.LOG_LEVEL)
    asyncio.run(create_all_tables(seed="--no-seed" not in sys.argv))
