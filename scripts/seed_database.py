#!/usr/bin/env python3
"""
Create the database tables and load the fixture data.

Uses DATABASE_URL from the environment (or .env). Collections that already
contain records are left untouched.
"""

import asyncio
import logging
import sys
from pathlib import Path

# Allow running from a source checkout without installing the package
sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

from qanyare.infrastructure.configuration.config import get_config
from qanyare.infrastructure.database.fixtures import seed_storage
from qanyare.infrastructure.database.operations import DatabaseManager
from qanyare.infrastructure.logging.logging_config import setup_logging
from qanyare.infrastructure.repositories import build_sqlalchemy_storage

logger = logging.getLogger(__name__)


async def seed_database() -> None:
    """Create tables and seed every empty collection"""
    config = get_config()
    db_manager = DatabaseManager(config)
    try:
        db_manager.create_tables()
        inserted = await seed_storage(build_sqlalchemy_storage(db_manager), config)
    finally:
        db_manager.close()

    if inserted:
        for collection, count in inserted.items():
            logger.info("Inserted %d %s", count, collection)
    else:
        logger.info("Database already populated, nothing to seed")


if __name__ == "__main__":
    load_dotenv()
    setup_logging()
    logger.info("Starting database seeding...")
    try:
        asyncio.run(seed_database())
    except Exception as e:  # pylint: disable=broad-except
        logger.error("Seeding failed: %s", e, exc_info=True)
        sys.exit(1)
    logger.info("Seeding finished!")
