"""
Database initialization script.

Creates every Vitrine table in the database named by DATABASE_URL.
Existing tables are left untouched.

Usage:
    python scripts/init_database.py
"""

import asyncio
import sys

from vitrine.config.settings import get_settings
from vitrine.infrastructure.monitoring.logger import get_logger, setup_logging
from vitrine.infrastructure.persistence.database import Database

logger = get_logger("vitrine.scripts.init_database")


async def init_database() -> bool:
    """
    Create all tables.

    Returns:
        True on success, False otherwise
    """
    settings = get_settings()
    database = Database(database_url=settings.DATABASE_URL, echo=settings.DATABASE_ECHO)

    await database.connect()
    try:
        await database.create_tables()
    except Exception:
        logger.exception("Schema creation failed")
        return False
    finally:
        await database.disconnect()

    logger.info("Schema created")
    return True


def main() -> int:
    setup_logging(level="INFO", json_logs=False)
    return 0 if asyncio.run(init_database()) else 1


if __name__ == "__main__":
    sys.exit(main())
