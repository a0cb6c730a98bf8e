"""
Database initialization script.

Creates the blogs and users tables. Can be run on its own with
`python -m bloglist.db.init_db`; the application also does this on startup.
"""

from asyncio import run as asyncio_run
from logging import getLogger

from bloglist.db.database import close_db, init_db
from bloglist.errors.database import DatabaseInitializationError
from bloglist.utils.helpers import file_logger

logger = file_logger(getLogger(__name__))


async def main() -> None:
    """Create tables and release the engine."""
    try:
        logger.info("Initializing database...")
        await init_db()
        logger.info("Database ready!")
    except Exception as e:
        logger.exception("Failed to initialize database")
        raise DatabaseInitializationError from e
    finally:
        await close_db()


def run() -> None:
    asyncio_run(main())


if __name__ == "__main__":
    run()
