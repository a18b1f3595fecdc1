import logging
import time

from todo_project.db.config import DatabaseManager
from todo_project.db.migrations import run_all_migrations

logger = logging.getLogger(__name__)


def initialize_database(db_manager: DatabaseManager, max_retries=5, retry_delay=2):
    """
    Connect to MongoDB and create the required indexes.
    Includes retry logic for Docker environments where the database starts after the app.
    """
    for attempt in range(max_retries):
        if db_manager.check_database_health():
            logger.info("MongoDB connected")
            break
        if attempt < max_retries - 1:
            logger.warning(
                f"Database health check failed, attempt {attempt + 1}. Retrying in {retry_delay} seconds..."
            )
            time.sleep(retry_delay)
        else:
            logger.error(f"Failed to connect to database after {max_retries} attempts")
            return False

    if not run_all_migrations(db_manager):
        logger.warning("Some database migrations failed, but continuing with initialization")

    logger.info("Database initialization completed successfully")
    return True
