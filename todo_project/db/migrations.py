import logging

from pymongo import ASCENDING
from pymongo.errors import PyMongoError

from todo_project.db.config import DatabaseManager
from todo.models.task import TaskModel
from todo.models.user import UserModel

logger = logging.getLogger(__name__)


def ensure_user_email_index(db_manager: DatabaseManager) -> bool:
    """
    Create the unique index on users.email.

    The upsert keyed on email is atomic per document, but only a unique index stops two
    concurrent first-time upserts from inserting two documents for the same email.
    """
    try:
        collection = db_manager.get_collection(UserModel.collection_name)
        collection.create_index([("email", ASCENDING)], unique=True, name="email_unique")
        logger.info("Ensured unique index on users.email")
        return True
    except PyMongoError as e:
        logger.error(f"Failed to create unique index on users.email: {e}")
        return False


def ensure_task_user_email_index(db_manager: DatabaseManager) -> bool:
    try:
        collection = db_manager.get_collection(TaskModel.collection_name)
        collection.create_index([("userEmail", ASCENDING)], name="userEmail")
        logger.info("Ensured index on tasks.userEmail")
        return True
    except PyMongoError as e:
        logger.error(f"Failed to create index on tasks.userEmail: {e}")
        return False


def run_all_migrations(db_manager: DatabaseManager) -> bool:
    """
    Run all index migrations. Each migration is idempotent.

    Returns:
        bool: True if every migration succeeded, False otherwise
    """
    logger.info("Starting database migrations")

    migrations = [
        ("Users email unique index", ensure_user_email_index),
        ("Tasks userEmail index", ensure_task_user_email_index),
    ]

    success_count = 0
    for name, migration in migrations:
        if migration(db_manager):
            success_count += 1
        else:
            logger.error(f"Migration failed: {name}")

    logger.info(f"Database migrations completed: {success_count}/{len(migrations)} successful")
    return success_count == len(migrations)
