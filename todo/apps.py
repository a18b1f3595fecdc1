from django.apps import AppConfig
from django.conf import settings
import atexit
import logging

logger = logging.getLogger(__name__)


class TodoConfig(AppConfig):
    name = "todo"

    def ready(self):
        """Create the shared MongoDB client and the services that use it"""
        from todo_project.db.config import DatabaseManager
        from todo_project.db.init import initialize_database
        from todo.repositories.task_repository import TaskRepository
        from todo.repositories.user_repository import UserRepository
        from todo.services.task_service import TaskService
        from todo.services.user_service import UserService

        self.db_manager = DatabaseManager()
        self.task_service = TaskService(TaskRepository(self.db_manager))
        self.user_service = UserService(UserRepository(self.db_manager))

        if settings.TESTING:
            logger.info("Test mode detected - skipping database initialization")
            return

        initialize_database(self.db_manager)
        atexit.register(self.db_manager.close_connection)
