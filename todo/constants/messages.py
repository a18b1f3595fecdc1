# Application Messages
class AppMessages:
    ROOT_STATUS = "Task Manager API is running!"


# Repository error messages
class RepositoryErrors:
    FETCH_TASKS_FAILED = "Failed to fetch tasks"
    FETCH_TASK_FAILED = "Failed to fetch task"
    ADD_TASK_FAILED = "Failed to add task"
    UPDATE_TASK_FAILED = "Failed to update task"
    DELETE_TASK_FAILED = "Failed to delete task"
    FETCH_USER_TASKS_FAILED = "Failed to fetch user tasks"
    FETCH_USER_FAILED = "Failed to fetch user"
    USER_CREATE_UPDATE_FAILED = "Failed to add/update user"
    TASK_NOT_FOUND_AFTER_INSERT = "Inserted task {0} could not be read back"
    USER_NOT_FOUND_AFTER_UPSERT = "Upserted user {0} could not be read back"


# API error messages
class ApiErrors:
    REPOSITORY_ERROR = "Repository Error"
    INTERNAL_SERVER_ERROR = "Internal server error"
    VALIDATION_ERROR = "Validation Error"


# Validation error messages
class ValidationErrors:
    TASK_REQUIRED_FIELDS = "Title and userEmail are required"
    EMAIL_REQUIRED = "Email is required"
