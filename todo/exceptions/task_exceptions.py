from todo.exceptions.repository_exceptions import RepositoryOperationException


class TaskOperationException(RepositoryOperationException):
    pass
