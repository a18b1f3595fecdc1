from todo.exceptions.repository_exceptions import RepositoryOperationException


class UserOperationException(RepositoryOperationException):
    pass
