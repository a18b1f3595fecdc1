from .task import TaskModel
from .user import UserModel

__all__ = [
    "TaskModel",
    "UserModel",
]
