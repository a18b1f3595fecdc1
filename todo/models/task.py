from typing import ClassVar
from datetime import datetime

from todo.models.common.document import Document


class TaskModel(Document):
    """
    A task document. Stored documents are loosely typed, so fields not declared here
    are kept as extras and passed through to responses.
    """

    collection_name: ClassVar[str] = "tasks"

    title: str
    description: str | None = ""
    userEmail: str
    completed: bool = False
    createdAt: datetime | None = None
