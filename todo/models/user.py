from typing import ClassVar
from datetime import datetime

from todo.models.common.document import Document


class UserModel(Document):
    """
    A user document, keyed on email rather than on its ObjectId.
    """

    collection_name: ClassVar[str] = "users"

    name: str | None = None
    email: str
    photoURL: str | None = None
    createdAt: datetime | None = None
