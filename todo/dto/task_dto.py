from datetime import datetime

from pydantic import BaseModel, ConfigDict


class TaskDTO(BaseModel):
    id: str
    title: str
    description: str | None = ""
    userEmail: str
    completed: bool = False
    createdAt: datetime | None = None

    model_config = ConfigDict(extra="allow")


class CreateTaskDTO(BaseModel):
    title: str
    description: str = ""
    userEmail: str


class UpdateTaskDTO(BaseModel):
    """Fields a client may change on an existing task. Unset fields are left untouched."""

    title: str | None = None
    description: str | None = None
    completed: bool | None = None
