from datetime import datetime

from pydantic import BaseModel, ConfigDict


class UserDTO(BaseModel):
    id: str
    name: str | None = None
    email: str
    photoURL: str | None = None
    createdAt: datetime | None = None

    model_config = ConfigDict(extra="allow")


class CreateOrUpdateUserDTO(BaseModel):
    name: str | None = None
    email: str
    photoURL: str | None = None
