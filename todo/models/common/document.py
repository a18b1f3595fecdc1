from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

from todo.models.common.pyobjectid import PyObjectId


class Document(BaseModel):
    collection_name: ClassVar[str]

    id: PyObjectId | None = Field(None, alias="_id")

    model_config = ConfigDict(populate_by_name=True, extra="allow")
