from pydantic import BaseModel


class UpdateTaskResponse(BaseModel):
    acknowledged: bool = True
    matchedCount: int
    modifiedCount: int
    upsertedId: str | None = None
    upsertedCount: int = 0
