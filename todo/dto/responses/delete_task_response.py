from pydantic import BaseModel


class DeleteTaskResponse(BaseModel):
    acknowledged: bool = True
    deletedCount: int
