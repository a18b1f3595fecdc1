from bson.errors import InvalidId
from pymongo.errors import PyMongoError


class RepositoryOperationException(Exception):
    """A document store operation failed. `message` is safe to return to the caller."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


# Failures raised while talking to the store or reading its documents: driver errors,
# malformed ObjectId strings and documents that do not fit the read model.
STORE_ERRORS = (PyMongoError, InvalidId, ValueError)
