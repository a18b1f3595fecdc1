import logging
from typing import Optional

from django.conf import settings
from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import PyMongoError

logger = logging.getLogger(__name__)


class DatabaseManager:
    """
    Owns the MongoDB client for the process.

    A single instance is created when the `todo` app starts and is handed to every
    repository. The client is opened once by `connect()` and released by
    `close_connection()` when the process shuts down.
    """

    def __init__(self, uri: Optional[str] = None, db_name: Optional[str] = None):
        self._uri = uri
        self._db_name = db_name
        self._database_client: Optional[MongoClient] = None

    @property
    def uri(self) -> str:
        return self._uri or settings.MONGODB_URI

    @property
    def db_name(self) -> str:
        return self._db_name or settings.DB_NAME

    def connect(self) -> MongoClient:
        if self._database_client is None:
            self._database_client = MongoClient(
                self.uri,
                tz_aware=True,
                serverSelectionTimeoutMS=settings.MONGODB_SERVER_SELECTION_TIMEOUT_MS,
            )
            logger.info(f"MongoDB client created for database '{self.db_name}'")
        return self._database_client

    def get_database(self) -> Database:
        return self.connect().get_database(self.db_name)

    def get_collection(self, collection_name: str) -> Collection:
        return self.get_database()[collection_name]

    def check_database_health(self) -> bool:
        try:
            self.connect().admin.command("ping")
            return True
        except PyMongoError as e:
            logger.error(f"MongoDB health check failed: {e}")
            return False

    def close_connection(self):
        if self._database_client is not None:
            self._database_client.close()
            self._database_client = None
            logger.info("MongoDB connection closed")
