from pymongo.collection import Collection

from todo_project.db.config import DatabaseManager


class MongoRepository:
    collection_name: str

    def __init__(self, db_manager: DatabaseManager):
        self.db_manager = db_manager

    def get_collection(self) -> Collection:
        return self.db_manager.get_collection(self.collection_name)
