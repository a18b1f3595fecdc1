from datetime import datetime, timezone
from typing import List

from bson import ObjectId
from pymongo.results import DeleteResult, UpdateResult

from todo.constants.messages import RepositoryErrors
from todo.dto.task_dto import CreateTaskDTO
from todo.models.task import TaskModel
from todo.repositories.common.mongo_repository import MongoRepository


class TaskRepository(MongoRepository):
    collection_name = TaskModel.collection_name

    def get_all(self) -> List[TaskModel]:
        """
        Get all tasks in the collection's natural order.

        Returns:
            List[TaskModel]: List of all task models
        """
        tasks_cursor = self.get_collection().find()
        return [TaskModel(**task) for task in tasks_cursor]

    def get_by_id(self, task_id: str) -> TaskModel | None:
        task_data = self.get_collection().find_one({"_id": ObjectId(task_id)})
        return TaskModel(**task_data) if task_data else None

    def get_by_user_email(self, user_email: str) -> List[TaskModel]:
        tasks_cursor = self.get_collection().find({"userEmail": user_email})
        return [TaskModel(**task) for task in tasks_cursor]

    def create(self, task: CreateTaskDTO) -> TaskModel:
        """
        Insert a new task and read it back so the returned model matches what is stored.

        Args:
            task (CreateTaskDTO): Validated task fields

        Returns:
            TaskModel: The stored task including its assigned id
        """
        tasks_collection = self.get_collection()
        task_doc = {
            "title": task.title,
            "description": task.description,
            "userEmail": task.userEmail,
            "completed": False,
            "createdAt": datetime.now(timezone.utc),
        }
        insert_result = tasks_collection.insert_one(task_doc)

        created = tasks_collection.find_one({"_id": insert_result.inserted_id})
        if not created:
            raise ValueError(RepositoryErrors.TASK_NOT_FOUND_AFTER_INSERT.format(insert_result.inserted_id))
        return TaskModel(**created)

    def update(self, task_id: str, update_data: dict) -> UpdateResult:
        return self.get_collection().update_one({"_id": ObjectId(task_id)}, {"$set": update_data})

    def count_by_id(self, task_id: str) -> int:
        return self.get_collection().count_documents({"_id": ObjectId(task_id)})

    def delete_by_id(self, task_id: str) -> DeleteResult:
        return self.get_collection().delete_one({"_id": ObjectId(task_id)})
