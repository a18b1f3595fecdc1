from typing import List

from todo.constants.messages import RepositoryErrors
from todo.dto.responses.delete_task_response import DeleteTaskResponse
from todo.dto.responses.update_task_response import UpdateTaskResponse
from todo.dto.task_dto import CreateTaskDTO, TaskDTO, UpdateTaskDTO
from todo.exceptions.repository_exceptions import STORE_ERRORS
from todo.exceptions.task_exceptions import TaskOperationException
from todo.models.task import TaskModel
from todo.repositories.task_repository import TaskRepository


class TaskService:
    def __init__(self, task_repository: TaskRepository):
        self.task_repository = task_repository

    def get_tasks(self) -> List[TaskDTO]:
        try:
            tasks = self.task_repository.get_all()
        except STORE_ERRORS as e:
            raise TaskOperationException(RepositoryErrors.FETCH_TASKS_FAILED) from e
        return [self.prepare_task_dto(task) for task in tasks]

    def get_task_by_id(self, task_id: str) -> TaskDTO | None:
        try:
            task = self.task_repository.get_by_id(task_id)
        except STORE_ERRORS as e:
            raise TaskOperationException(RepositoryErrors.FETCH_TASK_FAILED) from e
        return self.prepare_task_dto(task) if task else None

    def get_tasks_by_user_email(self, user_email: str) -> List[TaskDTO]:
        try:
            tasks = self.task_repository.get_by_user_email(user_email)
        except STORE_ERRORS as e:
            raise TaskOperationException(RepositoryErrors.FETCH_USER_TASKS_FAILED) from e
        return [self.prepare_task_dto(task) for task in tasks]

    def create_task(self, dto: CreateTaskDTO) -> TaskDTO:
        try:
            task = self.task_repository.create(dto)
        except STORE_ERRORS as e:
            raise TaskOperationException(RepositoryErrors.ADD_TASK_FAILED) from e
        return self.prepare_task_dto(task)

    def update_task(self, task_id: str, dto: UpdateTaskDTO) -> UpdateTaskResponse:
        """
        Apply the fields the client sent. A body without any changeable field still reports
        whether the task exists, but modifies nothing.
        """
        update_data = dto.model_dump(exclude_unset=True)
        try:
            if not update_data:
                matched_count = self.task_repository.count_by_id(task_id)
                return UpdateTaskResponse(matchedCount=matched_count, modifiedCount=0)

            result = self.task_repository.update(task_id, update_data)
        except STORE_ERRORS as e:
            raise TaskOperationException(RepositoryErrors.UPDATE_TASK_FAILED) from e

        return UpdateTaskResponse(
            acknowledged=result.acknowledged,
            matchedCount=result.matched_count,
            modifiedCount=result.modified_count,
        )

    def delete_task(self, task_id: str) -> DeleteTaskResponse:
        try:
            result = self.task_repository.delete_by_id(task_id)
        except STORE_ERRORS as e:
            raise TaskOperationException(RepositoryErrors.DELETE_TASK_FAILED) from e
        return DeleteTaskResponse(acknowledged=result.acknowledged, deletedCount=result.deleted_count)

    @staticmethod
    def prepare_task_dto(task: TaskModel) -> TaskDTO:
        return TaskDTO(id=str(task.id), **task.model_dump(exclude={"id"}))
