from unittest import TestCase
from unittest.mock import MagicMock
from bson import ObjectId
from bson.errors import InvalidId
from pymongo.errors import ServerSelectionTimeoutError

from todo.constants.messages import RepositoryErrors
from todo.dto.task_dto import CreateTaskDTO, TaskDTO, UpdateTaskDTO
from todo.exceptions.task_exceptions import TaskOperationException
from todo.models.task import TaskModel
from todo.services.task_service import TaskService
from todo.tests.fixtures.task import tasks_db_data


class TaskServiceTests(TestCase):
    def setUp(self):
        self.mock_repository = MagicMock()
        self.service = TaskService(self.mock_repository)
        self.task_models = [TaskModel(**task) for task in tasks_db_data]
        self.task_id = str(tasks_db_data[0]["_id"])

    def test_get_tasks_returns_dtos(self):
        self.mock_repository.get_all.return_value = self.task_models

        result = self.service.get_tasks()

        self.assertEqual(len(result), 3)
        self.assertIsInstance(result[0], TaskDTO)
        self.assertEqual(result[0].id, self.task_id)

    def test_get_tasks_wraps_store_error(self):
        self.mock_repository.get_all.side_effect = ServerSelectionTimeoutError("no servers")

        with self.assertRaises(TaskOperationException) as context:
            self.service.get_tasks()

        self.assertEqual(context.exception.message, RepositoryErrors.FETCH_TASKS_FAILED)
        self.assertIsInstance(context.exception.__cause__, ServerSelectionTimeoutError)

    def test_get_task_by_id_returns_dto(self):
        self.mock_repository.get_by_id.return_value = self.task_models[0]

        result = self.service.get_task_by_id(self.task_id)

        self.mock_repository.get_by_id.assert_called_once_with(self.task_id)
        self.assertEqual(result.title, "Buy milk")

    def test_get_task_by_id_returns_none_when_missing(self):
        self.mock_repository.get_by_id.return_value = None

        self.assertIsNone(self.service.get_task_by_id(self.task_id))

    def test_get_task_by_id_wraps_invalid_id(self):
        self.mock_repository.get_by_id.side_effect = InvalidId("bad id")

        with self.assertRaises(TaskOperationException) as context:
            self.service.get_task_by_id("bad id")

        self.assertEqual(context.exception.message, RepositoryErrors.FETCH_TASK_FAILED)

    def test_get_tasks_by_user_email(self):
        self.mock_repository.get_by_user_email.return_value = self.task_models[:2]

        result = self.service.get_tasks_by_user_email("a@x.com")

        self.mock_repository.get_by_user_email.assert_called_once_with("a@x.com")
        self.assertTrue(all(task.userEmail == "a@x.com" for task in result))

    def test_get_tasks_by_user_email_wraps_store_error(self):
        self.mock_repository.get_by_user_email.side_effect = ServerSelectionTimeoutError("down")

        with self.assertRaises(TaskOperationException) as context:
            self.service.get_tasks_by_user_email("a@x.com")

        self.assertEqual(context.exception.message, RepositoryErrors.FETCH_USER_TASKS_FAILED)

    def test_create_task(self):
        dto = CreateTaskDTO(title="Buy milk", userEmail="a@x.com")
        self.mock_repository.create.return_value = self.task_models[0]

        result = self.service.create_task(dto)

        self.mock_repository.create.assert_called_once_with(dto)
        self.assertEqual(result.id, self.task_id)
        self.assertFalse(result.completed)

    def test_create_task_wraps_store_error(self):
        self.mock_repository.create.side_effect = ServerSelectionTimeoutError("down")

        with self.assertRaises(TaskOperationException) as context:
            self.service.create_task(CreateTaskDTO(title="Buy milk", userEmail="a@x.com"))

        self.assertEqual(context.exception.message, RepositoryErrors.ADD_TASK_FAILED)

    def test_update_task_sets_only_provided_fields(self):
        self.mock_repository.update.return_value = MagicMock(acknowledged=True, matched_count=1, modified_count=1)

        result = self.service.update_task(self.task_id, UpdateTaskDTO(completed=True))

        self.mock_repository.update.assert_called_once_with(self.task_id, {"completed": True})
        self.assertEqual(result.matchedCount, 1)
        self.assertEqual(result.modifiedCount, 1)
        self.assertEqual(result.upsertedCount, 0)

    def test_update_task_without_fields_only_counts(self):
        self.mock_repository.count_by_id.return_value = 1

        result = self.service.update_task(self.task_id, UpdateTaskDTO())

        self.mock_repository.update.assert_not_called()
        self.assertEqual(result.matchedCount, 1)
        self.assertEqual(result.modifiedCount, 0)

    def test_update_task_wraps_invalid_id(self):
        self.mock_repository.update.side_effect = InvalidId("bad")

        with self.assertRaises(TaskOperationException) as context:
            self.service.update_task("bad", UpdateTaskDTO(title="x"))

        self.assertEqual(context.exception.message, RepositoryErrors.UPDATE_TASK_FAILED)

    def test_delete_task_reports_count(self):
        self.mock_repository.delete_by_id.return_value = MagicMock(acknowledged=True, deleted_count=0)

        result = self.service.delete_task(str(ObjectId()))

        self.assertEqual(result.deletedCount, 0)
        self.assertTrue(result.acknowledged)

    def test_delete_task_wraps_store_error(self):
        self.mock_repository.delete_by_id.side_effect = InvalidId("bad")

        with self.assertRaises(TaskOperationException) as context:
            self.service.delete_task("bad")

        self.assertEqual(context.exception.message, RepositoryErrors.DELETE_TASK_FAILED)

    def test_prepare_task_dto_passes_extra_fields(self):
        task = TaskModel(**{**tasks_db_data[0], "priority": "high"})

        dto = TaskService.prepare_task_dto(task)

        self.assertEqual(dto.model_dump()["priority"], "high")
        self.assertEqual(dto.id, self.task_id)
