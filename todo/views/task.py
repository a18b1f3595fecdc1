from django.http import JsonResponse
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status
from rest_framework.request import Request
from rest_framework.exceptions import ValidationError
from drf_spectacular.utils import extend_schema, OpenApiParameter, OpenApiResponse, OpenApiExample
from drf_spectacular.types import OpenApiTypes

from todo.serializers.create_task_serializer import CreateTaskSerializer
from todo.serializers.update_task_serializer import UpdateTaskSerializer
from todo.services.task_service import TaskService
from todo.dto.task_dto import CreateTaskDTO, TaskDTO, UpdateTaskDTO
from todo.dto.responses.delete_task_response import DeleteTaskResponse
from todo.dto.responses.update_task_response import UpdateTaskResponse
from todo.dto.responses.error_response import ApiErrorResponse
from todo.constants.messages import ValidationErrors


TASK_ID_PARAMETER = OpenApiParameter(
    name="task_id",
    type=OpenApiTypes.STR,
    location=OpenApiParameter.PATH,
    description="ObjectId of the task",
)


class TaskListView(APIView):
    task_service: TaskService = None

    @extend_schema(
        operation_id="get_tasks",
        summary="List all tasks",
        description="Return every task in the order the store scans them. No filtering or pagination.",
        tags=["tasks"],
        responses={
            200: OpenApiResponse(response=TaskDTO, description="List of all tasks"),
            500: ApiErrorResponse,
        },
    )
    def get(self, request: Request):
        tasks = self.task_service.get_tasks()
        return Response(data=[task.model_dump(mode="json") for task in tasks], status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="create_task",
        summary="Create new task",
        description="""
        Create a task for a user. `title` and `userEmail` are required; `description` defaults
        to an empty string. New tasks start with `completed=false`.

        **Test with curl:**
        ```bash
        curl -X POST "http://localhost:5000/tasks" \\
             -H "Content-Type: application/json" \\
             -d '{"title": "Buy milk", "userEmail": "a@x.com"}'
        ```
        """,
        tags=["tasks"],
        request=CreateTaskSerializer,
        responses={
            201: OpenApiResponse(response=TaskDTO, description="Task created successfully"),
            400: OpenApiResponse(
                response=ApiErrorResponse,
                description="Title or userEmail missing",
                examples=[
                    OpenApiExample(
                        "Missing fields",
                        value={
                            "statusCode": 400,
                            "message": ValidationErrors.TASK_REQUIRED_FIELDS,
                            "errors": [{"title": "Validation Error", "detail": ValidationErrors.TASK_REQUIRED_FIELDS}],
                        },
                        response_only=True,
                    )
                ],
            ),
            500: ApiErrorResponse,
        },
    )
    def post(self, request: Request):
        serializer = CreateTaskSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        dto = CreateTaskDTO(**serializer.validated_data)
        task = self.task_service.create_task(dto)
        return Response(data=task.model_dump(mode="json"), status=status.HTTP_201_CREATED)


class TaskDetailView(APIView):
    task_service: TaskService = None

    @extend_schema(
        operation_id="get_task_by_id",
        summary="Get task by ID",
        description="Return the task, or `null` when no task has this id.",
        tags=["tasks"],
        parameters=[TASK_ID_PARAMETER],
        responses={
            200: OpenApiResponse(response=TaskDTO, description="The task, or null"),
            500: OpenApiResponse(response=ApiErrorResponse, description="Malformed id or store error"),
        },
    )
    def get(self, request: Request, task_id: str):
        task = self.task_service.get_task_by_id(task_id)
        if task is None:
            return JsonResponse(None, safe=False, status=status.HTTP_200_OK)
        return Response(data=task.model_dump(mode="json"), status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="update_task",
        summary="Update task",
        description="""
        Partially update a task. Only `title`, `description` and `completed` are applied; any
        other key in the body is ignored. Returns counts of matched and modified documents,
        not the task itself. A missing task is not created.
        """,
        tags=["tasks"],
        parameters=[TASK_ID_PARAMETER],
        request=UpdateTaskSerializer,
        responses={
            200: OpenApiResponse(response=UpdateTaskResponse, description="Update result"),
            400: OpenApiResponse(response=ApiErrorResponse, description="Wrongly typed field"),
            500: OpenApiResponse(response=ApiErrorResponse, description="Malformed id or store error"),
        },
    )
    def put(self, request: Request, task_id: str):
        serializer = UpdateTaskSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        dto = UpdateTaskDTO(**serializer.validated_data)
        result = self.task_service.update_task(task_id, dto)
        return Response(data=result.model_dump(mode="json"), status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="delete_task",
        summary="Delete task",
        description="Delete the task if it exists. Deleting a missing task reports `deletedCount: 0`.",
        tags=["tasks"],
        parameters=[TASK_ID_PARAMETER],
        responses={
            200: OpenApiResponse(response=DeleteTaskResponse, description="Delete result"),
            500: OpenApiResponse(response=ApiErrorResponse, description="Malformed id or store error"),
        },
    )
    def delete(self, request: Request, task_id: str):
        result = self.task_service.delete_task(task_id)
        return Response(data=result.model_dump(mode="json"), status=status.HTTP_200_OK)


class UserTasksView(APIView):
    task_service: TaskService = None

    @extend_schema(
        operation_id="get_tasks_by_user_email",
        summary="List tasks of a user",
        description="Return the tasks whose `userEmail` exactly equals the path value.",
        tags=["tasks"],
        parameters=[
            OpenApiParameter(
                name="email",
                type=OpenApiTypes.STR,
                location=OpenApiParameter.PATH,
                description="Email the tasks belong to",
            ),
        ],
        responses={
            200: OpenApiResponse(response=TaskDTO, description="List of tasks of the user"),
            400: OpenApiResponse(response=ApiErrorResponse, description="Email missing"),
            500: ApiErrorResponse,
        },
    )
    def get(self, request: Request, email: str = ""):
        if not email:
            raise ValidationError(ValidationErrors.EMAIL_REQUIRED)

        tasks = self.task_service.get_tasks_by_user_email(email)
        return Response(data=[task.model_dump(mode="json") for task in tasks], status=status.HTTP_200_OK)
