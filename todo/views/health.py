from django.http import HttpResponse
from rest_framework.negotiation import BaseContentNegotiation
from rest_framework.views import APIView
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiResponse
from drf_spectacular.types import OpenApiTypes
from todo.constants.health import AppHealthStatus, ComponentHealthStatus
from todo.constants.messages import AppMessages
from todo_project.db.config import DatabaseManager


class IgnoreClientContentNegotiation(BaseContentNegotiation):
    """Pick the first parser and renderer whatever the client's Accept header says."""

    def select_parser(self, request, parsers):
        return parsers[0]

    def select_renderer(self, request, renderers, format_suffix=None):
        return (renderers[0], renderers[0].media_type)


class RootView(APIView):
    content_negotiation_class = IgnoreClientContentNegotiation

    @extend_schema(
        operation_id="root",
        summary="Liveness message",
        description="Return a fixed text without touching the database",
        tags=["health"],
        responses={(200, "text/plain"): OpenApiTypes.STR},
    )
    def get(self, request):
        return HttpResponse(AppMessages.ROOT_STATUS, content_type="text/plain; charset=utf-8")


class HealthView(APIView):
    db_manager: DatabaseManager = None

    @extend_schema(
        operation_id="health_check",
        summary="Health check",
        description="Check the health status of the application and its components",
        tags=["health"],
        responses={
            200: OpenApiResponse(description="Application is healthy"),
            503: OpenApiResponse(description="Application is unhealthy"),
        },
    )
    def get(self, request):
        is_mongo_healthy = self.db_manager.check_database_health()
        mongo_status = ComponentHealthStatus.UP.name if is_mongo_healthy else ComponentHealthStatus.DOWN.name

        overall_status = AppHealthStatus.UP if is_mongo_healthy else AppHealthStatus.DOWN

        response = {
            "status": overall_status.name,
            "components": {
                "mongodb": {"status": mongo_status},
            },
        }
        return Response(response, overall_status.http_status)
