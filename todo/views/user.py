from django.http import JsonResponse
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.request import Request
from rest_framework import status
from drf_spectacular.utils import extend_schema, OpenApiParameter, OpenApiResponse
from drf_spectacular.types import OpenApiTypes

from todo.dto.user_dto import CreateOrUpdateUserDTO, UserDTO
from todo.dto.responses.error_response import ApiErrorResponse
from todo.serializers.create_user_serializer import CreateOrUpdateUserSerializer
from todo.services.user_service import UserService


class UsersView(APIView):
    user_service: UserService = None

    @extend_schema(
        operation_id="get_users",
        summary="Get a user by email or list all users",
        description="With `email`, return that user or `null` when nobody has this email. "
        "Without it, return every user.",
        tags=["users"],
        parameters=[
            OpenApiParameter(
                name="email",
                type=OpenApiTypes.STR,
                location=OpenApiParameter.QUERY,
                description="Email of the user to look up",
                required=False,
            ),
        ],
        responses={
            200: OpenApiResponse(response=UserDTO, description="A user, null, or the list of all users"),
            500: ApiErrorResponse,
        },
    )
    def get(self, request: Request):
        email = request.query_params.get("email", "")
        if email:
            user = self.user_service.get_user_by_email(email)
            if user is None:
                return JsonResponse(None, safe=False, status=status.HTTP_200_OK)
            return Response(data=user.model_dump(mode="json"), status=status.HTTP_200_OK)

        users = self.user_service.get_all_users()
        return Response(data=[user.model_dump(mode="json") for user in users], status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="create_or_update_user",
        summary="Create or update a user",
        description="Upsert keyed on `email`. An existing user gets `name` and `photoURL` overwritten and "
        "keeps its id and `createdAt` (200). Otherwise a new user is created (201).",
        tags=["users"],
        request=CreateOrUpdateUserSerializer,
        responses={
            200: OpenApiResponse(response=UserDTO, description="Existing user updated"),
            201: OpenApiResponse(response=UserDTO, description="User created"),
            400: OpenApiResponse(response=ApiErrorResponse, description="Email missing"),
            500: ApiErrorResponse,
        },
    )
    def post(self, request: Request):
        serializer = CreateOrUpdateUserSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        dto = CreateOrUpdateUserDTO(**serializer.validated_data)
        user, created = self.user_service.create_or_update_user(dto)
        return Response(
            data=user.model_dump(mode="json"),
            status=status.HTTP_201_CREATED if created else status.HTTP_200_OK,
        )
