import logging
from typing import List
from rest_framework.exceptions import ValidationError as DRFValidationError
from rest_framework.response import Response
from rest_framework import status
from rest_framework.views import exception_handler as drf_exception_handler
from rest_framework.utils.serializer_helpers import ReturnDict
from rest_framework.settings import api_settings
from django.conf import settings

from todo.dto.responses.error_response import ApiErrorDetail, ApiErrorResponse, ApiErrorSource
from todo.constants.messages import ApiErrors
from todo.exceptions.repository_exceptions import RepositoryOperationException

logger = logging.getLogger(__name__)


def format_validation_errors(errors) -> List[ApiErrorDetail]:
    formatted_errors = []
    if isinstance(errors, ReturnDict | dict):
        for field, messages in errors.items():
            details = messages if isinstance(messages, list) else [messages]
            for message_detail in details:
                if isinstance(message_detail, dict):
                    nested_errors = format_validation_errors(message_detail)
                    formatted_errors.extend(nested_errors)
                elif field == api_settings.NON_FIELD_ERRORS_KEY:
                    formatted_errors.append(ApiErrorDetail(detail=str(message_detail), title=ApiErrors.VALIDATION_ERROR))
                else:
                    formatted_errors.append(
                        ApiErrorDetail(detail=str(message_detail), source={ApiErrorSource.PARAMETER: field})
                    )
    elif isinstance(errors, list):
        for message_detail in errors:
            formatted_errors.append(ApiErrorDetail(detail=str(message_detail), title=ApiErrors.VALIDATION_ERROR))
    return formatted_errors


def handle_exception(exc, context):
    response = drf_exception_handler(exc, context)
    view = context.get("view")

    error_list = []
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    if isinstance(exc, RepositoryOperationException):
        logger.error(f"{exc.message} in {view.__class__.__name__ if view else 'unknown view'}: {exc.__cause__!r}")
        error_list.append(
            ApiErrorDetail(
                title=ApiErrors.REPOSITORY_ERROR,
                detail=exc.message,
            )
        )
    elif isinstance(exc, DRFValidationError):
        status_code = status.HTTP_400_BAD_REQUEST
        error_list = format_validation_errors(exc.detail)
        if not error_list and exc.detail:
            error_list.append(ApiErrorDetail(detail=str(exc.detail), title=ApiErrors.VALIDATION_ERROR))
    elif response is not None:
        status_code = response.status_code
        if isinstance(response.data, dict) and "detail" in response.data:
            detail_str = str(response.data["detail"])
            error_list.append(ApiErrorDetail(detail=detail_str, title=detail_str))
        else:
            error_list.append(ApiErrorDetail(detail=str(response.data), title=str(exc)))
    else:
        logger.exception(f"Unhandled error in {view.__class__.__name__ if view else 'unknown view'}: {exc}")
        error_list.append(
            ApiErrorDetail(
                detail=str(exc) if settings.DEBUG else ApiErrors.INTERNAL_SERVER_ERROR,
                title=ApiErrors.INTERNAL_SERVER_ERROR,
            )
        )

    final_response_data = ApiErrorResponse(
        statusCode=status_code,
        message=error_list[0].detail if error_list else str(exc),
        errors=error_list,
    )
    return Response(data=final_response_data.model_dump(mode="json", exclude_none=True), status=status_code)
