"""
DRF Exception Handler for the events platform

- Translates business exceptions → HTTP responses
- Provides consistent error format across all callable endpoints
- Every error body carries the ``kind`` of the failure

Architecture Flow:
DAL (Django exceptions) → Business exceptions → API Handler → HTTP responses
"""

import logging
import traceback
from datetime import datetime
from datetime import timezone

from django.conf import settings
from django.core.exceptions import PermissionDenied as DjangoPermissionDenied
from django.http import Http404
from rest_framework import exceptions as drf_exceptions
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from apps.shared.exceptions import AppError
from apps.shared.exceptions import AuthenticationError
from apps.shared.exceptions import BusinessRuleViolation
from apps.shared.exceptions import PermissionError
from apps.shared.exceptions import ResourceNotFoundError
from apps.shared.exceptions import ServiceUnavailableError
from apps.shared.exceptions import ValidationError

logger = logging.getLogger(__name__)

DRF_KINDS = (
    (drf_exceptions.NotAuthenticated, 'unauthenticated'),
    (drf_exceptions.AuthenticationFailed, 'unauthenticated'),
    (drf_exceptions.PermissionDenied, 'permission-denied'),
    (drf_exceptions.NotFound, 'not-found'),
    (drf_exceptions.ValidationError, 'invalid-argument'),
    (Http404, 'not-found'),
    (DjangoPermissionDenied, 'permission-denied'),
)


def custom_exception_handler(exc, context):
    """
    Exception handler with business → HTTP translation.

    Called for every exception raised in DRF views.

    Args:
        exc: The exception instance
        context: View context (request, view, args, kwargs)

    Returns:
        Response with error details and appropriate HTTP status
    """
    request_info = _extract_request_info(context.get('request'), context.get('view'))

    # DRF handles its own exceptions (ValidationError, NotAuthenticated, ...)
    response = exception_handler(exc, context)
    if response is not None:
        _log_drf_exception(exc, request_info)
        return _format_drf_response(response, exc)

    if isinstance(exc, ResourceNotFoundError):
        return _business_response(exc, request_info, 'Resource Not Found', status.HTTP_404_NOT_FOUND, 'info')

    if isinstance(exc, BusinessRuleViolation):
        return _business_response(
            exc, request_info, 'Failed Precondition', status.HTTP_400_BAD_REQUEST, 'warning'
        )

    if isinstance(exc, ValidationError):
        response = _business_response(
            exc, request_info, 'Validation Error', status.HTTP_400_BAD_REQUEST, 'info'
        )
        if exc.field_errors:
            response.data['field_errors'] = exc.field_errors
        return response

    if isinstance(exc, PermissionError):
        return _business_response(exc, request_info, 'Permission Denied', status.HTTP_403_FORBIDDEN, 'warning')

    if isinstance(exc, ServiceUnavailableError):
        return _business_response(
            exc, request_info, 'Service Unavailable', status.HTTP_503_SERVICE_UNAVAILABLE, 'error'
        )

    if isinstance(exc, AuthenticationError):
        return _business_response(
            exc, request_info, 'Authentication Failed', status.HTTP_401_UNAUTHORIZED, 'warning'
        )

    if isinstance(exc, AppError):
        return _business_response(exc, request_info, 'Application Error', status.HTTP_400_BAD_REQUEST, 'error')

    return _handle_unhandled_exception(exc, request_info)


def _business_response(exc: AppError, request_info: dict, title: str, status_code: int, level: str) -> Response:
    _log_business_exception(exc, request_info, level=level)

    return Response(
        {
            'error': title,
            'kind': exc.kind,
            'error_code': exc.error_code,
            'message': str(exc),
            'details': exc.get_context(),
            'timestamp': _get_timestamp(),
        },
        status=status_code,
    )


def _handle_unhandled_exception(exc, request_info: dict) -> Response:
    """Handle unexpected exceptions → 500"""
    logger.error(
        f'UNHANDLED EXCEPTION in API: {type(exc).__name__}: {exc}\n'
        f'Request: {request_info}\n'
        f'Traceback: {traceback.format_exc()}'
    )

    return Response(
        {
            'error': 'Internal Server Error',
            'kind': 'internal',
            'error_code': 'internal_server_error',
            'message': 'An unexpected error occurred. Please try again later.',
            'timestamp': _get_timestamp(),
            'details': _get_debug_details(exc) if getattr(settings, 'DEBUG', False) else {},
        },
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


# =============================================================================
# Utility Functions
# =============================================================================


def _format_drf_response(response: Response, exc: Exception) -> Response:
    """Format DRF responses to match our consistent error format"""
    if isinstance(response.data, dict):
        response.data['kind'] = _drf_kind(exc)
        response.data['timestamp'] = _get_timestamp()
        response.data['error_code'] = getattr(exc, 'default_code', type(exc).__name__)
    return response


def _drf_kind(exc: Exception) -> str:
    for exc_class, kind in DRF_KINDS:
        if isinstance(exc, exc_class):
            return kind
    return 'internal'


def _extract_request_info(request, view) -> dict:
    """Extract useful request info for logging"""
    if not request:
        return {'method': 'unknown', 'path': 'unknown', 'user': 'unknown'}

    return {
        'method': getattr(request, 'method', 'unknown'),
        'path': getattr(request, 'path', 'unknown'),
        'user': getattr(request.user, 'id', 'anonymous') if hasattr(request, 'user') else 'unknown',
        'view': f'{view.__class__.__module__}.{view.__class__.__name__}' if view else 'unknown',
    }


def _log_business_exception(exc: AppError, request_info: dict, level: str = 'warning'):
    """Log business exceptions with appropriate level"""
    log_msg = f'Business exception in API: {type(exc).__name__}: {exc} | Request: {request_info}'
    getattr(logger, level, logger.warning)(log_msg)


def _log_drf_exception(exc: Exception, request_info: dict):
    logger.info(f'DRF exception in API: {type(exc).__name__}: {exc} | Request: {request_info}')


def _get_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


def _get_debug_details(exc: Exception) -> dict:
    return {
        'exception_type': type(exc).__name__,
        'exception_message': str(exc),
        'traceback': traceback.format_exc().split('\n'),
    }
