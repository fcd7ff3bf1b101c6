import logging

from django.http import JsonResponse
from rest_framework import status

from apps.shared.exceptions import LinkGenerationError
from apps.shared.exceptions import StorageServiceError

logger = logging.getLogger(__name__)


class StorageExceptionMiddleware:
    """
    Turns external-service failures escaping plain Django views (admin
    actions, non-DRF endpoints) into the same error body the API returns.
    DRF views never reach this: their handler answers first.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        return self.get_response(request)

    def process_exception(self, request, exception):
        if isinstance(exception, StorageServiceError | LinkGenerationError):
            logger.error(f'External service failure on {request.path}: {exception}')
            return JsonResponse(
                {
                    'error': 'Service Unavailable',
                    'kind': exception.kind,
                    'error_code': exception.error_code,
                    'message': str(exception),
                },
                status=status.HTTP_503_SERVICE_UNAVAILABLE,
            )

        return None
