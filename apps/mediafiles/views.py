import hmac
import logging

from django.conf import settings
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny

from apps.mediafiles.serializers import ObjectFinalizedSerializer
from apps.mediafiles.tasks import process_uploaded_image
from apps.shared.base.base_api_view import BaseAPIView
from apps.shared.exceptions import AuthenticationError

logger = logging.getLogger(__name__)

WEBHOOK_TOKEN_HEADER = 'HTTP_X_STORAGE_WEBHOOK_TOKEN'


@extend_schema(tags=['Storage'])
class ObjectFinalizedWebhookAPIView(BaseAPIView):
    """Receives object-created notifications from the storage bucket"""

    authentication_classes = ()
    permission_classes = [AllowAny]
    serializer_class = ObjectFinalizedSerializer

    def check_webhook_token(self, request):
        expected = settings.STORAGE_WEBHOOK_TOKEN
        provided = request.META.get(WEBHOOK_TOKEN_HEADER, '')
        if not expected or not hmac.compare_digest(provided, expected):
            raise AuthenticationError('Invalid storage webhook token', error_code='invalid_webhook_token')

    def post(self, request):
        self.check_webhook_token(request)

        serializer = ObjectFinalizedSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        objects = serializer.finalized_objects()
        for item in objects:
            process_uploaded_image.delay(item['bucket'], item['key'], item['content_type'])

        logger.info(f'Queued {len(objects)} uploaded objects for processing')
        return self.ok({'queued': len(objects)}, status_code=status.HTTP_202_ACCEPTED)
