import logging

from django.conf import settings

from apps.shared.container import get_image_resize_service
from settings.celery import app

logger = logging.getLogger(__name__)


@app.task(
    time_limit=settings.MEDIA_RESIZE_TIME_LIMIT,
    soft_time_limit=max(settings.MEDIA_RESIZE_TIME_LIMIT - 5, 1),
)
def process_uploaded_image(bucket: str, key: str, content_type: str | None = None):
    """Resize a finalized upload; failures are logged, never retried."""
    try:
        result = get_image_resize_service().process_uploaded_image(bucket, key, content_type)
        if result is None:
            return {'status': 'skipped', 'key': key}
        return {'status': 'success', **result}
    except Exception as e:
        logger.exception(f'Processing of uploaded image {key} failed: {e}')
        return {'status': 'error', 'key': key, 'error': str(e)}
