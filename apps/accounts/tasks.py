import logging

from apps.shared.container import get_user_lifecycle_service
from settings.celery import app

logger = logging.getLogger(__name__)


@app.task
def handle_user_created(user_id: str):
    """Bootstrap the profile of a new account."""
    try:
        created = get_user_lifecycle_service().on_user_created(user_id)
        return {'status': 'success', 'user_id': user_id, 'created': created}
    except Exception as e:
        logger.exception(f'Profile bootstrap for account {user_id} failed: {e}')
        return {'status': 'error', 'user_id': user_id, 'error': str(e)}


@app.task
def handle_user_document_deleted(user_id: str):
    """Delete events and per-user collections of a deleted profile."""
    try:
        result = get_user_lifecycle_service().on_user_document_deleted(user_id)
        return {'status': 'success', 'user_id': user_id, **result}
    except Exception as e:
        logger.exception(f'Cleanup of profile {user_id} failed: {e}')
        return {'status': 'error', 'user_id': user_id, 'error': str(e)}
