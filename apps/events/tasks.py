import logging

from apps.shared.container import get_event_service
from apps.shared.container import get_event_trigger_service
from settings.celery import app

logger = logging.getLogger(__name__)


@app.task
def handle_event_deleted(event_id: str, images: list[str] | None = None):
    """Clean up attendance, tickets and images of a deleted event."""
    try:
        result = get_event_trigger_service().on_event_deleted(event_id, images)
        return {'status': 'success', 'event_id': event_id, **result}
    except Exception as e:
        logger.exception(f'Cleanup of deleted event {event_id} failed: {e}')
        return {'status': 'error', 'event_id': event_id, 'error': str(e)}


@app.task
def handle_event_updated(event_id: str):
    """Retire attendance and tickets of an event that moved to the past."""
    try:
        result = get_event_trigger_service().on_event_updated(event_id)
        return {'status': 'success' if result is not None else 'skipped', 'event_id': event_id, **(result or {})}
    except Exception as e:
        logger.exception(f'Retirement of event {event_id} failed: {e}')
        return {'status': 'error', 'event_id': event_id, 'error': str(e)}


@app.task
def expire_finished_events():
    """Periodic task: move finished events to the past."""
    try:
        expired = get_event_service().expire_finished_events()
        return {'status': 'success', 'expired': expired}
    except Exception as e:
        logger.exception(f'Expiring finished events failed: {e}')
        return {'status': 'error', 'error': str(e)}
