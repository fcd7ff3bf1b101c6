"""
Reactive handlers for event deletion and expiry.

Handlers are idempotent: running one twice for the same event leaves the
same state as running it once.
"""

import logging

from django.conf import settings
from django.db import transaction

from apps.accounts.dal.user_dal import UserDAL
from apps.events.dal.event_dal import EventDAL
from apps.events.dal.ticket_dal import TicketDAL
from apps.shared.storage.factory import StorageFactory
from apps.shared.utils.best_effort import attempt

logger = logging.getLogger(__name__)

TEMPLATE_IMAGE_MARKER = 'template'


class EventTriggerService:
    def __init__(self, dal=None, ticket_dal=None, user_dal=None, storage_service=None, storage_factory=None):
        self.dal = dal or EventDAL()
        self.ticket_dal = ticket_dal or TicketDAL()
        self.user_dal = user_dal or UserDAL()
        self._storage_service = storage_service
        self._storage_factory = storage_factory or StorageFactory.create_storage_service

    @property
    def storage_service(self):
        if self._storage_service is None:
            self._storage_service = self._storage_factory()
        return self._storage_service

    def on_event_deleted(self, event_id: str, images: list[str] | None = None) -> dict[str, int]:
        """Detach attendees, drop the event's tickets and its uploaded images"""
        with transaction.atomic():
            unattended = self.user_dal.remove_event_from_attending(event_id)
            tickets = self.ticket_dal.delete_event_tickets(event_id)

        deleted_images = 0
        for name in images or []:
            if TEMPLATE_IMAGE_MARKER in name:
                continue
            deleted_images += attempt(f'delete image {name} of event {event_id}', self._delete_image, name)

        logger.info(
            f'Event {event_id} cleanup: {unattended} attendees, {tickets} tickets, {deleted_images} images removed'
        )
        return {'unattended': unattended, 'tickets': tickets, 'images': deleted_images}

    def on_event_updated(self, event_id: str) -> dict[str, int] | None:
        """Retire attendance and tickets of an event that moved to the past"""
        event = self.dal.get_event_or_none(event_id)
        if event is None or not event.is_past:
            logger.debug(f'Event {event_id} is not past anymore, nothing to retire')
            return None

        with transaction.atomic():
            unattended = self.user_dal.remove_event_from_attending(event_id)
            user_tickets = self.user_dal.invalidate_user_tickets(event_id)
            event_tickets = self.ticket_dal.invalidate_event_tickets(event_id)

        logger.info(
            f'Event {event_id} retired: {unattended} attendees, '
            f'{user_tickets} user tickets, {event_tickets} event tickets invalidated'
        )
        return {'unattended': unattended, 'user_tickets': user_tickets, 'event_tickets': event_tickets}

    def _delete_image(self, name: str) -> None:
        self.storage_service.delete_file(f'{settings.EVENT_IMAGES_PREFIX}{name}')
