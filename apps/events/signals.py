"""Django signals that turn event writes into trigger tasks."""

import logging

from django.db import transaction
from django.db.models.signals import post_delete
from django.db.models.signals import post_save
from django.db.models.signals import pre_save
from django.dispatch import receiver

from apps.events.models import Event

logger = logging.getLogger(__name__)


@receiver(pre_save, sender=Event)
def remember_previous_time_state(sender, instance, raw=False, **kwargs):
    """Keep the stored time_state so post_save can detect the move to past."""
    if raw:
        return
    instance._previous_time_state = (
        sender.objects.filter(pk=instance.pk).values_list('time_state', flat=True).first()
    )


@receiver(post_save, sender=Event)
def schedule_event_updated(sender, instance, created, raw=False, **kwargs):
    if created or raw:
        return

    previous = getattr(instance, '_previous_time_state', None)
    if instance.time_state != Event.TimeState.PAST or previous in (None, Event.TimeState.PAST):
        return

    from apps.events.tasks import handle_event_updated

    event_id = instance.id
    logger.debug(f'Event {event_id} moved to past, scheduling retirement')
    transaction.on_commit(lambda: handle_event_updated.delay(event_id))


@receiver(post_delete, sender=Event)
def schedule_event_deleted(sender, instance, **kwargs):
    from apps.events.tasks import handle_event_deleted

    event_id = instance.id
    images = list(instance.images or [])
    logger.debug(f'Event {event_id} deleted, scheduling cleanup')
    transaction.on_commit(lambda: handle_event_deleted.delay(event_id, images))
