from typing import Any

from django.db.models import QuerySet

from apps.events.models import Event
from apps.shared.decorators.database import handle_db_errors


class EventDAL:
    """Data Access Layer for Event model operations only"""

    def get_event_or_none(self, event_id: str) -> Event | None:
        return Event.objects.filter(pk=event_id).first()

    def get_event_for_update(self, event_id: str) -> Event | None:
        """Lock the event row for the rest of the current transaction"""
        return Event.objects.select_for_update().filter(pk=event_id).first()

    @handle_db_errors(operation_type='create', model_name='Event')
    def create_event(self, event_data: dict[str, Any]) -> Event:
        return Event.objects.create(**event_data)

    @handle_db_errors(operation_type='update', model_name='Event')
    def update_event(self, event: Event, validated_data: dict[str, Any]) -> Event:
        for field, value in validated_data.items():
            setattr(event, field, value)
        event.save()
        return event

    @handle_db_errors(operation_type='delete', model_name='Event')
    def delete_event(self, event: Event) -> bool:
        event.delete()
        return True

    def get_events_by_creator(self, creator_id: str) -> QuerySet[Event]:
        return Event.objects.for_creator(creator_id).order_by('created_at')

    def get_finished_events(self, utc_sec: int) -> QuerySet[Event]:
        return Event.objects.finished_before(utc_sec)
