from typing import Any

from apps.events.models import EventTicket
from apps.shared.decorators.database import handle_db_errors


class TicketDAL:
    """Data Access Layer for event tickets"""

    @handle_db_errors(operation_type='create', model_name='EventTicket')
    def create_ticket(self, ticket_data: dict[str, Any]) -> EventTicket:
        return EventTicket.objects.create(**ticket_data)

    def get_ticket_or_none(self, ticket_id: str) -> EventTicket | None:
        return EventTicket.objects.filter(pk=ticket_id).first()

    @handle_db_errors(operation_type='update', model_name='EventTicket')
    def set_max_attendees(self, ticket_id: str, max_attendees: int) -> int:
        return EventTicket.objects.filter(pk=ticket_id).update(max_attendees=max_attendees)

    @handle_db_errors(operation_type='update', model_name='EventTicket')
    def invalidate_event_tickets(self, event_id: str) -> int:
        return EventTicket.objects.filter(event_id=event_id).exclude(
            status=EventTicket.Status.INVALID
        ).update(status=EventTicket.Status.INVALID)

    @handle_db_errors(operation_type='delete', model_name='EventTicket')
    def delete_event_tickets(self, event_id: str) -> int:
        deleted, _ = EventTicket.objects.filter(event_id=event_id).delete()
        return deleted
