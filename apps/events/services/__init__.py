from apps.events.services.event_service import EventService
from apps.events.services.event_trigger_service import EventTriggerService
from apps.events.services.ticket_service import TicketService

__all__ = [
    'EventService',
    'EventTriggerService',
    'TicketService',
]
