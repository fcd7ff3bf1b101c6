import logging

from apps.accounts.dal.user_dal import UserDAL
from apps.accounts.models import UserTicket
from apps.accounts.services.authority_service import shares_authority
from apps.events.dal.event_dal import EventDAL
from apps.events.dal.ticket_dal import TicketDAL
from apps.events.exceptions import EventPermissionError
from apps.events.exceptions import TicketEventMissingError
from apps.events.models import Event
from apps.events.models import EventTicket
from apps.shared.base.models import generate_document_id
from apps.shared.links.dynamic_link_service import DynamicLinkService

logger = logging.getLogger(__name__)

UNLIMITED_ATTENDEES = -1


class TicketService:
    """Default ticket bookkeeping and ticket verification"""

    def __init__(self, dal=None, event_dal=None, user_dal=None, link_service=None):
        self.dal = dal or TicketDAL()
        self.event_dal = event_dal or EventDAL()
        self.user_dal = user_dal or UserDAL()
        self._link_service = link_service

    @property
    def link_service(self) -> DynamicLinkService:
        if self._link_service is None:
            self._link_service = DynamicLinkService()
        return self._link_service

    def ensure_default_ticket(self, event: Event, is_new: bool, max_attendees: int | None = None) -> str | None:
        """
        Create the default ticket of a new event or sync its capacity.

        Returns:
            The new ticket id for a new event, otherwise None
        """
        if is_new:
            ticket_id = generate_document_id()
            ticket = self.dal.create_ticket(
                {
                    'id': ticket_id,
                    'event_id': event.id,
                    'type': EventTicket.DEFAULT_TYPE,
                    'attendees_n': 0,
                    'status': EventTicket.Status.VALID,
                    'max_attendees': max_attendees or UNLIMITED_ATTENDEES,
                    'link': self.link_service.generate_ticket_link(ticket_id),
                }
            )
            logger.debug(f'Default ticket {ticket.id} created for event {event.id}')
            return ticket.id

        capacity = max_attendees or event.max_attendees or UNLIMITED_ATTENDEES
        if not event.default_ticket:
            logger.warning(f'Event {event.id} has no default ticket to sync capacity {capacity}')
            return None

        if not self.dal.set_max_attendees(event.default_ticket, capacity):
            logger.warning(f'Default ticket {event.default_ticket} of event {event.id} does not exist')
        return None

    def verify_ticket(self, provoker_id: str, user_id: str, event_id: str) -> dict[str, bool]:
        """Check whether ``user_id`` holds a valid ticket for the event"""
        event = self.event_dal.get_event_or_none(event_id)
        if event is None:
            raise TicketEventMissingError(context={'event_id': event_id})

        provoker = self.user_dal.get_profile_or_none(provoker_id)
        authorities = provoker.authorities if provoker else {}
        if not shares_authority(authorities, provoker_id, event.creator_id):
            raise EventPermissionError(action='verify_ticket', event_id=event_id)

        ticket = self.user_dal.get_user_ticket(user_id, event_id)
        return {
            'ticket_exists': ticket is not None,
            'ticket_valid': ticket is not None and ticket.status == UserTicket.Status.VALID,
        }
