from django.test import TestCase

from apps.accounts.models import UserTicket
from apps.accounts.tests.factories import UserTicketFactory
from apps.events.exceptions import EventPermissionError
from apps.events.exceptions import TicketEventMissingError
from apps.events.models import Event
from apps.events.services.ticket_service import TicketService
from apps.events.tests.factories import EventFactory
from apps.events.tests.factories import EventTicketFactory
from apps.events.tests.factories import UserEventFactory
from apps.events.tests.utils import EventTestMixin
from apps.events.tests.utils import TICKET_SHORT_LINK


class TicketVerificationTest(EventTestMixin, TestCase):
    """Ticket checks by organizers"""

    def setUp(self):
        super().setUp()
        self.service = TicketService(link_service=self.link_service)
        self.event = EventFactory(creator_id=self.community.id)

    def test_valid_ticket(self):
        UserTicketFactory(user_id=self.other_account.id, event_id=self.event.id)

        result = self.service.verify_ticket(self.account.id, self.other_account.id, self.event.id)

        self.assertEqual(result, {'ticket_exists': True, 'ticket_valid': True})

    def test_invalid_ticket(self):
        UserTicketFactory(user_id=self.other_account.id, event_id=self.event.id, status=UserTicket.Status.INVALID)

        result = self.service.verify_ticket(self.account.id, self.other_account.id, self.event.id)

        self.assertEqual(result, {'ticket_exists': True, 'ticket_valid': False})

    def test_no_ticket(self):
        result = self.service.verify_ticket(self.account.id, self.other_account.id, self.event.id)

        self.assertEqual(result, {'ticket_exists': False, 'ticket_valid': False})

    def test_creator_verifies_own_event(self):
        event = UserEventFactory(creator_id=self.other_account.id)

        result = self.service.verify_ticket(self.other_account.id, self.account.id, event.id)

        self.assertFalse(result['ticket_exists'])

    def test_verification_without_authority(self):
        with self.assertRaises(EventPermissionError):
            self.service.verify_ticket(self.other_account.id, self.account.id, self.event.id)

    def test_missing_event(self):
        with self.assertRaises(TicketEventMissingError):
            self.service.verify_ticket(self.account.id, self.other_account.id, 'missing')


class DefaultTicketTest(EventTestMixin, TestCase):
    def setUp(self):
        super().setUp()
        self.service = TicketService(link_service=self.link_service)

    def test_new_event_gets_default_ticket(self):
        ticket_id = self.service.ensure_default_ticket(Event(id='new-event'), is_new=True, max_attendees=None)

        ticket = self.service.dal.get_ticket_or_none(ticket_id)
        self.assertEqual(ticket.event_id, 'new-event')
        self.assertEqual(ticket.max_attendees, -1)
        self.assertEqual(ticket.attendees_n, 0)
        self.assertEqual(ticket.link, TICKET_SHORT_LINK)

    def test_existing_event_without_default_ticket(self):
        event = EventFactory(default_ticket='')

        self.assertIsNone(self.service.ensure_default_ticket(event, is_new=False, max_attendees=20))
        self.link_service.generate_ticket_link.assert_not_called()

    def test_existing_event_syncs_capacity(self):
        ticket = EventTicketFactory(max_attendees=5)
        event = EventFactory(default_ticket=ticket.id, max_attendees=5)

        self.service.ensure_default_ticket(event, is_new=False, max_attendees=None)

        ticket.refresh_from_db()
        self.assertEqual(ticket.max_attendees, 5)
