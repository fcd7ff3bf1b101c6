from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from apps.accounts.tests.factories import StaffAccountFactory
from apps.events.models import Event
from apps.events.models import EventTicket
from apps.events.tests.factories import EventFactory
from apps.events.tests.utils import EVENT_SHORT_LINK
from apps.events.tests.utils import EventTestMixin
from apps.shared.container import get_container
from apps.shared.exceptions import LinkGenerationError


class EventCallablesTest(EventTestMixin, TestCase):
    """POST callables under /api/v1/events/"""

    def setUp(self):
        super().setUp()
        get_container().override_link_service(lambda: self.link_service)
        self.addCleanup(get_container().reset_to_defaults)
        self.client = APIClient()
        self.client.force_authenticate(user=self.account)

    def test_create_event(self):
        response = self.client.post(reverse('events:event-create'), self.event_data(), format='json')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['status'], 'ok')
        self.assertEqual(response.data['response']['link'], EVENT_SHORT_LINK)
        self.assertTrue(Event.objects.filter(pk=response.data['response']['id']).exists())

    def test_create_event_with_camel_case_update_key(self):
        event = EventFactory(creator_id=self.community.id)

        response = self.client.post(
            reverse('events:event-create'), {'forceUpdateID': event.id, 'title': 'Renamed'}, format='json'
        )

        event.refresh_from_db()
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(event.title, 'Renamed')

    def test_create_event_without_date(self):
        data = self.event_data()
        del data['date']

        response = self.client.post(reverse('events:event-create'), data, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['kind'], 'failed-precondition')
        self.assertEqual(response.data['message'], 'Date is a mandatory parameter.')

    def test_staff_publishes_for_any_organizer(self):
        staff = StaffAccountFactory()
        self.client.force_authenticate(user=staff)

        response = self.client.post(reverse('events:event-create'), self.event_data(), format='json')

        self.assertEqual(response.status_code, status.HTTP_200_OK)

    def test_publish_permission_denied(self):
        self.client.force_authenticate(user=self.other_account)

        response = self.client.post(reverse('events:event-create'), self.event_data(), format='json')

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(response.data['message'], 'User does not have the permissions requested.')

    def test_delete_event(self):
        event = EventFactory(creator_id=self.community.id)

        response = self.client.post(reverse('events:event-delete'), {'event_id': event.id}, format='json')

        self.assertEqual(response.data, {'status': 'ok', 'response': None})
        self.assertFalse(Event.objects.filter(pk=event.id).exists())

    def test_delete_event_forbidden(self):
        event = EventFactory(creator_id=self.community.id)
        self.client.force_authenticate(user=self.other_account)

        response = self.client.post(reverse('events:event-delete'), {'event_id': event.id}, format='json')

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertTrue(Event.objects.filter(pk=event.id).exists())

    def test_events_by_authority(self):
        event = EventFactory(creator_id=self.community.id, title='Finals')

        response = self.client.post(
            reverse('events:events-by-authority'), {'authority_id': self.community.id}, format='json'
        )

        self.assertEqual(response.data['response'], {'events': [{'title': 'Finals', 'id': event.id}]})

    def test_attendees_missing_event(self):
        response = self.client.post(reverse('events:event-attendees'), {'event_id': 'missing'}, format='json')

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data['kind'], 'not-found')

    def test_verify_ticket_missing_event(self):
        response = self.client.post(
            reverse('events:verify-ticket'), {'user_id': self.other_account.id, 'event_id': 'missing'}, format='json'
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['message'], 'Event does not exist!')

    def test_invalid_payload(self):
        response = self.client.post(reverse('events:event-delete'), {}, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['kind'], 'invalid-argument')

    def test_create_event_link_failure(self):
        self.link_service.generate_event_link.side_effect = LinkGenerationError()

        response = self.client.post(reverse('events:event-create'), self.event_data(), format='json')

        self.assertEqual(response.status_code, status.HTTP_503_SERVICE_UNAVAILABLE)
        self.assertEqual(response.data['kind'], 'unavailable')
        self.assertEqual(response.data['error_code'], 'link_generation_failed')
        self.assertFalse(Event.objects.exists())
        self.assertFalse(EventTicket.objects.exists())

    def test_create_event_duration_out_of_range(self):
        response = self.client.post(reverse('events:event-create'), self.event_data(duration=1e30), format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['kind'], 'invalid-argument')
        self.assertIn('duration', response.data)
        self.assertFalse(Event.objects.exists())

    def test_create_event_capacity_out_of_range(self):
        response = self.client.post(
            reverse('events:event-create'), self.event_data(max_attendees=1e30), format='json'
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('max_attendees', response.data)
