from django.test import SimpleTestCase
from drf_spectacular.generators import SchemaGenerator


class ApiSchemaTest(SimpleTestCase):
    """Callable responses are documented inside the success envelope"""

    @classmethod
    def setUpClass(cls):
        super().setUpClass()
        cls.schema = SchemaGenerator().get_schema(request=None, public=True)
        cls.components = cls.schema['components']['schemas']

    def _response_ref(self, path):
        content = self.schema['paths'][path]['post']['responses']['200']['content']
        return content['application/json']['schema']['$ref']

    def test_event_created_envelope(self):
        self.assertEqual(self._response_ref('/api/v1/events/create/'), '#/components/schemas/EventCreatedEnvelope')

        envelope = self.components['EventCreatedEnvelope']['properties']
        self.assertIn('status', envelope)
        self.assertEqual(envelope['response']['$ref'], '#/components/schemas/EventCreatedResponse')
        self.assertEqual(set(self.components['EventCreatedResponse']['properties']), {'link', 'id'})

    def test_list_payloads(self):
        self.assertEqual(set(self.components['EventSummary']['properties']), {'title', 'id'})
        self.assertEqual(set(self.components['Attendee']['properties']), {'display_name', 'email'})
        self.assertIn('list', self.components['AttendeeList']['properties'])
        self.assertIn('events', self.components['EventSummaryList']['properties'])

    def test_user_payloads(self):
        self.assertEqual(self._response_ref('/api/v1/users/me/'), '#/components/schemas/UserDataEnvelope')
        self.assertIn('cacheValid', self.components['CacheInfo']['properties'])
        self.assertEqual(
            set(self.components['UserProfileResponse']['properties']), {'displayName', 'email', 'disabled'}
        )
        self.assertEqual(set(self.components['TicketStatus']['properties']), {'ticket_exists', 'ticket_valid'})
