from unittest.mock import Mock

import requests
from django.test import SimpleTestCase
from django.test import override_settings

from apps.shared.exceptions import LinkGenerationError
from apps.shared.links.dynamic_link_service import DynamicLinkService
from apps.shared.links.dynamic_link_service import shorten_description


@override_settings(
    DYNAMIC_LINKS_DOMAIN_PREFIX='https://example.page.link',
    DEEP_LINK_BASE_URL='https://example.com/',
    IOS_BUNDLE_ID='com.example.app',
    IOS_APP_STORE_ID='123456',
)
class DynamicLinkServiceTest(SimpleTestCase):
    def setUp(self):
        self.response = Mock()
        self.response.json.return_value = {'shortLink': 'https://example.page.link/abc'}
        self.session = Mock()
        self.session.post.return_value = self.response
        self.service = DynamicLinkService(
            session=self.session, api_url='https://links.example.com/v1/shortLinks', api_key='key-1', timeout=3
        )

    def test_event_link(self):
        link = self.service.generate_event_link('event-1', 'Open Day', 'x' * 40)

        self.assertEqual(link, 'https://example.page.link/abc')
        self.session.post.assert_called_once()
        args, kwargs = self.session.post.call_args
        self.assertEqual(args, ('https://links.example.com/v1/shortLinks',))
        self.assertEqual(kwargs['params'], {'key': 'key-1'})
        self.assertEqual(kwargs['timeout'], 3)

        info = kwargs['json']['dynamicLinkInfo']
        self.assertEqual(info['domainUriPrefix'], 'https://example.page.link')
        self.assertEqual(info['link'], 'https://example.com/?openevent_id=event-1')
        self.assertEqual(info['iosInfo'], {'iosBundleId': 'com.example.app', 'iosAppStoreId': '123456'})
        self.assertTrue(info['navigationInfo']['enableForcedRedirect'])
        self.assertEqual(info['socialMetaTagInfo'], {'socialTitle': 'Open Day', 'socialDescription': 'x' * 32 + '...'})

    def test_ticket_link(self):
        self.service.generate_ticket_link('ticket-1')

        payload = self.session.post.call_args.kwargs['json']
        self.assertEqual(
            payload,
            {
                'dynamicLinkInfo': {
                    'domainUriPrefix': 'https://example.page.link',
                    'link': 'https://example.com/?verifyticket_id=ticket-1',
                }
            },
        )

    def test_request_failure(self):
        self.session.post.side_effect = requests.ConnectionError('unreachable')

        with self.assertRaises(LinkGenerationError):
            self.service.generate_event_link('event-1')

    def test_http_error(self):
        self.response.raise_for_status.side_effect = requests.HTTPError('400 Client Error')

        with self.assertRaises(LinkGenerationError):
            self.service.generate_ticket_link('ticket-1')

    def test_missing_short_link(self):
        self.response.json.return_value = {'warning': []}

        with self.assertRaises(LinkGenerationError):
            self.service.generate_event_link('event-1')

    def test_short_description_kept(self):
        self.assertEqual(shorten_description('x' * 32), 'x' * 32)
        self.assertEqual(shorten_description(''), '')
