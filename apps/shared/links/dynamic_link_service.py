"""
Short link generation through the dynamic links REST API.

Event links open the event in the mobile app; ticket links open the ticket
verification screen.
"""

import logging
from typing import Any

import requests
from django.conf import settings

from apps.shared.exceptions.exception import LinkGenerationError

logger = logging.getLogger(__name__)

DEFAULT_LINK_TITLE = 'HSE connect'
SOCIAL_DESCRIPTION_LIMIT = 32


def shorten_description(description: str) -> str:
    if len(description) > SOCIAL_DESCRIPTION_LIMIT:
        return description[:SOCIAL_DESCRIPTION_LIMIT] + '...'
    return description


class DynamicLinkService:
    """Creates short links for events and tickets"""

    def __init__(self, session=None, api_url: str = None, api_key: str = None, timeout: int = None):
        self.session = session or requests.Session()
        self.api_url = api_url or settings.DYNAMIC_LINKS_API_URL
        self.api_key = api_key if api_key is not None else settings.DYNAMIC_LINKS_API_KEY
        self.timeout = timeout or settings.LINK_REQUEST_TIMEOUT

    def _deep_link(self, query: str, object_id: str) -> str:
        base_url = settings.DEEP_LINK_BASE_URL.rstrip('/')
        return f'{base_url}/?{query}={object_id}'

    def build_event_payload(self, event_id: str, title: str, description: str) -> dict[str, Any]:
        return {
            'dynamicLinkInfo': {
                'domainUriPrefix': settings.DYNAMIC_LINKS_DOMAIN_PREFIX,
                'link': self._deep_link('openevent_id', event_id),
                'iosInfo': {
                    'iosBundleId': settings.IOS_BUNDLE_ID,
                    'iosAppStoreId': settings.IOS_APP_STORE_ID,
                },
                'navigationInfo': {
                    'enableForcedRedirect': True,
                },
                'socialMetaTagInfo': {
                    'socialTitle': title,
                    'socialDescription': shorten_description(description),
                },
            }
        }

    def build_ticket_payload(self, ticket_id: str) -> dict[str, Any]:
        return {
            'dynamicLinkInfo': {
                'domainUriPrefix': settings.DYNAMIC_LINKS_DOMAIN_PREFIX,
                'link': self._deep_link('verifyticket_id', ticket_id),
            }
        }

    def generate_event_link(self, event_id: str, title: str = DEFAULT_LINK_TITLE, description: str = '') -> str:
        return self._create_short_link(self.build_event_payload(str(event_id), title, description or ''))

    def generate_ticket_link(self, ticket_id: str) -> str:
        return self._create_short_link(self.build_ticket_payload(str(ticket_id)))

    def _create_short_link(self, payload: dict[str, Any]) -> str:
        link = payload['dynamicLinkInfo']['link']
        try:
            response = self.session.post(
                self.api_url,
                params={'key': self.api_key},
                json=payload,
                timeout=self.timeout,
            )
            response.raise_for_status()
            body = response.json()
        except (requests.RequestException, ValueError) as e:
            logger.error(f'Short link request failed for {link}: {e}')
            raise LinkGenerationError(context={'link': link, 'original_error': str(e)})

        short_link = body.get('shortLink') if isinstance(body, dict) else None
        if not short_link:
            logger.error(f'Short link API returned no link for {link}: {body}')
            raise LinkGenerationError(context={'link': link})

        logger.debug(f'Generated short link {short_link} for {link}')
        return short_link
