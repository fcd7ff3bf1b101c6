"""
Helpers shared by the events test modules.
"""

from unittest.mock import Mock

from apps.accounts.tests.factories import AccountFactory
from apps.accounts.tests.factories import UserProfileFactory
from apps.communities.tests.factories import CommunityFactory
from apps.shared.links.dynamic_link_service import DynamicLinkService

EVENT_SHORT_LINK = 'https://example.page.link/event'
TICKET_SHORT_LINK = 'https://example.page.link/ticket'

# [year, month (0-based), day, hour, minute, second, time_shift]
EVENT_DATE = [2030, 0, 15, 18, 30, 0, 10800]


def make_link_service():
    link_service = Mock(spec=DynamicLinkService)
    link_service.generate_event_link.return_value = EVENT_SHORT_LINK
    link_service.generate_ticket_link.return_value = TICKET_SHORT_LINK
    return link_service


class EventTestMixin:
    """Account with a profile, a community it fully controls and a stub link service"""

    def setUp(self):
        super().setUp()
        self.account = AccountFactory(display_name='Ivan Petrov')
        self.community = CommunityFactory(display_name='Debate Club')
        self.profile = UserProfileFactory(
            id=self.account.id,
            authorities={'self': 0, self.community.id: 0},
        )
        self.other_account = AccountFactory()
        self.other_profile = UserProfileFactory(id=self.other_account.id)
        self.link_service = make_link_service()

    def event_data(self, **overrides):
        data = {'authority_id': self.community.id, 'title': 'Spring Debates', 'date': list(EVENT_DATE)}
        data.update(overrides)
        return data
