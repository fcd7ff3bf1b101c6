from apps.events.views.event_views import BaseEventAPIView
from apps.events.views.event_views import EventAttendeesAPIView
from apps.events.views.event_views import EventCreateAPIView
from apps.events.views.event_views import EventDeleteAPIView
from apps.events.views.event_views import EventsByAuthorityAPIView
from apps.events.views.event_views import TicketVerifyAPIView

__all__ = [
    'BaseEventAPIView',
    'EventAttendeesAPIView',
    'EventCreateAPIView',
    'EventDeleteAPIView',
    'EventsByAuthorityAPIView',
    'TicketVerifyAPIView',
]
