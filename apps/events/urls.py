from django.urls import path

from apps.events.views import EventAttendeesAPIView
from apps.events.views import EventCreateAPIView
from apps.events.views import EventDeleteAPIView
from apps.events.views import EventsByAuthorityAPIView
from apps.events.views import TicketVerifyAPIView

app_name = 'events'


urlpatterns = [
    path('create/', EventCreateAPIView.as_view(), name='event-create'),
    path('delete/', EventDeleteAPIView.as_view(), name='event-delete'),
    path('by-authority/', EventsByAuthorityAPIView.as_view(), name='events-by-authority'),
    path('attendees/', EventAttendeesAPIView.as_view(), name='event-attendees'),
    path('verify-ticket/', TicketVerifyAPIView.as_view(), name='verify-ticket'),
]
