import logging

from drf_spectacular.utils import extend_schema
from drf_spectacular.utils import inline_serializer
from rest_framework.permissions import IsAuthenticated

from apps.events.serializers import AttendeeSerializer
from apps.events.serializers import AuthorityIdSerializer
from apps.events.serializers import EventCreatedResponseSerializer
from apps.events.serializers import EventCreateSerializer
from apps.events.serializers import EventIdSerializer
from apps.events.serializers import EventSummarySerializer
from apps.events.serializers import TicketStatusSerializer
from apps.events.serializers import TicketVerificationSerializer
from apps.shared.base.base_api_view import BaseAPIView
from apps.shared.base.base_api_view import ok_envelope
from apps.shared.container import get_event_service
from apps.shared.container import get_ticket_service

logger = logging.getLogger(__name__)


class BaseEventAPIView(BaseAPIView):
    """Base view for event operations"""

    permission_classes = [IsAuthenticated]

    _event_service = None

    def get_service(self):
        if self._event_service is None:
            self._event_service = get_event_service()
        return self._event_service


@extend_schema(tags=['Events'])
class EventCreateAPIView(BaseEventAPIView):
    """Create or update an event"""

    serializer_class = EventCreateSerializer

    @extend_schema(
        summary='Create or update an event',
        request=EventCreateSerializer,
        responses={200: ok_envelope('EventCreatedEnvelope', EventCreatedResponseSerializer())},
    )
    def post(self, request):
        serializer = EventCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = self.get_service().create_or_update_event(
            user_id=request.user.id,
            data=serializer.validated_data,
            trusted=request.user.is_staff,
        )
        return self.ok(result)


@extend_schema(tags=['Events'])
class EventDeleteAPIView(BaseEventAPIView):
    serializer_class = EventIdSerializer

    @extend_schema(
        summary='Delete an event',
        request=EventIdSerializer,
        responses={200: ok_envelope('EventDeletedEnvelope')},
    )
    def post(self, request):
        serializer = EventIdSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        self.get_service().delete_event(request.user.id, serializer.validated_data['event_id'])
        return self.ok()


@extend_schema(tags=['Events'])
class EventsByAuthorityAPIView(BaseEventAPIView):
    """Titles and ids of events published by a user or community"""

    serializer_class = AuthorityIdSerializer

    @extend_schema(
        summary='List events by organizer',
        request=AuthorityIdSerializer,
        responses={
            200: ok_envelope(
                'EventsByAuthorityEnvelope',
                inline_serializer(name='EventSummaryList', fields={'events': EventSummarySerializer(many=True)}),
            )
        },
    )
    def post(self, request):
        serializer = AuthorityIdSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        events = self.get_service().fetch_events_by_authority(serializer.validated_data['authority_id'])
        return self.ok({'events': events})


@extend_schema(tags=['Events'])
class EventAttendeesAPIView(BaseEventAPIView):
    serializer_class = EventIdSerializer

    @extend_schema(
        summary='List event attendees',
        request=EventIdSerializer,
        responses={
            200: ok_envelope(
                'EventAttendeesEnvelope',
                inline_serializer(name='AttendeeList', fields={'list': AttendeeSerializer(many=True)}),
            )
        },
    )
    def post(self, request):
        serializer = EventIdSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        attendees = self.get_service().fetch_event_attendees(request.user.id, serializer.validated_data['event_id'])
        return self.ok({'list': attendees})


@extend_schema(tags=['Events'])
class TicketVerifyAPIView(BaseEventAPIView):
    """Check whether a user holds a valid ticket for an event"""

    serializer_class = TicketVerificationSerializer

    def get_service(self):
        return get_ticket_service()

    @extend_schema(
        summary='Verify a ticket',
        request=TicketVerificationSerializer,
        responses={200: ok_envelope('TicketStatusEnvelope', TicketStatusSerializer())},
    )
    def post(self, request):
        serializer = TicketVerificationSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = self.get_service().verify_ticket(
            provoker_id=request.user.id,
            user_id=serializer.validated_data['user_id'],
            event_id=serializer.validated_data['event_id'],
        )
        return self.ok(result)
