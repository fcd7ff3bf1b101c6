import factory

from apps.events.models import Event
from apps.events.models import EventTicket
from apps.events.models.event import TEMPLATE_IMAGE
from apps.shared.base.models import generate_document_id

# 2030-01-15 18:30:00 UTC
FUTURE_START_SEC = 1894732200


class EventFactory(factory.django.DjangoModelFactory):
    """Factory for future community events"""

    class Meta:
        model = Event

    creator_id = factory.LazyFunction(generate_document_id)
    creator_name = factory.Faker('company')
    user_generated = False
    title = factory.Faker('sentence', nb_words=3)
    description = factory.Faker('paragraph', nb_sentences=2)
    images = factory.LazyFunction(lambda: [TEMPLATE_IMAGE])
    main_image = TEMPLATE_IMAGE
    country = 'russia'
    city = 'moscow'
    link = 'https://example.page.link/event'
    date = factory.LazyFunction(lambda: {'year': 2030, 'month': 0, 'day': 15, 'hour': 18, 'minute': 30, 'second': 0})
    date_str = '2030-1-15'
    duration = 3600
    utc_sec_start = FUTURE_START_SEC
    utc_sec_end = FUTURE_START_SEC + 3600
    time_state = Event.TimeState.FUTURE


class UserEventFactory(EventFactory):
    """Event published by a user as ``self``"""

    user_generated = True


class PastEventFactory(EventFactory):
    time_state = Event.TimeState.PAST


class EventTicketFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = EventTicket

    event_id = factory.LazyFunction(generate_document_id)
    type = EventTicket.DEFAULT_TYPE
    max_attendees = -1
    status = EventTicket.Status.VALID
    link = 'https://example.page.link/ticket'
