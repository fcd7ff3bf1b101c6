import logging
import math
from datetime import datetime
from datetime import timezone as dt_timezone
from typing import Any

from django.conf import settings
from django.db import transaction

from apps.accounts.dal.user_dal import UserDAL
from apps.accounts.models.account import ANONYMOUS_DISPLAY_NAME
from apps.accounts.models.profile import SELF_AUTHORITY
from apps.accounts.services.authority_service import can_manage_event
from apps.accounts.services.authority_service import has_full_authority
from apps.accounts.services.authority_service import shares_authority
from apps.communities.dal.community_dal import CommunityDAL
from apps.events.dal.event_dal import EventDAL
from apps.events.exceptions import AuthorityNotSetError
from apps.events.exceptions import DateRequiredError
from apps.events.exceptions import EventNotFoundError
from apps.events.exceptions import EventPermissionError
from apps.events.exceptions import EventPreconditionError
from apps.events.exceptions import ForcedUpdateTargetMissingError
from apps.events.exceptions import InvalidEventDateError
from apps.events.exceptions import OrganizerNotFoundError
from apps.events.exceptions import PublishPermissionError
from apps.events.exceptions import TooManyImagesError
from apps.events.models import Event
from apps.events.models.event import TEMPLATE_IMAGE
from apps.events.services.ticket_service import TicketService
from apps.shared.base.models import generate_document_id
from apps.shared.links.dynamic_link_service import DynamicLinkService
from apps.shared.utils.general import utc_now_sec

logger = logging.getLogger(__name__)

RESIZED_IMAGE_PREFIX = 'resized-1200_'
DATE_FIELDS = ('year', 'month', 'day', 'hour', 'minute', 'second')


def new_event_defaults() -> dict[str, Any]:
    """Field values every newly created event starts from"""
    return {
        'title': '',
        'description': '',
        'categories': [],
        'private': False,
        'images': [TEMPLATE_IMAGE],
        'main_image': TEMPLATE_IMAGE,
        'link': '',
        'duration': 0,
        'country': settings.EVENT_DEFAULT_COUNTRY,
        'city': settings.EVENT_DEFAULT_CITY,
        'attending': 0,
        'max_attendees': -1,
        'sold_out': False,
        'time_state': Event.TimeState.FUTURE,
        'time_valid': True,
        'rating': 0,
        'rating_index': 1,
        'external_url': '',
    }


def _as_int(value, field: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise InvalidEventDateError(f'"{field}" must be a number.')
    if not math.isfinite(value) or int(value) != value:
        raise InvalidEventDateError(f'"{field}" must be a whole number.')
    return int(value)


def parse_event_date(date) -> tuple[dict[str, int], float]:
    """
    Split a client date into calendar fields and the UTC offset.

    Accepts ``[year, month, day, hour, minute, second, time_shift]`` where
    the last element is always the offset, or a dict with the same keys.
    Month is zero-based; ``time_shift`` is the local UTC offset in seconds.
    """
    if isinstance(date, list | tuple):
        if len(date) < 4:
            raise InvalidEventDateError('Expected at least year, month, day and time shift.')
        raw_fields = dict(zip(DATE_FIELDS, date[:-1], strict=False))
        time_shift = date[-1]
    elif isinstance(date, dict):
        raw_fields = {key: date.get(key) for key in DATE_FIELDS}
        time_shift = date.get('time_shift')
    else:
        raise InvalidEventDateError('Expected a list or an object.')

    fields = {}
    for key in DATE_FIELDS:
        value = raw_fields.get(key)
        if value is None:
            if key in ('year', 'month', 'day'):
                raise InvalidEventDateError(f'"{key}" is required.')
            value = 0
        fields[key] = _as_int(value, key)

    if time_shift is None:
        time_shift = 0
    if isinstance(time_shift, bool) or not isinstance(time_shift, int | float) or not math.isfinite(time_shift):
        raise InvalidEventDateError('"time_shift" must be a number.')

    return fields, time_shift


def local_epoch_seconds(fields: dict[str, int]) -> int:
    try:
        local = datetime(
            fields['year'],
            fields['month'] + 1,
            fields['day'],
            fields['hour'],
            fields['minute'],
            fields['second'],
            tzinfo=dt_timezone.utc,
        )
    except (ValueError, OverflowError) as e:
        raise InvalidEventDateError(str(e).capitalize() + '.')
    return int(local.timestamp())


class EventService:
    """Service for event business logic operations"""

    def __init__(
        self,
        dal=None,
        user_dal=None,
        community_dal=None,
        ticket_service=None,
        link_service=None,
    ):
        self.dal = dal or EventDAL()
        self.user_dal = user_dal or UserDAL()
        self.community_dal = community_dal or CommunityDAL()
        self._link_service = link_service
        self.ticket_service = ticket_service or TicketService(
            event_dal=self.dal, user_dal=self.user_dal, link_service=link_service
        )

    @property
    def link_service(self) -> DynamicLinkService:
        if self._link_service is None:
            self._link_service = DynamicLinkService()
        return self._link_service

    # =========================================================================
    # Create / update
    # =========================================================================

    @transaction.atomic
    def create_or_update_event(self, user_id: str, data: dict[str, Any], trusted: bool = False) -> dict[str, str]:
        """
        Create an event, or update the one named by ``force_update_id``.

        Runs in one transaction holding row locks on the event and on the
        acting user's profile.

        Returns:
            dict with the event ``id`` and its short ``link``
        """
        force_update_id = data.get('force_update_id')
        if not isinstance(force_update_id, str) or not force_update_id:
            force_update_id = None

        profile = self.user_dal.get_profile_for_update(user_id) if user_id else None
        event = None
        if force_update_id:
            event = self.dal.get_event_for_update(force_update_id)
            if event is None:
                raise ForcedUpdateTargetMissingError(context={'event_id': force_update_id})
        is_new = event is None

        authorities = (profile.authorities if profile else None) or {}
        authority_id = data.get('authority_id') or None
        if authority_id is not None and authority_id == user_id:
            authority_id = SELF_AUTHORITY

        self._check_permission(user_id, authorities, event, authority_id, trusted)

        event_id = event.id if event else generate_document_id()
        update = {}
        update.update(self._creator_data(user_id, authority_id))
        update.update(self._merge_options(event, data))
        update.update(self._categories(data.get('categories')))
        update.update(self._location(data.get('location')))
        update.update(self._schedule(event, data.get('date'), data.get('duration')))

        ticket_target = event or Event(id=event_id)
        default_ticket = self.ticket_service.ensure_default_ticket(
            ticket_target, is_new, update.get('max_attendees')
        )
        if is_new:
            update['default_ticket'] = default_ticket

        title = update.get('title') or (event.title if event else '') or ''
        description = update.get('description') or (event.description if event else '') or ''
        update['link'] = self.link_service.generate_event_link(event_id, title, description)

        if is_new:
            event = self.dal.create_event({'id': event_id, **update})
            logger.info(f'Event {event_id} created by {user_id} as {update.get("creator_id")}')
        else:
            event = self.dal.update_event(event, update)
            logger.info(f'Event {event_id} updated by {user_id}')

        return {'link': event.link, 'id': event.id}

    def _check_permission(self, user_id, authorities, event, authority_id, trusted: bool) -> None:
        if event is None and authority_id is None:
            raise AuthorityNotSetError()
        if trusted:
            return

        if event is not None:
            if not can_manage_event(authorities, user_id, event):
                raise EventPermissionError(action='update', event_id=event.id)
            if authority_id is not None and not has_full_authority(authorities, authority_id):
                raise EventPermissionError(action='reassign', event_id=event.id)
        elif not has_full_authority(authorities, authority_id):
            raise PublishPermissionError(authority_id)

    def _creator_data(self, user_id: str, authority_id: str | None) -> dict[str, Any]:
        if not authority_id:
            return {}

        if authority_id == SELF_AUTHORITY:
            account = self.user_dal.get_account_or_none(user_id) if user_id else None
            return {
                'user_generated': True,
                'creator_name': account.public_name if account else ANONYMOUS_DISPLAY_NAME,
                'creator_id': user_id,
            }

        community = self.community_dal.get_community_or_none(authority_id)
        if community is None:
            raise OrganizerNotFoundError(context={'authority_id': authority_id})
        return {
            'user_generated': False,
            'creator_name': community.display_name,
            'creator_id': authority_id,
        }

    def _merge_options(self, event: Event | None, data: dict[str, Any]) -> dict[str, Any]:
        update = new_event_defaults() if event is None else {}

        for field in ('title', 'description', 'categories', 'private', 'external_url'):
            if data.get(field):
                update[field] = data[field]

        images = data.get('images')
        if images:
            if len(images) > settings.EVENT_MAX_IMAGES:
                raise TooManyImagesError(limit=settings.EVENT_MAX_IMAGES)
            update['images'] = [RESIZED_IMAGE_PREFIX + name for name in images]

        main_image = data.get('main_image')
        if main_image and isinstance(main_image, str):
            update['main_image'] = RESIZED_IMAGE_PREFIX + main_image
        elif images and (event is None or not event.main_image):
            update['main_image'] = update['images'][0]

        if data.get('country'):
            update['country'] = data['country'].lower()
        if data.get('city'):
            update['city'] = data['city'].lower()

        max_attendees = data.get('max_attendees')
        if max_attendees:
            attending = event.attending if event else 0
            if max_attendees == -1 or max_attendees > (attending or 0):
                update['max_attendees'] = math.floor(max_attendees)

        return update

    def _categories(self, categories: list[str] | None) -> dict[str, Any]:
        if not categories:
            return {}
        names = self.community_dal.get_category_names(categories)
        return {'categories_prefetched': [names.get(category_id, category_id) for category_id in categories]}

    @staticmethod
    def _location(location) -> dict[str, float]:
        if not location:
            return {}
        try:
            latitude, longitude = (float(value) for value in location[:2])
        except (TypeError, ValueError) as e:
            raise EventPreconditionError('Location must be [latitude, longitude].', error_code='invalid_location') from e
        if not (math.isfinite(latitude) and math.isfinite(longitude)):
            raise EventPreconditionError('Location must be [latitude, longitude].', error_code='invalid_location')
        return {'latitude': latitude, 'longitude': longitude}

    @staticmethod
    def _schedule(event: Event | None, date, duration) -> dict[str, Any]:
        update = {}
        if duration and duration >= 0:
            update['duration'] = int(duration)

        if date:
            fields, time_shift = parse_event_date(date)
            utc_sec_start = round(local_epoch_seconds(fields) - time_shift)

            update['date_str'] = f"{fields['year']}-{fields['month'] + 1}-{fields['day']}"
            update['utc_sec_start'] = utc_sec_start
            update['date'] = fields

            if 'duration' in update:
                update['utc_sec_end'] = utc_sec_start + update['duration']
            elif event is not None:
                update['utc_sec_end'] = utc_sec_start + (event.duration or 0)
            else:
                update['utc_sec_end'] = utc_sec_start
        elif event is None:
            raise DateRequiredError()
        elif 'duration' in update:
            if event.utc_sec_start is None:
                logger.warning(f'Event {event.id} has no start time; end time not recomputed')
            else:
                update['utc_sec_end'] = event.utc_sec_start + update['duration']

        return update

    # =========================================================================
    # Delete / queries
    # =========================================================================

    @transaction.atomic
    def delete_event(self, user_id: str, event_id: str) -> bool:
        event = self.dal.get_event_for_update(event_id)
        if event is None:
            raise EventNotFoundError(event_id)

        profile = self.user_dal.get_profile_or_none(user_id)
        authorities = profile.authorities if profile else {}
        if not can_manage_event(authorities, user_id, event):
            raise EventPermissionError(action='delete', event_id=event_id)

        self.dal.delete_event(event)
        logger.info(f'Event {event_id} deleted by {user_id}')
        return True

    def fetch_events_by_authority(self, authority_id: str) -> list[dict[str, str]]:
        return [{'title': event.title, 'id': event.id} for event in self.dal.get_events_by_creator(authority_id)]

    def fetch_event_attendees(self, user_id: str, event_id: str) -> list[dict[str, str]]:
        event = self.dal.get_event_or_none(event_id)
        if event is None:
            raise EventNotFoundError(event_id)

        profile = self.user_dal.get_profile_or_none(user_id)
        authorities = profile.authorities if profile else {}
        if not shares_authority(authorities, user_id, event.creator_id):
            raise EventPermissionError(action='list_attendees', event_id=event_id)

        return [
            {'display_name': account.public_name, 'email': account.email or ''}
            for account in self.user_dal.get_attendee_accounts(event_id)
        ]

    # =========================================================================
    # Maintenance
    # =========================================================================

    def expire_finished_events(self, now_sec: int | None = None) -> int:
        """Move every finished future event to ``past``"""
        now_sec = utc_now_sec() if now_sec is None else now_sec
        expired = 0
        for event_id in self.dal.get_finished_events(now_sec).values_list('id', flat=True):
            with transaction.atomic():
                event = self.dal.get_event_for_update(event_id)
                if event is None or event.is_past or event.utc_sec_end is None or event.utc_sec_end >= now_sec:
                    continue
                self.dal.update_event(event, {'time_state': Event.TimeState.PAST})
                expired += 1

        if expired:
            logger.info(f'Expired {expired} finished events')
        return expired
