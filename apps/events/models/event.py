from django.db import models
from django.utils.translation import gettext_lazy as _

from apps.shared.base.models import DocumentModel

TEMPLATE_IMAGE = 'resized-1200_template.jpg'


class EventQuerySet(models.QuerySet):
    def for_creator(self, creator_id):
        """Events published by a user or community"""
        return self.filter(creator_id=creator_id)

    def future(self):
        return self.filter(time_state=Event.TimeState.FUTURE)

    def finished_before(self, utc_sec: int):
        """Future events whose end time has already passed"""
        return self.future().filter(utc_sec_end__isnull=False, utc_sec_end__lt=utc_sec)


class EventManager(models.Manager):
    def get_queryset(self):
        return EventQuerySet(self.model, using=self._db)

    def for_creator(self, creator_id):
        return self.get_queryset().for_creator(creator_id)

    def finished_before(self, utc_sec: int):
        return self.get_queryset().finished_before(utc_sec)


class Event(DocumentModel):
    """
    Clean "dumb" Event model - only defines data structure.
    Merge and scheduling rules live in EventService.
    """

    class TimeState(models.TextChoices):
        FUTURE = 'future', _('Future')
        PAST = 'past', _('Past')

    # Creator of record: a user id (user_generated) or a community id
    creator_id = models.CharField(_('Creator ID'), max_length=64, db_index=True, blank=True)
    creator_name = models.CharField(_('Creator Name'), max_length=255, blank=True)
    user_generated = models.BooleanField(_('User Generated'), default=False)

    title = models.CharField(_('Title'), max_length=255, blank=True)
    description = models.TextField(_('Description'), blank=True)
    categories = models.JSONField(_('Category IDs'), default=list, blank=True)
    categories_prefetched = models.JSONField(_('Category Names'), default=list, blank=True)
    images = models.JSONField(_('Images'), default=list, blank=True)
    main_image = models.CharField(_('Main Image'), max_length=255, blank=True)
    private = models.BooleanField(_('Private'), default=False)
    country = models.CharField(_('Country'), max_length=100, blank=True)
    city = models.CharField(_('City'), max_length=100, blank=True)
    external_url = models.CharField(_('External URL'), max_length=2048, blank=True)
    link = models.CharField(_('Short Link'), max_length=512, blank=True)

    # Scheduling
    date = models.JSONField(_('Local Date'), null=True, blank=True)
    date_str = models.CharField(_('Date String'), max_length=16, blank=True)
    duration = models.PositiveIntegerField(_('Duration (sec)'), default=0)
    utc_sec_start = models.BigIntegerField(_('Start (UTC sec)'), null=True, blank=True)
    utc_sec_end = models.BigIntegerField(_('End (UTC sec)'), null=True, blank=True, db_index=True)
    time_state = models.CharField(
        _('Time State'), max_length=16, choices=TimeState.choices, default=TimeState.FUTURE, db_index=True
    )
    time_valid = models.BooleanField(_('Time Valid'), default=True)

    latitude = models.FloatField(_('Latitude'), null=True, blank=True)
    longitude = models.FloatField(_('Longitude'), null=True, blank=True)

    # Capacity
    max_attendees = models.IntegerField(_('Max Attendees'), default=-1, help_text=_('-1 means unlimited'))
    attending = models.PositiveIntegerField(_('Attending'), default=0)
    sold_out = models.BooleanField(_('Sold Out'), default=False)

    rating = models.FloatField(_('Rating'), default=0)
    rating_index = models.IntegerField(_('Rating Index'), default=1)

    default_ticket = models.CharField(_('Default Ticket ID'), max_length=64, blank=True)

    objects = EventManager()

    class Meta:
        db_table = 'events'
        verbose_name = _('Event')
        verbose_name_plural = _('Events')
        ordering = ['-created_at']

    def __str__(self):
        return f'{self.title or self.id} ({self.date_str or "no date"})'

    @property
    def is_past(self) -> bool:
        return self.time_state == self.TimeState.PAST
