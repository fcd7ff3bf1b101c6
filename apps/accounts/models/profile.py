"""
User profile document and its per-user collections.

Rows reference the profile and events by id columns: cleanup of these rows
is done by the lifecycle triggers, not by cascading foreign keys.
"""

from django.db import models
from django.utils.translation import gettext_lazy as _

from apps.shared.base.models import BaseModel
from apps.shared.base.models import DocumentModel

SELF_AUTHORITY = 'self'
FULL_AUTHORITY_LEVEL = 0


def default_authorities() -> dict:
    return {SELF_AUTHORITY: FULL_AUTHORITY_LEVEL}


def default_subscriptions() -> dict:
    return {'configured': False, 'communities': []}


class UserProfile(BaseModel):
    """Application-level user document, keyed by the account uid"""

    id = models.CharField(primary_key=True, max_length=64, editable=False)
    authorities = models.JSONField(
        _('Authorities'),
        default=default_authorities,
        help_text=_('Authority id ("self" or community id) to level; 0 grants full control'),
    )
    subscriptions = models.JSONField(_('Subscriptions'), default=default_subscriptions)
    language = models.CharField(_('Language'), max_length=16, default='en')
    email_active = models.BooleanField(_('Email Active'), default=True)
    user_rating = models.IntegerField(_('User Rating'), default=0)
    cache_utc_sec = models.BigIntegerField(_('Cache Timestamp (UTC sec)'), default=0)
    messaging_tokens = models.JSONField(_('Messaging Tokens'), default=dict, blank=True)

    class Meta:
        db_table = 'users'
        verbose_name = _('User Profile')
        verbose_name_plural = _('User Profiles')

    def __str__(self):
        return f'Profile {self.id}'


class UserEventLink(BaseModel):
    """Membership of an event in a user's attending or saved set"""

    class Kind(models.TextChoices):
        ATTENDING = 'attending', _('Attending')
        SAVED = 'saved', _('Saved')

    user_id = models.CharField(max_length=64, db_index=True)
    event_id = models.CharField(max_length=64, db_index=True)
    kind = models.CharField(max_length=16, choices=Kind.choices)

    class Meta:
        db_table = 'user_event_links'
        constraints = [
            models.UniqueConstraint(fields=['user_id', 'event_id', 'kind'], name='unique_user_event_link'),
        ]
        indexes = [
            models.Index(fields=['event_id', 'kind'], name='user_event_link_event_kind'),
        ]

    def __str__(self):
        return f'{self.user_id} {self.kind} {self.event_id}'


class UserTicket(DocumentModel):
    class Status(models.TextChoices):
        VALID = 'valid', _('Valid')
        INVALID = 'invalid', _('Invalid')

    user_id = models.CharField(max_length=64, db_index=True)
    event_id = models.CharField(max_length=64, db_index=True)
    ticket_id = models.CharField(max_length=64, blank=True)
    status = models.CharField(max_length=16, choices=Status.choices, default=Status.VALID)

    class Meta:
        db_table = 'user_tickets'

    def __str__(self):
        return f'Ticket {self.ticket_id} of {self.user_id} for {self.event_id} ({self.status})'


class UserCategory(DocumentModel):
    user_id = models.CharField(max_length=64, db_index=True)
    category_id = models.CharField(max_length=64)

    class Meta:
        db_table = 'user_categories'
        verbose_name_plural = _('User Categories')


class Notification(DocumentModel):
    user_id = models.CharField(max_length=64, db_index=True)
    payload = models.JSONField(default=dict)
    utc_sec = models.BigIntegerField()

    class Meta:
        db_table = 'notifications'
        ordering = ['utc_sec']

    def __str__(self):
        return f'Notification for {self.user_id} at {self.utc_sec}'
