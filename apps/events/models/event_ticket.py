from django.db import models
from django.utils.translation import gettext_lazy as _

from apps.shared.base.models import DocumentModel


class EventTicket(DocumentModel):
    """Ticket type of an event; every event has one ``default`` ticket"""

    DEFAULT_TYPE = 'default'

    class Status(models.TextChoices):
        VALID = 'valid', _('Valid')
        INVALID = 'invalid', _('Invalid')

    event_id = models.CharField(_('Event ID'), max_length=64, db_index=True)
    type = models.CharField(_('Type'), max_length=32, default=DEFAULT_TYPE)
    max_attendees = models.IntegerField(_('Max Attendees'), default=-1)
    attendees_n = models.PositiveIntegerField(_('Attendees'), default=0)
    status = models.CharField(_('Status'), max_length=16, choices=Status.choices, default=Status.VALID)
    link = models.CharField(_('Verification Link'), max_length=512, blank=True)

    class Meta:
        db_table = 'event_tickets'
        verbose_name = _('Event Ticket')
        verbose_name_plural = _('Event Tickets')

    def __str__(self):
        return f'{self.type} ticket {self.id} of event {self.event_id}'
