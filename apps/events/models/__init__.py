from .event import Event
from .event_ticket import EventTicket

__all__ = ['Event', 'EventTicket']
