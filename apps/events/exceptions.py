"""
Domain-specific business exceptions for Events app.

- These are BUSINESS exceptions, not HTTP exceptions
- They represent domain logic failures
- HTTP mapping happens in the global exception handler
- Inherits from core business exception hierarchy
"""

from apps.shared.exceptions import BusinessRuleViolation
from apps.shared.exceptions import PermissionError
from apps.shared.exceptions import ResourceNotFoundError

# =============================================================================
# Event Domain Exceptions
# =============================================================================


class EventNotFoundError(ResourceNotFoundError):
    """Raised when requested event does not exist."""

    def __init__(self, event_identifier: str = None, **kwargs):
        message = 'Event not found'
        if event_identifier:
            message = f"Event '{event_identifier}' not found"
        super().__init__(message, error_code='event_not_found', **kwargs)


class EventPermissionError(PermissionError):
    """Raised when user lacks permission to access/modify event."""

    def __init__(self, action: str = None, event_id: str = None, **kwargs):
        if action and event_id:
            message = f"Permission denied for '{action}' on event '{event_id}'"
        else:
            message = 'User does not have the permission for the event.'
        super().__init__(message, error_code='event_permission_denied', **kwargs)


class EventPreconditionError(BusinessRuleViolation):
    """Raised when an event request cannot be served in the current state."""

    error_code_name = 'event_failed_precondition'

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault('error_code', self.error_code_name)
        super().__init__(message, **kwargs)


# =============================================================================
# Specific preconditions (convenience classes)
# =============================================================================


class ForcedUpdateTargetMissingError(EventPreconditionError):
    error_code_name = 'forced_update_target_missing'

    def __init__(self, **kwargs):
        super().__init__('Event fetched by forceUpdateID does not exist.', **kwargs)


class AuthorityNotSetError(EventPreconditionError):
    error_code_name = 'authority_not_set'

    def __init__(self, **kwargs):
        super().__init__('Authority ID is not set.', **kwargs)


class OrganizerNotFoundError(EventPreconditionError):
    error_code_name = 'organizer_not_found'

    def __init__(self, **kwargs):
        super().__init__('Organizer not found.', **kwargs)


class TooManyImagesError(EventPreconditionError):
    error_code_name = 'too_many_images'

    def __init__(self, limit: int = 5, **kwargs):
        super().__init__('Maximum of five images are allowed per event', context={'limit': limit}, **kwargs)


class DateRequiredError(EventPreconditionError):
    error_code_name = 'date_required'

    def __init__(self, **kwargs):
        super().__init__('Date is a mandatory parameter.', **kwargs)


class InvalidEventDateError(EventPreconditionError):
    error_code_name = 'invalid_event_date'

    def __init__(self, details: str = None, **kwargs):
        message = 'Event date is invalid.'
        if details:
            message = f'{message} {details}'
        super().__init__(message, **kwargs)


class TicketEventMissingError(EventPreconditionError):
    error_code_name = 'ticket_event_missing'

    def __init__(self, **kwargs):
        super().__init__('Event does not exist!', **kwargs)


class PublishPermissionError(EventPermissionError):
    """Raised when the caller does not hold the authority it publishes as."""

    def __init__(self, authority_id: str = None, **kwargs):
        PermissionError.__init__(
            self,
            'User does not have the permissions requested.',
            error_code='publish_permission_denied',
            context={'authority_id': authority_id},
            **kwargs,
        )
