"""
Core Business Exception Hierarchy for the events platform

- Clean separation between business and HTTP layers
- Exception translation from DAL → Service → View layers
- Every exception carries a ``kind`` that callers see next to the message

These exceptions represent BUSINESS failures, not HTTP responses.
HTTP mapping happens in the API exception handler.
"""

import logging

logger = logging.getLogger(__name__)


class AppError(Exception):
    """
    Base class for all business logic errors in the application.

    This is NOT an HTTP exception - it's a pure business domain error.
    HTTP status codes are mapped by the API exception handler.
    """

    kind = 'internal'

    def __init__(self, message: str, error_code: str = None, context: dict = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.context = context or {}

    def __str__(self) -> str:
        return self.message

    def get_context(self) -> dict:
        """Get additional error context for logging/debugging"""
        return self.context


class ResourceNotFoundError(AppError):
    """
    Raised when a requested resource doesn't exist.

    Examples:
    - Event not found by id
    - User profile not found

    HTTP Mapping: 404 NOT FOUND
    """

    kind = 'not-found'


class BusinessRuleViolation(AppError):
    """
    Raised when a request cannot be served in the current state.

    Examples:
    - Forced update of an event that does not exist
    - Creating an event without a date
    - Publishing on behalf of an unknown organizer

    HTTP Mapping: 400 BAD REQUEST
    """

    kind = 'failed-precondition'


class ValidationError(AppError):
    """
    Raised when input data fails business validation.

    Examples:
    - More than five images on an event
    - Impossible calendar date

    HTTP Mapping: 400 BAD REQUEST
    """

    kind = 'failed-precondition'

    def __init__(self, message: str, field_errors: dict = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field_errors = field_errors or {}


class PermissionError(AppError):
    """
    Raised when a principal lacks the authority for a business operation.

    HTTP Mapping: 403 FORBIDDEN
    """

    kind = 'permission-denied'


class ServiceUnavailableError(AppError):
    """
    Raised when external service dependencies fail.

    Examples:
    - Short link API failures
    - Object storage failures
    - Database connection issues

    HTTP Mapping: 503 SERVICE UNAVAILABLE
    """

    kind = 'unavailable'


class AuthenticationError(AppError):
    """
    Raised when user authentication fails at business layer.

    HTTP Mapping: 401 UNAUTHORIZED
    """

    kind = 'unauthenticated'


# Convenience functions for common patterns
def resource_not_found(resource_type: str, identifier: str, **context) -> ResourceNotFoundError:
    """Factory function for consistent resource not found errors"""
    message = f"{resource_type} with identifier '{identifier}' not found"
    error_code = f"{resource_type.lower()}_not_found"
    return ResourceNotFoundError(
        message=message,
        error_code=error_code,
        context={'resource_type': resource_type, 'identifier': identifier, **context},
    )
