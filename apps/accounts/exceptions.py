"""
Domain-specific business exceptions for the Accounts app.

- These are BUSINESS exceptions, not HTTP exceptions
- HTTP mapping happens in the global exception handler
- Inherits from core business exception hierarchy
"""

from apps.shared.exceptions import BusinessRuleViolation
from apps.shared.exceptions import PermissionError


class UserProfileMissingError(BusinessRuleViolation):
    """Raised when a callable needs the caller's profile and it does not exist."""

    def __init__(self, user_id: str = None, **kwargs):
        super().__init__(
            'User does not exist',
            error_code='user_profile_missing',
            context={'user_id': user_id},
            **kwargs,
        )


class AuthorityPermissionError(PermissionError):
    """Raised when the caller does not hold full authority over the target."""

    def __init__(self, authority_id: str = None, **kwargs):
        message = 'Permission denied'
        if authority_id:
            message = f"Permission denied for authority '{authority_id}'"
        super().__init__(message, error_code='authority_permission_denied', **kwargs)
