from apps.accounts.services.authority_service import AuthorityService
from apps.accounts.services.user_lifecycle_service import UserLifecycleService
from apps.accounts.services.user_service import UserService

__all__ = [
    'AuthorityService',
    'UserLifecycleService',
    'UserService',
]
