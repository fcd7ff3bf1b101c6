from apps.accounts.views.profile_views import CacheInfoAPIView
from apps.accounts.views.profile_views import ChangeAuthoritiesAPIView
from apps.accounts.views.profile_views import EmailActiveAPIView
from apps.accounts.views.profile_views import UserAuthoritiesAPIView
from apps.accounts.views.profile_views import UserDataAPIView
from apps.accounts.views.profile_views import UserProfileUpdateAPIView

__all__ = [
    'CacheInfoAPIView',
    'ChangeAuthoritiesAPIView',
    'EmailActiveAPIView',
    'UserAuthoritiesAPIView',
    'UserDataAPIView',
    'UserProfileUpdateAPIView',
]
