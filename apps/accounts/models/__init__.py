from .account import Account
from .profile import Notification
from .profile import UserCategory
from .profile import UserEventLink
from .profile import UserProfile
from .profile import UserTicket

__all__ = [
    'Account',
    'Notification',
    'UserCategory',
    'UserEventLink',
    'UserProfile',
    'UserTicket',
]
