import logging
from typing import Any

from django.db.models import QuerySet
from rest_framework_simplejwt.token_blacklist.models import BlacklistedToken
from rest_framework_simplejwt.token_blacklist.models import OutstandingToken

from apps.accounts.models import Account
from apps.accounts.models import Notification
from apps.accounts.models import UserCategory
from apps.accounts.models import UserEventLink
from apps.accounts.models import UserProfile
from apps.accounts.models import UserTicket
from apps.shared.decorators.database import handle_db_errors

logger = logging.getLogger(__name__)


class UserDAL:
    """Data Access Layer for accounts, profiles and per-user collections"""

    # =========================================================================
    # Accounts
    # =========================================================================

    @handle_db_errors(operation_type='read', model_name='Account')
    def get_account(self, user_id: str) -> Account:
        return Account.objects.get(pk=user_id)

    def get_account_or_none(self, user_id: str) -> Account | None:
        return Account.objects.filter(pk=user_id).first()

    @handle_db_errors(operation_type='update', model_name='Account')
    def update_account(self, account: Account, fields: dict[str, Any]) -> Account:
        for field, value in fields.items():
            setattr(account, field, value)
        account.save(update_fields=[*fields.keys(), 'updated_at'])
        return account

    @handle_db_errors(operation_type='update', model_name='OutstandingToken')
    def blacklist_outstanding_tokens(self, user_id: str) -> int:
        """Blacklist every refresh token issued to the account"""
        revoked = 0
        for token in OutstandingToken.objects.filter(user_id=user_id):
            _, created = BlacklistedToken.objects.get_or_create(token=token)
            revoked += int(created)
        return revoked

    # =========================================================================
    # Profiles
    # =========================================================================

    def get_profile_or_none(self, user_id: str) -> UserProfile | None:
        return UserProfile.objects.filter(pk=user_id).first()

    def get_profile_for_update(self, user_id: str) -> UserProfile | None:
        """Lock the profile row for the rest of the current transaction"""
        return UserProfile.objects.select_for_update().filter(pk=user_id).first()

    @handle_db_errors(operation_type='create', model_name='UserProfile')
    def get_or_create_profile(self, user_id: str) -> tuple[UserProfile, bool]:
        return UserProfile.objects.get_or_create(pk=user_id)

    @handle_db_errors(operation_type='update', model_name='UserProfile')
    def save_profile(self, profile: UserProfile, update_fields: list[str]) -> UserProfile:
        profile.save(update_fields=[*update_fields, 'updated_at'])
        return profile

    @handle_db_errors(operation_type='delete', model_name='UserProfile')
    def delete_profile(self, user_id: str) -> bool:
        # Instance deletes so that post_delete receivers fire
        deleted = False
        for profile in UserProfile.objects.filter(pk=user_id):
            profile.delete()
            deleted = True
        return deleted

    # =========================================================================
    # Attending / saved sets
    # =========================================================================

    def get_attendee_accounts(self, event_id: str) -> QuerySet[Account]:
        user_ids = UserEventLink.objects.filter(
            event_id=event_id, kind=UserEventLink.Kind.ATTENDING
        ).values('user_id')
        return Account.objects.filter(pk__in=user_ids).order_by('pk')

    @handle_db_errors(operation_type='delete', model_name='UserEventLink')
    def remove_event_from_attending(self, event_id: str) -> int:
        deleted, _ = UserEventLink.objects.filter(
            event_id=event_id, kind=UserEventLink.Kind.ATTENDING
        ).delete()
        return deleted

    # =========================================================================
    # Tickets
    # =========================================================================

    def get_user_ticket(self, user_id: str, event_id: str) -> UserTicket | None:
        return UserTicket.objects.filter(user_id=user_id, event_id=event_id).order_by('created_at').first()

    @handle_db_errors(operation_type='update', model_name='UserTicket')
    def invalidate_user_tickets(self, event_id: str) -> int:
        return UserTicket.objects.filter(event_id=event_id).exclude(
            status=UserTicket.Status.INVALID
        ).update(status=UserTicket.Status.INVALID)

    # =========================================================================
    # Per-user collections
    # =========================================================================

    @handle_db_errors(operation_type='delete', model_name='UserProfile')
    def delete_user_collections(self, user_id: str) -> dict[str, int]:
        """Delete categories, tickets and event links owned by the user"""
        categories, _ = UserCategory.objects.filter(user_id=user_id).delete()
        tickets, _ = UserTicket.objects.filter(user_id=user_id).delete()
        links, _ = UserEventLink.objects.filter(user_id=user_id).delete()
        return {'categories': categories, 'tickets': tickets, 'event_links': links}

    @handle_db_errors(operation_type='create', model_name='Notification')
    def create_notification(self, user_id: str, payload: dict[str, Any], utc_sec: int) -> Notification:
        return Notification.objects.create(user_id=user_id, payload=payload, utc_sec=utc_sec)
