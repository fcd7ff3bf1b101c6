import logging
from typing import Any

from django.db import transaction

from apps.accounts.dal.user_dal import UserDAL
from apps.accounts.exceptions import UserProfileMissingError
from apps.accounts.models import Account
from apps.accounts.models.account import ANONYMOUS_DISPLAY_NAME
from apps.communities.dal.community_dal import CommunityDAL
from apps.shared.utils.best_effort import attempt
from apps.shared.utils.general import utc_now_sec

logger = logging.getLogger(__name__)


class UserService:
    """Service layer for profile callables and notifications"""

    def __init__(self, dal: UserDAL = None, community_dal: CommunityDAL = None):
        self.dal = dal or UserDAL()
        self.community_dal = community_dal or CommunityDAL()

    def _require_profile(self, user_id: str, for_update: bool = False):
        profile = self.dal.get_profile_for_update(user_id) if for_update else self.dal.get_profile_or_none(user_id)
        if profile is None:
            raise UserProfileMissingError(user_id)
        return profile

    # =============================================================================
    # PROFILE
    # =============================================================================

    @transaction.atomic
    def update_profile(
        self,
        user_id: str,
        display_name: str | None = None,
        email: str | None = None,
        messaging_token_ios: str | None = None,
    ) -> dict[str, Any]:
        """
        Update account fields and the iOS messaging token.

        Only fields that are present (truthy) are written.

        Returns:
            dict with displayName, email and disabled of the resulting account
        """
        if messaging_token_ios:
            profile = self.dal.get_profile_for_update(user_id)
            if profile is None:
                logger.warning(f'Messaging token not stored: profile {user_id} does not exist')
            else:
                profile.messaging_tokens = {**(profile.messaging_tokens or {}), 'ios': messaging_token_ios}
                self.dal.save_profile(profile, ['messaging_tokens'])

        account = self.dal.get_account(user_id)
        account_fields = {}
        if email:
            account_fields['email'] = Account.objects.normalize_email(email)
        if display_name:
            account_fields['display_name'] = display_name
        if account_fields:
            account = self.dal.update_account(account, account_fields)
            logger.info(f'Account {user_id} updated: {sorted(account_fields)}')

        return {
            'displayName': account.display_name or ANONYMOUS_DISPLAY_NAME,
            'email': account.email or '',
            'disabled': account.is_disabled,
        }

    # =============================================================================
    # NOTIFICATIONS
    # =============================================================================

    def notify(self, user_id: str, payload: dict[str, Any]) -> bool:
        """Append a notification for the user; never raises"""
        notification = {**payload, 'utc_sec': utc_now_sec()}
        return attempt(f'notification for user {user_id}', self._write_notification, user_id, notification)

    def _write_notification(self, user_id: str, notification: dict[str, Any]) -> None:
        # Savepoint keeps a failed insert from breaking an enclosing transaction
        with transaction.atomic():
            self.dal.create_notification(user_id, notification, notification['utc_sec'])

    # =============================================================================
    # CACHE / SETTINGS / DATA
    # =============================================================================

    def fetch_cache_info(self, user_id: str) -> dict[str, bool]:
        profile = self._require_profile(user_id)
        user_cache = profile.cache_utc_sec or 0

        metadata = self.community_dal.get_cache_metadata()
        categories_cache = metadata.categories_utc_sec if metadata else 0
        communities_cache = metadata.communities_utc_sec if metadata else 0

        return {'cacheValid': categories_cache < user_cache and communities_cache < user_cache}

    @transaction.atomic
    def set_email_active(self, user_id: str, email_active: bool | None = None) -> dict[str, bool]:
        profile = self._require_profile(user_id, for_update=True)

        if email_active is not None:
            profile.email_active = bool(email_active)
            self.dal.save_profile(profile, ['email_active'])

        return {'email_active': bool(profile.email_active)}

    def fetch_user_data(self, user_id: str) -> dict[str, int]:
        profile = self._require_profile(user_id)
        return {'user_rating': profile.user_rating or 0}
