"""
Account and profile lifecycle.

- Account created   -> bootstrap the profile document
- Account deleted   -> revoke sessions, delete the profile document
- Profile deleted   -> delete the user's events and per-user collections
"""

import logging

from django.db import transaction

from apps.accounts.dal.user_dal import UserDAL
from apps.accounts.models.account import ANONYMOUS_DISPLAY_NAME
from apps.events.dal.event_dal import EventDAL
from apps.shared.utils.best_effort import attempt

logger = logging.getLogger(__name__)


class UserLifecycleService:
    def __init__(self, dal: UserDAL = None, event_dal: EventDAL = None):
        self.dal = dal or UserDAL()
        self.event_dal = event_dal or EventDAL()

    @transaction.atomic
    def on_user_created(self, user_id: str) -> bool:
        """
        Create the profile with default values if it does not exist yet.

        Returns:
            True when a profile was created by this call
        """
        account = self.dal.get_account_or_none(user_id)
        if account is None:
            logger.warning(f'Account {user_id} vanished before its profile was created')
            return False

        _, created = self.dal.get_or_create_profile(user_id)
        if not account.display_name:
            self.dal.update_account(account, {'display_name': ANONYMOUS_DISPLAY_NAME})

        if created:
            logger.info(f'Profile created for account {user_id}')
        return created

    @transaction.atomic
    def on_user_deleted(self, user_id: str) -> None:
        revoked = attempt(f'revoke sessions of account {user_id}', self._revoke_sessions, user_id)
        deleted = self.dal.delete_profile(user_id)
        logger.info(f'Account {user_id} deleted: sessions revoked={revoked}, profile deleted={deleted}')

    def _revoke_sessions(self, user_id: str) -> None:
        # Savepoint keeps the account delete usable when blacklisting fails
        with transaction.atomic():
            self.dal.blacklist_outstanding_tokens(user_id)

    def on_user_document_deleted(self, user_id: str) -> dict[str, int]:
        events = 0
        for event in self.event_dal.get_events_by_creator(user_id):
            # Instance deletes so that every event fires its own cleanup
            with transaction.atomic():
                self.event_dal.delete_event(event)
            events += 1

        with transaction.atomic():
            collections = self.dal.delete_user_collections(user_id)

        logger.info(f'Profile {user_id} cleanup: {events} events, {collections}')
        return {'events': events, **collections}
