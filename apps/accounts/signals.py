"""Django signals that drive the account and profile lifecycle."""

import logging

from django.db import transaction
from django.db.models.signals import post_delete
from django.db.models.signals import post_save
from django.db.models.signals import pre_delete
from django.dispatch import receiver

from apps.accounts.models import Account
from apps.accounts.models import UserProfile

logger = logging.getLogger(__name__)


@receiver(post_save, sender=Account)
def schedule_profile_bootstrap(sender, instance, created, raw=False, **kwargs):
    if not created or raw:
        return

    from apps.accounts.tasks import handle_user_created

    user_id = instance.id
    transaction.on_commit(lambda: handle_user_created.delay(user_id))


@receiver(pre_delete, sender=Account)
def revoke_account_sessions(sender, instance, **kwargs):
    """Runs before the account row goes away so its tokens can still be found."""
    from apps.shared.container import get_user_lifecycle_service

    get_user_lifecycle_service().on_user_deleted(instance.id)


@receiver(post_delete, sender=UserProfile)
def schedule_profile_cleanup(sender, instance, **kwargs):
    from apps.accounts.tasks import handle_user_document_deleted

    user_id = instance.id
    logger.debug(f'Profile {user_id} deleted, scheduling cleanup')
    transaction.on_commit(lambda: handle_user_document_deleted.delay(user_id))
