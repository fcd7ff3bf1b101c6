"""Auth account: the identity record behind every profile."""

from typing import ClassVar

from django.contrib.auth.models import AbstractUser
from django.db import models
from django.utils.translation import gettext_lazy as _

from apps.accounts.managers import AccountManager
from apps.shared.base.models import BaseModel
from apps.shared.base.models import generate_document_id

ANONYMOUS_DISPLAY_NAME = 'Anonymous'


class Account(AbstractUser, BaseModel):
    """Authentication account keyed by an opaque uid."""

    id = models.CharField(primary_key=True, max_length=64, default=generate_document_id, editable=False)
    username = None
    first_name = None
    last_name = None

    email = models.EmailField(
        _('email address'),
        unique=True,
        null=True,
        blank=True,
    )
    display_name = models.CharField(_('Display Name'), max_length=255, blank=True)

    USERNAME_FIELD = 'email'
    REQUIRED_FIELDS: ClassVar[list[str]] = []

    objects = AccountManager()

    class Meta:
        db_table = 'accounts_account'
        verbose_name = _('Account')
        verbose_name_plural = _('Accounts')

    def __str__(self):
        return self.email or self.display_name or self.id

    def get_full_name(self):
        return self.display_name

    def get_short_name(self):
        return self.display_name

    @property
    def is_disabled(self) -> bool:
        return not self.is_active

    @property
    def public_name(self) -> str:
        return self.display_name or ANONYMOUS_DISPLAY_NAME
