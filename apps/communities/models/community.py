from django.db import models
from django.utils.translation import gettext_lazy as _

from apps.shared.base.models import BaseModel
from apps.shared.base.models import DocumentModel


class Community(DocumentModel):
    """Organizer that can publish events on behalf of its members"""

    display_name = models.CharField(_('Display Name'), max_length=255)
    images = models.JSONField(_('Images'), default=list, blank=True)

    class Meta:
        db_table = 'communities'
        verbose_name = _('Community')
        verbose_name_plural = _('Communities')

    def __str__(self):
        return self.display_name

    @property
    def first_image(self) -> str:
        return self.images[0] if self.images else ''


class Category(DocumentModel):
    display_name = models.CharField(_('Display Name'), max_length=255)

    class Meta:
        db_table = 'categories'
        verbose_name = _('Category')
        verbose_name_plural = _('Categories')

    def __str__(self):
        return self.display_name


class CacheMetadata(BaseModel):
    """
    Singleton row with the last modification time of client-cached catalogs.

    Clients compare these against their own ``cache_utc_sec`` to decide
    whether categories and communities must be refetched.
    """

    SINGLETON_ID = 1

    id = models.PositiveSmallIntegerField(primary_key=True, default=SINGLETON_ID, editable=False)
    categories_utc_sec = models.BigIntegerField(_('Categories Updated (UTC sec)'), default=0)
    communities_utc_sec = models.BigIntegerField(_('Communities Updated (UTC sec)'), default=0)

    class Meta:
        db_table = 'cache_metadata'
        verbose_name = _('Cache Metadata')
        verbose_name_plural = _('Cache Metadata')

    def __str__(self):
        return f'categories@{self.categories_utc_sec} communities@{self.communities_utc_sec}'

    @classmethod
    def load(cls):
        return cls.objects.filter(pk=cls.SINGLETON_ID).first()
