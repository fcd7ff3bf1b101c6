from django.db.models import QuerySet

from apps.communities.models import CacheMetadata
from apps.communities.models import Category
from apps.communities.models import Community
from apps.shared.decorators.database import handle_db_errors


class CommunityDAL:
    """Data Access Layer for communities, categories and cache metadata"""

    @handle_db_errors(operation_type='read', model_name='Community')
    def get_community_or_none(self, community_id: str) -> Community | None:
        return Community.objects.filter(pk=community_id).first()

    def get_communities_by_ids(self, community_ids: list[str]) -> QuerySet[Community]:
        return Community.objects.filter(pk__in=community_ids)

    @handle_db_errors(operation_type='read', model_name='Category')
    def get_category_names(self, category_ids: list[str]) -> dict[str, str]:
        """Map each existing category id to its display name"""
        rows = Category.objects.filter(pk__in=category_ids).values_list('id', 'display_name')
        return dict(rows)

    @handle_db_errors(operation_type='read', model_name='CacheMetadata')
    def get_cache_metadata(self) -> CacheMetadata | None:
        return CacheMetadata.load()
