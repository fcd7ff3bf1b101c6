from .community import CacheMetadata
from .community import Category
from .community import Community

__all__ = ['CacheMetadata', 'Category', 'Community']
