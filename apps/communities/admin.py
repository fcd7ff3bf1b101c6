from django.contrib import admin

from .models import CacheMetadata
from .models import Category
from .models import Community


@admin.register(Community)
class CommunityAdmin(admin.ModelAdmin):
    list_display = ['display_name', 'id', 'created_at']
    search_fields = ['display_name', 'id']
    readonly_fields = ['id', 'created_at', 'updated_at']


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ['display_name', 'id']
    search_fields = ['display_name', 'id']
    readonly_fields = ['id', 'created_at', 'updated_at']


@admin.register(CacheMetadata)
class CacheMetadataAdmin(admin.ModelAdmin):
    list_display = ['categories_utc_sec', 'communities_utc_sec', 'updated_at']
