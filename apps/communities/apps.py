from django.apps import AppConfig


class CommunitiesConfig(AppConfig):
    """Configuration for the Communities application."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.communities'
    verbose_name = 'Communities & Categories'
