from django.apps import AppConfig


class CommunityConfig(AppConfig):
    """Django app config for forum user profiles."""
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'community'
