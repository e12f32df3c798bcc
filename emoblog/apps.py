"""Django app configuration for emoblog."""
from django.apps import AppConfig


class EmoblogConfig(AppConfig):
    """Configuration for the emoblog app."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "emoblog"
    verbose_name = "Emotion Blogs"
