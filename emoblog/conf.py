"""
Configuration settings for django-emoblog.

Override these in your Django settings.py:

    EMOBLOG = {
        'APPLICATION_NAME': 'myBlogApp',
        'ENTRIES_PER_PAGE': 50,
        ...
    }

The moderation vocabularies live in emoblog.lexicon and are not
configurable.
"""
from django.conf import settings

DEFAULTS = {
    # Prefix for X-<app>-alert / X-<app>-error response headers
    "APPLICATION_NAME": "emoblogApp",

    # Entry listing
    "ENTRIES_PER_PAGE": 20,
    "MAX_ENTRIES_PER_PAGE": 100,

    # Display glyph per emoji tag
    "EMOJI_GLYPHS": {
        "LIKE": "👍",
        "LOVE": "❤️",
        "HAHA": "😂",
        "WOW": "😮",
        "SAD": "😢",
        "ANGRY": "😠",
    },

    # Field sizes
    "TITLE_MAX_LENGTH": 255,
    "BLOG_NAME_MAX_LENGTH": 100,
    "HANDLE_MAX_LENGTH": 100,
}


class EmoblogSettings:
    """
    Lazy settings object that reads from Django settings.

    Access via: from emoblog.conf import emoblog_settings
    """

    def __getattr__(self, name):
        if name not in DEFAULTS:
            raise AttributeError(f"Invalid emoblog setting: {name}")

        user_settings = getattr(settings, "EMOBLOG", {})
        return user_settings.get(name, DEFAULTS[name])


emoblog_settings = EmoblogSettings()
