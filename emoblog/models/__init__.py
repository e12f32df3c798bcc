"""
Models for django-emoblog.

All models are importable from emoblog.models:

    from emoblog.models import Blog, Entry, Polarity, Emoji
"""
from .blogs import Blog, Polarity
from .entries import Entry, Emoji

__all__ = [
    # Blogs
    "Blog",
    "Polarity",
    # Entries
    "Entry",
    "Emoji",
]
