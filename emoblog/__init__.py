"""
django-emoblog - Blogs with polarity-aware entry moderation.

Features:
- Blogs with a positive, negative or unset polarity
- Entries tagged with an emotion (LIKE, LOVE, HAHA, WOW, SAD, ANGRY)
- Validation that rejects entries contradicting their blog's polarity
- Keyword sweeps that purge entries across all blogs or within one blog
- JSON REST endpoints and Django admin integration
"""

__version__ = "0.1.0"
