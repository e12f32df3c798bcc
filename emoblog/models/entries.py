"""
Entry model for django-emoblog.
"""
from django.db import models
from django.utils import timezone

from ..conf import emoblog_settings


class Emoji(models.TextChoices):
    """Closed set of emotion tags an entry can carry."""

    LIKE = "LIKE", "Like"
    LOVE = "LOVE", "Love"
    HAHA = "HAHA", "Haha"
    WOW = "WOW", "Wow"
    SAD = "SAD", "Sad"
    ANGRY = "ANGRY", "Angry"


class Entry(models.Model):
    """
    A single entry written to a blog.

    Entries are only written through emoblog.services (or the admin form),
    which check them against the parent blog's polarity first.
    """

    blog = models.ForeignKey(
        "emoblog.Blog",
        on_delete=models.CASCADE,
        related_name="entries",
    )
    title = models.CharField(max_length=emoblog_settings.TITLE_MAX_LENGTH)
    content = models.TextField()
    date = models.DateTimeField(default=timezone.now, db_index=True)
    emoji = models.CharField(
        max_length=10,
        choices=Emoji.choices,
        default=Emoji.LIKE,
    )

    class Meta:
        ordering = ["date", "id"]
        verbose_name_plural = "Entries"
        indexes = [
            models.Index(fields=["blog", "date"]),
        ]

    def __str__(self):
        return self.title

    @property
    def glyph(self):
        """Return the display glyph for this entry's emoji."""
        return emoblog_settings.EMOJI_GLYPHS.get(self.emoji, "")

    @property
    def preview(self):
        """Return truncated content for admin display."""
        if len(self.content) > 100:
            return self.content[:100] + "..."
        return self.content
