"""
Blog model for django-emoblog.
"""
from django.db import models
from django.utils.text import slugify

from ..conf import emoblog_settings


class Polarity(models.TextChoices):
    """
    Emotional direction of a blog.

    UNSET disables all content and emoji validation for the blog's entries.
    """

    POSITIVE = "POSITIVE", "Positive"
    NEGATIVE = "NEGATIVE", "Negative"
    UNSET = "UNSET", "Unset"


class Blog(models.Model):
    """
    A blog owning zero or more entries.

    The polarity decides which entries may be written to it, see
    emoblog.validation.
    """

    name = models.CharField(max_length=emoblog_settings.BLOG_NAME_MAX_LENGTH)
    handle = models.SlugField(
        max_length=emoblog_settings.HANDLE_MAX_LENGTH,
        unique=True,
        blank=True,
    )
    polarity = models.CharField(
        max_length=10,
        choices=Polarity.choices,
        default=Polarity.UNSET,
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["id"]

    def __str__(self):
        return self.name

    def save(self, *args, **kwargs):
        # Auto-generate a unique handle from the name
        if not self.handle:
            base_handle = slugify(self.name)[:emoblog_settings.HANDLE_MAX_LENGTH] or "blog"
            handle = base_handle
            counter = 1
            while Blog.objects.filter(handle=handle).exclude(pk=self.pk).exists():
                handle = f"{base_handle}-{counter}"
                counter += 1
            self.handle = handle
        super().save(*args, **kwargs)

    @property
    def is_positive(self):
        return self.polarity == Polarity.POSITIVE

    @property
    def is_negative(self):
        return self.polarity == Polarity.NEGATIVE

    @property
    def is_polarized(self):
        """Check if entries written to this blog are validated."""
        return self.polarity != Polarity.UNSET

    @property
    def entry_count(self):
        return self.entries.count()
