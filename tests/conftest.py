"""
Shared fixtures for django-emoblog tests.
"""
import pytest

from emoblog.models import Blog, Entry, Polarity


@pytest.fixture
def positive_blog(db):
    """Create a blog with positive polarity."""
    return Blog.objects.create(name="Sunny Days", polarity=Polarity.POSITIVE)


@pytest.fixture
def negative_blog(db):
    """Create a blog with negative polarity."""
    return Blog.objects.create(name="Rainy Days", polarity=Polarity.NEGATIVE)


@pytest.fixture
def neutral_blog(db):
    """Create a blog with no polarity."""
    return Blog.objects.create(name="Any Days")


@pytest.fixture
def make_entry(db):
    """Factory writing entries straight to the database, skipping validation."""

    def _make_entry(blog, title="Title", content="Content", emoji="LIKE"):
        return Entry.objects.create(blog=blog, title=title, content=content, emoji=emoji)

    return _make_entry
