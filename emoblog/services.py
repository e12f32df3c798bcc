"""
Write paths and sweep entry points for django-emoblog.

Entry writes go through create_entry / update_entry, which validate the
entry against its parent blog inside a transaction holding a lock on the
blog row. A concurrent polarity change or write cannot slip in between
the check and the save.

Lookups by id return None (or False for deletes) when the row does not
exist; callers decide how to report that.
"""
import logging

from django.db import transaction

from .exceptions import IdAlreadySet, IdMissing
from .models import Blog
from .store import default_store
from .sweeper import sweep_all, sweep_blog
from .validation import validate_entry

logger = logging.getLogger(__name__)


# Entries

def create_entry(entry, store=None):
    """
    Validate and persist a new entry.

    Raises:
        IdAlreadySet: entry already has a primary key
        ParentBlogNotFound: entry.blog_id does not point at a blog
        EntryRejected: the entry contradicts the blog's polarity
    """
    store = store or default_store
    if entry.pk is not None:
        raise IdAlreadySet("entry")

    with transaction.atomic():
        validate_entry(entry, store, for_update=True)
        entry = store.save_entry(entry)

    logger.info("Created entry %s in blog %s", entry.pk, entry.blog_id)
    return entry


def update_entry(entry, store=None):
    """
    Validate and persist changes to an existing entry.

    The parent blog is resolved again, so moving an entry to another blog
    is checked against the new blog.

    Returns:
        The saved entry, or None if the entry no longer exists

    Raises:
        IdMissing: entry has no primary key
        ParentBlogNotFound: entry.blog_id does not point at a blog
        EntryRejected: the entry contradicts the blog's polarity
    """
    store = store or default_store
    if entry.pk is None:
        raise IdMissing("entry")

    with transaction.atomic():
        if store.get_entry(entry.pk, for_update=True) is None:
            return None
        validate_entry(entry, store, for_update=True)
        entry = store.save_entry(entry)

    logger.info("Updated entry %s in blog %s", entry.pk, entry.blog_id)
    return entry


def get_entry(entry_id, store=None):
    store = store or default_store
    return store.get_entry(entry_id)


def delete_entry(entry_id, store=None):
    store = store or default_store
    deleted = store.delete_entry(entry_id)
    if deleted:
        logger.info("Deleted entry %s", entry_id)
    return deleted


# Blogs

def create_blog(blog):
    if blog.pk is not None:
        raise IdAlreadySet("blog")
    blog.save()
    logger.info("Created blog %s (%s)", blog.pk, blog.polarity)
    return blog


def update_blog(blog):
    """
    Persist changes to an existing blog.

    Existing entries are not re-validated when the polarity changes; the
    new polarity applies to subsequent entry writes.

    Returns:
        The saved blog, or None if the blog no longer exists
    """
    if blog.pk is None:
        raise IdMissing("blog")

    with transaction.atomic():
        if not Blog.objects.select_for_update().filter(pk=blog.pk).exists():
            return None
        blog.save()

    logger.info("Updated blog %s (%s)", blog.pk, blog.polarity)
    return blog


def list_blogs(store=None):
    store = store or default_store
    return store.list_all_blogs()


def get_blog(blog_id, store=None):
    store = store or default_store
    return store.get_blog(blog_id)


def delete_blog(blog_id):
    """Delete a blog and its entries. Returns False if there was no such blog."""
    deleted, _ = Blog.objects.filter(pk=blog_id).delete()
    if deleted:
        logger.info("Deleted blog %s", blog_id)
    return deleted > 0


# Sweeps

def clean_all_blogs(store=None):
    """Run the global moderation sweep. See emoblog.sweeper.sweep_all."""
    return sweep_all(store)


def clean_blog(blog_id, store=None):
    """Run the single-blog moderation sweep. See emoblog.sweeper.sweep_blog."""
    return sweep_blog(blog_id, store)
