"""
Polarity validation for entries.

An entry written to a POSITIVE blog may not carry a SAD or ANGRY emoji and
may not mention SAD, FEAR or LONELY. An entry written to a NEGATIVE blog
may not carry a LIKE or HAHA emoji and may not mention LOVE, HAPPY or
TRUST. Blogs with UNSET polarity accept anything.

The emoji check runs before the content check and the first failure wins.
"""
import logging

from .exceptions import InvalidContent, InvalidEmoji, ParentBlogNotFound
from .lexicon import (
    NEGATIVE_CONTENT_MARKERS,
    NEGATIVE_EMOJI_BLOCKLIST,
    POSITIVE_CONTENT_MARKERS,
    POSITIVE_EMOJI_BLOCKLIST,
    find_marker,
)
from .models import Polarity

logger = logging.getLogger(__name__)

# polarity -> (forbidden emoji, forbidden content markers)
RULES = {
    Polarity.POSITIVE.value: (POSITIVE_EMOJI_BLOCKLIST, NEGATIVE_CONTENT_MARKERS),
    Polarity.NEGATIVE.value: (NEGATIVE_EMOJI_BLOCKLIST, POSITIVE_CONTENT_MARKERS),
}


def check_polarity(entry, blog):
    """
    Check an entry against its parent blog's polarity.

    Pure decision over the two objects; nothing is read or written.

    Args:
        entry: object with title, content and emoji attributes
        blog: the resolved parent Blog, or None if it could not be found

    Raises:
        ParentBlogNotFound: blog is None
        InvalidEmoji: the emoji is forbidden for the blog's polarity
        InvalidContent: title or content contains a forbidden marker
    """
    if blog is None:
        raise ParentBlogNotFound(getattr(entry, "blog_id", None))

    rule = RULES.get(blog.polarity)
    if rule is None:
        return

    forbidden_emoji, forbidden_markers = rule

    if entry.emoji in forbidden_emoji:
        logger.info(
            "Rejected entry for blog %s: emoji %s not allowed on %s blog",
            blog.pk, entry.emoji, blog.polarity,
        )
        raise InvalidEmoji(marker=entry.emoji)

    marker = find_marker(entry.content, forbidden_markers) or find_marker(
        entry.title, forbidden_markers
    )
    if marker is not None:
        logger.info(
            "Rejected entry for blog %s: content contains %r on %s blog",
            blog.pk, marker, blog.polarity,
        )
        raise InvalidContent(marker=marker)


def validate_entry(entry, store, for_update=False):
    """
    Resolve the entry's parent blog through the store and check polarity.

    The blog is looked up again on every call so an update that moves an
    entry to another blog is checked against the new parent.

    Args:
        entry: Entry instance (saved or not)
        store: an EntryStore
        for_update: lock the blog row for the rest of the transaction

    Returns:
        The resolved parent Blog
    """
    blog = None
    if entry.blog_id is not None:
        blog = store.get_blog(entry.blog_id, for_update=for_update)
    check_polarity(entry, blog)
    return blog
