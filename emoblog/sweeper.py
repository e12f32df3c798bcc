"""
Moderation sweeps that purge entries containing cleanup vocabulary.

Two scopes, each with its own vocabulary:

- GLOBAL walks every blog's entries and removes anything mentioning
  "rubbish" or "hell".
- BLOG walks a single blog's entries and removes anything mentioning
  "rude", "lol" or "rofl".

Sweeps are best effort: a failed delete is logged and recorded, the
remaining candidates are still processed, and SweepIncomplete is raised
at the end.
"""
import enum
import logging
from dataclasses import dataclass, field

from django.db import DatabaseError

from .exceptions import SweepIncomplete
from .lexicon import GLOBAL_CLEANUP_MARKERS, SCOPED_CLEANUP_MARKERS, find_marker
from .store import default_store

logger = logging.getLogger(__name__)


class SweepScope(enum.Enum):
    GLOBAL = "global"
    BLOG = "blog"


SCOPE_MARKERS = {
    SweepScope.GLOBAL: GLOBAL_CLEANUP_MARKERS,
    SweepScope.BLOG: SCOPED_CLEANUP_MARKERS,
}


@dataclass
class SweepResult:
    """Outcome of one sweep."""

    scope: SweepScope
    blog_id: int = None
    examined: int = 0
    deleted: list = field(default_factory=list)
    failed: dict = field(default_factory=dict)

    @property
    def ok(self):
        return not self.failed


def markers_for(scope):
    return SCOPE_MARKERS[scope]


def matched_marker(entry, markers):
    """Return the first marker found in the entry's content, then title."""
    return find_marker(entry.content, markers) or find_marker(entry.title, markers)


def select_for_purge(scope, entries):
    """
    Pick the entries a sweep of this scope would delete.

    Args:
        scope: SweepScope
        entries: iterable of entries, visited once each in the given order

    Returns:
        List of matching entry ids, in input order
    """
    return [entry.pk for entry, _ in iter_matches(scope, entries)]


def iter_matches(scope, entries):
    """Yield (entry, marker) for each entry the scope's vocabulary matches."""
    markers = markers_for(scope)
    for entry in entries:
        marker = matched_marker(entry, markers)
        if marker is not None:
            yield entry, marker


def _purge(result, entries, store):
    entries = list(entries)
    result.examined += len(entries)
    for entry, marker in iter_matches(result.scope, entries):
        try:
            store.delete_entry(entry.pk)
        except DatabaseError as exc:
            logger.exception("Failed to delete entry %s during %s sweep", entry.pk, result.scope.value)
            result.failed[entry.pk] = exc
            continue
        logger.info(
            "Deleted entry %s from blog %s (%s sweep matched %r)",
            entry.pk, entry.blog_id, result.scope.value, marker,
        )
        result.deleted.append(entry.pk)


def _finish(result):
    logger.info(
        "%s sweep examined %d entries, deleted %d, failed %d",
        result.scope.value.capitalize(), result.examined, len(result.deleted), len(result.failed),
    )
    if result.failed:
        raise SweepIncomplete(result)
    return result


def sweep_all(store=None):
    """
    Purge entries matching the global cleanup vocabulary from every blog.

    Returns:
        SweepResult

    Raises:
        SweepIncomplete: one or more deletes failed
    """
    store = store or default_store
    result = SweepResult(scope=SweepScope.GLOBAL)
    for blog in store.list_all_blogs():
        _purge(result, store.list_entries_by_blog(blog.pk), store)
    return _finish(result)


def sweep_blog(blog_id, store=None):
    """
    Purge entries matching the scoped cleanup vocabulary from one blog.

    An unknown blog id has no entries and yields an empty result.

    Returns:
        SweepResult

    Raises:
        SweepIncomplete: one or more deletes failed
    """
    store = store or default_store
    result = SweepResult(scope=SweepScope.BLOG, blog_id=blog_id)
    _purge(result, store.list_entries_by_blog(blog_id), store)
    return _finish(result)
