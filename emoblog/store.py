"""
ORM-backed access to blogs and entries.

The validator, the sweeper and the services only talk to storage through
an EntryStore, so tests can hand them a store that fails on demand.
"""
from .models import Blog, Entry


class EntryStore:
    """Lookups, deletes and saves for Blog and Entry rows."""

    def get_blog(self, blog_id, for_update=False):
        """
        Return the blog with this id, or None.

        With for_update the row stays locked until the surrounding
        transaction ends; call inside transaction.atomic().
        """
        qs = Blog.objects.all()
        if for_update:
            qs = qs.select_for_update()
        return qs.filter(pk=blog_id).first()

    def list_all_blogs(self):
        return list(Blog.objects.order_by("id"))

    def list_entries_by_blog(self, blog_id):
        """Return the blog's entries in storage order (date, then id)."""
        return list(Entry.objects.filter(blog_id=blog_id).order_by("date", "id"))

    def get_entry(self, entry_id, for_update=False):
        qs = Entry.objects.select_related("blog")
        if for_update:
            qs = qs.select_for_update()
        return qs.filter(pk=entry_id).first()

    def delete_entry(self, entry_id):
        """
        Delete an entry by id.

        Returns:
            True if a row was removed, False if there was nothing to delete
        """
        deleted, _ = Entry.objects.filter(pk=entry_id).delete()
        return deleted > 0

    def save_entry(self, entry):
        entry.save()
        return entry


default_store = EntryStore()
