"""
Tests for moderation sweeps.
"""
import pytest
from django.db import DatabaseError

from emoblog.exceptions import SweepIncomplete
from emoblog.models import Entry
from emoblog.store import EntryStore
from emoblog.sweeper import (
    SweepScope,
    iter_matches,
    markers_for,
    select_for_purge,
    sweep_all,
    sweep_blog,
)


class FlakyStore(EntryStore):
    """Store whose deletes fail for chosen entry ids."""

    def __init__(self, failing_ids):
        self.failing_ids = set(failing_ids)
        self.attempted = []

    def delete_entry(self, entry_id):
        self.attempted.append(entry_id)
        if entry_id in self.failing_ids:
            raise DatabaseError("database is locked")
        return super().delete_entry(entry_id)


class TestSelectForPurge:
    """Pure selection over in-memory entries."""

    def test_global_scope(self):
        entries = [Entry(pk=1, content="this is rubbish"), Entry(pk=2, content="fine")]
        assert select_for_purge(SweepScope.GLOBAL, entries) == [1]

    def test_blog_scope(self):
        entries = [Entry(pk=3, title="lol"), Entry(pk=4, content="normal")]
        assert select_for_purge(SweepScope.BLOG, entries) == [3]

    def test_title_or_content_matches(self):
        entries = [
            Entry(pk=1, title="go to hell", content="ok"),
            Entry(pk=2, title="ok", content="rofl"),
            Entry(pk=3, title="ok", content="ok"),
        ]
        assert select_for_purge(SweepScope.GLOBAL, entries) == [1]
        assert select_for_purge(SweepScope.BLOG, entries) == [2]

    def test_preserves_input_order(self):
        entries = [Entry(pk=9, content="rude"), Entry(pk=2, content="lol"), Entry(pk=5, content="rofl")]
        assert select_for_purge(SweepScope.BLOG, entries) == [9, 2, 5]

    def test_case_sensitive(self):
        entries = [Entry(pk=1, content="RUBBISH"), Entry(pk=2, content="LOL")]
        assert select_for_purge(SweepScope.GLOBAL, entries) == []
        assert select_for_purge(SweepScope.BLOG, entries) == []

    def test_substring_match(self):
        """'shell' contains 'hell'."""
        assert select_for_purge(SweepScope.GLOBAL, [Entry(pk=1, content="seashell")]) == [1]

    @pytest.mark.parametrize("marker", ["rude", "lol", "rofl"])
    def test_global_ignores_scoped_vocabulary(self, marker):
        assert select_for_purge(SweepScope.GLOBAL, [Entry(pk=1, content=marker)]) == []

    @pytest.mark.parametrize("marker", ["rubbish", "hell"])
    def test_blog_ignores_global_vocabulary(self, marker):
        assert select_for_purge(SweepScope.BLOG, [Entry(pk=1, content=marker)]) == []

    def test_vocabularies_are_disjoint(self):
        assert not set(markers_for(SweepScope.GLOBAL)) & set(markers_for(SweepScope.BLOG))


class TestSweepAll:
    """Global sweep against the database."""

    def test_deletes_matches_across_blogs(self, positive_blog, neutral_blog, make_entry):
        bad_one = make_entry(positive_blog, content="this is rubbish")
        good = make_entry(positive_blog, content="fine")
        bad_two = make_entry(neutral_blog, title="hell")
        scoped_only = make_entry(neutral_blog, content="lol")

        result = sweep_all()

        assert result.scope is SweepScope.GLOBAL
        assert result.examined == 4
        assert result.deleted == [bad_one.pk, bad_two.pk]
        assert set(Entry.objects.values_list("pk", flat=True)) == {good.pk, scoped_only.pk}

    def test_idempotent(self, neutral_blog, make_entry):
        make_entry(neutral_blog, content="rubbish")
        make_entry(neutral_blog, content="fine")

        sweep_all()
        second = sweep_all()

        assert second.deleted == []
        assert second.examined == 1

    def test_never_modifies_blogs(self, positive_blog, make_entry):
        make_entry(positive_blog, content="rubbish")
        sweep_all()
        positive_blog.refresh_from_db()
        assert positive_blog.is_positive

    def test_failure_does_not_abort(self, neutral_blog, make_entry):
        first = make_entry(neutral_blog, content="rubbish")
        second = make_entry(neutral_blog, content="hell")
        store = FlakyStore(failing_ids=[first.pk])

        with pytest.raises(SweepIncomplete) as excinfo:
            sweep_all(store)

        result = excinfo.value.result
        assert store.attempted == [first.pk, second.pk]
        assert result.deleted == [second.pk]
        assert list(result.failed) == [first.pk]
        assert not result.ok
        assert Entry.objects.filter(pk=first.pk).exists()
        assert not Entry.objects.filter(pk=second.pk).exists()

    def test_sweep_logged(self, neutral_blog, make_entry, caplog):
        make_entry(neutral_blog, content="rubbish")
        with caplog.at_level("INFO", logger="emoblog.sweeper"):
            sweep_all()
        assert "deleted 1" in caplog.text


class TestSweepBlog:
    """Single-blog sweep against the database."""

    def test_only_touches_target_blog(self, positive_blog, negative_blog, make_entry):
        target = make_entry(positive_blog, title="lol")
        kept = make_entry(positive_blog, content="normal")
        other = make_entry(negative_blog, content="rude")

        result = sweep_blog(positive_blog.pk)

        assert result.scope is SweepScope.BLOG
        assert result.blog_id == positive_blog.pk
        assert result.deleted == [target.pk]
        assert set(Entry.objects.values_list("pk", flat=True)) == {kept.pk, other.pk}

    def test_unknown_blog_is_empty(self, db):
        result = sweep_blog(9999)
        assert result.examined == 0
        assert result.deleted == []

    def test_idempotent(self, neutral_blog, make_entry):
        make_entry(neutral_blog, content="rofl")
        sweep_blog(neutral_blog.pk)
        assert sweep_blog(neutral_blog.pk).deleted == []

    def test_deletes_what_selection_picks(self, neutral_blog, make_entry, monkeypatch):
        make_entry(neutral_blog, title="lol")
        make_entry(neutral_blog, content="fine")
        make_entry(neutral_blog, content="so rude")
        expected = select_for_purge(SweepScope.BLOG, Entry.objects.filter(blog=neutral_blog))

        calls = []

        def recording_iter_matches(scope, entries):
            calls.append(scope)
            return iter_matches(scope, entries)

        monkeypatch.setattr("emoblog.sweeper.iter_matches", recording_iter_matches)
        result = sweep_blog(neutral_blog.pk)

        assert calls == [SweepScope.BLOG]
        assert result.examined == 3
        assert result.deleted == expected
