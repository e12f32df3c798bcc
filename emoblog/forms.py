"""
Forms for django-emoblog.

BlogForm and EntryForm validate the fields of REST payloads; polarity
checks are left to emoblog.services so they run under the write lock.
EntryAdminForm runs the polarity check itself so rejections show up as
admin form errors.
"""
from django import forms
from django.utils import timezone

from .models import Blog, Entry, Polarity
from .validation import check_polarity


class BlogForm(forms.ModelForm):
    polarity = forms.ChoiceField(choices=Polarity.choices, required=False)

    class Meta:
        model = Blog
        fields = ["name", "handle", "polarity"]

    def clean_polarity(self):
        # null / missing means no polarity
        return self.cleaned_data.get("polarity") or Polarity.UNSET

    def clean_handle(self):
        # an update that omits the handle keeps the stored one
        return self.cleaned_data.get("handle") or self.instance.handle


class EntryForm(forms.ModelForm):
    """
    Field validation for entry payloads.

    The parent blog is taken as a plain id so that a dangling reference
    reaches the validator and is reported as ParentBlogNotFound.
    """

    blog = forms.IntegerField(min_value=1)
    date = forms.DateTimeField(required=False)

    class Meta:
        model = Entry
        fields = ["title", "content", "date", "emoji"]

    def clean_date(self):
        # keep the stored date when an update omits it
        return self.cleaned_data.get("date") or self.instance.date or timezone.now()

    def build_entry(self):
        """Return the unsaved entry with its blog reference applied."""
        entry = self.save(commit=False)
        entry.blog_id = self.cleaned_data["blog"]
        return entry


class EntryAdminForm(forms.ModelForm):
    class Meta:
        model = Entry
        fields = ["blog", "title", "content", "date", "emoji"]

    def clean(self):
        cleaned_data = super().clean()
        blog = cleaned_data.get("blog")
        if blog is None or self.errors:
            return cleaned_data
        # untouched rows keep whatever the blog accepted when they were written
        if self.instance.pk is not None and not self.has_changed():
            return cleaned_data

        candidate = Entry(
            title=cleaned_data.get("title", ""),
            content=cleaned_data.get("content", ""),
            emoji=cleaned_data.get("emoji"),
        )
        # EntryRejected is a ValidationError; the form reports it as a non-field error
        check_polarity(candidate, blog)
        return cleaned_data
