"""
Django admin configuration for emoblog.

Entry saves from the admin go through emoblog.services, so they are
validated again under the blog lock before they are written.
"""
from django.contrib import admin, messages

from . import services
from .exceptions import SweepIncomplete
from .forms import EntryAdminForm
from .models import Blog, Entry


def save_entry(entry):
    if entry.pk is None:
        return services.create_entry(entry)
    return services.update_entry(entry)


class EntryInline(admin.TabularInline):
    """Inline for editing a blog's entries; polarity rules still apply."""

    model = Entry
    form = EntryAdminForm
    extra = 0
    fields = ["title", "content", "emoji", "date"]


@admin.register(Blog)
class BlogAdmin(admin.ModelAdmin):
    list_display = ["name", "handle", "polarity", "entry_count", "created_at"]
    list_filter = ["polarity", "created_at"]
    search_fields = ["name", "handle"]
    prepopulated_fields = {"handle": ("name",)}
    readonly_fields = ["created_at", "updated_at"]
    inlines = [EntryInline]

    actions = ["clean_selected_blogs", "clean_all_blogs"]

    def save_model(self, request, obj, form, change):
        if change:
            services.update_blog(obj)
        else:
            services.create_blog(obj)

    def save_formset(self, request, form, formset, change):
        if formset.model is not Entry:
            return super().save_formset(request, form, formset, change)

        entries = formset.save(commit=False)
        for entry in formset.deleted_objects:
            services.delete_entry(entry.pk)
        for entry in entries:
            save_entry(entry)
        formset.save_m2m()

    def _report_sweep(self, request, result):
        self.message_user(
            request,
            f"{result.scope.value.capitalize()} sweep deleted {len(result.deleted)} "
            f"of {result.examined} entries.",
        )

    @admin.action(description="Remove rude entries from selected blogs")
    def clean_selected_blogs(self, request, queryset):
        for blog in queryset:
            try:
                result = services.clean_blog(blog.pk)
            except SweepIncomplete as exc:
                self.message_user(request, f"{blog}: {exc}", level=messages.ERROR)
                continue
            self._report_sweep(request, result)

    @admin.action(description="Remove rubbish entries from every blog (runs on all blogs, tick any one)")
    def clean_all_blogs(self, request, queryset):
        """Global sweep. Django only runs actions on a selection; the selection itself is ignored."""
        try:
            result = services.clean_all_blogs()
        except SweepIncomplete as exc:
            self.message_user(request, str(exc), level=messages.ERROR)
            return
        self._report_sweep(request, result)


@admin.register(Entry)
class EntryAdmin(admin.ModelAdmin):
    form = EntryAdminForm
    list_display = ["title", "blog", "emoji", "glyph", "preview", "date"]
    list_filter = ["emoji", "blog__polarity", "date"]
    search_fields = ["title", "content", "blog__name"]
    raw_id_fields = ["blog"]
    date_hierarchy = "date"

    def save_model(self, request, obj, form, change):
        save_entry(obj)
