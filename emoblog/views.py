"""
JSON REST views for django-emoblog.

Successful writes carry X-<app>-alert / X-<app>-params headers and errors
carry X-<app>-error, where <app> is the APPLICATION_NAME setting.
"""
import json
import logging

from django.core.exceptions import ValidationError
from django.core.paginator import EmptyPage, Paginator
from django.http import HttpResponse, JsonResponse
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt

from . import services
from .conf import emoblog_settings
from .exceptions import SweepIncomplete
from .forms import BlogForm, EntryForm
from .models import Entry

logger = logging.getLogger(__name__)


def alert_headers(action, entity_name, param):
    """Build X-<app>-alert headers for a created/updated/deleted entity."""
    app = emoblog_settings.APPLICATION_NAME
    return {
        f"X-{app}-alert": f"{app}.{entity_name}.{action}",
        f"X-{app}-params": str(param),
    }


def error_response(entity_name, error_key, title, status=400, **extra):
    app = emoblog_settings.APPLICATION_NAME
    body = {"entityName": entity_name, "errorKey": error_key, "title": title, "status": status}
    body.update(extra)
    response = JsonResponse(body, status=status)
    response[f"X-{app}-error"] = f"error.{error_key}"
    response[f"X-{app}-params"] = entity_name
    return response


def rejection_response(exc, entity_name):
    """Turn a write-path ValidationError into a 400 response."""
    return error_response(
        getattr(exc, "entity_name", entity_name),
        getattr(exc, "reason", None) or exc.code or "invalid",
        exc.message,
    )


def form_error_response(form, entity_name):
    return error_response(
        entity_name,
        "invalid",
        "Invalid payload",
        fieldErrors=form.errors.get_json_data(),
    )


def no_content(headers=None):
    response = HttpResponse(status=204)
    for name, value in (headers or {}).items():
        response[name] = value
    return response


def read_json(request):
    """Return the decoded JSON object body, or None if it is not one."""
    try:
        data = json.loads(request.body or b"{}")
    except (ValueError, UnicodeDecodeError):
        return None
    return data if isinstance(data, dict) else None


def serialize_blog(blog):
    return {
        "id": blog.pk,
        "name": blog.name,
        "handle": blog.handle,
        "polarity": blog.polarity,
    }


def serialize_entry(entry):
    return {
        "id": entry.pk,
        "blog": entry.blog_id,
        "title": entry.title,
        "content": entry.content,
        "date": entry.date.isoformat(),
        "emoji": entry.emoji,
    }


def serialize_sweep(result):
    return {
        "scope": result.scope.value,
        "examined": result.examined,
        "deleted": result.deleted,
        "failed": sorted(result.failed),
    }


@method_decorator(csrf_exempt, name="dispatch")
class JsonView(View):
    """Base view: parses the JSON body for write methods."""

    entity_name = None

    def dispatch(self, request, *args, **kwargs):
        logger.debug("REST request %s %s", request.method, request.path)
        if request.method in ("POST", "PUT"):
            self.data = read_json(request)
            if self.data is None:
                return error_response(self.entity_name, "invalidJson", "Body must be a JSON object")
        return super().dispatch(request, *args, **kwargs)


# Blogs

class BlogListView(JsonView):
    """GET: list all blogs. POST: create a blog."""

    entity_name = "blog"

    def get(self, request):
        blogs = services.list_blogs()
        return JsonResponse([serialize_blog(blog) for blog in blogs], safe=False)

    def post(self, request):
        if self.data.get("id") is not None:
            return error_response("blog", "idexists", "A new blog cannot already have an ID")

        form = BlogForm(self.data)
        if not form.is_valid():
            return form_error_response(form, "blog")

        blog = services.create_blog(form.save(commit=False))
        response = JsonResponse(serialize_blog(blog), status=201)
        response["Location"] = request.build_absolute_uri(f"{blog.pk}/")
        for name, value in alert_headers("created", "blog", blog.pk).items():
            response[name] = value
        return response


class BlogDetailView(JsonView):
    """GET, PUT or DELETE a single blog."""

    entity_name = "blog"

    def get(self, request, pk):
        blog = services.get_blog(pk)
        if blog is None:
            return error_response("blog", "notfound", "Blog not found", status=404)
        return JsonResponse(serialize_blog(blog))

    def put(self, request, pk):
        blog = services.get_blog(pk)
        if blog is None:
            return error_response("blog", "notfound", "Blog not found", status=404)

        form = BlogForm(self.data, instance=blog)
        if not form.is_valid():
            return form_error_response(form, "blog")

        blog = services.update_blog(form.save(commit=False))
        if blog is None:
            return error_response("blog", "notfound", "Blog not found", status=404)
        response = JsonResponse(serialize_blog(blog))
        for name, value in alert_headers("updated", "blog", blog.pk).items():
            response[name] = value
        return response

    def delete(self, request, pk):
        if not services.delete_blog(pk):
            return error_response("blog", "notfound", "Blog not found", status=404)
        return no_content(alert_headers("deleted", "blog", pk))


class BlogCleanAllView(JsonView):
    """DELETE: run the global moderation sweep."""

    entity_name = "blog"

    def delete(self, request):
        try:
            services.clean_all_blogs()
        except SweepIncomplete as exc:
            return error_response(
                "blog", "cleanIncomplete", str(exc), status=500,
                sweep=serialize_sweep(exc.result),
            )
        return no_content(alert_headers("deleted", "blog", ""))


class BlogCleanView(JsonView):
    """DELETE: run the moderation sweep on one blog."""

    entity_name = "blog"

    def delete(self, request, pk):
        try:
            services.clean_blog(pk)
        except SweepIncomplete as exc:
            return error_response(
                "blog", "cleanIncomplete", str(exc), status=500,
                sweep=serialize_sweep(exc.result),
            )
        return no_content(alert_headers("deleted", "blog", pk))


# Entries

class EntryListView(JsonView):
    """GET: paginated entries. POST: validated create."""

    entity_name = "entry"

    def get(self, request):
        try:
            page_number = max(int(request.GET.get("page", 0)), 0)
            size = int(request.GET.get("size", emoblog_settings.ENTRIES_PER_PAGE))
        except ValueError:
            return error_response("entry", "invalidPage", "page and size must be integers")
        size = min(max(size, 1), emoblog_settings.MAX_ENTRIES_PER_PAGE)

        paginator = Paginator(Entry.objects.order_by("id"), size)
        # Pages are zero-based in the API, one-based in Django
        try:
            entries = paginator.page(page_number + 1).object_list
        except EmptyPage:
            entries = []

        response = JsonResponse([serialize_entry(entry) for entry in entries], safe=False)
        response["X-Total-Count"] = str(paginator.count)
        return response

    def post(self, request):
        if self.data.get("id") is not None:
            return error_response("entry", "idexists", "A new entry cannot already have an ID")

        form = EntryForm(self.data)
        if not form.is_valid():
            return form_error_response(form, "entry")

        try:
            entry = services.create_entry(form.build_entry())
        except ValidationError as exc:
            return rejection_response(exc, "entry")

        response = JsonResponse(serialize_entry(entry), status=201)
        response["Location"] = request.build_absolute_uri(f"{entry.pk}/")
        for name, value in alert_headers("created", "entry", entry.pk).items():
            response[name] = value
        return response


class EntryDetailView(JsonView):
    """GET, PUT (validated) or DELETE a single entry."""

    entity_name = "entry"

    def get(self, request, pk):
        entry = services.get_entry(pk)
        if entry is None:
            return error_response("entry", "notfound", "Entry not found", status=404)
        return JsonResponse(serialize_entry(entry))

    def put(self, request, pk):
        entry = services.get_entry(pk)
        if entry is None:
            return error_response("entry", "notfound", "Entry not found", status=404)

        form = EntryForm(self.data, instance=entry)
        if not form.is_valid():
            return form_error_response(form, "entry")

        try:
            entry = services.update_entry(form.build_entry())
        except ValidationError as exc:
            return rejection_response(exc, "entry")
        if entry is None:
            return error_response("entry", "notfound", "Entry not found", status=404)

        response = JsonResponse(serialize_entry(entry))
        for name, value in alert_headers("updated", "entry", entry.pk).items():
            response[name] = value
        return response

    def delete(self, request, pk):
        if not services.delete_entry(pk):
            return error_response("entry", "notfound", "Entry not found", status=404)
        return no_content(alert_headers("deleted", "entry", pk))
