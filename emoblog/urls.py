"""
URL configuration for django-emoblog.

Include in your project urls.py:

    path('api/', include('emoblog.urls')),
"""
from django.urls import path

from . import views

app_name = "emoblog"

urlpatterns = [
    # Blogs
    path("blogs/", views.BlogListView.as_view(), name="blog_list"),
    path("blogs/clean/", views.BlogCleanAllView.as_view(), name="blog_clean_all"),
    path("blogs/<int:pk>/", views.BlogDetailView.as_view(), name="blog_detail"),
    path("blogs/<int:pk>/clean/", views.BlogCleanView.as_view(), name="blog_clean"),

    # Entries
    path("entries/", views.EntryListView.as_view(), name="entry_list"),
    path("entries/<int:pk>/", views.EntryDetailView.as_view(), name="entry_detail"),
]
