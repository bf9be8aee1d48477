"""Root URL configuration: all API routes live under /api/."""

from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/", include("apps.accounts.urls")),
    path("api/profile/", include("apps.profiles.urls")),
    path("api/", include("apps.posts.urls")),
]
