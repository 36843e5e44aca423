"""URL configuration for the network service project."""

from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/v1/network/", include("core.urls")),
]
