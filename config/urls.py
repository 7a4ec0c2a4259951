from django.contrib import admin
from django.urls import include, path

from exhibitions.handlers import HealthView

urlpatterns = [
    path("health", HealthView.as_view(), name="health"),
    path("admin/", admin.site.urls),
    path("api/", include("exhibitions.urls")),
]
