from django.contrib import admin
from django.urls import include, path

from .views import HealthView, PublicStatsView

urlpatterns = [
    path("admin/", admin.site.urls),

    path("api/health/", HealthView.as_view(), name="health"),
    path("api/public/stats/", PublicStatsView.as_view(), name="public-stats"),

    path("api/", include("accounts.urls")),
    path("api/", include("projects.urls")),
    path("api/", include("mrv.urls")),
    path("api/", include("scoring.urls")),
    path("api/", include("credits.urls")),
    path("api/", include("notary.urls")),
]
