# apps/api/v1/urls.py
from django.urls import path, include

urlpatterns = [
    # =========================
    # Domain APIs
    # =========================
    path("submissions/", include("apps.domains.submissions.urls")),
    path("results/", include("apps.domains.results.urls")),
    path("appeals/", include("apps.domains.appeals.urls")),
]
