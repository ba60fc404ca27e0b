# PATH: apps/domains/appeals/urls.py

from django.urls import path

# ======================================================
# Student
# ======================================================
from apps.domains.appeals.views.student_appeal_view import MyAppealListCreateView

# ======================================================
# Admin / Teacher
# ======================================================
from apps.domains.appeals.views.admin_appeal_view import (
    AdminAppealAcceptView,
    AdminAppealListView,
    AdminAppealRejectView,
)


urlpatterns = [
    # ============================
    # Student
    # ============================
    path("", MyAppealListCreateView.as_view(), name="appeal-create"),
    path("me/", MyAppealListCreateView.as_view(), name="my-appeals"),

    # ============================
    # Admin / Teacher
    # ============================
    path("admin/", AdminAppealListView.as_view(), name="admin-appeals"),
    path(
        "admin/<int:appeal_id>/accept/",
        AdminAppealAcceptView.as_view(),
        name="admin-appeal-accept",
    ),
    path(
        "admin/<int:appeal_id>/reject/",
        AdminAppealRejectView.as_view(),
        name="admin-appeal-reject",
    ),
]
