# apps/domains/submissions/urls.py
from django.urls import path

from apps.domains.submissions.views.exam_submission_create_view import (
    ExamSubmissionCreateView,
)

urlpatterns = [
    path(
        "exams/<int:exam_id>/",
        ExamSubmissionCreateView.as_view(),
        name="exam-submission-create",
    ),
]
