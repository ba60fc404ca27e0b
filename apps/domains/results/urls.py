# PATH: apps/domains/results/urls.py

from django.urls import path

from apps.domains.results.views.student_exam_result_view import MyExamResultView


urlpatterns = [
    path(
        "me/exams/<int:exam_id>/",
        MyExamResultView.as_view(),
        name="my-exam-result",
    ),
]
