# PATH: apps/domains/results/views/__init__.py

from .student_exam_result_view import MyExamResultView

__all__ = [
    "MyExamResultView",
]
