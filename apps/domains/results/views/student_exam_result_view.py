# apps/domains/results/views/student_exam_result_view.py
from __future__ import annotations

from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated

from apps.core.permissions import IsStudent
from apps.domains.results.serializers.student_exam_result import (
    StudentExamResultSerializer,
)
from apps.domains.results.services.student_result_service import (
    build_student_exam_result,
)


class MyExamResultView(APIView):
    """
    GET /results/me/exams/<exam_id>/

    - 저장 점수 + 문항별 정오 + 이의신청 여부
    """

    permission_classes = [IsAuthenticated, IsStudent]

    def get(self, request, exam_id: int):
        data = build_student_exam_result(
            exam_id=int(exam_id),
            student_id=int(request.user.student_profile.id),
        )
        return Response(StudentExamResultSerializer(data).data)
