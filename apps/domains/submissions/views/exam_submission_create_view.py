# PATH: apps/domains/submissions/views/exam_submission_create_view.py
from __future__ import annotations

from drf_yasg.utils import swagger_auto_schema
from rest_framework.views import APIView
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework import status

from apps.core.permissions import IsStudent
from apps.domains.submissions.serializers.submission import (
    SubmissionCreateSerializer,
    SubmissionSerializer,
)
from apps.domains.submissions.services.submission_service import record_submission


class ExamSubmissionCreateView(APIView):
    """
    POST /api/v1/submissions/exams/{exam_id}/

    body:
    {
      "answers": {"<question_id>": "text", ...},
      "cheating_detected": false
    }
    """

    permission_classes = [IsAuthenticated, IsStudent]

    @swagger_auto_schema(request_body=SubmissionCreateSerializer)
    def post(self, request, exam_id: int):
        ser = SubmissionCreateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        submission = record_submission(
            exam_id=int(exam_id),
            student_id=int(request.user.student_profile.id),
            answers=ser.validated_data["answers"],
            cheating_detected=ser.validated_data["cheating_detected"],
        )

        return Response(
            SubmissionSerializer(submission).data,
            status=status.HTTP_201_CREATED,
        )
