# PATH: apps/domains/appeals/views/student_appeal_view.py
from __future__ import annotations

from drf_yasg.utils import swagger_auto_schema
from rest_framework import status as drf_status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.core.permissions import IsStudent
from apps.domains.appeals.serializers.appeal import (
    AppealCreateSerializer,
    AppealSerializer,
    MyAppealQuerySerializer,
)
from apps.domains.appeals.services.appeal_store import create_appeal, list_appeals


class MyAppealListCreateView(APIView):
    """
    GET  /appeals/me/?exam=<exam_id>   본인 이의신청 목록
    POST /appeals/                     이의신청 생성

    body:
    {
      "exam": number,
      "question": number,
      "reason": "..."
    }
    """

    permission_classes = [IsAuthenticated, IsStudent]

    @swagger_auto_schema(query_serializer=MyAppealQuerySerializer)
    def get(self, request):
        query = MyAppealQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        qs = list_appeals(
            student_id=int(request.user.student_profile.id),
            exam_id=query.validated_data.get("exam"),
        )
        return Response(AppealSerializer(qs, many=True).data)

    @swagger_auto_schema(request_body=AppealCreateSerializer)
    def post(self, request):
        ser = AppealCreateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        appeal = create_appeal(
            student_id=int(request.user.student_profile.id),
            exam_id=ser.validated_data["exam"],
            question_id=ser.validated_data["question"],
            reason=ser.validated_data["reason"],
        )
        return Response(
            AppealSerializer(appeal).data,
            status=drf_status.HTTP_201_CREATED,
        )
