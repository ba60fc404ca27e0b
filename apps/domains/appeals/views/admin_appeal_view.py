# PATH: apps/domains/appeals/views/admin_appeal_view.py
from __future__ import annotations

from dataclasses import asdict

from django_filters.rest_framework import DjangoFilterBackend
from drf_yasg.utils import swagger_auto_schema
from rest_framework.generics import ListAPIView
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.core.permissions import IsTeacherOrAdmin
from apps.domains.appeals.filters import AppealFilter
from apps.domains.appeals.serializers.appeal import (
    AppealSerializer,
    ResolveOutcomeSerializer,
)
from apps.domains.appeals.services.appeal_resolver import accept_appeal, reject_appeal
from apps.domains.appeals.services.appeal_store import list_appeals


class AdminAppealListView(ListAPIView):
    """
    GET /appeals/admin/?status=pending&student=&exam=

    교사 검토 큐 (최신 제출 순)
    """

    permission_classes = [IsAuthenticated, IsTeacherOrAdmin]
    serializer_class = AppealSerializer
    filter_backends = [DjangoFilterBackend]
    filterset_class = AppealFilter

    def get_queryset(self):
        return list_appeals()


class AdminAppealAcceptView(APIView):
    """
    POST /appeals/admin/{appeal_id}/accept/

    - 점수 가산 + 상태 resolved 를 하나의 트랜잭션으로
    - pending 이 아니면 409 INVALID_STATE
    """

    permission_classes = [IsAuthenticated, IsTeacherOrAdmin]

    @swagger_auto_schema(request_body=None, responses={200: ResolveOutcomeSerializer})
    def post(self, request, appeal_id: int):
        outcome = accept_appeal(int(appeal_id))
        return Response(ResolveOutcomeSerializer(asdict(outcome)).data)


class AdminAppealRejectView(APIView):
    """
    POST /appeals/admin/{appeal_id}/reject/
    """

    permission_classes = [IsAuthenticated, IsTeacherOrAdmin]

    @swagger_auto_schema(request_body=None, responses={200: ResolveOutcomeSerializer})
    def post(self, request, appeal_id: int):
        outcome = reject_appeal(int(appeal_id))
        return Response(ResolveOutcomeSerializer(asdict(outcome)).data)
