# apps/domains/appeals/serializers/appeal.py
from rest_framework import serializers

from apps.domains.appeals.models import Appeal


class AppealSerializer(serializers.ModelSerializer):
    class Meta:
        model = Appeal
        fields = [
            "id",
            "student",
            "student_name",
            "exam",
            "exam_title",
            "question",
            "question_text",
            "reason",
            "submitted_at",
            "status",
            "resolved_at",
        ]
        read_only_fields = fields


class AppealCreateSerializer(serializers.Serializer):
    exam = serializers.IntegerField()
    question = serializers.IntegerField()

    # 공백 검사는 appeal_store 에서 (ValidationError 코드 통일)
    reason = serializers.CharField(allow_blank=True, trim_whitespace=False)


class MyAppealQuerySerializer(serializers.Serializer):
    # ?exam= (빈 값이면 전체)
    exam = serializers.IntegerField(required=False, min_value=1)


class ResolveOutcomeSerializer(serializers.Serializer):
    appeal_id = serializers.IntegerField()
    status = serializers.CharField()
    submission_id = serializers.IntegerField(allow_null=True)
    credited = serializers.IntegerField()
    score = serializers.IntegerField(allow_null=True)
    manual_score_adjustment = serializers.IntegerField(allow_null=True)
