# apps/domains/submissions/serializers/submission.py
from rest_framework import serializers
from apps.domains.submissions.models import Submission


class SubmissionSerializer(serializers.ModelSerializer):
    class Meta:
        model = Submission
        fields = (
            "id",
            "exam",
            "student",
            "answers",
            "submitted_at",
            "cheating_detected",
            "score",
            "manual_score_adjustment",
        )
        read_only_fields = fields


class SubmissionCreateSerializer(serializers.Serializer):
    answers = serializers.DictField(
        child=serializers.CharField(allow_blank=True, trim_whitespace=False),
        required=False,
        default=dict,
    )
    cheating_detected = serializers.BooleanField(required=False, default=False)
