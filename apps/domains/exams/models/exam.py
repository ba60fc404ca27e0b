from django.core.exceptions import ValidationError
from django.db import models
from django.utils import timezone

from apps.api.common.models import BaseModel


class Exam(BaseModel):
    """
    시험 정의
    - 문항 배점은 시험 단위로 균일 (points_per_question)
    - start_at 이 지나면 문항/정답 변경 금지 (채점 기준 고정)
    """

    title = models.CharField(max_length=255)

    # 응시 대상 그룹 이름 목록 (예: ["10A", "10B"])
    assigned_groups = models.JSONField(default=list, blank=True)

    start_at = models.DateTimeField()
    end_at = models.DateTimeField()

    points_per_question = models.PositiveIntegerField(default=10)

    announcement = models.TextField(blank=True)

    class Meta:
        db_table = "exams_exam"
        ordering = ["-created_at"]

    def __str__(self):
        return self.title

    @property
    def has_started(self) -> bool:
        return bool(self.start_at and self.start_at <= timezone.now())

    def clean(self):
        errors = {}
        if self.points_per_question is not None and self.points_per_question < 1:
            errors["points_per_question"] = "points_per_question must be at least 1"
        if self.start_at and self.end_at and self.end_at <= self.start_at:
            errors["end_at"] = "end_at must be after start_at"
        if errors:
            raise ValidationError(errors)
