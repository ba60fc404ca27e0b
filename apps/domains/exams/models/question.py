from django.core.exceptions import ValidationError
from django.db import models

from apps.api.common.models import BaseModel
from .exam import Exam


class ExamQuestion(BaseModel):
    """
    시험 문항 정의

    채점 시 kind 는 구분하지 않는다.
    객관식도 correct_answer 문자열 비교만 한다 (options 와 대조 X).
    """

    class Kind(models.TextChoices):
        MULTIPLE_CHOICE = "multiple-choice", "Multiple choice"
        FREE_FORM = "free-form", "Free form"

    exam = models.ForeignKey(
        Exam,
        on_delete=models.CASCADE,
        related_name="questions",
    )

    number = models.PositiveIntegerField()  # 1번, 2번 ...
    text = models.TextField()

    kind = models.CharField(
        max_length=20,
        choices=Kind.choices,
        default=Kind.MULTIPLE_CHOICE,
    )

    # 객관식 보기 (예: ["Paris", "London", "Rome"])
    options = models.JSONField(default=list, blank=True)

    correct_answer = models.CharField(max_length=500)

    class Meta:
        db_table = "exams_question"
        unique_together = ("exam", "number")
        ordering = ["number"]

    def __str__(self):
        return f"{self.exam} Q{self.number}"

    def clean(self):
        if not (self.text or "").strip():
            raise ValidationError({"text": "question text is required"})
        if not (self.correct_answer or "").strip():
            raise ValidationError({"correct_answer": "correct answer is required"})

        # 시작된 시험의 문항/정답은 고정
        if self.exam_id and self.exam.has_started:
            raise ValidationError("exam has already started; questions are locked")
