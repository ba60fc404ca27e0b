# apps/domains/submissions/models/submission.py
from __future__ import annotations

from django.db import models
from django.utils import timezone

from apps.api.common.models import TimestampModel


class Submission(TimestampModel):
    """
    submissions = "시험 1회 응시 기록 + 저장 점수"

    - score 는 제출 시점에 자동채점으로 확정, 이후 재계산하지 않는다
    - 제출 이후 score / manual_score_adjustment 를 쓰는 곳은
      appeals.services.appeal_resolver 하나뿐이다
    - score = 자동채점 점수 + manual_score_adjustment
    """

    exam = models.ForeignKey(
        "exams.Exam",
        on_delete=models.CASCADE,
        related_name="submissions",
    )
    student = models.ForeignKey(
        "students.Student",
        on_delete=models.CASCADE,
        related_name="submissions",
    )

    # { "<question_id>": "answer text" } / 키 없음 = 미응답
    answers = models.JSONField(default=dict, blank=True)

    submitted_at = models.DateTimeField(default=timezone.now)

    # 부정행위 감지 결과 (표시용, 점수에 영향 없음)
    cheating_detected = models.BooleanField(default=False)

    score = models.PositiveIntegerField(null=True, blank=True)

    # 이의신청 승인으로 누적된 가산점 (항상 points_per_question 의 배수)
    manual_score_adjustment = models.PositiveIntegerField(default=0)

    class Meta:
        db_table = "submissions_submission"
        constraints = [
            models.UniqueConstraint(
                fields=["exam", "student"],
                name="uniq_submission_exam_student",
            )
        ]
        indexes = [
            models.Index(fields=["student", "submitted_at"], name="submissions_student_sub_idx"),
        ]

    def __str__(self) -> str:
        return (
            f"Submission({self.id}) exam={self.exam_id} "
            f"student={self.student_id} score={self.score}"
        )
