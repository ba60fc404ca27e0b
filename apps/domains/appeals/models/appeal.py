# apps/domains/appeals/models/appeal.py
from __future__ import annotations

from django.db import models
from django.utils import timezone

from apps.api.common.models import TimestampModel


class Appeal(TimestampModel):
    """
    문항 단위 이의신청

    상태 전이 (단방향):
      pending → resolved (승인, 점수 가산)
      pending → rejected (반려)

    student_name / exam_title / question_text 는 생성 시점 스냅샷이다.
    검토 화면 조인 없이 쓰기 위한 값이며 이후 원본이 바뀌어도 갱신하지 않는다.
    """

    class Status(models.TextChoices):
        PENDING = "pending", "Pending"
        RESOLVED = "resolved", "Resolved"
        REJECTED = "rejected", "Rejected"

    # 같은 문항에 대해 동시에 1건만 허용되는 상태 (rejected 는 재신청 가능)
    BLOCKING_STATUSES = (Status.PENDING, Status.RESOLVED)

    student = models.ForeignKey(
        "students.Student",
        on_delete=models.CASCADE,
        related_name="appeals",
    )
    exam = models.ForeignKey(
        "exams.Exam",
        on_delete=models.CASCADE,
        related_name="appeals",
    )
    question = models.ForeignKey(
        "exams.ExamQuestion",
        on_delete=models.CASCADE,
        related_name="appeals",
    )

    # 스냅샷 (읽기 최적화)
    student_name = models.CharField(max_length=100)
    exam_title = models.CharField(max_length=255)
    question_text = models.TextField()

    reason = models.TextField()
    submitted_at = models.DateTimeField(default=timezone.now, db_index=True)

    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.PENDING,
    )
    resolved_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = "appeals_appeal"
        ordering = ["-submitted_at", "-id"]
        constraints = [
            models.UniqueConstraint(
                fields=["student", "exam", "question"],
                name="uniq_open_appeal_per_question",
                condition=models.Q(status__in=["pending", "resolved"]),
            )
        ]
        indexes = [
            models.Index(fields=["status", "submitted_at"], name="appeals_status_sub_idx"),
            models.Index(fields=["student", "exam"], name="appeals_student_exam_idx"),
        ]

    def __str__(self):
        return f"Appeal({self.id}) {self.student_name} / {self.exam_title} [{self.status}]"

    @property
    def is_pending(self) -> bool:
        return self.status == self.Status.PENDING
