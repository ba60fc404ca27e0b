from django.db import models
from django.conf import settings

from apps.api.common.models import TimestampModel


class Student(TimestampModel):
    """
    학생 명부 (최소 필드)
    - 이의신청 생성 시 name 이 스냅샷으로 복사된다
    """

    class Status(models.TextChoices):
        ACTIVE = "active", "Active"
        DISABLED = "disabled", "Disabled"

    # 로그인 사용자 연결 (없는 학생도 허용)
    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="student_profile",
        help_text="학생이 로그인 계정을 가지는 경우 연결",
    )

    name = models.CharField(max_length=100)
    group = models.CharField(max_length=100, db_index=True)
    email = models.CharField(max_length=150, blank=True)

    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.ACTIVE,
    )

    class Meta:
        db_table = "students_student"
        ordering = ["-id"]

    def __str__(self):
        return self.name
