# PATH: apps/api/common/models.py
from django.db import models


class TimestampModel(models.Model):
    """
    생성 / 수정 시간 자동 기록 추상 모델
    """
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True


class BaseModel(TimestampModel):
    """
    시험 정의 계열(Exam / ExamQuestion) 공통 베이스.
    작성 흐름(admin)이 소유하고, 채점 코어는 읽기만 한다.
    """
    class Meta:
        abstract = True
