# PATH: apps/domains/exams/services/exam_lookup.py
from __future__ import annotations

from apps.api.common.exceptions import NotFoundError
from apps.domains.exams.models import Exam


def get_exam(exam_id: int) -> Exam:
    """
    시험 단건 조회 (문항 prefetch)

    채점/이의신청 코어는 시험을 읽기만 한다.
    """
    exam = (
        Exam.objects
        .prefetch_related("questions")
        .filter(id=exam_id)
        .first()
    )
    if exam is None:
        raise NotFoundError(f"exam {exam_id} not found")
    return exam
