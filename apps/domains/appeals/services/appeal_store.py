# PATH: apps/domains/appeals/services/appeal_store.py
from __future__ import annotations

import logging
from typing import Optional

from django.db import IntegrityError, transaction
from django.db.models import QuerySet
from django.utils import timezone

from apps.api.common.exceptions import NotFoundError, ValidationError
from apps.domains.appeals.models import Appeal
from apps.domains.exams.models import Exam, ExamQuestion
from apps.domains.students.models import Student

logger = logging.getLogger(__name__)


def _duplicate_error() -> ValidationError:
    return ValidationError(
        "an open or accepted appeal already exists for this question",
        code="DUPLICATE_APPEAL",
    )


def create_appeal(
    *,
    student_id: int,
    exam_id: int,
    question_id: int,
    reason: Optional[str],
) -> Appeal:
    """
    이의신청 생성

    - reason 공백이면 ValidationError (레코드 생성 X)
    - 학생/시험/문항 이름·내용은 이 시점 값으로 스냅샷
    - (student, exam, question) 당 pending/resolved 는 1건 (rejected 이후 재신청 가능)
    """
    reason = (reason or "").strip()
    if not reason:
        raise ValidationError("reason must not be empty")

    student = Student.objects.filter(id=student_id).first()
    if student is None:
        raise NotFoundError(f"student {student_id} not found")

    exam = Exam.objects.filter(id=exam_id).first()
    if exam is None:
        raise NotFoundError(f"exam {exam_id} not found")

    question = ExamQuestion.objects.filter(id=question_id, exam_id=exam.id).first()
    if question is None:
        raise NotFoundError(f"question {question_id} not found in exam {exam_id}")

    try:
        with transaction.atomic():
            already = Appeal.objects.filter(
                student_id=student.id,
                exam_id=exam.id,
                question_id=question.id,
                status__in=Appeal.BLOCKING_STATUSES,
            ).exists()
            if already:
                raise _duplicate_error()

            appeal = Appeal.objects.create(
                student=student,
                exam=exam,
                question=question,
                student_name=student.name,
                exam_title=exam.title,
                question_text=question.text,
                reason=reason,
                submitted_at=timezone.now(),
                status=Appeal.Status.PENDING,
            )
    except IntegrityError:
        # 동시 생성 → partial unique constraint
        raise _duplicate_error() from None

    logger.info(
        "appeal created: appeal_id=%s student_id=%s exam_id=%s question_id=%s",
        appeal.id,
        student.id,
        exam.id,
        question.id,
    )
    return appeal


def list_appeals(
    *,
    status: Optional[str] = None,
    student_id: Optional[int] = None,
    exam_id: Optional[int] = None,
) -> QuerySet:
    """
    검토 큐 / 학생 본인 이력 조회
    - 최신 제출 순 (submitted_at desc)
    """
    qs = Appeal.objects.all()

    if status:
        if status not in Appeal.Status.values:
            raise ValidationError(f"unknown appeal status: {status}")
        qs = qs.filter(status=status)
    if student_id is not None:
        qs = qs.filter(student_id=student_id)
    if exam_id is not None:
        qs = qs.filter(exam_id=exam_id)

    return qs.order_by("-submitted_at", "-id")
