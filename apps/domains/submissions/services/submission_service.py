# apps/domains/submissions/services/submission_service.py
from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from django.db import IntegrityError, transaction
from django.utils import timezone

from apps.api.common.exceptions import NotFoundError, ValidationError
from apps.domains.exams.services.exam_lookup import get_exam
from apps.domains.results.services.score_calculator import answer_key_for, auto_score
from apps.domains.students.models import Student
from apps.domains.submissions.models import Submission

logger = logging.getLogger(__name__)


def find_submission(exam_id: int, student_id: int) -> Optional[Submission]:
    """(exam, student) 당 제출은 0 또는 1건."""
    return (
        Submission.objects
        .filter(exam_id=exam_id, student_id=student_id)
        .first()
    )


def _clean_answers(exam, answers: Optional[Mapping[str, Any]]) -> dict:
    # 시험에 없는 문항 키는 버린다 / 값은 문자열로 고정
    known = {answer_key_for(q) for q in exam.questions.all()}
    cleaned = {}
    for k, v in (answers or {}).items():
        if str(k) in known and v is not None:
            cleaned[str(k)] = str(v)
    return cleaned


def record_submission(
    *,
    exam_id: int,
    student_id: int,
    answers: Optional[Mapping[str, Any]],
    cheating_detected: bool = False,
    submitted_at=None,
) -> Submission:
    """
    제출 1회 기록 + 자동채점 점수 확정.

    - 같은 (exam, student) 재제출 금지 (ALREADY_SUBMITTED)
    - score = 정답 수 * points_per_question, manual_score_adjustment = 0
    """
    exam = get_exam(exam_id)
    if not Student.objects.filter(id=student_id).exists():
        raise NotFoundError(f"student {student_id} not found")

    cleaned = _clean_answers(exam, answers)
    score = auto_score(exam.questions.all(), cleaned, exam.points_per_question)

    try:
        with transaction.atomic():
            if find_submission(exam.id, student_id) is not None:
                raise ValidationError(
                    "submission already exists for this exam",
                    code="ALREADY_SUBMITTED",
                )
            submission = Submission.objects.create(
                exam=exam,
                student_id=student_id,
                answers=cleaned,
                submitted_at=submitted_at or timezone.now(),
                cheating_detected=bool(cheating_detected),
                score=score,
                manual_score_adjustment=0,
            )
    except IntegrityError:
        # 동시 제출: unique(exam, student) 충돌
        raise ValidationError(
            "submission already exists for this exam",
            code="ALREADY_SUBMITTED",
        ) from None

    logger.info(
        "submission recorded: submission_id=%s exam_id=%s student_id=%s score=%s",
        submission.id,
        exam.id,
        student_id,
        score,
    )
    return submission
