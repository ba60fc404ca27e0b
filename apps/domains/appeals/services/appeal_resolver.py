# PATH: apps/domains/appeals/services/appeal_resolver.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from django.db import DatabaseError, transaction
from django.utils import timezone

from apps.api.common.exceptions import (
    InvalidStateError,
    NotFoundError,
    TransactionConflictError,
)
from apps.domains.appeals.models import Appeal
from apps.domains.exams.models import Exam
from apps.domains.submissions.models import Submission

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolveOutcome:
    appeal_id: int
    status: str
    submission_id: Optional[int]
    credited: int
    score: Optional[int]
    manual_score_adjustment: Optional[int]


# ============================================================
# 이의신청 처리 (승인 / 반려)
#
# Submission.score / manual_score_adjustment 와 Appeal.status 를
# 제출 이후 변경하는 유일한 진입점.
#
# - pending 확인은 같은 트랜잭션 안에서 row lock + 조건부 update 로 한다
# - 승인 1건 = points_per_question 1회 가산 (전체 재채점 X)
# - 실패 시 세 레코드 모두 변경 없음, appeal 은 pending 유지
# ============================================================


def _lock_pending_appeal(appeal_id: int) -> Appeal:
    appeal = Appeal.objects.select_for_update().filter(id=appeal_id).first()
    if appeal is None:
        raise NotFoundError(f"appeal {appeal_id} not found")
    if appeal.status != Appeal.Status.PENDING:
        raise InvalidStateError(
            f"appeal {appeal_id} is already {appeal.status}",
        )
    return appeal


def _transition(appeal: Appeal, to_status: str) -> None:
    """pending → to_status compare-and-set. 한 행이 아니면 전체 롤백."""
    now = timezone.now()
    updated = (
        Appeal.objects
        .filter(id=appeal.id, status=Appeal.Status.PENDING)
        .update(status=to_status, resolved_at=now, updated_at=now)
    )
    if updated != 1:
        raise InvalidStateError(f"appeal {appeal.id} is no longer pending")

    appeal.status = to_status
    appeal.resolved_at = now


def _credit_submission(submission: Submission, points: int) -> None:
    submission.score = int(submission.score or 0) + points
    submission.manual_score_adjustment = int(submission.manual_score_adjustment or 0) + points
    submission.save(update_fields=["score", "manual_score_adjustment", "updated_at"])


def accept_appeal(appeal_id: int) -> ResolveOutcome:
    """
    승인: 3 read + 2 write 를 하나의 트랜잭션으로.

    1) Appeal lock + pending 확인
    2) Exam 조회 → points_per_question
    3) Submission(exam, student) lock
    4) score, manual_score_adjustment += points
    5) Appeal pending → resolved (CAS)
    """
    try:
        with transaction.atomic():
            appeal = _lock_pending_appeal(appeal_id)

            exam = Exam.objects.filter(id=appeal.exam_id).first()
            if exam is None:
                raise NotFoundError(f"exam {appeal.exam_id} not found")
            points = int(exam.points_per_question)

            submission = (
                Submission.objects
                .select_for_update()
                .filter(exam_id=appeal.exam_id, student_id=appeal.student_id)
                .first()
            )
            if submission is None:
                raise NotFoundError(
                    f"no submission for exam {appeal.exam_id} / student {appeal.student_id}",
                )

            _credit_submission(submission, points)
            _transition(appeal, Appeal.Status.RESOLVED)
    except DatabaseError as exc:
        logger.exception("accept appeal failed (appeal_id=%s)", appeal_id)
        raise TransactionConflictError(
            f"could not accept appeal {appeal_id}; nothing was changed",
        ) from exc

    logger.info(
        "appeal accepted: appeal_id=%s submission_id=%s credited=%s score=%s adjustment=%s",
        appeal.id,
        submission.id,
        points,
        submission.score,
        submission.manual_score_adjustment,
    )

    return ResolveOutcome(
        appeal_id=int(appeal.id),
        status=appeal.status,
        submission_id=int(submission.id),
        credited=points,
        score=submission.score,
        manual_score_adjustment=submission.manual_score_adjustment,
    )


def reject_appeal(appeal_id: int) -> ResolveOutcome:
    """
    반려: Appeal 단건 상태 변경. 다른 레코드는 건드리지 않는다.
    이미 처리된 appeal 은 InvalidStateError.
    """
    try:
        with transaction.atomic():
            appeal = _lock_pending_appeal(appeal_id)
            _transition(appeal, Appeal.Status.REJECTED)
    except DatabaseError as exc:
        logger.exception("reject appeal failed (appeal_id=%s)", appeal_id)
        raise TransactionConflictError(
            f"could not reject appeal {appeal_id}; nothing was changed",
        ) from exc

    logger.info("appeal rejected: appeal_id=%s", appeal.id)

    return ResolveOutcome(
        appeal_id=int(appeal.id),
        status=appeal.status,
        submission_id=None,
        credited=0,
        score=None,
        manual_score_adjustment=None,
    )
