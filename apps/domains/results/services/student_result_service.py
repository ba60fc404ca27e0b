# apps/domains/results/services/student_result_service.py
from __future__ import annotations

from typing import Any, Dict, List

from apps.api.common.exceptions import NotFoundError
from apps.domains.appeals.models import Appeal
from apps.domains.exams.services.exam_lookup import get_exam
from apps.domains.results.services.score_calculator import (
    answer_key_for,
    question_flags,
    summarize,
)
from apps.domains.submissions.services.submission_service import find_submission


def build_student_exam_result(*, exam_id: int, student_id: int) -> Dict[str, Any]:
    """
    학생 결과 화면 payload

    - 점수는 Submission.score (저장값) 기준
    - 문항별 정오는 score_calculator 로 재판정 (저장 점수 산출과 같은 matcher)
    - appealed: 해당 문항에 이미 이의신청이 있으면 True (버튼 숨김용)
    """
    exam = get_exam(exam_id)
    submission = find_submission(exam.id, student_id)
    if submission is None:
        raise NotFoundError(f"no submission for exam {exam_id}")

    questions = list(exam.questions.all())
    answers = submission.answers or {}
    flags = question_flags(questions, answers)

    appealed_ids = set(
        Appeal.objects
        .filter(exam_id=exam.id, student_id=student_id)
        .values_list("question_id", flat=True)
    )

    summary = summarize(
        questions=questions,
        answers=answers,
        points_per_question=exam.points_per_question,
        score=submission.score,
        manual_adjustment=submission.manual_score_adjustment,
    )

    items: List[Dict[str, Any]] = []
    for q in questions:
        key = answer_key_for(q)
        is_correct = flags[key]
        items.append({
            "question_id": q.id,
            "number": q.number,
            "text": q.text,
            "kind": q.kind,
            "answer": answers.get(key),
            "correct_answer": q.correct_answer,
            "is_correct": is_correct,
            "earned": exam.points_per_question if is_correct else 0,
            "appealed": q.id in appealed_ids,
        })

    return {
        "exam_id": exam.id,
        "exam_title": exam.title,
        "submission_id": submission.id,
        "submitted_at": submission.submitted_at,
        "cheating_detected": submission.cheating_detected,
        "points_per_question": exam.points_per_question,
        "score": summary.score,
        "max_score": summary.max_score,
        "manual_score_adjustment": submission.manual_score_adjustment,
        "correct_count": summary.correct_count,
        "question_count": summary.question_count,
        "percentage": summary.percentage,
        "items": items,
    }
