# PATH: apps/domains/results/services/score_calculator.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Mapping, Optional

from apps.domains.results.services.answer_matcher import matches

# ============================================================
# 점수 계산 (순수 함수, DB 접근 없음)
#
# 저장 점수 산출(제출 시점)과 화면 표시용 문항별 정오 판정이
# 모두 여기를 거친다. 두 경로가 같은 matcher 를 써야 어긋나지 않는다.
# ============================================================


@dataclass(frozen=True)
class ScoreSummary:
    score: int
    max_score: int
    correct_count: int
    question_count: int
    percentage: float


def answer_key_for(question: Any) -> str:
    # answers JSON 의 key 는 문항 id 문자열
    return str(question.id)


def question_flags(
    questions: Iterable[Any],
    answers: Optional[Mapping[str, Any]],
) -> Dict[str, bool]:
    answers = answers or {}
    return {
        answer_key_for(q): matches(answers.get(answer_key_for(q)), q.correct_answer)
        for q in questions
    }


def correct_count(
    questions: Iterable[Any],
    answers: Optional[Mapping[str, Any]],
) -> int:
    return sum(1 for ok in question_flags(questions, answers).values() if ok)


def auto_score(
    questions: Iterable[Any],
    answers: Optional[Mapping[str, Any]],
    points_per_question: int,
) -> int:
    return correct_count(questions, answers) * int(points_per_question)


def summarize(
    *,
    questions: Iterable[Any],
    answers: Optional[Mapping[str, Any]],
    points_per_question: int,
    score: Optional[int],
    manual_adjustment: Optional[int],
) -> ScoreSummary:
    """
    결과 화면용 요약.

    correct_count = autoScore/ppq + manualAdjustment/ppq
    (이의신청 가산점은 항상 ppq 의 정수배라 나눗셈이 정확하다)

    percentage = score / (문항수 * ppq) * 100, 문항 0개면 0.0
    """
    questions = list(questions)
    ppq = int(points_per_question)

    auto_correct = correct_count(questions, answers)
    adjusted = int(manual_adjustment or 0) // ppq if ppq else 0

    max_score = len(questions) * ppq
    stored = int(score or 0)
    percentage = (stored / max_score) * 100 if max_score > 0 else 0.0

    return ScoreSummary(
        score=stored,
        max_score=max_score,
        correct_count=auto_correct + adjusted,
        question_count=len(questions),
        percentage=float(percentage),
    )
