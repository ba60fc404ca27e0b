# PATH: apps/domains/results/services/answer_matcher.py
from __future__ import annotations

from typing import Optional


def _norm(s: str) -> str:
    return s.strip().lower()


def matches(answer: Optional[str], correct_answer: str) -> bool:
    """
    정답 비교 규칙 (객관식 / 서술형 공통)

    - 양끝 공백 제거 + 소문자 변환 후 완전 일치
    - 미응답(None)은 항상 오답
    - 객관식도 보기 목록과 대조하지 않는다 (정답 문자열 비교만)
    """
    if answer is None:
        return False
    return _norm(str(answer)) == _norm(str(correct_answer or ""))
