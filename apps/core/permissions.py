# PATH: apps/core/permissions.py
from __future__ import annotations

from rest_framework.permissions import BasePermission


def _role(u) -> str:
    v = getattr(u, "role", None) or ""
    return str(v).upper()


def is_teacher_user(u) -> bool:
    return bool(
        getattr(u, "is_superuser", False)
        or getattr(u, "is_staff", False)
        or _role(u) == "TEACHER"
    )


class IsTeacherOrAdmin(BasePermission):
    """
    교사 / 관리자 전용 Permission
    - 이의신청 검토 큐, 승인/반려
    """

    def has_permission(self, request, view):
        u = getattr(request, "user", None)
        return bool(u and u.is_authenticated and is_teacher_user(u))


class IsStudent(BasePermission):
    """
    학생 전용 Permission
    - 로그인 필수
    - User ↔ Student OneToOne 연결 필수
    """

    message = "Student account required."

    def has_permission(self, request, view):
        user = request.user
        return bool(
            user
            and user.is_authenticated
            and hasattr(user, "student_profile")
        )
