from datetime import timedelta

import pytest
from django.utils import timezone
from rest_framework.test import APIClient

from apps.core.models import User
from apps.domains.exams.models import Exam, ExamQuestion
from apps.domains.students.models import Student
from apps.domains.submissions.models import Submission


@pytest.fixture
def make_exam(db):
    """Exam with questions given as (text, correct_answer) pairs."""

    def _make(
        title="Geography quiz",
        points_per_question=10,
        questions=(("Capital of France?", "Paris"), ("Answer to everything?", "42")),
        started=True,
    ):
        now = timezone.now()
        start_at = now - timedelta(hours=1) if started else now + timedelta(days=1)
        exam = Exam.objects.create(
            title=title,
            assigned_groups=["10A"],
            start_at=start_at,
            end_at=start_at + timedelta(hours=2),
            points_per_question=points_per_question,
        )
        for number, (text, correct) in enumerate(questions, start=1):
            ExamQuestion.objects.create(
                exam=exam,
                number=number,
                text=text,
                kind=ExamQuestion.Kind.FREE_FORM,
                correct_answer=correct,
            )
        return exam

    return _make


@pytest.fixture
def exam(make_exam):
    return make_exam()


@pytest.fixture
def student_user(db):
    return User.objects.create_user(username="aysel", password="pass1234", role=User.Role.STUDENT)


@pytest.fixture
def student(student_user):
    return Student.objects.create(user=student_user, name="Aysel Mammadova", group="10A")


@pytest.fixture
def teacher_user(db):
    return User.objects.create_user(username="teacher", password="pass1234", role=User.Role.TEACHER)


@pytest.fixture
def questions(exam):
    return list(exam.questions.order_by("number"))


@pytest.fixture
def submission(exam, student, questions):
    """q1 correct (with stray whitespace/case), q2 wrong → 10 points."""
    q1, q2 = questions
    return Submission.objects.create(
        exam=exam,
        student=student,
        answers={str(q1.id): " paris ", str(q2.id): "41"},
        score=10,
        manual_score_adjustment=0,
    )


@pytest.fixture
def api_client():
    return APIClient()
