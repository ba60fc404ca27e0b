from datetime import timedelta

import pytest
from django.contrib import admin
from django.core.exceptions import ValidationError
from django.test import RequestFactory
from django.utils import timezone

from apps.api.common.exceptions import NotFoundError
from apps.domains.exams.admin import ExamQuestionInline
from apps.domains.exams.models import Exam, ExamQuestion
from apps.domains.exams.services.exam_lookup import get_exam


@pytest.mark.django_db
class TestExamValidation:
    def _exam(self, **kwargs):
        now = timezone.now()
        data = {
            "title": "Algebra",
            "start_at": now + timedelta(days=1),
            "end_at": now + timedelta(days=1, hours=1),
            "points_per_question": 10,
        }
        data.update(kwargs)
        return Exam(**data)

    def test_valid_exam(self):
        self._exam().full_clean()

    def test_end_must_follow_start(self):
        exam = self._exam()
        exam.end_at = exam.start_at
        with pytest.raises(ValidationError) as exc:
            exam.full_clean()
        assert "end_at" in exc.value.message_dict

    def test_points_must_be_positive(self):
        with pytest.raises(ValidationError) as exc:
            self._exam(points_per_question=0).full_clean()
        assert "points_per_question" in exc.value.message_dict


@pytest.mark.django_db
class TestQuestionLock:
    def test_questions_editable_before_start(self, make_exam):
        exam = make_exam(started=False)
        q = ExamQuestion(exam=exam, number=3, text="2+2?", correct_answer="4")
        q.full_clean()

    def test_questions_locked_after_start(self, make_exam):
        exam = make_exam(started=True)
        q = exam.questions.first()
        q.correct_answer = "London"
        with pytest.raises(ValidationError):
            q.full_clean()

    def test_correct_answer_required(self, make_exam):
        exam = make_exam(started=False)
        q = ExamQuestion(exam=exam, number=3, text="2+2?", correct_answer="   ")
        with pytest.raises(ValidationError):
            q.clean()


@pytest.mark.django_db
class TestGetExam:
    def test_returns_exam_with_ordered_questions(self, exam):
        found = get_exam(exam.id)
        assert found.id == exam.id
        assert [q.number for q in found.questions.all()] == [1, 2]

    def test_missing_exam(self):
        with pytest.raises(NotFoundError):
            get_exam(999999)


@pytest.mark.django_db
class TestExamQuestionInline:
    @pytest.fixture
    def admin_request(self, django_user_model):
        request = RequestFactory().get("/admin/exams/exam/")
        request.user = django_user_model.objects.create_superuser(
            username="root", email="root@example.com", password="pass1234"
        )
        return request

    def _inline(self):
        return ExamQuestionInline(Exam, admin.site)

    def test_started_exam_questions_cannot_be_added_or_deleted(self, make_exam, admin_request):
        exam = make_exam(started=True)
        inline = self._inline()

        assert inline.has_add_permission(admin_request, exam) is False
        assert inline.has_delete_permission(admin_request, exam) is False

    def test_upcoming_exam_questions_stay_editable(self, make_exam, admin_request):
        exam = make_exam(started=False)
        inline = self._inline()

        assert inline.has_add_permission(admin_request, exam) is True
        assert inline.has_delete_permission(admin_request, exam) is True
        assert inline.has_add_permission(admin_request, None) is True
