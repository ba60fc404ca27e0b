from datetime import timedelta
from unittest import mock

import pytest
from django.db import IntegrityError
from django.utils import timezone

from apps.api.common.exceptions import NotFoundError, ValidationError
from apps.domains.appeals.models import Appeal
from apps.domains.appeals.services.appeal_resolver import accept_appeal, reject_appeal
from apps.domains.appeals.services.appeal_store import create_appeal, list_appeals
from apps.domains.students.models import Student


@pytest.mark.django_db
class TestCreateAppeal:
    def test_creates_pending_appeal_with_snapshot(self, exam, student, questions):
        q2 = questions[1]
        appeal = create_appeal(
            student_id=student.id,
            exam_id=exam.id,
            question_id=q2.id,
            reason="  42 and 41 are both accepted in the textbook  ",
        )

        assert appeal.id is not None
        assert appeal.status == Appeal.Status.PENDING
        assert appeal.student_name == "Aysel Mammadova"
        assert appeal.exam_title == "Geography quiz"
        assert appeal.question_text == "Answer to everything?"
        assert appeal.reason == "42 and 41 are both accepted in the textbook"
        assert appeal.submitted_at is not None
        assert appeal.resolved_at is None

    @pytest.mark.parametrize("reason", ["", "   ", "\n\t", None])
    def test_empty_reason_creates_nothing(self, exam, student, questions, reason):
        with pytest.raises(ValidationError):
            create_appeal(
                student_id=student.id,
                exam_id=exam.id,
                question_id=questions[0].id,
                reason=reason,
            )
        assert Appeal.objects.count() == 0

    def test_snapshot_is_frozen(self, exam, student, questions):
        appeal = create_appeal(
            student_id=student.id,
            exam_id=exam.id,
            question_id=questions[1].id,
            reason="key is wrong",
        )

        exam.title = "Renamed quiz"
        exam.save()
        Student.objects.filter(id=student.id).update(name="Someone else")
        q = questions[1]
        q.text = "Edited text"
        q.save()

        appeal.refresh_from_db()
        assert appeal.exam_title == "Geography quiz"
        assert appeal.student_name == "Aysel Mammadova"
        assert appeal.question_text == "Answer to everything?"

    def test_one_pending_appeal_per_question(self, exam, student, questions):
        kwargs = dict(
            student_id=student.id,
            exam_id=exam.id,
            question_id=questions[1].id,
        )
        create_appeal(reason="first", **kwargs)
        with pytest.raises(ValidationError) as exc:
            create_appeal(reason="second", **kwargs)
        assert exc.value.code == "DUPLICATE_APPEAL"
        assert Appeal.objects.count() == 1

    def test_racing_create_maps_unique_violation(self, exam, student, questions):
        with mock.patch.object(Appeal.objects, "create", side_effect=IntegrityError("uniq_open_appeal_per_question")):
            with pytest.raises(ValidationError) as exc:
                create_appeal(
                    student_id=student.id,
                    exam_id=exam.id,
                    question_id=questions[1].id,
                    reason="first",
                )

        assert exc.value.code == "DUPLICATE_APPEAL"
        assert exc.value.__cause__ is None
        assert exc.value.__suppress_context__ is True

    def test_other_questions_can_be_appealed(self, exam, student, questions):
        create_appeal(student_id=student.id, exam_id=exam.id, question_id=questions[0].id, reason="a")
        create_appeal(student_id=student.id, exam_id=exam.id, question_id=questions[1].id, reason="b")
        assert Appeal.objects.filter(status=Appeal.Status.PENDING).count() == 2

    def test_new_appeal_allowed_after_rejection(self, exam, student, questions):
        kwargs = dict(
            student_id=student.id,
            exam_id=exam.id,
            question_id=questions[1].id,
        )
        first = create_appeal(reason="first", **kwargs)
        reject_appeal(first.id)

        second = create_appeal(reason="new evidence", **kwargs)
        assert second.status == Appeal.Status.PENDING

    def test_accepted_question_cannot_be_appealed_again(self, exam, student, questions, submission):
        kwargs = dict(
            student_id=student.id,
            exam_id=exam.id,
            question_id=questions[1].id,
        )
        accept_appeal(create_appeal(reason="first", **kwargs).id)

        with pytest.raises(ValidationError) as exc:
            create_appeal(reason="once more", **kwargs)
        assert exc.value.code == "DUPLICATE_APPEAL"

        submission.refresh_from_db()
        assert submission.score == 20
        assert submission.manual_score_adjustment == 10
        assert Appeal.objects.count() == 1

    def test_question_from_another_exam(self, make_exam, exam, student):
        other = make_exam(title="Other")
        foreign_question = other.questions.first()
        with pytest.raises(NotFoundError):
            create_appeal(
                student_id=student.id,
                exam_id=exam.id,
                question_id=foreign_question.id,
                reason="x",
            )

    def test_unknown_student(self, exam, questions):
        with pytest.raises(NotFoundError):
            create_appeal(student_id=999, exam_id=exam.id, question_id=questions[0].id, reason="x")

    def test_unknown_exam(self, student, questions):
        with pytest.raises(NotFoundError):
            create_appeal(student_id=student.id, exam_id=999, question_id=questions[0].id, reason="x")


@pytest.mark.django_db
class TestListAppeals:
    @pytest.fixture
    def appeals(self, make_exam, exam, student, questions):
        other_student = Student.objects.create(name="Kamal", group="10B")
        other_exam = make_exam(title="History")

        now = timezone.now()
        rows = [
            (student, exam, questions[0], now - timedelta(minutes=30)),
            (student, exam, questions[1], now - timedelta(minutes=10)),
            (other_student, exam, questions[1], now - timedelta(minutes=20)),
            (student, other_exam, other_exam.questions.first(), now - timedelta(minutes=5)),
        ]
        created = []
        for s, e, q, at in rows:
            a = create_appeal(student_id=s.id, exam_id=e.id, question_id=q.id, reason="r")
            Appeal.objects.filter(id=a.id).update(submitted_at=at)
            created.append(a)
        return created

    def test_newest_first(self, appeals):
        ids = list(list_appeals().values_list("id", flat=True))
        assert ids == [appeals[3].id, appeals[1].id, appeals[2].id, appeals[0].id]

    def test_filter_by_status(self, appeals):
        reject_appeal(appeals[1].id)

        pending = list(list_appeals(status=Appeal.Status.PENDING).values_list("id", flat=True))
        assert pending == [appeals[3].id, appeals[2].id, appeals[0].id]

        rejected = list(list_appeals(status="rejected").values_list("id", flat=True))
        assert rejected == [appeals[1].id]

    def test_filter_by_student_and_exam(self, appeals, student, exam):
        ids = list(
            list_appeals(student_id=student.id, exam_id=exam.id).values_list("id", flat=True)
        )
        assert ids == [appeals[1].id, appeals[0].id]

    def test_unknown_status(self, appeals):
        with pytest.raises(ValidationError):
            list_appeals(status="archived")
