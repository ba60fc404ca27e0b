# PATH: apps/domains/exams/admin.py
from django.contrib import admin

from apps.domains.exams.models import Exam, ExamQuestion


class ExamQuestionInline(admin.TabularInline):
    model = ExamQuestion
    extra = 0
    fields = ("number", "text", "kind", "options", "correct_answer")

    # 시작된 시험은 문항 추가/삭제 불가 (수정은 ExamQuestion.clean 에서 차단)
    def has_add_permission(self, request, obj=None):
        if obj is not None and obj.has_started:
            return False
        return super().has_add_permission(request, obj)

    def has_delete_permission(self, request, obj=None):
        if obj is not None and obj.has_started:
            return False
        return super().has_delete_permission(request, obj)


@admin.register(Exam)
class ExamAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "title",
        "start_at",
        "end_at",
        "points_per_question",
    )
    list_display_links = ("id", "title")
    search_fields = ("title",)
    ordering = ("-id",)
    inlines = [ExamQuestionInline]
