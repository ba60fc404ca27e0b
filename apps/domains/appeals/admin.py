# PATH: apps/domains/appeals/admin.py
from django.contrib import admin

from apps.domains.appeals.models import Appeal


@admin.register(Appeal)
class AppealAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "student_name",
        "exam_title",
        "question",
        "status",
        "submitted_at",
    )
    list_filter = ("status",)
    search_fields = ("student_name", "exam_title", "reason")
    ordering = ("-submitted_at",)

    # 상태 변경은 appeal_resolver 경유 (API)
    readonly_fields = (
        "student",
        "exam",
        "question",
        "student_name",
        "exam_title",
        "question_text",
        "status",
        "resolved_at",
    )
