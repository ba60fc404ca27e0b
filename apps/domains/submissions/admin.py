from django.contrib import admin

from apps.domains.submissions.models import Submission


@admin.register(Submission)
class SubmissionAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "exam",
        "student",
        "score",
        "manual_score_adjustment",
        "cheating_detected",
        "submitted_at",
    )
    list_filter = ("cheating_detected",)
    search_fields = ("student__name", "exam__title")

    # 점수는 appeal_resolver 만 변경한다
    readonly_fields = ("score", "manual_score_adjustment")
