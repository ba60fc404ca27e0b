import django_filters

from .models import Appeal


class AppealFilter(django_filters.FilterSet):
    status = django_filters.ChoiceFilter(choices=Appeal.Status.choices)
    student = django_filters.NumberFilter(field_name="student_id")
    exam = django_filters.NumberFilter(field_name="exam_id")

    class Meta:
        model = Appeal
        fields = [
            "status",
            "student",
            "exam",
        ]
