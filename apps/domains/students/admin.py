from django.contrib import admin
from .models import Student


@admin.register(Student)
class StudentAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "name",
        "group",
        "email",
        "status",
        "created_at",
    )
    list_filter = ("group", "status")
    search_fields = ("name", "email")
