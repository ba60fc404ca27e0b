# PATH: apps/core/admin.py
from django.contrib import admin
from django.contrib.auth.admin import UserAdmin

from apps.core.models import User


@admin.register(User)
class CoreUserAdmin(UserAdmin):
    list_display = ("id", "username", "name", "role", "is_staff", "is_active")
    list_filter = ("role", "is_staff", "is_active")
    search_fields = ("username", "name", "email")
    fieldsets = UserAdmin.fieldsets + (
        ("Portal", {"fields": ("name", "role")}),
    )
