"""Admin configuration for the profiles app."""

from django.contrib import admin

from .models import Education, Experience, Profile


class ExperienceInline(admin.TabularInline):
    model = Experience
    extra = 0


class EducationInline(admin.TabularInline):
    model = Education
    extra = 0


@admin.register(Profile)
class ProfileAdmin(admin.ModelAdmin):
    list_display = ("user", "status", "company", "location", "date")
    search_fields = ("user__name", "user__email", "company", "status")
    readonly_fields = ("date",)
    inlines = [ExperienceInline, EducationInline]
