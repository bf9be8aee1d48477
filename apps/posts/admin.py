"""Admin configuration for the posts app."""

from django.contrib import admin

from .models import Comment, Like, Post


class CommentInline(admin.TabularInline):
    model = Comment
    extra = 0
    readonly_fields = ("date",)


class LikeInline(admin.TabularInline):
    model = Like
    extra = 0


@admin.register(Post)
class PostAdmin(admin.ModelAdmin):
    list_display = ("name", "text", "user", "date")
    list_filter = ("user",)
    search_fields = ("text", "name")
    inlines = [LikeInline, CommentInline]
