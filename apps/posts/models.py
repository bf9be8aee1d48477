"""Post aggregate: a Post with its Likes and Comments."""

import uuid

from django.conf import settings
from django.db import models
from django.utils import timezone


class Post(models.Model):
    """
    A text post by a user.

    The author's name and avatar are copied onto the post at creation so
    the feed renders without joining users, and keep their original values
    if the author later changes theirs.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="posts",
    )
    text = models.TextField()
    name = models.CharField(max_length=100, blank=True, default="")
    avatar = models.URLField(max_length=500, blank=True, default="")
    date = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ["-date"]

    def __str__(self):
        return f"{self.name}: {self.text[:40]}"


class Like(models.Model):
    """A user's like on a post; at most one per (post, user)."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    post = models.ForeignKey(Post, on_delete=models.CASCADE, related_name="likes")
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="likes",
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at"]
        constraints = [
            models.UniqueConstraint(
                fields=["post", "user"],
                name="unique_like_per_user",
            )
        ]

    def __str__(self):
        return f"{self.user} likes {self.post_id}"


class Comment(models.Model):
    """A comment on a post, with the same author snapshot as posts."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    post = models.ForeignKey(Post, on_delete=models.CASCADE, related_name="comments")
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="comments",
    )
    text = models.TextField()
    name = models.CharField(max_length=100, blank=True, default="")
    avatar = models.URLField(max_length=500, blank=True, default="")
    date = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ["-date"]

    def __str__(self):
        return self.text[:40]
