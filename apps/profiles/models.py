"""Developer profile aggregate: Profile plus its Experience and Education entries."""

import uuid

from django.conf import settings
from django.db import models


class Profile(models.Model):
    """
    One-to-one extension of a User.

    Skills are kept as an ordered list of strings and social links as a
    platform → URL mapping. Experience and education entries hang off the
    profile and are listed most recent first.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="profile",
    )
    company = models.CharField(max_length=200, blank=True, default="")
    website = models.CharField(max_length=500, blank=True, default="")
    location = models.CharField(max_length=200, blank=True, default="")
    bio = models.TextField(blank=True, default="")
    status = models.CharField(max_length=200)
    githubusername = models.CharField(max_length=100, blank=True, default="")
    skills = models.JSONField(default=list, blank=True)
    social = models.JSONField(default=dict, blank=True)
    date = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-date"]

    def __str__(self):
        return f"Profile of {self.user}"


class ProfileEntry(models.Model):
    """Fields shared by experience and education entries."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    from_date = models.DateField()
    to_date = models.DateField(null=True, blank=True)
    current = models.BooleanField(default=False)
    description = models.TextField(blank=True, default="")
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        abstract = True
        ordering = ["-created_at"]


class Experience(ProfileEntry):
    profile = models.ForeignKey(Profile, on_delete=models.CASCADE, related_name="experience")
    title = models.CharField(max_length=200)
    company = models.CharField(max_length=200)
    location = models.CharField(max_length=200, blank=True, default="")

    class Meta(ProfileEntry.Meta):
        pass

    def __str__(self):
        return f"{self.title} at {self.company}"


class Education(ProfileEntry):
    profile = models.ForeignKey(Profile, on_delete=models.CASCADE, related_name="education")
    school = models.CharField(max_length=200)
    degree = models.CharField(max_length=200)
    fieldofstudy = models.CharField(max_length=200)

    class Meta(ProfileEntry.Meta):
        verbose_name_plural = "education"

    def __str__(self):
        return f"{self.degree}, {self.school}"
