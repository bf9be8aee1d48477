"""
Profiles URL configuration.

Mounted under /api/profile/ by the root URL config.
"""

from django.urls import path

from .serializers import EducationSerializer, ExperienceSerializer
from .views import GithubReposView, MyProfileView, ProfileEntryView, ProfileView, UserProfileView


def entry_views(related_name, serializer_class, label):
    """Build the (add, remove) views for one profile entry list."""
    config = {"related_name": related_name, "serializer_class": serializer_class, "label": label}
    return (
        ProfileEntryView.as_view(http_method_names=["put", "options"], **config),
        ProfileEntryView.as_view(http_method_names=["delete", "options"], **config),
    )


add_experience, remove_experience = entry_views("experience", ExperienceSerializer, "Experience")
add_education, remove_education = entry_views("education", EducationSerializer, "Education")

urlpatterns = [
    path("", ProfileView.as_view(), name="profile"),
    path("me/", MyProfileView.as_view(), name="profile-me"),
    path("user/<str:user_id>/", UserProfileView.as_view(), name="profile-user"),

    # Profile entries
    path("experience/", add_experience, name="profile-experience"),
    path("experience/<str:entry_id>/", remove_experience, name="profile-experience-delete"),
    path("education/", add_education, name="profile-education"),
    path("education/<str:entry_id>/", remove_education, name="profile-education-delete"),

    # GitHub
    path("github/<str:username>/", GithubReposView.as_view(), name="profile-github"),
]
