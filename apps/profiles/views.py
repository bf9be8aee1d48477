"""
Views for developer profiles.

Reads of other users' profiles (and the GitHub repo listing) are public;
everything that touches the caller's own profile needs a session token
and is always scoped to ``request.user``, so no ownership check is needed.

GET    /api/profile/                          → all profiles (public)
POST   /api/profile/                          → create or update own profile
DELETE /api/profile/                          → delete own account, profile and posts
GET    /api/profile/me/                       → own profile
GET    /api/profile/user/{user_id}/           → a user's profile (public)
PUT    /api/profile/experience/               → add an experience entry
DELETE /api/profile/experience/{id}/          → remove an experience entry
PUT    /api/profile/education/                → add an education entry
DELETE /api/profile/education/{id}/           → remove an education entry
GET    /api/profile/github/{username}/        → latest GitHub repos (public)
"""

import logging

from django.db import transaction
from rest_framework.exceptions import NotFound
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.common.exceptions import find_or_not_found, get_or_not_found
from apps.common.mixins import PublicMethodsMixin

from .github import fetch_repositories
from .models import Profile
from .serializers import ProfileSerializer, ProfileUpsertSerializer

logger = logging.getLogger(__name__)

NO_PROFILE_MESSAGE = "There is no profile for this user"


def profile_queryset():
    return Profile.objects.select_related("user").prefetch_related("experience", "education")


def own_profile(user):
    """The caller's profile, with entries loaded fresh."""
    return get_or_not_found(profile_queryset(), NO_PROFILE_MESSAGE, user=user)


# ---------------------------------------------------------------------------
# Profile collection / own profile
# ---------------------------------------------------------------------------
class ProfileView(PublicMethodsMixin, APIView):
    """List every profile, upsert the caller's, or delete the caller's account."""

    public_methods = ("GET",)

    def get(self, request):
        return Response(ProfileSerializer(profile_queryset(), many=True).data)

    def post(self, request):
        serializer = ProfileUpsertSerializer(data=request.data, context={"request": request})
        serializer.is_valid(raise_exception=True)
        serializer.save(user=request.user)
        return Response(serializer.data)

    def delete(self, request):
        user = request.user
        user_id = user.pk
        with transaction.atomic():
            Profile.objects.filter(user=user).delete()
            # Posts, likes and comments by the user cascade with the account
            user.delete()

        logger.info("Deleted account %s", user_id)
        return Response({"msg": "User deleted"})


class MyProfileView(APIView):
    """GET /api/profile/me/"""

    def get(self, request):
        return Response(ProfileSerializer(own_profile(request.user)).data)


class UserProfileView(PublicMethodsMixin, APIView):
    """GET /api/profile/user/{user_id}/"""

    public_methods = ("GET",)

    def get(self, request, user_id):
        profile = get_or_not_found(profile_queryset(), "Profile not found", user__id=user_id)
        return Response(ProfileSerializer(profile).data)


# ---------------------------------------------------------------------------
# Experience / Education entries
# ---------------------------------------------------------------------------
class ProfileEntryView(APIView):
    """
    Add an entry to one of the caller's profile lists, or remove one by id.

    Configured per list through ``as_view()``: ``related_name`` names the
    reverse relation on Profile, ``serializer_class`` validates new
    entries and ``label`` is used in the not-found message.
    """

    related_name = None
    serializer_class = None
    label = None

    def put(self, request):
        profile = own_profile(request.user)
        serializer = self.serializer_class(data=request.data)
        serializer.is_valid(raise_exception=True)
        serializer.save(profile=profile)
        return Response(ProfileSerializer(own_profile(request.user)).data)

    def delete(self, request, entry_id):
        profile = own_profile(request.user)
        entries = getattr(profile, self.related_name).all()
        entry = find_or_not_found(entries, entry_id, f"{self.label} not found")
        entry.delete()
        return Response(ProfileSerializer(own_profile(request.user)).data)


# ---------------------------------------------------------------------------
# GitHub
# ---------------------------------------------------------------------------
class GithubReposView(PublicMethodsMixin, APIView):
    """GET /api/profile/github/{username}/"""

    public_methods = ("GET",)

    def get(self, request, username):
        repos = fetch_repositories(username)
        if repos is None:
            raise NotFound("No Github profile found")
        return Response(repos)
