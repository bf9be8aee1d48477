"""
Root conftest: shared pytest fixtures and factory-boy factories.

All fixtures use the ``db`` marker implicitly via ``@pytest.mark.django_db``
on individual tests, or via the ``db`` fixture where noted. Authenticated
clients carry a real session token in the ``x-auth-token`` header, so
every API test also goes through token verification.
"""

from datetime import date

import factory
import pytest
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient

from apps.accounts.avatars import gravatar_url
from apps.accounts.tokens import issue_token
from apps.posts.models import Comment, Like, Post
from apps.profiles.models import Education, Experience, Profile

User = get_user_model()

PASSWORD = "secret123"


# ===================================================================
# Factories
# ===================================================================

class UserFactory(factory.django.DjangoModelFactory):
    """Create a User with a hashed password, unique email and Gravatar."""

    class Meta:
        model = User
        skip_postgeneration_save = True

    name = factory.Sequence(lambda n: f"Test User {n}")
    email = factory.Sequence(lambda n: f"user{n}@example.com")
    avatar = factory.LazyAttribute(lambda o: gravatar_url(o.email))
    password = factory.PostGeneration(
        lambda obj, create, extracted, **kw: obj.set_password(extracted or PASSWORD)
        or obj.save()
    )


class ProfileFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = Profile

    user = factory.SubFactory(UserFactory)
    status = "Developer"
    company = "Acme"
    skills = ["python", "django"]


class ExperienceFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = Experience

    profile = factory.SubFactory(ProfileFactory)
    title = factory.Sequence(lambda n: f"Engineer {n}")
    company = "Acme"
    from_date = date(2020, 1, 1)


class EducationFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = Education

    profile = factory.SubFactory(ProfileFactory)
    school = "State University"
    degree = "BSc"
    fieldofstudy = "Computer Science"
    from_date = date(2014, 9, 1)


class PostFactory(factory.django.DjangoModelFactory):
    """Create a Post with the author's name/avatar snapshot."""

    class Meta:
        model = Post

    user = factory.SubFactory(UserFactory)
    text = factory.Sequence(lambda n: f"Post {n}")
    name = factory.LazyAttribute(lambda o: o.user.name)
    avatar = factory.LazyAttribute(lambda o: o.user.avatar)


class LikeFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = Like

    post = factory.SubFactory(PostFactory)
    user = factory.SubFactory(UserFactory)


class CommentFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = Comment

    post = factory.SubFactory(PostFactory)
    user = factory.SubFactory(UserFactory)
    text = factory.Sequence(lambda n: f"Comment {n}")
    name = factory.LazyAttribute(lambda o: o.user.name)
    avatar = factory.LazyAttribute(lambda o: o.user.avatar)


# ===================================================================
# Fixtures
# ===================================================================

def token_client(user):
    """A DRF client that sends ``user``'s session token on every request."""
    client = APIClient()
    client.credentials(HTTP_X_AUTH_TOKEN=issue_token(user))
    return client


@pytest.fixture
def api_client():
    """Unauthenticated DRF test client."""
    return APIClient()


@pytest.fixture
def user(db):
    """A persisted User instance (password: secret123)."""
    return UserFactory()


@pytest.fixture
def other_user(db):
    """A second user for ownership tests."""
    return UserFactory()


@pytest.fixture
def auth_client(user):
    """Client authenticated as ``user`` via x-auth-token."""
    return token_client(user)


@pytest.fixture
def other_auth_client(other_user):
    """Client authenticated as ``other_user`` via x-auth-token."""
    return token_client(other_user)


@pytest.fixture
def profile(user):
    """A Profile owned by ``user``."""
    return ProfileFactory(user=user)


@pytest.fixture
def post(user):
    """A Post written by ``user``."""
    return PostFactory(user=user)
