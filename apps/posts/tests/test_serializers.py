"""Tests for post serializers."""

import pytest

from apps.posts.serializers import CommentSerializer, PostSerializer
from conftest import CommentFactory, LikeFactory


@pytest.mark.django_db
class TestPostSerializer:

    def test_text_required(self):
        s = PostSerializer(data={})
        assert not s.is_valid()
        assert s.errors["text"] == ["Text is required"]

    def test_blank_text_rejected(self):
        s = PostSerializer(data={"text": "   "})
        assert not s.is_valid()
        assert s.errors["text"] == ["Text is required"]

    def test_authorship_fields_ignored_on_input(self, user, other_user):
        s = PostSerializer(data={"text": "hi", "user": str(other_user.pk), "name": "Fake"})
        assert s.is_valid(), s.errors
        assert "user" not in s.validated_data
        assert "name" not in s.validated_data

    def test_nested_likes_and_comments(self, post, other_user):
        LikeFactory(post=post, user=other_user)
        CommentFactory(post=post, user=other_user)
        data = PostSerializer(post).data
        assert len(data["likes"]) == 1
        assert data["likes"][0]["id"] == str(post.likes.get().pk)
        assert str(data["likes"][0]["user"]) == str(other_user.pk)
        assert data["comments"][0]["name"] == other_user.name


@pytest.mark.django_db
class TestCommentSerializer:

    def test_text_required(self):
        s = CommentSerializer(data={"text": ""})
        assert not s.is_valid()
        assert s.errors["text"] == ["Text is required"]
