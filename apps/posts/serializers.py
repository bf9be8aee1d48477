"""
Serializers for posts, likes and comments.

Authorship fields (user, name, avatar) are always taken from the
authenticated request by the views, never from the client.
"""

from rest_framework import serializers

from .models import Comment, Like, Post

TEXT_REQUIRED = {"required": "Text is required", "blank": "Text is required", "null": "Text is required"}


class LikeSerializer(serializers.ModelSerializer):
    class Meta:
        model = Like
        fields = ["id", "user"]
        read_only_fields = fields


class CommentSerializer(serializers.ModelSerializer):
    class Meta:
        model = Comment
        fields = ["id", "user", "text", "name", "avatar", "date"]
        read_only_fields = ["id", "user", "name", "avatar", "date"]
        extra_kwargs = {"text": {"error_messages": TEXT_REQUIRED}}


class PostSerializer(serializers.ModelSerializer):
    """A post with its likes and comments, most recent first."""

    likes = LikeSerializer(many=True, read_only=True)
    comments = CommentSerializer(many=True, read_only=True)

    class Meta:
        model = Post
        fields = ["id", "user", "text", "name", "avatar", "likes", "comments", "date"]
        read_only_fields = ["id", "user", "name", "avatar", "date"]
        extra_kwargs = {"text": {"error_messages": TEXT_REQUIRED}}
