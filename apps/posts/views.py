"""
Views for posts, likes and comments.

Every endpoint requires a session token. Reads are open to any
authenticated user; deleting a post or comment is restricted to its
author through the predicates in ``permissions``.

list    → GET    /api/posts/                      (?user=<uuid>, ?search=text)
create  → POST   /api/posts/
read    → GET    /api/posts/{id}/
delete  → DELETE /api/posts/{id}/                 (owner only)
like    → PUT    /api/posts/like/{id}/
unlike  → PUT    /api/posts/unlike/{id}/
comment → POST   /api/posts/comment/{id}/
uncomment → DELETE /api/posts/comment/{id}/{comment_id}/ (author only)
"""

import logging

from django.db import IntegrityError, transaction
from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import status, viewsets
from rest_framework.filters import OrderingFilter, SearchFilter
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.common.exceptions import BadRequest, find_or_not_found, get_or_not_found

from .filters import PostFilter
from .models import Like, Post
from .permissions import ensure, has_liked, is_comment_author, is_post_owner
from .serializers import CommentSerializer, LikeSerializer, PostSerializer

logger = logging.getLogger(__name__)

POST_NOT_FOUND = "Post not found"


def get_post(pk):
    return get_or_not_found(Post.objects.all(), POST_NOT_FOUND, pk=pk)


# ---------------------------------------------------------------------------
# Post ViewSet
# ---------------------------------------------------------------------------
class PostViewSet(viewsets.ModelViewSet):
    """Feed, single post, create and owner-only delete."""

    serializer_class = PostSerializer
    http_method_names = ["get", "post", "delete", "head", "options"]

    filter_backends = [DjangoFilterBackend, SearchFilter, OrderingFilter]
    filterset_class = PostFilter
    search_fields = ["text"]
    ordering_fields = ["date"]
    ordering = ["-date"]

    def get_queryset(self):
        return Post.objects.prefetch_related("likes", "comments")

    def get_object(self):
        return get_or_not_found(self.get_queryset(), POST_NOT_FOUND, pk=self.kwargs["pk"])

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        self.perform_create(serializer)
        return Response(serializer.data, status=status.HTTP_200_OK)

    def perform_create(self, serializer):
        """Stamp the post with its author and the author's current name/avatar."""
        user = self.request.user
        serializer.save(user=user, name=user.name, avatar=user.avatar)

    def destroy(self, request, *args, **kwargs):
        post = self.get_object()
        ensure(is_post_owner, post, request.user)
        post.delete()
        logger.info("Post %s removed by %s", kwargs["pk"], request.user.pk)
        return Response({"msg": "Post removed"})


# ---------------------------------------------------------------------------
# Likes
# ---------------------------------------------------------------------------
class LikeView(APIView):
    """PUT /api/posts/like/{id}/: returns the post's likes."""

    def put(self, request, pk):
        post = get_post(pk)
        if has_liked(post.likes.all(), request.user):
            raise BadRequest("Post already liked")

        try:
            with transaction.atomic():
                Like.objects.create(post=post, user=request.user)
        except IntegrityError:
            # A concurrent request liked it first
            raise BadRequest("Post already liked")

        return Response(LikeSerializer(post.likes.all(), many=True).data)


class UnlikeView(APIView):
    """PUT /api/posts/unlike/{id}/: returns the post's likes."""

    def put(self, request, pk):
        post = get_post(pk)
        if not has_liked(post.likes.all(), request.user):
            raise BadRequest("Post hasn't been liked")

        post.likes.filter(user=request.user).delete()
        return Response(LikeSerializer(post.likes.all(), many=True).data)


# ---------------------------------------------------------------------------
# Comments
# ---------------------------------------------------------------------------
class CommentView(APIView):
    """POST /api/posts/comment/{id}/: returns the post's comments."""

    def post(self, request, pk):
        serializer = CommentSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        post = get_post(pk)
        user = request.user
        serializer.save(post=post, user=user, name=user.name, avatar=user.avatar)
        return Response(CommentSerializer(post.comments.all(), many=True).data)


class CommentDetailView(APIView):
    """DELETE /api/posts/comment/{id}/{comment_id}/: returns the post's comments."""

    def delete(self, request, pk, comment_id):
        post = get_post(pk)
        comment = find_or_not_found(post.comments.all(), comment_id, "Comment does not exist")
        ensure(is_comment_author, comment, request.user)

        comment.delete()
        return Response(CommentSerializer(post.comments.all(), many=True).data)
