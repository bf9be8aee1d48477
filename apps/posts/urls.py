"""
Posts app URL configuration.

The post ViewSet is routed by DRF; like/unlike/comment routes are declared
explicitly because their id comes after the action segment.
All endpoints are mounted under /api/ by the root URL config.
"""

from django.urls import path, include
from rest_framework.routers import SimpleRouter

from .views import CommentDetailView, CommentView, LikeView, PostViewSet, UnlikeView

router = SimpleRouter()
router.register(r"posts", PostViewSet, basename="post")

urlpatterns = [
    path("posts/like/<str:pk>/", LikeView.as_view(), name="post-like"),
    path("posts/unlike/<str:pk>/", UnlikeView.as_view(), name="post-unlike"),
    path("posts/comment/<str:pk>/", CommentView.as_view(), name="post-comment"),
    path(
        "posts/comment/<str:pk>/<str:comment_id>/",
        CommentDetailView.as_view(),
        name="post-comment-delete",
    ),
    path("", include(router.urls)),
]
