"""
django-filter FilterSet for the post feed.

Supports filtering by:
  - user (author UUID)
"""

from django_filters import rest_framework as filters

from .models import Post


class PostFilter(filters.FilterSet):
    """
    Filterable fields exposed as query parameters on GET /posts/.

    Examples:
        ?user=<uuid>
    """

    user = filters.UUIDFilter(field_name="user__id")

    class Meta:
        model = Post
        fields = ["user"]
