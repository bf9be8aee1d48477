"""
API-level tests for posts, likes and comments.

Covers CRUD, ownership enforcement, like/unlike rules, comment
add/remove and filtering of the feed.
"""

import uuid

import pytest
from rest_framework import status

from apps.posts.models import Comment, Like, Post
from conftest import CommentFactory, LikeFactory, PostFactory

LIST_URL = "/api/posts/"


def detail_url(pk):
    return f"/api/posts/{pk}/"


def like_url(pk):
    return f"/api/posts/like/{pk}/"


def unlike_url(pk):
    return f"/api/posts/unlike/{pk}/"


def comment_url(pk, comment_id=None):
    if comment_id is None:
        return f"/api/posts/comment/{pk}/"
    return f"/api/posts/comment/{pk}/{comment_id}/"


# ===================================================================
# Post CRUD
# ===================================================================
@pytest.mark.django_db
class TestPostViewSet:

    def test_create(self, auth_client, user):
        r = auth_client.post(LIST_URL, {"text": "hello"}, format="json")
        assert r.status_code == status.HTTP_200_OK
        body = r.json()
        assert body["text"] == "hello"
        assert body["likes"] == []
        assert body["comments"] == []
        assert body["user"] == str(user.pk)
        assert body["name"] == user.name
        assert body["avatar"] == user.avatar

    def test_create_requires_text(self, auth_client):
        r = auth_client.post(LIST_URL, {"text": ""}, format="json")
        assert r.status_code == status.HTTP_400_BAD_REQUEST
        assert r.data["errors"] == [{"msg": "Text is required", "param": "text"}]

    def test_create_ignores_client_authorship(self, auth_client, user, other_user):
        r = auth_client.post(
            LIST_URL,
            {"text": "hi", "user": str(other_user.pk), "name": "Someone else"},
            format="json",
        )
        assert r.json()["user"] == str(user.pk)
        assert r.json()["name"] == user.name

    def test_name_snapshot_survives_rename(self, auth_client, user):
        r = auth_client.post(LIST_URL, {"text": "hello"}, format="json")
        user.name = "Renamed"
        user.save()
        post = Post.objects.get(pk=r.data["id"])
        assert post.name != "Renamed"

    def test_list_newest_first(self, auth_client, user, other_user):
        p1 = PostFactory(user=user)
        p2 = PostFactory(user=other_user)
        r = auth_client.get(LIST_URL)
        assert r.status_code == status.HTTP_200_OK
        assert [p["id"] for p in r.json()] == [str(p2.pk), str(p1.pk)]

    def test_filter_by_user(self, auth_client, user, other_user):
        PostFactory(user=user)
        theirs = PostFactory(user=other_user)
        r = auth_client.get(LIST_URL, {"user": str(other_user.pk)})
        assert [p["id"] for p in r.json()] == [str(theirs.pk)]

    def test_search_text(self, auth_client, user):
        PostFactory(user=user, text="django tips")
        PostFactory(user=user, text="gardening")
        r = auth_client.get(LIST_URL, {"search": "django"})
        assert [p["text"] for p in r.json()] == ["django tips"]

    def test_list_requires_token(self, api_client):
        r = api_client.get(LIST_URL)
        assert r.status_code == status.HTTP_401_UNAUTHORIZED
        assert r.data == {"msg": "No token, authorization denied"}

    def test_retrieve(self, other_auth_client, post):
        r = other_auth_client.get(detail_url(post.pk))
        assert r.status_code == status.HTTP_200_OK
        assert r.data["id"] == str(post.pk)

    def test_retrieve_missing(self, auth_client):
        r = auth_client.get(detail_url(uuid.uuid4()))
        assert r.status_code == status.HTTP_404_NOT_FOUND
        assert r.data == {"msg": "Post not found"}

    def test_retrieve_malformed_id(self, auth_client):
        r = auth_client.get(detail_url("not-a-uuid"))
        assert r.status_code == status.HTTP_404_NOT_FOUND
        assert r.data == {"msg": "Post not found"}

    def test_delete_by_owner(self, auth_client, post):
        r = auth_client.delete(detail_url(post.pk))
        assert r.status_code == status.HTTP_200_OK
        assert r.data == {"msg": "Post removed"}
        assert not Post.objects.filter(pk=post.pk).exists()

    def test_delete_by_non_owner(self, other_auth_client, post):
        r = other_auth_client.delete(detail_url(post.pk))
        assert r.status_code == status.HTTP_401_UNAUTHORIZED
        assert r.data == {"msg": "User not authorized"}
        assert Post.objects.filter(pk=post.pk).exists()

    def test_delete_missing(self, auth_client):
        r = auth_client.delete(detail_url(uuid.uuid4()))
        assert r.status_code == status.HTTP_404_NOT_FOUND

    def test_update_not_allowed(self, auth_client, post):
        r = auth_client.patch(detail_url(post.pk), {"text": "edited"}, format="json")
        assert r.status_code == status.HTTP_405_METHOD_NOT_ALLOWED

    def test_no_api_root_listing(self, auth_client):
        r = auth_client.get("/api/")
        assert r.status_code == status.HTTP_404_NOT_FOUND


# ===================================================================
# Likes
# ===================================================================
@pytest.mark.django_db
class TestLikes:

    def test_like(self, auth_client, user, post):
        r = auth_client.put(like_url(post.pk))
        assert r.status_code == status.HTTP_200_OK
        assert [like["user"] for like in r.json()] == [str(user.pk)]

    def test_like_twice(self, auth_client, post):
        auth_client.put(like_url(post.pk))
        r = auth_client.put(like_url(post.pk))
        assert r.status_code == status.HTTP_400_BAD_REQUEST
        assert r.data == {"msg": "Post already liked"}
        assert post.likes.count() == 1

    def test_new_like_goes_first(self, auth_client, other_user, user, post):
        LikeFactory(post=post, user=other_user)
        r = auth_client.put(like_url(post.pk))
        assert [like["user"] for like in r.json()] == [str(user.pk), str(other_user.pk)]

    def test_like_missing_post(self, auth_client):
        r = auth_client.put(like_url(uuid.uuid4()))
        assert r.status_code == status.HTTP_404_NOT_FOUND
        assert r.data == {"msg": "Post not found"}

    def test_unlike(self, auth_client, user, other_user, post):
        LikeFactory(post=post, user=user)
        LikeFactory(post=post, user=other_user)
        r = auth_client.put(unlike_url(post.pk))
        assert r.status_code == status.HTTP_200_OK
        assert [like["user"] for like in r.json()] == [str(other_user.pk)]

    def test_unlike_never_liked(self, auth_client, other_user, post):
        LikeFactory(post=post, user=other_user)
        r = auth_client.put(unlike_url(post.pk))
        assert r.status_code == status.HTTP_400_BAD_REQUEST
        assert r.data == {"msg": "Post hasn't been liked"}
        assert post.likes.count() == 1

    def test_like_requires_token(self, api_client, post):
        r = api_client.put(like_url(post.pk))
        assert r.status_code == status.HTTP_401_UNAUTHORIZED
        assert Like.objects.count() == 0


# ===================================================================
# Comments
# ===================================================================
@pytest.mark.django_db
class TestComments:

    def test_add(self, other_auth_client, other_user, post):
        r = other_auth_client.post(comment_url(post.pk), {"text": "Nice"}, format="json")
        assert r.status_code == status.HTTP_200_OK
        body = r.json()
        assert body[0]["text"] == "Nice"
        assert body[0]["user"] == str(other_user.pk)
        assert body[0]["name"] == other_user.name
        assert body[0]["avatar"] == other_user.avatar

    def test_add_prepends(self, auth_client, post):
        older = CommentFactory(post=post)
        r = auth_client.post(comment_url(post.pk), {"text": "Newest"}, format="json")
        assert [c["id"] for c in r.json()][1] == str(older.pk)
        assert r.json()[0]["text"] == "Newest"

    def test_add_requires_text(self, auth_client, post):
        r = auth_client.post(comment_url(post.pk), {}, format="json")
        assert r.status_code == status.HTTP_400_BAD_REQUEST
        assert r.data["errors"] == [{"msg": "Text is required", "param": "text"}]

    def test_add_missing_post(self, auth_client):
        r = auth_client.post(comment_url(uuid.uuid4()), {"text": "Nice"}, format="json")
        assert r.status_code == status.HTTP_404_NOT_FOUND

    def test_delete_by_author(self, auth_client, user, post):
        comment = CommentFactory(post=post, user=user)
        r = auth_client.delete(comment_url(post.pk, comment.pk))
        assert r.status_code == status.HTTP_200_OK
        assert r.data == []
        assert not Comment.objects.filter(pk=comment.pk).exists()

    def test_delete_by_non_author(self, auth_client, other_user, post):
        """Owning the post is not enough to delete someone else's comment."""
        comment = CommentFactory(post=post, user=other_user)
        r = auth_client.delete(comment_url(post.pk, comment.pk))
        assert r.status_code == status.HTTP_401_UNAUTHORIZED
        assert r.data == {"msg": "User not authorized"}
        assert Comment.objects.filter(pk=comment.pk).exists()

    def test_delete_with_uppercase_id(self, auth_client, user, post):
        comment = CommentFactory(post=post, user=user)
        r = auth_client.delete(comment_url(post.pk, str(comment.pk).upper()))
        assert r.status_code == status.HTTP_200_OK
        assert not Comment.objects.filter(pk=comment.pk).exists()

    def test_delete_missing_comment(self, auth_client, post):
        r = auth_client.delete(comment_url(post.pk, uuid.uuid4()))
        assert r.status_code == status.HTTP_404_NOT_FOUND
        assert r.data == {"msg": "Comment does not exist"}

    def test_delete_comment_from_other_post(self, auth_client, user, post):
        elsewhere = CommentFactory(user=user)
        r = auth_client.delete(comment_url(post.pk, elsewhere.pk))
        assert r.status_code == status.HTTP_404_NOT_FOUND
        assert Comment.objects.filter(pk=elsewhere.pk).exists()

    def test_delete_removes_targeted_comment_not_first_by_author(self, auth_client, user, post):
        """The comment addressed by id is removed, even when it is not the author's first."""
        older = CommentFactory(post=post, user=user, text="older")
        newer = CommentFactory(post=post, user=user, text="newer")

        r = auth_client.delete(comment_url(post.pk, older.pk))

        assert [c["id"] for c in r.json()] == [str(newer.pk)]
        assert not Comment.objects.filter(pk=older.pk).exists()


# ===================================================================
# End-to-end scenario
# ===================================================================
@pytest.mark.django_db
def test_register_post_and_like(api_client):
    token = api_client.post(
        "/api/users/",
        {"name": "User A", "email": "a@x.com", "password": "secret1"},
        format="json",
    ).data["token"]
    api_client.credentials(HTTP_X_AUTH_TOKEN=token)

    post = api_client.post(LIST_URL, {"text": "hello"}, format="json").json()
    assert post["likes"] == [] and post["comments"] == []
    assert post["name"] == "User A"

    first = api_client.put(like_url(post["id"]))
    assert len(first.json()) == 1

    second = api_client.put(like_url(post["id"]))
    assert second.status_code == status.HTTP_400_BAD_REQUEST
    assert second.data == {"msg": "Post already liked"}
