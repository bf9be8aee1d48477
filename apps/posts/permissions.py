"""
Ownership rules for posts and their sub-entries.

Each rule is a plain predicate on a (resource, user) pair so it can be
tested on its own; ``ensure`` turns a failed rule into ``NotOwner``.
"""

from apps.common.exceptions import NotOwner


def is_post_owner(post, user):
    """Only the user who created a post may delete it."""
    return post.user_id == user.pk


def is_comment_author(comment, user):
    """Only the author of a comment may delete it."""
    return comment.user_id == user.pk


def has_liked(likes, user):
    """True when ``user`` appears among ``likes``."""
    return any(like.user_id == user.pk for like in likes)


def ensure(rule, resource, user):
    if not rule(resource, user):
        raise NotOwner()
