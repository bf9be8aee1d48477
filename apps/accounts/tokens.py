"""
Stateless session tokens.

A session token is a signed JWT (djangorestframework-simplejwt
``AccessToken``) carrying ``{"user": {"id": <uuid>}}`` and an ``exp``
claim. Nothing is stored server-side; the lifetime comes from
``SIMPLE_JWT["ACCESS_TOKEN_LIFETIME"]``.
"""

from rest_framework_simplejwt.exceptions import InvalidToken, TokenError
from rest_framework_simplejwt.tokens import AccessToken

INVALID_TOKEN_MESSAGE = "Token is not valid"


def issue_token(user):
    """Return a freshly signed session token for ``user``."""
    token = AccessToken.for_user(user)
    token["user"] = {"id": str(user.pk)}
    return str(token)


def verify_token(raw_token):
    """
    Validate ``raw_token`` and return the user id it was issued for.

    Raises ``InvalidToken`` when the signature does not match, the token is
    malformed or expired, or it lacks the embedded user identity.
    """
    try:
        token = AccessToken(raw_token)
        user_id = token["user"]["id"]
    except (TokenError, KeyError, TypeError) as exc:
        raise InvalidToken(INVALID_TOKEN_MESSAGE) from exc
    if not user_id:
        raise InvalidToken(INVALID_TOKEN_MESSAGE)
    return user_id
