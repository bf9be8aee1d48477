"""Gravatar URLs derived from a user's email address."""

import hashlib
from urllib.parse import urlencode

GRAVATAR_BASE_URL = "https://www.gravatar.com/avatar/"

# 200px, PG-rated, "mystery man" silhouette when no Gravatar is registered
DEFAULT_OPTIONS = {"s": "200", "r": "pg", "d": "mm"}


def gravatar_url(email, **options):
    """
    Return the Gravatar image URL for ``email``.

    The address is trimmed and lower-cased before hashing, so the result is
    deterministic for any spelling of the same mailbox.
    """
    digest = hashlib.md5(email.strip().lower().encode("utf-8")).hexdigest()
    query = urlencode({**DEFAULT_OPTIONS, **options})
    return f"{GRAVATAR_BASE_URL}{digest}?{query}"
