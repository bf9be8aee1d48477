"""
GitHub integration: list a user's most recent public repositories.

Kept out of the views so the outbound call is easy to mock. Failures are
logged and reported as ``None``; callers decide how to surface them.
"""

import logging

import requests
from django.conf import settings

logger = logging.getLogger(__name__)

REPO_LIMIT = 5


def fetch_repositories(username):
    """
    Return the decoded repository list for ``username``, or ``None``.

    ``None`` means GitHub answered with anything but 200 (typically an
    unknown user) or could not be reached at all.
    """
    params = {"per_page": REPO_LIMIT, "sort": "created:asc"}
    if settings.GITHUB_CLIENT_ID and settings.GITHUB_SECRET:
        params["client_id"] = settings.GITHUB_CLIENT_ID
        params["client_secret"] = settings.GITHUB_SECRET

    try:
        response = requests.get(
            f"{settings.GITHUB_API_URL}/users/{username}/repos",
            params=params,
            headers={"User-Agent": "devconnector-api", "Accept": "application/vnd.github+json"},
            timeout=settings.GITHUB_TIMEOUT,
        )
    except requests.RequestException as exc:
        logger.error("GitHub request failed for %s: %s", username, exc)
        return None

    if response.status_code != 200:
        logger.info("GitHub returned %s for %s", response.status_code, username)
        return None

    try:
        return response.json()
    except ValueError as exc:
        logger.error("GitHub sent an unreadable body for %s: %s", username, exc)
        return None
