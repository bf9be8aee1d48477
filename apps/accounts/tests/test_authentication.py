"""Tests for the x-auth-token authentication gate."""

import pytest
from rest_framework import status

from apps.accounts.tokens import issue_token

URL = "/api/auth/"


@pytest.mark.django_db
class TestTokenHeaderAuthentication:

    def test_missing_token(self, api_client):
        r = api_client.get(URL)
        assert r.status_code == status.HTTP_401_UNAUTHORIZED
        assert r.data == {"msg": "No token, authorization denied"}

    def test_invalid_token(self, api_client):
        api_client.credentials(HTTP_X_AUTH_TOKEN="garbage")
        r = api_client.get(URL)
        assert r.status_code == status.HTTP_401_UNAUTHORIZED
        assert r.data == {"msg": "Token is not valid"}

    def test_valid_token_resolves_user(self, api_client, user):
        api_client.credentials(HTTP_X_AUTH_TOKEN=issue_token(user))
        r = api_client.get(URL)
        assert r.status_code == status.HTTP_200_OK
        assert r.data["id"] == str(user.pk)

    def test_token_for_deleted_user(self, api_client, user):
        token = issue_token(user)
        user.delete()
        api_client.credentials(HTTP_X_AUTH_TOKEN=token)
        r = api_client.get(URL)
        assert r.status_code == status.HTTP_401_UNAUTHORIZED
        assert r.data == {"msg": "Token is not valid"}

    def test_token_for_inactive_user(self, api_client, user):
        api_client.credentials(HTTP_X_AUTH_TOKEN=issue_token(user))
        user.is_active = False
        user.save()
        r = api_client.get(URL)
        assert r.status_code == status.HTTP_401_UNAUTHORIZED

    def test_bearer_header_is_not_accepted(self, api_client, user):
        api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {issue_token(user)}")
        r = api_client.get(URL)
        assert r.status_code == status.HTTP_401_UNAUTHORIZED

    def test_public_route_ignores_bad_token(self, api_client):
        api_client.credentials(HTTP_X_AUTH_TOKEN="garbage")
        r = api_client.get("/api/profile/")
        assert r.status_code == status.HTTP_200_OK
