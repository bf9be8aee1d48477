"""DRF authentication backed by the ``x-auth-token`` request header."""

from django.conf import settings
from django.contrib.auth import get_user_model
from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework.authentication import BaseAuthentication
from rest_framework_simplejwt.exceptions import InvalidToken

from .tokens import INVALID_TOKEN_MESSAGE, verify_token

User = get_user_model()


class TokenHeaderAuthentication(BaseAuthentication):
    """
    Resolve ``request.user`` from the session token header.

    No header → anonymous (protected views then answer 401 "No token").
    A bad, expired or orphaned token is rejected outright with 401.
    """

    def authenticate(self, request):
        raw_token = request.META.get(settings.AUTH_TOKEN_HEADER)
        if not raw_token:
            return None

        user_id = verify_token(raw_token)
        try:
            user = User.objects.get(pk=user_id)
        except (User.DoesNotExist, DjangoValidationError, ValueError):
            raise InvalidToken(INVALID_TOKEN_MESSAGE)
        if not user.is_active:
            raise InvalidToken(INVALID_TOKEN_MESSAGE)

        return (user, raw_token)

    def authenticate_header(self, request):
        # Makes DRF answer 401 rather than 403 for unauthenticated requests
        return "X-Auth-Token"
