"""
Views for registration, login and the authenticated-user lookup.

Both registration and login answer with a single signed session token;
clients send it back in the ``x-auth-token`` header on protected routes.
"""

import logging

from rest_framework import generics, status
from rest_framework.exceptions import ValidationError
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.common.mixins import PublicMethodsMixin

from .serializers import LoginSerializer, RegisterSerializer, UserSerializer
from .tokens import issue_token

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Registration
# ---------------------------------------------------------------------------
class RegisterView(generics.CreateAPIView):
    """
    POST /api/users/

    Creates a new user account and returns a session token so the user is
    logged in immediately after registration.
    """

    serializer_class = RegisterSerializer
    authentication_classes = []
    permission_classes = [AllowAny]

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.save()

        logger.info("Registered user %s", user.pk)
        return Response({"token": issue_token(user)}, status=status.HTTP_200_OK)


# ---------------------------------------------------------------------------
# Login / current user
# ---------------------------------------------------------------------------
class AuthView(PublicMethodsMixin, APIView):
    """
    GET  /api/auth/  → the authenticated user (token required)
    POST /api/auth/  → exchange email + password for a session token
    """

    public_methods = ("POST",)

    def get(self, request):
        return Response(UserSerializer(request.user).data)

    def post(self, request):
        serializer = LoginSerializer(data=request.data, context={"request": request})
        try:
            serializer.is_valid(raise_exception=True)
        except ValidationError:
            logger.warning("Failed login attempt for %s", request.data.get("email"))
            raise
        user = serializer.validated_data["user"]

        return Response({"token": issue_token(user)}, status=status.HTTP_200_OK)
