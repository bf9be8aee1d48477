"""
Serializers for user registration, login and the authenticated user.

Field error messages are phrased for display to end users; the project
exception handler reports them as ``{"errors": [{"msg", "param"}]}``.
"""

from django.contrib.auth import authenticate, get_user_model
from rest_framework import serializers

User = get_user_model()

INVALID_CREDENTIALS_MESSAGE = "Invalid credentials"


# ---------------------------------------------------------------------------
# Registration
# ---------------------------------------------------------------------------
class RegisterSerializer(serializers.ModelSerializer):
    """
    Handles new-user registration.

    Accepts name, email and password. The email is normalised and must
    not already be registered; the avatar is derived from it by the
    user manager.
    """

    name = serializers.CharField(
        max_length=100,
        error_messages={"required": "Name is required", "blank": "Name is required"},
    )
    email = serializers.EmailField(
        error_messages={
            "required": "Please include a valid email address",
            "blank": "Please include a valid email address",
            "invalid": "Please include a valid email address",
        },
    )
    password = serializers.CharField(
        write_only=True,
        min_length=6,
        trim_whitespace=False,
        error_messages={
            "required": "Please enter a password with 6 or more characters",
            "blank": "Please enter a password with 6 or more characters",
            "min_length": "Please enter a password with 6 or more characters",
        },
    )

    class Meta:
        model = User
        fields = ["id", "name", "email", "password"]
        read_only_fields = ["id"]

    def validate_email(self, value):
        """Normalise and check uniqueness (case-insensitive)."""
        value = value.lower().strip()
        if User.objects.filter(email=value).exists():
            raise serializers.ValidationError("User already exists")
        return value

    def create(self, validated_data):
        return User.objects.create_user(
            email=validated_data["email"],
            name=validated_data["name"],
            password=validated_data["password"],
        )


# ---------------------------------------------------------------------------
# Login
# ---------------------------------------------------------------------------
class LoginSerializer(serializers.Serializer):
    """
    Validates login credentials and returns the matching user.

    Unknown emails and wrong passwords produce the same message so the
    endpoint cannot be used to discover registered addresses.
    """

    email = serializers.EmailField(
        error_messages={
            "required": "Please include a valid email address",
            "blank": "Please include a valid email address",
            "invalid": "Please include a valid email address",
        },
    )
    password = serializers.CharField(
        write_only=True,
        trim_whitespace=False,
        error_messages={"required": "Password is required", "blank": "Password is required"},
    )

    def validate(self, attrs):
        user = authenticate(
            self.context.get("request"),
            email=attrs["email"].lower().strip(),
            password=attrs["password"],
        )
        if user is None:
            raise serializers.ValidationError(INVALID_CREDENTIALS_MESSAGE)
        attrs["user"] = user
        return attrs


# ---------------------------------------------------------------------------
# Authenticated user (read-only)
# ---------------------------------------------------------------------------
class UserSerializer(serializers.ModelSerializer):
    """The current user as returned by GET /api/auth/, never with the password."""

    class Meta:
        model = User
        fields = ["id", "name", "email", "avatar", "date"]
        read_only_fields = fields


class UserSummarySerializer(serializers.ModelSerializer):
    """Public identity embedded in profiles."""

    class Meta:
        model = User
        fields = ["id", "name", "avatar"]
        read_only_fields = fields
