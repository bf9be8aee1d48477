"""
Serializers for profiles and their experience/education entries.

``ProfileUpsertSerializer`` accepts the flat form the client submits
(comma-separated skills, one key per social platform) and creates or
updates the caller's profile. ``ProfileSerializer`` is the read shape.
"""

from rest_framework import serializers

from apps.accounts.serializers import UserSummarySerializer

from .models import Education, Experience, Profile

PROFILE_FIELDS = ("company", "website", "location", "bio", "status", "githubusername")
SOCIAL_PLATFORMS = ("youtube", "twitter", "facebook", "linkedin", "instagram")


def required_messages(message):
    return {"required": message, "blank": message, "null": message}


def parse_skills(value):
    """Split a comma-separated skills string into a trimmed, ordered list."""
    return [skill.strip() for skill in value.split(",") if skill.strip()]


# ---------------------------------------------------------------------------
# Experience / Education
# ---------------------------------------------------------------------------
class OptionalDateField(serializers.DateField):
    """A date that may be submitted as an empty string, stored as null."""

    def to_internal_value(self, value):
        if value == "":
            return None
        return super().to_internal_value(value)


class DateRangeMixin:
    """
    Expose the model's ``from_date``/``to_date`` as ``from``/``to``.

    ``from`` is a Python keyword, so the fields cannot be declared on the
    class body.
    """

    def get_fields(self):
        fields = super().get_fields()
        fields["from"] = serializers.DateField(
            source="from_date", error_messages=required_messages("From date is required"),
        )
        fields["to"] = OptionalDateField(source="to_date", required=False, allow_null=True)
        return fields


class ExperienceSerializer(DateRangeMixin, serializers.ModelSerializer):
    class Meta:
        model = Experience
        fields = ["id", "title", "company", "location", "current", "description"]
        read_only_fields = ["id"]
        extra_kwargs = {
            "title": {"error_messages": required_messages("Title is required")},
            "company": {"error_messages": required_messages("Company is required")},
        }


class EducationSerializer(DateRangeMixin, serializers.ModelSerializer):
    class Meta:
        model = Education
        fields = ["id", "school", "degree", "fieldofstudy", "current", "description"]
        read_only_fields = ["id"]
        extra_kwargs = {
            "school": {"error_messages": required_messages("School is required")},
            "degree": {"error_messages": required_messages("Degree is required")},
            "fieldofstudy": {"error_messages": required_messages("Field of study is required")},
        }


# ---------------------------------------------------------------------------
# Profile (read)
# ---------------------------------------------------------------------------
class ProfileSerializer(serializers.ModelSerializer):
    """Full profile with owner summary and nested entries, most recent first."""

    user = UserSummarySerializer(read_only=True)
    experience = ExperienceSerializer(many=True, read_only=True)
    education = EducationSerializer(many=True, read_only=True)

    class Meta:
        model = Profile
        fields = [
            "id",
            "user",
            "company",
            "website",
            "location",
            "bio",
            "status",
            "githubusername",
            "skills",
            "social",
            "experience",
            "education",
            "date",
        ]
        read_only_fields = fields


# ---------------------------------------------------------------------------
# Profile (create or update)
# ---------------------------------------------------------------------------
class ProfileUpsertSerializer(serializers.Serializer):
    """
    Create the caller's profile, or update it in place if one exists.

    Only non-empty scalar fields are written, so a resubmission that omits
    a field keeps its stored value. The social map is rebuilt from the
    platforms present in every submission.
    """

    company = serializers.CharField(max_length=200, required=False, allow_blank=True)
    website = serializers.CharField(max_length=500, required=False, allow_blank=True)
    location = serializers.CharField(max_length=200, required=False, allow_blank=True)
    bio = serializers.CharField(required=False, allow_blank=True)
    status = serializers.CharField(
        max_length=200, error_messages=required_messages("Status is required"),
    )
    githubusername = serializers.CharField(max_length=100, required=False, allow_blank=True)
    skills = serializers.CharField(required=False, allow_blank=True)
    youtube = serializers.CharField(required=False, allow_blank=True)
    twitter = serializers.CharField(required=False, allow_blank=True)
    facebook = serializers.CharField(required=False, allow_blank=True)
    linkedin = serializers.CharField(required=False, allow_blank=True)
    instagram = serializers.CharField(required=False, allow_blank=True)

    def build_fields(self, validated_data):
        """Translate the submitted form into Profile field values."""
        fields = {
            name: validated_data[name]
            for name in PROFILE_FIELDS
            if validated_data.get(name)
        }
        if validated_data.get("skills"):
            fields["skills"] = parse_skills(validated_data["skills"])
        fields["social"] = {
            platform: validated_data[platform]
            for platform in SOCIAL_PLATFORMS
            if validated_data.get(platform)
        }
        return fields

    def create(self, validated_data):
        user = validated_data.pop("user")
        fields = self.build_fields(validated_data)

        profile = Profile.objects.filter(user=user).first()
        if profile is None:
            return Profile.objects.create(user=user, **fields)

        for name, value in fields.items():
            setattr(profile, name, value)
        profile.save(update_fields=list(fields))
        return profile

    def to_representation(self, instance):
        return ProfileSerializer(instance, context=self.context).data
