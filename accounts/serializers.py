import logging
from django.db import transaction
from rest_framework import serializers

from .identity import check_nccr_eligibility
from .models import Role, User
from .utils.passwords import validate_strong_password
from .utils.validators import validate_email_format, validate_full_name

logger = logging.getLogger("accounts.serializers")


class SignupSerializer(serializers.Serializer):
    email = serializers.CharField()
    password = serializers.CharField(write_only=True)
    name = serializers.CharField(source="full_name")
    role = serializers.ChoiceField(choices=Role.choices, default=Role.BUYER)

    def validate_email(self, value):
        value = validate_email_format(value)
        if User.objects.filter(email=value).exists():
            raise serializers.ValidationError("Email already exists")
        return value

    def validate_name(self, value):
        return validate_full_name(value)

    def validate_password(self, value):
        validate_strong_password(value)
        return value

    def validate(self, data):
        if data["role"] == Role.NCCR_VERIFIER:
            eligibility = check_nccr_eligibility(data["email"])
            if not eligibility["eligible"]:
                raise serializers.ValidationError({"role": [eligibility["reason"]]})
        return data

    @transaction.atomic
    def create(self, validated_data):
        user = User.objects.create_user(
            email=validated_data["email"],
            password=validated_data["password"],
            full_name=validated_data["full_name"],
            role=validated_data["role"],
        )

        logger.info(
            "user_signed_up | user_id=%s role=%s",
            user.id,
            user.role,
        )
        return user


class NCCREligibilitySerializer(serializers.Serializer):
    email = serializers.EmailField()

    def validate_email(self, value):
        return value.lower().strip()


class UserSerializer(serializers.ModelSerializer):
    name = serializers.CharField(source="full_name", read_only=True)
    role_display = serializers.CharField(source="get_role_display", read_only=True)

    class Meta:
        model = User
        fields = ["id", "email", "name", "role", "role_display", "is_active", "created_at"]
        read_only_fields = fields
