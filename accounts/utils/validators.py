from django.core.exceptions import ValidationError as DjangoValidationError
from django.core.validators import validate_email
from rest_framework import serializers

NAME_PUNCTUATION = set(" -'.")

# throwaway inboxes cannot receive MRV decision emails
BLOCKED_EMAIL_DOMAINS = {
    "mailinator.com",
    "guerrillamail.com",
    "10minutemail.com",
    "tempmail.com",
    "throwaway.email",
}


def validate_full_name(value):
    """Collapse whitespace and accept letters in any script plus ``-'.``"""
    value = " ".join(value.split())

    if not 2 <= len(value) <= 255:
        raise serializers.ValidationError("Name must be between 2 and 255 characters")

    if any(not (c.isalpha() or c in NAME_PUNCTUATION) for c in value):
        raise serializers.ValidationError(
            "Name can only contain letters, spaces, hyphens, apostrophes and periods"
        )

    if not any(c.isalpha() for c in value):
        raise serializers.ValidationError("Name must contain at least one letter")

    return value


def validate_email_format(value):
    value = value.strip().lower()

    try:
        validate_email(value)
    except DjangoValidationError:
        raise serializers.ValidationError("Invalid email format")

    if value.rsplit("@", 1)[1] in BLOCKED_EMAIL_DOMAINS:
        raise serializers.ValidationError("Disposable email addresses are not allowed")

    return value
