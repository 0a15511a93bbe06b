import string

from rest_framework import serializers

MIN_PASSWORD_LENGTH = 8

PASSWORD_RULES = (
    (lambda p: len(p) >= MIN_PASSWORD_LENGTH, f"at least {MIN_PASSWORD_LENGTH} characters"),
    (lambda p: any(c.islower() for c in p), "a lowercase letter"),
    (lambda p: any(c.isupper() for c in p), "an uppercase letter"),
    (lambda p: any(c.isdigit() for c in p), "a number"),
    (lambda p: any(c in string.punctuation for c in p), "a special character"),
)


def missing_password_rules(password):
    return [label for check, label in PASSWORD_RULES if not check(password)]


def validate_strong_password(password: str) -> None:
    """Registry accounts sign verification decisions, so every rule applies to every role."""
    if not password:
        raise serializers.ValidationError("Password cannot be empty")

    missing = missing_password_rules(password)
    if missing:
        raise serializers.ValidationError("Password must contain " + ", ".join(missing))
