from django.test import SimpleTestCase
from rest_framework import serializers

from accounts.utils.passwords import missing_password_rules, validate_strong_password
from accounts.utils.validators import validate_email_format, validate_full_name


class PasswordRuleTests(SimpleTestCase):

    def test_strong_password_passes(self):
        validate_strong_password("Tide-Gauge7")

    def test_every_missing_rule_is_reported(self):
        self.assertEqual(
            missing_password_rules("mangrove"),
            ["an uppercase letter", "a number", "a special character"],
        )

    def test_message_lists_missing_rules(self):
        with self.assertRaises(serializers.ValidationError) as ctx:
            validate_strong_password("Ab1!")

        self.assertIn("at least 8 characters", str(ctx.exception.detail))


class NameAndEmailTests(SimpleTestCase):

    def test_name_whitespace_is_collapsed(self):
        self.assertEqual(validate_full_name("  Meera   Nair "), "Meera Nair")

    def test_accented_names_are_accepted(self):
        self.assertEqual(validate_full_name("Zoë Fernández"), "Zoë Fernández")

    def test_name_with_digits_rejected(self):
        with self.assertRaises(serializers.ValidationError):
            validate_full_name("R2D2")

    def test_email_is_normalised(self):
        self.assertEqual(validate_email_format(" Asha@Example.ORG "), "asha@example.org")

    def test_malformed_email_rejected(self):
        with self.assertRaises(serializers.ValidationError):
            validate_email_format("asha..rao@example")

    def test_disposable_email_rejected(self):
        with self.assertRaises(serializers.ValidationError):
            validate_email_format("someone@mailinator.com")
