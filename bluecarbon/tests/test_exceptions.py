from django.test import SimpleTestCase
from rest_framework import exceptions as drf_exceptions

from bluecarbon.exceptions import (
    AccessDenied,
    ExternalServiceError,
    InvalidState,
    NotFound,
    Unauthenticated,
    ValidationError,
    registry_exception_handler,
)


class RegistryExceptionHandlerTests(SimpleTestCase):

    def test_domain_errors_map_to_status_codes(self):
        cases = [
            (Unauthenticated(), 401),
            (AccessDenied("Access denied: Buyer role required"), 403),
            (ValidationError("Missing required field: name"), 400),
            (NotFound("Project not found"), 404),
            (InvalidState("MRV data has already been approved"), 409),
            (ExternalServiceError("Scoring service unavailable"), 500),
        ]
        for exc, expected in cases:
            with self.subTest(exc=type(exc).__name__):
                response = registry_exception_handler(exc, {})
                self.assertEqual(response.status_code, expected)
                self.assertEqual(set(response.data), {"error"})

    def test_detail_becomes_error_message(self):
        response = registry_exception_handler(NotFound("Project not found"), {})
        self.assertEqual(response.data, {"error": "Project not found"})

    def test_serializer_errors_keep_fields(self):
        exc = drf_exceptions.ValidationError({"email": ["Email already exists"]})
        response = registry_exception_handler(exc, {})

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["error"], "Email already exists")
        self.assertIn("email", response.data["fields"])

    def test_unexpected_exception_is_500(self):
        with self.assertLogs("bluecarbon.exceptions", level="ERROR"):
            response = registry_exception_handler(RuntimeError("boom"), {})

        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.data, {"error": "Internal server error"})
