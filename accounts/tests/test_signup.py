from django.urls import reverse

from accounts.models import Role, User
from bluecarbon.tests.base import RegistryTestCase


class SignupTests(RegistryTestCase):

    def payload(self, **overrides):
        data = {
            "email": "Asha@Example.org",
            "password": "StrongPass1!",
            "name": "Asha Rao",
        }
        data.update(overrides)
        return data

    def test_defaults_to_buyer(self):
        response = self.client.post(reverse("signup"), self.payload(), format="json")

        self.assertEqual(response.status_code, 201)
        user = User.objects.get(email="asha@example.org")
        self.assertEqual(user.role, Role.BUYER)
        self.assertEqual(user.full_name, "Asha Rao")
        self.assertEqual(response.data["user"]["role"], "buyer")

    def test_project_manager_signup(self):
        response = self.client.post(
            reverse("signup"), self.payload(role="project_manager"), format="json"
        )

        self.assertEqual(response.status_code, 201)
        self.assertEqual(User.objects.get().role, Role.PROJECT_MANAGER)

    def test_verifier_requires_government_email(self):
        response = self.client.post(
            reverse("signup"), self.payload(role="nccr_verifier"), format="json"
        )

        self.assertEqual(response.status_code, 400)
        self.assertIn("role", response.data["fields"])
        self.assertFalse(User.objects.exists())

    def test_verifier_with_eligible_email(self):
        response = self.client.post(
            reverse("signup"),
            self.payload(email="officer@nccr.gov.in", role="nccr_verifier"),
            format="json",
        )

        self.assertEqual(response.status_code, 201)
        self.assertEqual(User.objects.get().role, Role.NCCR_VERIFIER)

    def test_duplicate_email_rejected(self):
        self.make_buyer(email="asha@example.org")

        response = self.client.post(reverse("signup"), self.payload(), format="json")

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["error"], "Email already exists")

    def test_weak_password_rejected(self):
        response = self.client.post(
            reverse("signup"), self.payload(password="password"), format="json"
        )

        self.assertEqual(response.status_code, 400)
        self.assertIn("password", response.data["fields"])

    def test_unknown_role_rejected(self):
        response = self.client.post(reverse("signup"), self.payload(role="admin"), format="json")

        self.assertEqual(response.status_code, 400)
        self.assertFalse(User.objects.exists())


class NCCREligibilityViewTests(RegistryTestCase):

    def test_subdomain_is_eligible(self):
        response = self.client.post(
            reverse("check-nccr-eligibility"), {"email": "lab@moef.gov.in"}, format="json"
        )

        self.assertEqual(response.status_code, 200)
        self.assertTrue(response.data["eligible"])

    def test_private_domain_is_not_eligible(self):
        response = self.client.post(
            reverse("check-nccr-eligibility"), {"email": "someone@gmail.com"}, format="json"
        )

        self.assertEqual(response.status_code, 200)
        self.assertFalse(response.data["eligible"])
        self.assertTrue(response.data["reason"])

    def test_lookalike_domain_is_not_eligible(self):
        response = self.client.post(
            reverse("check-nccr-eligibility"), {"email": "x@notgov.in"}, format="json"
        )

        self.assertFalse(response.data["eligible"])
