from decimal import Decimal

from django.urls import reverse

from accounts.identity import Identity
from credits.services import retire
from projects.models import Project

from .base import RegistryTestCase


class HealthViewTests(RegistryTestCase):

    def test_health_is_public(self):
        response = self.client.get(reverse("health"))

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["status"], "ok")


class PublicStatsViewTests(RegistryTestCase):

    def test_empty_registry(self):
        response = self.client.get(reverse("public-stats"))

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["totalProjects"], 0)
        self.assertEqual(response.data["creditsIssued"], Decimal("0"))
        self.assertEqual(response.data["projectsByEcosystem"], {})

    def test_aggregates_projects_credits_and_retirements(self):
        credit = self.make_credit(amount=Decimal("20.000"))
        manager = self.make_manager()
        self.make_project(manager, name="Seagrass B", ecosystem_type=Project.EcosystemType.SEAGRASS, area=Decimal("5.00"))

        buyer = self.make_buyer()
        retire(credit.id, Identity.from_user(buyer), "5", "offset Q1")

        response = self.client.get(reverse("public-stats"))

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["totalProjects"], 2)
        self.assertEqual(response.data["approvedProjects"], 1)
        self.assertEqual(response.data["totalArea"], Decimal("15.00"))
        self.assertEqual(response.data["creditsIssued"], Decimal("20.000"))
        self.assertEqual(response.data["creditsRetired"], Decimal("5.000"))
        self.assertEqual(response.data["totalRetirements"], 1)
        self.assertEqual(response.data["projectsByEcosystem"], {"mangrove": 1, "seagrass": 1})
