from decimal import Decimal

from django.test import override_settings

from bluecarbon.exceptions import AccessDenied, InvalidState, NotFound, ValidationError
from bluecarbon.tests.base import RegistryTestCase
from bluecarbon.tests.fakes import RecordingNotary
from notary.models import ChainTransaction
from projects.models import Project
from projects.services.project_service import ProjectService


VALID_PROJECT = {
    "name": "Mangrove A",
    "description": "Y",
    "location": "X",
    "ecosystemType": "mangrove",
    "area": 10,
}


class CreateProjectTests(RegistryTestCase):

    def setUp(self):
        super().setUp()
        self.manager = self.make_manager()
        self.service = ProjectService()

    def test_valid_payload_registers_project(self):
        project = self.service.create_project(dict(VALID_PROJECT), self.identity(self.manager))

        self.assertEqual(project.status, Project.Status.REGISTERED)
        self.assertEqual(project.manager_id, self.manager.id)
        self.assertEqual(project.area, Decimal("10"))

    def test_project_is_notarized(self):
        project = self.service.create_project(dict(VALID_PROJECT), self.identity(self.manager))

        project.refresh_from_db()
        self.assertTrue(project.on_chain_tx_hash.startswith("0x"))
        self.assertEqual(RecordingNotary.calls[0]["action"], "project.registered")
        self.assertTrue(
            ChainTransaction.objects.filter(
                tx_hash=project.on_chain_tx_hash, entity_type="project", entity_id=str(project.id)
            ).exists()
        )

    @override_settings(NOTARY_BACKEND="bluecarbon.tests.fakes.FailingNotary")
    def test_notary_failure_still_creates_project(self):
        project = self.service.create_project(dict(VALID_PROJECT), self.identity(self.manager))

        project.refresh_from_db()
        self.assertIsNone(project.on_chain_tx_hash)
        self.assertFalse(ChainTransaction.objects.exists())

    def test_missing_required_field_persists_nothing(self):
        for field in ("name", "description", "location", "ecosystemType", "area"):
            payload = dict(VALID_PROJECT)
            payload.pop(field)
            with self.subTest(field=field):
                with self.assertRaises(ValidationError) as ctx:
                    self.service.create_project(payload, self.identity(self.manager))
                self.assertIn(field, str(ctx.exception.detail))

        self.assertFalse(Project.objects.exists())

    def test_blank_field_is_missing(self):
        with self.assertRaises(ValidationError):
            self.service.create_project(dict(VALID_PROJECT, name="   "), self.identity(self.manager))

    def test_non_positive_area_rejected(self):
        for area in (0, -3, "0"):
            with self.subTest(area=area):
                with self.assertRaises(ValidationError):
                    self.service.create_project(dict(VALID_PROJECT, area=area), self.identity(self.manager))

        self.assertFalse(Project.objects.exists())

    def test_non_numeric_area_rejected(self):
        with self.assertRaises(ValidationError):
            self.service.create_project(dict(VALID_PROJECT, area="large"), self.identity(self.manager))

    def test_non_string_text_fields_rejected(self):
        cases = {
            "name": 123,
            "description": 5,
            "location": ["Sundarbans"],
            "coordinates": {"lat": 21.9, "lng": 88.8},
            "communityPartners": 7,
        }
        for field, value in cases.items():
            with self.subTest(field=field):
                with self.assertRaises(ValidationError) as ctx:
                    self.service.create_project(dict(VALID_PROJECT, **{field: value}), self.identity(self.manager))
                self.assertEqual(str(ctx.exception.detail), f"{field} must be a string")

        self.assertFalse(Project.objects.exists())

    def test_overlong_text_fields_rejected(self):
        for field in ("name", "location", "coordinates"):
            with self.subTest(field=field):
                with self.assertRaises(ValidationError):
                    self.service.create_project(dict(VALID_PROJECT, **{field: "x" * 256}), self.identity(self.manager))

        self.assertFalse(Project.objects.exists())

    def test_area_rounding_to_zero_rejected(self):
        for area in ("0.001", "0.004"):
            with self.subTest(area=area):
                with self.assertRaises(ValidationError):
                    self.service.create_project(dict(VALID_PROJECT, area=area), self.identity(self.manager))

        self.assertFalse(Project.objects.exists())

    def test_area_beyond_column_bound_rejected(self):
        for area in ("1e15", "9999999999.999", "Infinity", "NaN"):
            with self.subTest(area=area):
                with self.assertRaises(ValidationError):
                    self.service.create_project(dict(VALID_PROJECT, area=area), self.identity(self.manager))

        self.assertFalse(Project.objects.exists())
        self.assertEqual(RecordingNotary.calls, [])

    def test_expected_capture_beyond_column_bound_rejected(self):
        with self.assertRaises(ValidationError):
            self.service.create_project(
                dict(VALID_PROJECT, expectedCarbonCapture="1e12"), self.identity(self.manager)
            )

        self.assertFalse(Project.objects.exists())

    def test_area_and_capture_are_rounded_to_column_precision(self):
        project = self.service.create_project(
            dict(VALID_PROJECT, area="12.345", expectedCarbonCapture="3.14159"),
            self.identity(self.manager),
        )

        project.refresh_from_db()
        self.assertEqual(project.area, Decimal("12.35"))
        self.assertEqual(project.expected_carbon_capture, Decimal("3.142"))

    def test_unknown_ecosystem_rejected(self):
        with self.assertRaises(ValidationError):
            self.service.create_project(dict(VALID_PROJECT, ecosystemType="desert"), self.identity(self.manager))


class ListProjectsTests(RegistryTestCase):

    def test_manager_sees_only_own_projects(self):
        manager = self.make_manager()
        other = self.make_manager()
        mine = self.make_project(manager)
        self.make_project(other, name="Other")

        projects = ProjectService().get_manager_projects(manager.id)

        self.assertEqual([p.id for p in projects], [mine.id])

    def test_all_projects_include_manager_details(self):
        manager = self.make_manager(full_name="Ravi Kumar")
        self.make_project(manager)

        projects = ProjectService().get_all_projects()

        self.assertEqual(projects[0].manager_name, "Ravi Kumar")
        self.assertEqual(projects[0].manager_email, manager.email)

    def test_missing_manager_falls_back(self):
        manager = self.make_manager()
        project = self.make_project(manager)
        manager.delete()

        projects = ProjectService().get_all_projects()

        self.assertEqual(projects[0].id, project.id)
        self.assertEqual(projects[0].manager_name, "Unknown Manager")
        self.assertEqual(projects[0].manager_email, "N/A")

    def test_project_stats(self):
        manager = self.make_manager()
        self.make_project(manager, area=Decimal("10.00"), expected_carbon_capture=Decimal("5"))
        self.make_project(
            manager,
            area=Decimal("2.50"),
            ecosystem_type=Project.EcosystemType.SALTMARSH,
            status=Project.Status.APPROVED,
        )

        stats = ProjectService().get_project_stats(list(Project.objects.all()))

        self.assertEqual(stats["total"], 2)
        self.assertEqual(stats["byStatus"], {"registered": 1, "approved": 1})
        self.assertEqual(stats["byEcosystem"], {"mangrove": 1, "saltmarsh": 1})
        self.assertEqual(stats["totalArea"], Decimal("12.50"))
        self.assertEqual(stats["totalExpectedCapture"], Decimal("5"))


class DeleteProjectTests(RegistryTestCase):

    def setUp(self):
        super().setUp()
        self.manager = self.make_manager()
        self.service = ProjectService()

    def test_owner_deletes_registered_project(self):
        project = self.make_project(self.manager)

        self.service.delete_project(project.id, self.identity(self.manager))

        self.assertFalse(Project.objects.filter(id=project.id).exists())

    def test_non_owner_is_denied(self):
        project = self.make_project(self.manager)
        other = self.make_manager()

        with self.assertRaises(AccessDenied):
            self.service.delete_project(project.id, self.identity(other))

        self.assertTrue(Project.objects.filter(id=project.id).exists())

    def test_decided_projects_cannot_be_deleted(self):
        for status in (Project.Status.MRV_SUBMITTED, Project.Status.APPROVED, Project.Status.REJECTED):
            project = self.make_project(self.manager, status=status)
            with self.subTest(status=status):
                with self.assertRaises(InvalidState):
                    self.service.delete_project(project.id, self.identity(self.manager))
                project.refresh_from_db()
                self.assertEqual(project.status, status)

    def test_unknown_project(self):
        with self.assertRaises(NotFound):
            self.service.delete_project("0d9c1b1e-1111-4111-8111-111111111111", self.identity(self.manager))
