from unittest import mock

from django.test import override_settings

from bluecarbon.tests.base import RegistryTestCase
from bluecarbon.tests.fakes import RecordingNotary
from notary.models import ChainTransaction
from notary.services import notarize


class NotarizeTests(RegistryTestCase):

    def setUp(self):
        super().setUp()
        self.project = self.make_project(self.make_manager())

    def test_records_transaction_and_stores_hash(self):
        tx_hash = notarize("project.registered", self.project, {"name": self.project.name})

        self.project.refresh_from_db()
        self.assertEqual(self.project.on_chain_tx_hash, tx_hash)
        chain_tx = ChainTransaction.objects.get(tx_hash=tx_hash)
        self.assertEqual(chain_tx.entity_type, "project")
        self.assertEqual(chain_tx.entity_id, str(self.project.id))
        self.assertEqual(chain_tx.status, "pending")
        self.assertEqual(RecordingNotary.calls[-1]["entityId"], str(self.project.id))

    @override_settings(NOTARY_BACKEND="bluecarbon.tests.fakes.FailingNotary")
    def test_unavailable_notary_returns_none(self):
        with self.assertLogs("notary.services", level="WARNING"):
            tx_hash = notarize("project.registered", self.project, {})

        self.assertIsNone(tx_hash)
        self.project.refresh_from_db()
        self.assertIsNone(self.project.on_chain_tx_hash)

    def test_unexpected_error_returns_none(self):
        broken = mock.Mock()
        broken.record_transaction.side_effect = KeyError("txHash")

        with self.assertLogs("notary.services", level="ERROR"):
            tx_hash = notarize("project.registered", self.project, {}, notary=broken)

        self.assertIsNone(tx_hash)
        self.assertFalse(ChainTransaction.objects.exists())

    @override_settings(NOTARY_ENABLED=False)
    def test_disabled(self):
        self.assertIsNone(notarize("project.registered", self.project, {}))
        self.assertEqual(RecordingNotary.calls, [])
