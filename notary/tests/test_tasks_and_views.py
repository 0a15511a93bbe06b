from django.test import override_settings
from django.urls import reverse

from bluecarbon.tests.base import RegistryTestCase
from notary.models import ChainTransaction
from notary.tasks import refresh_pending_transactions


class RefreshPendingTransactionsTests(RegistryTestCase):

    def test_settles_pending_rows(self):
        ChainTransaction.objects.create(
            tx_hash="0x" + "a" * 64, action="project.registered", entity_type="project", entity_id="1"
        )
        ChainTransaction.objects.create(
            tx_hash="0x" + "b" * 64, action="credit.issued", entity_type="carboncredit", entity_id="2",
            status="confirmed",
        )

        result = refresh_pending_transactions()

        self.assertEqual(result, {"checked": 1, "settled": 1})
        chain_tx = ChainTransaction.objects.get(tx_hash="0x" + "a" * 64)
        self.assertEqual(chain_tx.status, "confirmed")
        self.assertEqual(chain_tx.block_number, 42)
        self.assertIsNotNone(chain_tx.checked_at)

    @override_settings(NOTARY_BACKEND="bluecarbon.tests.fakes.FailingNotary")
    def test_stops_when_notary_unavailable(self):
        ChainTransaction.objects.create(
            tx_hash="0x" + "c" * 64, action="project.registered", entity_type="project", entity_id="1"
        )

        result = refresh_pending_transactions()

        self.assertEqual(result, {"checked": 0, "settled": 0})
        self.assertEqual(ChainTransaction.objects.get().status, "pending")


@override_settings(
    AVALANCHE_CHAIN_ID=43113,
    AVALANCHE_EXPLORER_URL="https://testnet.snowtrace.io",
)
class NotaryViewTests(RegistryTestCase):

    def test_network_info(self):
        self.login(self.make_buyer())

        response = self.client.get(reverse("notary-network"))

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["chainId"], 43113)
        self.assertTrue(response.data["isTestnet"])

    def test_network_requires_authentication(self):
        response = self.client.get(reverse("notary-network"))
        self.assertEqual(response.status_code, 401)

    def test_transaction_status(self):
        tx_hash = "0x" + "d" * 64
        ChainTransaction.objects.create(
            tx_hash=tx_hash, action="credit.retired", entity_type="retirement", entity_id="3"
        )
        self.login(self.make_buyer())

        response = self.client.get(reverse("notary-transaction", args=[tx_hash]))

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["status"], "confirmed")
        self.assertEqual(response.data["explorerUrl"], f"https://testnet.snowtrace.io/tx/{tx_hash}")
        self.assertFalse(response.data["stale"])

    @override_settings(NOTARY_BACKEND="bluecarbon.tests.fakes.FailingNotary")
    def test_transaction_status_when_rpc_down(self):
        tx_hash = "0x" + "e" * 64
        ChainTransaction.objects.create(
            tx_hash=tx_hash, action="credit.issued", entity_type="carboncredit", entity_id="4"
        )
        self.login(self.make_buyer())

        response = self.client.get(reverse("notary-transaction", args=[tx_hash]))

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["status"], "pending")
        self.assertTrue(response.data["stale"])

    def test_unknown_transaction(self):
        self.login(self.make_buyer())

        response = self.client.get(reverse("notary-transaction", args=["0x" + "f" * 64]))

        self.assertEqual(response.status_code, 404)
