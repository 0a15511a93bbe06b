from decimal import Decimal

from django.db.models import Sum
from django.test import override_settings

from bluecarbon.exceptions import NotFound, ValidationError
from bluecarbon.tests.base import RegistryTestCase
from bluecarbon.tests.fakes import RecordingNotary
from credits.models import CarbonCredit, CreditHolding, Retirement
from credits.services import list_available, parse_amount, purchase, retire


class ParseAmountTests(RegistryTestCase):

    def test_accepts_numbers_and_strings(self):
        self.assertEqual(parse_amount(5), Decimal("5.000"))
        self.assertEqual(parse_amount("2.5"), Decimal("2.500"))

    def test_rejects_bad_values(self):
        for value in (None, True, "", "abc", "NaN", "Infinity", 0, -1, "0.0001"):
            with self.subTest(value=value):
                with self.assertRaises(ValidationError):
                    parse_amount(value)


class ListAvailableTests(RegistryTestCase):

    def test_only_unowned_unretired_credits_with_balance(self):
        listed = self.make_credit()
        sold_out = self.make_credit()
        sold_out.available_balance = Decimal("0")
        sold_out.owner = self.make_buyer()
        sold_out.save()
        retired = self.make_credit()
        retired.is_retired = True
        retired.save()

        self.assertEqual([c.id for c in list_available()], [listed.id])


class PurchaseTests(RegistryTestCase):

    def setUp(self):
        super().setUp()
        self.credit = self.make_credit(amount=Decimal("10.000"))
        self.buyer = self.make_buyer()

    def test_moves_balance_into_holding(self):
        holding = purchase(self.credit.id, self.identity(self.buyer), "4")

        self.credit.refresh_from_db()
        self.assertEqual(holding.balance, Decimal("4.000"))
        self.assertEqual(self.credit.available_balance, Decimal("6.000"))
        self.assertEqual(self.credit.remaining_balance, Decimal("10.000"))
        self.assertIsNone(self.credit.owner_id)

    def test_draining_marketplace_sets_owner(self):
        purchase(self.credit.id, self.identity(self.buyer), "10")

        self.credit.refresh_from_db()
        self.assertEqual(self.credit.owner_id, self.buyer.id)
        self.assertNotIn(self.credit.id, [c.id for c in list_available()])

    def test_repeat_purchases_accumulate(self):
        purchase(self.credit.id, self.identity(self.buyer), "1")
        purchase(self.credit.id, self.identity(self.buyer), "2")

        self.assertEqual(CreditHolding.objects.get().balance, Decimal("3.000"))

    def test_exceeding_available_balance(self):
        with self.assertRaises(ValidationError):
            purchase(self.credit.id, self.identity(self.buyer), "10.001")

        self.credit.refresh_from_db()
        self.assertEqual(self.credit.available_balance, Decimal("10.000"))
        self.assertFalse(CreditHolding.objects.exists())

    def test_non_positive_amount(self):
        with self.assertRaises(ValidationError):
            purchase(self.credit.id, self.identity(self.buyer), 0)

    def test_unknown_credit(self):
        with self.assertRaises(NotFound):
            purchase("1b2c3d4e-5555-4555-8555-555555555555", self.identity(self.buyer), 1)


class RetireTests(RegistryTestCase):

    def setUp(self):
        super().setUp()
        self.credit = self.make_credit(amount=Decimal("10.000"))
        self.buyer = self.make_buyer()

    def test_retire_decrements_remaining_by_exact_amount(self):
        retirement = retire(self.credit.id, self.identity(self.buyer), "3.5", "offset Q1")

        self.credit.refresh_from_db()
        self.assertEqual(retirement.amount, Decimal("3.500"))
        self.assertEqual(retirement.reason, "offset Q1")
        self.assertEqual(self.credit.remaining_balance, Decimal("6.500"))
        self.assertFalse(self.credit.is_retired)
        self.assertEqual(Retirement.objects.count(), 1)

    def test_holding_is_consumed_before_marketplace(self):
        purchase(self.credit.id, self.identity(self.buyer), "4")

        retire(self.credit.id, self.identity(self.buyer), "5", "offset Q1")

        self.credit.refresh_from_db()
        self.assertEqual(CreditHolding.objects.get().balance, Decimal("0"))
        self.assertEqual(self.credit.available_balance, Decimal("5.000"))
        self.assertEqual(self.credit.remaining_balance, Decimal("5.000"))

    def test_retiring_everything_retires_credit(self):
        retire(self.credit.id, self.identity(self.buyer), "10", "annual offset")

        self.credit.refresh_from_db()
        self.assertEqual(self.credit.remaining_balance, Decimal("0"))
        self.assertTrue(self.credit.is_retired)
        self.assertEqual(self.credit.owner_id, self.buyer.id)

    def test_amount_above_remaining_changes_nothing(self):
        with self.assertRaises(ValidationError):
            retire(self.credit.id, self.identity(self.buyer), "10.5", "too much")

        self.credit.refresh_from_db()
        self.assertEqual(self.credit.remaining_balance, Decimal("10.000"))
        self.assertEqual(self.credit.available_balance, Decimal("10.000"))
        self.assertFalse(Retirement.objects.exists())

    def test_cannot_retire_another_buyers_holding(self):
        other = self.make_buyer()
        purchase(self.credit.id, self.identity(other), "10")

        with self.assertRaises(ValidationError):
            retire(self.credit.id, self.identity(self.buyer), "1", "not mine")

        self.assertEqual(CreditHolding.objects.get(buyer=other).balance, Decimal("10.000"))

    def test_blank_reason(self):
        with self.assertRaises(ValidationError):
            retire(self.credit.id, self.identity(self.buyer), "1", "   ")

        self.assertFalse(Retirement.objects.exists())

    def test_retirement_is_notarized(self):
        retirement = retire(self.credit.id, self.identity(self.buyer), "1", "offset")

        retirement.refresh_from_db()
        self.assertTrue(retirement.on_chain_tx_hash)
        self.assertEqual(RecordingNotary.calls[-1]["action"], "credit.retired")

    @override_settings(NOTARY_BACKEND="bluecarbon.tests.fakes.FailingNotary")
    def test_notary_failure_keeps_retirement(self):
        retirement = retire(self.credit.id, self.identity(self.buyer), "1", "offset")

        retirement.refresh_from_db()
        self.assertIsNone(retirement.on_chain_tx_hash)
        self.credit.refresh_from_db()
        self.assertEqual(self.credit.remaining_balance, Decimal("9.000"))


class InterleavedPurchaseAndRetireTests(RegistryTestCase):

    def assert_balances_consistent(self, credit):
        credit.refresh_from_db()
        held = CreditHolding.objects.filter(credit=credit).aggregate(total=Sum("balance"))["total"] or Decimal("0")
        retired = Retirement.objects.filter(credit=credit).aggregate(total=Sum("amount"))["total"] or Decimal("0")

        self.assertGreaterEqual(credit.available_balance, 0)
        self.assertGreaterEqual(credit.remaining_balance, 0)
        self.assertEqual(credit.remaining_balance, credit.available_balance + held)
        self.assertEqual(credit.amount, credit.remaining_balance + retired)

    def test_requests_summing_past_balance_never_overdraw(self):
        credit = self.make_credit(amount=Decimal("10.000"))
        alice = self.identity(self.make_buyer())
        bob = self.identity(self.make_buyer())

        purchase(credit.id, alice, "6")
        with self.assertRaises(ValidationError):
            retire(credit.id, bob, "6", "offset")
        self.assert_balances_consistent(credit)

        retire(credit.id, bob, "4", "offset")
        with self.assertRaises(ValidationError):
            purchase(credit.id, alice, "1")
        self.assert_balances_consistent(credit)

        retire(credit.id, alice, "6", "offset")
        self.assert_balances_consistent(credit)

        credit.refresh_from_db()
        self.assertEqual(credit.remaining_balance, Decimal("0"))
        self.assertTrue(credit.is_retired)

    def test_mixed_sequence_keeps_invariant(self):
        credit = self.make_credit(amount=Decimal("12.000"))
        buyers = [self.identity(self.make_buyer()) for _ in range(3)]

        steps = [
            (purchase, buyers[0], "3"),
            (retire, buyers[1], "2"),
            (purchase, buyers[2], "5"),
            (retire, buyers[0], "4"),
            (purchase, buyers[1], "9"),
            (retire, buyers[2], "5"),
            (retire, buyers[1], "1"),
        ]
        for operation, identity, amount in steps:
            try:
                if operation is retire:
                    operation(credit.id, identity, amount, "offset")
                else:
                    operation(credit.id, identity, amount)
            except ValidationError:
                pass
            self.assert_balances_consistent(credit)
