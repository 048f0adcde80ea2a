"""Unit tests for recharge domain helpers"""

from datetime import date
from decimal import Decimal
from src.domain.customer_recharge import CustomerRecharge, parse_wallet_amount, compute_new_expiry


class TestParseWalletAmount:

    def test_parenthesised_with_symbol(self):
        assert parse_wallet_amount("bKash TX123 (Wallet: ৳250)") == Decimal("250")

    def test_plain(self):
        assert parse_wallet_amount("Wallet: 120.50") == Decimal("120.50")

    def test_symbol_with_space(self):
        assert parse_wallet_amount("(Wallet: ৳ 75)") == Decimal("75")

    def test_no_wallet_note(self):
        assert parse_wallet_amount("Paid at counter") == Decimal("0")

    def test_empty_notes(self):
        assert parse_wallet_amount(None) == Decimal("0")
        assert parse_wallet_amount("") == Decimal("0")


class TestComputeNewExpiry:

    def test_extends_from_future_expiry(self):
        result = compute_new_expiry(date(2024, 2, 10), date(2024, 2, 1), months=1, validity_days=30)

        assert result == date(2024, 3, 11)

    def test_extends_from_today_when_expired(self):
        result = compute_new_expiry(date(2024, 1, 10), date(2024, 2, 1), months=2, validity_days=30)

        assert result == date(2024, 4, 1)

    def test_extends_from_today_without_expiry(self):
        assert compute_new_expiry(None, date(2024, 2, 1), months=1, validity_days=30) == date(2024, 3, 2)

    def test_expiry_equal_to_today_starts_today(self):
        assert compute_new_expiry(date(2024, 2, 1), date(2024, 2, 1), 1, 30) == date(2024, 3, 2)


class TestPackageChange:

    def test_detects_package_change_note(self):
        recharge = CustomerRecharge(
            tenant_id="t",
            customer_id="c",
            amount=Decimal("800"),
            payment_method="bkash",
            notes="Package Change to 20 Mbps",
        )
        assert recharge.is_package_change() is True

    def test_plain_recharge(self):
        recharge = CustomerRecharge(tenant_id="t", customer_id="c", amount=Decimal("500"), payment_method="cash")
        assert recharge.is_package_change() is False
