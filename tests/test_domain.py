"""Tests for domain entities and value objects."""

from datetime import date, datetime
from decimal import Decimal

import pytest

from asset_ledger.domain.entities import Asset, TransactionRecord
from asset_ledger.domain.value_objects import CurrencyCode, RecurrenceFrequency
from asset_ledger.exceptions import InvalidCurrencyError


class TestCurrencyCode:
    def test_parse_is_case_insensitive(self):
        assert CurrencyCode.parse(" eur ") is CurrencyCode.EUR

    def test_parse_rejects_unknown_code(self):
        with pytest.raises(InvalidCurrencyError) as exc_info:
            CurrencyCode.parse("XYZ")

        assert exc_info.value.context == {"currency_code": "XYZ"}


class TestAsset:
    def test_display_name_includes_icon(self):
        assert Asset(name="Cash", icon="💰").display_name == "💰 Cash"
        assert Asset(name="Cash").display_name == "Cash"

    def test_defaults(self):
        asset = Asset(name="Cash")

        assert asset.currency is CurrencyCode.USD
        assert asset.initial_balance == Decimal("0")
        assert asset.id != Asset(name="Cash").id


class TestTransactionRecord:
    def test_occurred_on_drops_time(self):
        record = TransactionRecord(
            name="Lunch",
            amount=Decimal("-12"),
            occurred_at=datetime(2024, 3, 20, 23, 59),
        )

        assert record.occurred_on == date(2024, 3, 20)
        assert record.frequency is RecurrenceFrequency.SINGLE
        assert record.note == ""
