from dataclasses import dataclass, field
from datetime import UTC, date, datetime
from decimal import Decimal
from uuid import UUID, uuid4

from asset_ledger.domain.value_objects import (
    AssetType,
    CurrencyCode,
    RecurrenceFrequency,
)


def _utc_now() -> datetime:
    return datetime.now(UTC)


@dataclass
class Asset:
    name: str
    currency: CurrencyCode = CurrencyCode.USD
    id: UUID = field(default_factory=uuid4)
    icon: str = ""
    asset_type: AssetType = AssetType.CASH
    initial_balance: Decimal = Decimal("0")
    created_at: datetime = field(default_factory=_utc_now)

    @property
    def display_name(self) -> str:
        return f"{self.icon} {self.name}".strip()


@dataclass
class Category:
    name: str
    id: UUID = field(default_factory=uuid4)


@dataclass
class TransactionRecord:
    """A single money movement on an asset.

    Positive amounts are inflows, negative amounts outflows. Category and
    asset are referenced by id; their names are resolved through lookup
    tables owned by the persistence layer.
    """

    name: str
    amount: Decimal
    occurred_at: datetime
    currency: CurrencyCode = CurrencyCode.USD
    id: UUID = field(default_factory=uuid4)
    note: str = ""
    frequency: RecurrenceFrequency = RecurrenceFrequency.SINGLE
    category_id: UUID | None = None
    asset_id: UUID | None = None

    @property
    def occurred_on(self) -> date:
        return self.occurred_at.date()
