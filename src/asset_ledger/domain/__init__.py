from asset_ledger.domain.entities import Asset, Category, TransactionRecord
from asset_ledger.domain.imports import (
    AssetNotFoundError,
    ImportOutcome,
    ImportResult,
    RowError,
)
from asset_ledger.domain.value_objects import (
    AssetType,
    CurrencyCode,
    RecurrenceFrequency,
)

__all__ = [
    "Asset",
    "AssetNotFoundError",
    "AssetType",
    "Category",
    "CurrencyCode",
    "ImportOutcome",
    "ImportResult",
    "RecurrenceFrequency",
    "RowError",
    "TransactionRecord",
]
