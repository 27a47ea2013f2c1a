from asset_ledger.domain.entities import Asset, Category, TransactionRecord
from asset_ledger.domain.imports import ImportOutcome, ImportResult, RowError
from asset_ledger.domain.value_objects import (
    AssetType,
    CurrencyCode,
    RecurrenceFrequency,
)

__all__ = [
    "Asset",
    "AssetType",
    "Category",
    "CurrencyCode",
    "ImportOutcome",
    "ImportResult",
    "RecurrenceFrequency",
    "RowError",
    "TransactionRecord",
]

__version__ = "0.1.0"
