from asset_ledger.repositories.interfaces import (
    AssetRepository,
    CategoryRepository,
    OperationRepository,
)
from asset_ledger.repositories.sqlite import (
    SQLiteAssetRepository,
    SQLiteCategoryRepository,
    SQLiteDatabase,
    SQLiteOperationRepository,
)

__all__ = [
    "AssetRepository",
    "CategoryRepository",
    "OperationRepository",
    "SQLiteAssetRepository",
    "SQLiteCategoryRepository",
    "SQLiteDatabase",
    "SQLiteOperationRepository",
]
