from collections.abc import Iterable
from uuid import UUID

import pytest

from asset_ledger.config import Environment, LogLevel, Settings, get_settings
from asset_ledger.domain.entities import Asset, Category, TransactionRecord
from asset_ledger.domain.value_objects import AssetType, CurrencyCode
from asset_ledger.logging_config import configure_logging
from asset_ledger.repositories.interfaces import (
    AssetRepository,
    CategoryRepository,
    OperationRepository,
)
from asset_ledger.services.csv_export import CSVExportService
from asset_ledger.services.csv_import import CSVImportService


def pytest_configure(config: pytest.Config) -> None:
    configure_logging(
        Settings(environment=Environment.TESTING, log_level=LogLevel.DEBUG)
    )


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# =============================================================================
# In-memory Repository Implementations
# =============================================================================


class InMemoryAssetRepository(AssetRepository):
    """In-memory asset repository for testing."""

    def __init__(self) -> None:
        self._assets: dict[UUID, Asset] = {}

    def add(self, asset: Asset) -> None:
        self._assets[asset.id] = asset

    def get(self, asset_id: UUID) -> Asset | None:
        return self._assets.get(asset_id)

    def get_by_name(self, name: str) -> Asset | None:
        for asset in self._assets.values():
            if asset.name == name:
                return asset
        return None

    def list_all(self) -> Iterable[Asset]:
        return list(self._assets.values())


class InMemoryCategoryRepository(CategoryRepository):
    """In-memory category repository for testing."""

    def __init__(self) -> None:
        self._categories: dict[UUID, Category] = {}

    def add(self, category: Category) -> None:
        self._categories[category.id] = category

    def get(self, category_id: UUID) -> Category | None:
        return self._categories.get(category_id)

    def list_all(self) -> Iterable[Category]:
        return list(self._categories.values())

    def names(self) -> list[str]:
        return [category.name for category in self._categories.values()]


class InMemoryOperationRepository(OperationRepository):
    """In-memory operation repository for testing."""

    def __init__(self) -> None:
        self._records: dict[UUID, TransactionRecord] = {}

    def add(self, record: TransactionRecord) -> None:
        self._records[record.id] = record

    def get(self, record_id: UUID) -> TransactionRecord | None:
        return self._records.get(record_id)

    def list_all(self) -> Iterable[TransactionRecord]:
        return list(self._records.values())


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def cash_asset() -> Asset:
    return Asset(name="Cash", icon="💰")


@pytest.fixture
def bank_asset() -> Asset:
    return Asset(
        name="Bank Account",
        icon="🏦",
        currency=CurrencyCode.EUR,
        asset_type=AssetType.BANK_ACCOUNT,
    )


@pytest.fixture
def asset_repo(cash_asset: Asset, bank_asset: Asset) -> InMemoryAssetRepository:
    repo = InMemoryAssetRepository()
    repo.add(cash_asset)
    repo.add(bank_asset)
    return repo


@pytest.fixture
def category_repo() -> InMemoryCategoryRepository:
    return InMemoryCategoryRepository()


@pytest.fixture
def operation_repo() -> InMemoryOperationRepository:
    return InMemoryOperationRepository()


@pytest.fixture
def import_service(
    operation_repo: InMemoryOperationRepository,
    asset_repo: InMemoryAssetRepository,
    category_repo: InMemoryCategoryRepository,
) -> CSVImportService:
    return CSVImportService(
        operation_repo=operation_repo,
        asset_repo=asset_repo,
        category_repo=category_repo,
    )


@pytest.fixture
def export_service(
    operation_repo: InMemoryOperationRepository,
    asset_repo: InMemoryAssetRepository,
    category_repo: InMemoryCategoryRepository,
) -> CSVExportService:
    return CSVExportService(
        operation_repo=operation_repo,
        asset_repo=asset_repo,
        category_repo=category_repo,
    )
