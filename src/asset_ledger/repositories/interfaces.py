from abc import ABC, abstractmethod
from collections.abc import Iterable
from uuid import UUID

from asset_ledger.domain.entities import Asset, Category, TransactionRecord


class AssetRepository(ABC):
    @abstractmethod
    def add(self, asset: Asset) -> None:
        pass

    @abstractmethod
    def get(self, asset_id: UUID) -> Asset | None:
        pass

    @abstractmethod
    def get_by_name(self, name: str) -> Asset | None:
        pass

    @abstractmethod
    def list_all(self) -> Iterable[Asset]:
        pass


class CategoryRepository(ABC):
    @abstractmethod
    def add(self, category: Category) -> None:
        pass

    @abstractmethod
    def get(self, category_id: UUID) -> Category | None:
        pass

    @abstractmethod
    def list_all(self) -> Iterable[Category]:
        pass


class OperationRepository(ABC):
    @abstractmethod
    def add(self, record: TransactionRecord) -> None:
        pass

    @abstractmethod
    def get(self, record_id: UUID) -> TransactionRecord | None:
        pass

    @abstractmethod
    def list_all(self) -> Iterable[TransactionRecord]:
        pass
