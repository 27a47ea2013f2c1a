"""Dependency injection container for Asset Ledger.

Provides lazy-loaded access to the database, repositories and services,
configured from Settings.

Usage:
    from asset_ledger.container import Container

    with Container() as container:
        container.import_service.import_file("operations.csv")
"""

from functools import cached_property

from asset_ledger.config import Settings, get_settings
from asset_ledger.logging_config import get_logger
from asset_ledger.repositories.sqlite import (
    SQLiteAssetRepository,
    SQLiteCategoryRepository,
    SQLiteDatabase,
    SQLiteOperationRepository,
)
from asset_ledger.services.csv_export import CSVExportService
from asset_ledger.services.csv_import import CSVImportService

logger = get_logger(__name__)


class Container:
    """Dependency injection container.

    Services are instantiated on first access and cached for reuse. The
    container can be configured with custom settings for testing:

        test_settings = Settings(sqlite_path=tmp_path / "ledger.db")
        container = Container(settings=test_settings)
    """

    def __init__(self, settings: Settings | None = None) -> None:
        """Initialize the container.

        Args:
            settings: Application settings. If None, loads from environment.
        """
        self._settings = settings or get_settings()
        logger.debug(
            "container_created",
            sqlite_path=str(self._settings.sqlite_path),
            environment=self._settings.environment.value,
        )

    @property
    def settings(self) -> Settings:
        """Get application settings."""
        return self._settings

    @cached_property
    def database(self) -> SQLiteDatabase:
        """Get the SQLite database, creating its tables on first access."""
        db_path = self._settings.sqlite_path
        logger.info("initializing_sqlite_database", path=str(db_path))
        db_path.parent.mkdir(parents=True, exist_ok=True)

        db = SQLiteDatabase(db_path)
        db.initialize()
        return db

    @cached_property
    def asset_repo(self) -> SQLiteAssetRepository:
        return SQLiteAssetRepository(self.database)

    @cached_property
    def category_repo(self) -> SQLiteCategoryRepository:
        return SQLiteCategoryRepository(self.database)

    @cached_property
    def operation_repo(self) -> SQLiteOperationRepository:
        return SQLiteOperationRepository(self.database)

    @cached_property
    def import_service(self) -> CSVImportService:
        """Get the CSV import service."""
        return CSVImportService(
            operation_repo=self.operation_repo,
            asset_repo=self.asset_repo,
            category_repo=self.category_repo,
            encodings=self._settings.csv_encodings,
            preview_bytes=self._settings.decode_preview_bytes,
            amount_tolerance=self._settings.duplicate_amount_tolerance,
        )

    @cached_property
    def export_service(self) -> CSVExportService:
        """Get the CSV export service."""
        return CSVExportService(
            operation_repo=self.operation_repo,
            asset_repo=self.asset_repo,
            category_repo=self.category_repo,
        )

    def close(self) -> None:
        """Close the database connection if it was opened."""
        if "database" in self.__dict__:
            logger.info("closing_database_connection")
            self.database.close()

    def __enter__(self) -> "Container":
        """Enter context manager."""
        return self

    def __exit__(self, *args: object) -> None:
        """Exit context manager, closing resources."""
        self.close()
