"""SQLite implementations of repository interfaces."""

from __future__ import annotations

import sqlite3
from collections.abc import Iterable
from datetime import datetime
from decimal import Decimal
from pathlib import Path
from uuid import UUID

from asset_ledger.domain.entities import Asset, Category, TransactionRecord
from asset_ledger.domain.value_objects import (
    AssetType,
    CurrencyCode,
    RecurrenceFrequency,
)
from asset_ledger.exceptions import DuplicateAssetError
from asset_ledger.repositories.interfaces import (
    AssetRepository,
    CategoryRepository,
    OperationRepository,
)


class SQLiteDatabase:
    """SQLite database connection manager."""

    def __init__(
        self, path: str | Path = ":memory:", check_same_thread: bool = True
    ) -> None:
        self._path = str(path)
        self._check_same_thread = check_same_thread
        self._connection: sqlite3.Connection | None = None

    @property
    def path(self) -> str:
        return self._path

    def get_connection(self) -> sqlite3.Connection:
        """Get or create the database connection."""
        if self._connection is None:
            self._connection = sqlite3.connect(
                self._path, check_same_thread=self._check_same_thread
            )
            self._connection.row_factory = sqlite3.Row
            # Enable foreign keys
            self._connection.execute("PRAGMA foreign_keys = ON")
        return self._connection

    def initialize(self) -> None:
        """Create all database tables."""
        conn = self.get_connection()
        conn.executescript(
            """
            -- Assets table
            CREATE TABLE IF NOT EXISTS assets (
                id TEXT PRIMARY KEY,
                name TEXT NOT NULL UNIQUE,
                currency TEXT NOT NULL DEFAULT 'USD',
                icon TEXT NOT NULL DEFAULT '',
                asset_type TEXT NOT NULL,
                initial_balance TEXT NOT NULL DEFAULT '0',
                created_at TEXT NOT NULL
            );

            -- Categories table
            CREATE TABLE IF NOT EXISTS categories (
                id TEXT PRIMARY KEY,
                name TEXT NOT NULL
            );

            -- Operations table
            CREATE TABLE IF NOT EXISTS operations (
                id TEXT PRIMARY KEY,
                name TEXT NOT NULL,
                currency TEXT NOT NULL,
                occurred_at TEXT NOT NULL,
                amount TEXT NOT NULL,
                note TEXT NOT NULL DEFAULT '',
                frequency TEXT NOT NULL DEFAULT 'single',
                category_id TEXT,
                asset_id TEXT,
                FOREIGN KEY (category_id) REFERENCES categories(id),
                FOREIGN KEY (asset_id) REFERENCES assets(id) ON DELETE CASCADE
            );
            CREATE INDEX IF NOT EXISTS idx_operations_occurred_at ON operations(occurred_at);
            CREATE INDEX IF NOT EXISTS idx_operations_asset ON operations(asset_id);
            """
        )
        conn.commit()

    def close(self) -> None:
        """Close the database connection."""
        if self._connection is not None:
            self._connection.close()
            self._connection = None


class SQLiteAssetRepository(AssetRepository):
    """SQLite implementation of AssetRepository."""

    def __init__(self, database: SQLiteDatabase) -> None:
        self._db = database

    def add(self, asset: Asset) -> None:
        conn = self._db.get_connection()
        try:
            conn.execute(
                """
                INSERT INTO assets (id, name, currency, icon, asset_type, initial_balance, created_at)
                VALUES (?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    str(asset.id),
                    asset.name,
                    asset.currency.value,
                    asset.icon,
                    asset.asset_type.value,
                    str(asset.initial_balance),
                    asset.created_at.isoformat(),
                ),
            )
        except sqlite3.IntegrityError:
            conn.rollback()
            raise DuplicateAssetError(asset.name) from None
        conn.commit()

    def get(self, asset_id: UUID) -> Asset | None:
        conn = self._db.get_connection()
        row = conn.execute(
            "SELECT * FROM assets WHERE id = ?", (str(asset_id),)
        ).fetchone()
        if row is None:
            return None
        return self._row_to_asset(row)

    def get_by_name(self, name: str) -> Asset | None:
        conn = self._db.get_connection()
        row = conn.execute("SELECT * FROM assets WHERE name = ?", (name,)).fetchone()
        if row is None:
            return None
        return self._row_to_asset(row)

    def list_all(self) -> Iterable[Asset]:
        conn = self._db.get_connection()
        rows = conn.execute("SELECT * FROM assets ORDER BY rowid").fetchall()
        return [self._row_to_asset(row) for row in rows]

    def _row_to_asset(self, row: sqlite3.Row) -> Asset:
        return Asset(
            name=row["name"],
            currency=CurrencyCode(row["currency"]),
            id=UUID(row["id"]),
            icon=row["icon"],
            asset_type=AssetType(row["asset_type"]),
            initial_balance=Decimal(row["initial_balance"]),
            created_at=datetime.fromisoformat(row["created_at"]),
        )


class SQLiteCategoryRepository(CategoryRepository):
    """SQLite implementation of CategoryRepository."""

    def __init__(self, database: SQLiteDatabase) -> None:
        self._db = database

    def add(self, category: Category) -> None:
        conn = self._db.get_connection()
        conn.execute(
            "INSERT INTO categories (id, name) VALUES (?, ?)",
            (str(category.id), category.name),
        )
        conn.commit()

    def get(self, category_id: UUID) -> Category | None:
        conn = self._db.get_connection()
        row = conn.execute(
            "SELECT * FROM categories WHERE id = ?", (str(category_id),)
        ).fetchone()
        if row is None:
            return None
        return self._row_to_category(row)

    def list_all(self) -> Iterable[Category]:
        conn = self._db.get_connection()
        rows = conn.execute("SELECT * FROM categories ORDER BY rowid").fetchall()
        return [self._row_to_category(row) for row in rows]

    def _row_to_category(self, row: sqlite3.Row) -> Category:
        return Category(name=row["name"], id=UUID(row["id"]))


class SQLiteOperationRepository(OperationRepository):
    """SQLite implementation of OperationRepository."""

    def __init__(self, database: SQLiteDatabase) -> None:
        self._db = database

    def add(self, record: TransactionRecord) -> None:
        conn = self._db.get_connection()
        conn.execute(
            """
            INSERT INTO operations (id, name, currency, occurred_at, amount, note,
                                    frequency, category_id, asset_id)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (
                str(record.id),
                record.name,
                record.currency.value,
                record.occurred_at.isoformat(),
                str(record.amount),
                record.note,
                record.frequency.value,
                str(record.category_id) if record.category_id else None,
                str(record.asset_id) if record.asset_id else None,
            ),
        )
        conn.commit()

    def get(self, record_id: UUID) -> TransactionRecord | None:
        conn = self._db.get_connection()
        row = conn.execute(
            "SELECT * FROM operations WHERE id = ?", (str(record_id),)
        ).fetchone()
        if row is None:
            return None
        return self._row_to_record(row)

    def list_all(self) -> Iterable[TransactionRecord]:
        conn = self._db.get_connection()
        rows = conn.execute("SELECT * FROM operations ORDER BY rowid").fetchall()
        return [self._row_to_record(row) for row in rows]

    def _row_to_record(self, row: sqlite3.Row) -> TransactionRecord:
        return TransactionRecord(
            name=row["name"],
            amount=Decimal(row["amount"]),
            occurred_at=datetime.fromisoformat(row["occurred_at"]),
            currency=CurrencyCode(row["currency"]),
            id=UUID(row["id"]),
            note=row["note"],
            frequency=RecurrenceFrequency(row["frequency"]),
            category_id=UUID(row["category_id"]) if row["category_id"] else None,
            asset_id=UUID(row["asset_id"]) if row["asset_id"] else None,
        )
