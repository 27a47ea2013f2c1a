"""CSV import service.

This service:
- Decodes file bytes with encoding fallback
- Validates the header row
- Converts each data row into an operation, creating categories on demand
  and resolving assets by normalized name
- Skips rows that duplicate operations already in the ledger
- Collects every row problem before reporting, so one pass tells the user
  everything that is wrong with the file

Rows are committed as they are accepted. A failing import leaves earlier
accepted rows and newly created categories in place.
"""

import re
from collections.abc import Iterable, Sequence
from datetime import datetime
from decimal import Decimal, InvalidOperation
from pathlib import Path

from asset_ledger.domain.entities import Asset, Category, TransactionRecord
from asset_ledger.domain.imports import AssetNotFoundError, ImportResult, RowError
from asset_ledger.exceptions import EmptyFileError
from asset_ledger.logging_config import LogContext, get_logger
from asset_ledger.parsers import headers as columns
from asset_ledger.parsers.csv_line import parse_line, split_records
from asset_ledger.parsers.encoding import (
    DEFAULT_PREVIEW_BYTES,
    decode_bytes,
    read_file_bytes,
)
from asset_ledger.parsers.headers import (
    REQUIRED_HEADERS,
    HeaderLayout,
    validate_headers,
)
from asset_ledger.parsers.normalize import normalize_name
from asset_ledger.repositories.interfaces import (
    AssetRepository,
    CategoryRepository,
    OperationRepository,
)
from asset_ledger.services.reconciliation import (
    DEFAULT_AMOUNT_TOLERANCE,
    DuplicateReconciler,
)

logger = get_logger(__name__)

DATE_FORMAT = "%Y-%m-%d"
_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
_AMOUNT_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")


class _ImportBatch:
    """Mutable state for one call to import_rows."""

    def __init__(
        self,
        existing_records: Iterable[TransactionRecord],
        existing_categories: Iterable[Category],
        assets: Iterable[Asset],
        tolerance: Decimal,
    ) -> None:
        self.result = ImportResult()
        category_list = list(existing_categories)
        self.categories: dict[str, Category] = {}
        for category in category_list:
            self.categories.setdefault(normalize_name(category.name), category)
        self.asset_list = list(assets)
        self.assets: dict[str, Asset] = {}
        for asset in self.asset_list:
            self.assets.setdefault(normalize_name(asset.name), asset)
        self.reconciler = DuplicateReconciler(
            existing_records,
            category_names={c.id: c.name for c in category_list},
            asset_names={a.id: a.name for a in self.asset_list},
            tolerance=tolerance,
        )

    @property
    def available_asset_names(self) -> tuple[str, ...]:
        return tuple(asset.name for asset in self.asset_list)


class CSVImportService:
    """Service for importing operations from CSV files.

    Expected columns: Date, Name, Amount, Category, Asset, Note.
    Dates use yyyy-MM-dd and amounts use "." as the decimal separator.
    """

    def __init__(
        self,
        operation_repo: OperationRepository,
        asset_repo: AssetRepository,
        category_repo: CategoryRepository,
        encodings: Sequence[str] | None = None,
        preview_bytes: int = DEFAULT_PREVIEW_BYTES,
        amount_tolerance: Decimal = DEFAULT_AMOUNT_TOLERANCE,
    ) -> None:
        """Initialize the import service.

        Args:
            operation_repo: Repository the imported operations are added to
            asset_repo: Repository of known assets
            category_repo: Repository categories are looked up in and added to
            encodings: Candidate text encodings, in priority order
            preview_bytes: Leading bytes reported when decoding fails
            amount_tolerance: Amounts closer than this count as equal
                for duplicate detection
        """
        self._operation_repo = operation_repo
        self._asset_repo = asset_repo
        self._category_repo = category_repo
        self._encodings = list(encodings) if encodings else None
        self._preview_bytes = preview_bytes
        self._amount_tolerance = amount_tolerance

    def import_file(self, file_path: str | Path) -> ImportResult:
        """Import a CSV file.

        Raises:
            FileNotFoundError: If the file does not exist.
            CSVError: See import_text.
        """
        data = read_file_bytes(file_path)
        return self.import_bytes(data, source=str(file_path))

    def import_bytes(self, data: bytes, source: str = "<bytes>") -> ImportResult:
        """Decode raw bytes and import them.

        Raises:
            DecodeError: If no candidate encoding can decode the data.
            CSVError: See import_text.
        """
        decoded = decode_bytes(data, self._encodings, self._preview_bytes)
        logger.debug(
            "csv_decoded", source=source, encoding=decoded.encoding, size=len(data)
        )
        return self.import_text(decoded.text, source=source)

    def import_text(self, text: str, source: str = "<text>") -> ImportResult:
        """Import decoded CSV text.

        Returns:
            ImportResult with the accepted operations and any categories
            created along the way.

        Raises:
            EmptyFileError: If there is no header or no data row.
            HeaderColumnCountError: If the header has the wrong column count.
            HeaderMismatchError: If the header names are not the required set.
            ImportRowsError: If any row was rejected.
            DuplicateCountError: If rows were skipped as already imported.
        """
        with LogContext(source=source):
            records = split_records(text)
            if not records:
                raise EmptyFileError()

            _, header_record = records[0]
            layout = validate_headers(parse_line(header_record))
            if not layout.is_default_order:
                logger.info("csv_header_reordered", positions=layout.positions)

            data_records = records[1:]
            if not data_records:
                raise EmptyFileError("The CSV file has a header but no data rows")

            logger.info("csv_import_started", rows=len(data_records))
            result = self.import_rows(
                [(row_number, parse_line(record)) for row_number, record in data_records],
                existing_records=list(self._operation_repo.list_all()),
                existing_categories=list(self._category_repo.list_all()),
                assets=list(self._asset_repo.list_all()),
                layout=layout,
            )
            logger.info(
                "csv_import_finished",
                outcome=result.outcome.value,
                accepted=len(result.accepted),
                duplicates=result.duplicate_count,
                errors=len(result.errors),
                categories_created=len(result.created_categories),
            )
            result.raise_for_outcome()
            return result

    def import_rows(
        self,
        rows: Iterable[tuple[int, Sequence[str]]],
        existing_records: Iterable[TransactionRecord],
        existing_categories: Iterable[Category],
        assets: Iterable[Asset],
        layout: HeaderLayout | None = None,
    ) -> ImportResult:
        """Convert parsed rows into operations and store the accepted ones.

        Every row is examined; problems are collected in the result rather
        than raised. Duplicates are checked only against existing_records.

        Args:
            rows: (row_number, fields) pairs for each data row
            existing_records: Operations stored before this import
            existing_categories: Categories stored before this import
            assets: Assets rows may reference
            layout: Column positions; defaults to the standard column order

        Returns:
            ImportResult; inspect its outcome or call raise_for_outcome().
        """
        layout = layout or HeaderLayout.default()
        batch = _ImportBatch(
            existing_records, existing_categories, assets, self._amount_tolerance
        )

        for row_number, values in rows:
            error = self._process_row(batch, row_number, values, layout)
            if error is not None:
                logger.info(
                    "csv_row_rejected",
                    row=error.row_number,
                    reason=error.reason,
                    value=error.value,
                )
                batch.result.errors.append(error)

        return batch.result

    def _process_row(
        self,
        batch: _ImportBatch,
        row_number: int,
        values: Sequence[str],
        layout: HeaderLayout,
    ) -> RowError | None:
        """Import one row, returning its error if it was rejected."""
        if len(values) != len(REQUIRED_HEADERS):
            return RowError(
                row_number,
                f"has {len(values)} columns, expected {len(REQUIRED_HEADERS)}",
                ",".join(values),
            )

        raw_date = layout.pick(values, columns.DATE).strip()
        occurred_at = self._parse_date(raw_date)
        if occurred_at is None:
            return RowError(
                row_number, f"invalid date '{raw_date}', expected yyyy-MM-dd", raw_date
            )

        name = layout.pick(values, columns.NAME).strip()
        if not name:
            return RowError(row_number, "name is empty")

        raw_amount = layout.pick(values, columns.AMOUNT).strip()
        amount = self._parse_amount(raw_amount)
        if amount is None:
            return RowError(row_number, f"invalid amount '{raw_amount}'", raw_amount)

        category_name = layout.pick(values, columns.CATEGORY).strip()
        if not category_name:
            return RowError(row_number, "category is empty")
        category = self._get_or_create_category(batch, category_name)

        asset_name = layout.pick(values, columns.ASSET).strip()
        if not asset_name:
            return RowError(row_number, "asset is empty")
        asset = batch.assets.get(normalize_name(asset_name))
        if asset is None:
            return AssetNotFoundError(
                row_number,
                f"asset '{asset_name}' not found",
                asset_name,
                available_assets=batch.available_asset_names,
            )

        candidate = TransactionRecord(
            name=name,
            amount=amount,
            occurred_at=occurred_at,
            currency=asset.currency,
            note=layout.pick(values, columns.NOTE),
            category_id=category.id,
            asset_id=asset.id,
        )

        if batch.reconciler.is_duplicate(candidate, category.name, asset.name):
            logger.debug("csv_row_duplicate", row=row_number, name=name)
            batch.result.duplicate_count += 1
            return None

        self._operation_repo.add(candidate)
        batch.result.accepted.append(candidate)
        return None

    def _get_or_create_category(self, batch: _ImportBatch, name: str) -> Category:
        """Find a category by normalized name, creating it if missing."""
        key = normalize_name(name)
        category = batch.categories.get(key)
        if category is not None:
            return category

        category = Category(name=name)
        self._category_repo.add(category)
        batch.categories[key] = category
        batch.result.created_categories.append(category)
        logger.info("category_created", category=name)
        return category

    def _parse_date(self, value: str) -> datetime | None:
        if not _DATE_RE.fullmatch(value):
            return None
        try:
            return datetime.strptime(value, DATE_FORMAT)
        except ValueError:
            return None

    def _parse_amount(self, value: str) -> Decimal | None:
        if not _AMOUNT_RE.fullmatch(value):
            return None
        try:
            return Decimal(value)
        except InvalidOperation:
            return None
