"""CSV export of stored operations."""

from collections.abc import Iterable
from decimal import Decimal
from pathlib import Path

from asset_ledger.domain.entities import Asset, Category, TransactionRecord
from asset_ledger.logging_config import get_logger
from asset_ledger.parsers.csv_line import SEPARATOR, escape_value
from asset_ledger.parsers.headers import REQUIRED_HEADERS
from asset_ledger.repositories.interfaces import (
    AssetRepository,
    CategoryRepository,
    OperationRepository,
)

logger = get_logger(__name__)

EXPORT_DATE_FORMAT = "%Y-%m-%d"

_TEMPLATE_ROWS = (
    (
        "2024-03-20",
        "March Salary",
        "1000.00",
        "Salary",
        "Bank Account",
        "Monthly salary, including bonus",
    ),
    (
        "2024-03-21",
        "Grocery Shopping",
        "-50.00",
        "Food",
        "Cash",
        "Groceries, fruits and vegetables",
    ),
)


def format_amount(amount: Decimal) -> str:
    """Render an amount without exponent or trailing zeros (1000.00 -> "1000")."""
    text = format(amount.normalize(), "f")
    return "0" if text == "-0" else text


def _join(values: Iterable[str]) -> str:
    return SEPARATOR.join(escape_value(value) for value in values) + "\n"


def export_records(
    records: Iterable[TransactionRecord],
    categories: Iterable[Category] = (),
    assets: Iterable[Asset] = (),
) -> str:
    """Serialize operations to CSV text.

    Rows keep the order of records. Category and asset names are resolved
    from the given lookup tables; unknown or missing references export as
    an empty value.

    Args:
        records: Operations to export.
        categories: Categories referenced by the operations.
        assets: Assets referenced by the operations.

    Returns:
        CSV text with a header line and one line per operation.
    """
    category_names = {category.id: category.name for category in categories}
    asset_names = {asset.id: asset.name for asset in assets}

    lines = [_join(REQUIRED_HEADERS)]
    for record in records:
        lines.append(
            _join(
                (
                    record.occurred_at.strftime(EXPORT_DATE_FORMAT),
                    record.name,
                    format_amount(record.amount),
                    category_names.get(record.category_id, ""),
                    asset_names.get(record.asset_id, ""),
                    record.note,
                )
            )
        )
    return "".join(lines)


def csv_template() -> str:
    """Return an example file showing the expected columns and formats."""
    return _join(REQUIRED_HEADERS) + "".join(_join(row) for row in _TEMPLATE_ROWS)


class CSVExportService:
    """Service exporting every stored operation as CSV."""

    def __init__(
        self,
        operation_repo: OperationRepository,
        asset_repo: AssetRepository,
        category_repo: CategoryRepository,
    ) -> None:
        self._operation_repo = operation_repo
        self._asset_repo = asset_repo
        self._category_repo = category_repo

    def export_all(self) -> tuple[str, int]:
        """Export all operations in storage order.

        Returns:
            Tuple of (csv_text, number_of_operations).
        """
        records = list(self._operation_repo.list_all())
        text = export_records(
            records,
            categories=self._category_repo.list_all(),
            assets=self._asset_repo.list_all(),
        )
        logger.info("csv_export_finished", operations=len(records))
        return text, len(records)

    def export_to_file(self, file_path: str | Path) -> int:
        """Write all operations to a UTF-8 CSV file.

        Returns:
            Number of operations written.
        """
        path = Path(file_path)
        text, count = self.export_all()
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8", newline="") as handle:
            handle.write(text)
        logger.info("csv_export_written", path=str(path), operations=count)
        return count
