"""Import diagnostics and results."""

from dataclasses import dataclass, field
from enum import Enum

from asset_ledger.domain.entities import Category, TransactionRecord
from asset_ledger.exceptions import DuplicateCountError, ImportRowsError


@dataclass(frozen=True)
class RowError:
    """A problem with a single CSV row.

    Row errors are collected while an import runs and never stop the
    remaining rows from being processed.

    Attributes:
        row_number: Physical line number in the file (the header is row 1).
        reason: Human-readable description of the problem.
        value: The offending raw value, if any.
    """

    row_number: int
    reason: str
    value: str = ""

    def __str__(self) -> str:
        return f"Row {self.row_number}: {self.reason}"


@dataclass(frozen=True)
class AssetNotFoundError(RowError):
    """Row error for an asset name that matches no known asset."""

    available_assets: tuple[str, ...] = ()

    def __str__(self) -> str:
        available = ", ".join(self.available_assets) or "none"
        return f"{super().__str__()} (available assets: {available})"


class ImportOutcome(str, Enum):
    SUCCESS = "success"
    ROW_ERRORS = "row_errors"
    DUPLICATES = "duplicates"


@dataclass
class ImportResult:
    """Accumulated result of importing a batch of rows."""

    accepted: list[TransactionRecord] = field(default_factory=list)
    duplicate_count: int = 0
    errors: list[RowError] = field(default_factory=list)
    created_categories: list[Category] = field(default_factory=list)

    @property
    def outcome(self) -> ImportOutcome:
        if self.errors:
            return ImportOutcome.ROW_ERRORS
        if self.duplicate_count:
            return ImportOutcome.DUPLICATES
        return ImportOutcome.SUCCESS

    def raise_for_outcome(self) -> None:
        """Raise the error matching a failed outcome.

        Raises:
            ImportRowsError: If any row was rejected.
            DuplicateCountError: If no row was rejected but some were
                skipped as duplicates.
        """
        outcome = self.outcome
        if outcome is ImportOutcome.ROW_ERRORS:
            raise ImportRowsError(self.errors)
        if outcome is ImportOutcome.DUPLICATES:
            raise DuplicateCountError(self.duplicate_count)
