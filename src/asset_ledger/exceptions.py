"""Domain exception hierarchy for Asset Ledger.

All raised application errors inherit from AssetLedgerError. This allows
catching every application error with a single base class while preserving
specificity for individual error types.

Row-level import problems are not exceptions: they are collected as
RowError values (see asset_ledger.domain.imports) and surfaced together
through ImportRowsError once every row has been examined.
"""

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from asset_ledger.domain.imports import RowError


class AssetLedgerError(Exception):
    """Base exception for all Asset Ledger errors.

    Includes an error_code for machine-readable output and extra context.
    """

    error_code: str = "ASSET_LEDGER_ERROR"

    def __init__(
        self,
        message: str,
        *,
        error_code: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        if error_code:
            self.error_code = error_code
        self.context = context or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for structured output."""
        return {
            "error": self.error_code,
            "message": self.message,
            "context": self.context,
        }


# =============================================================================
# CSV Errors
# =============================================================================


class CSVError(AssetLedgerError):
    """Base exception for CSV import/export errors."""

    error_code = "CSV_ERROR"


class DecodeError(CSVError):
    """Raised when no candidate encoding can decode the file bytes."""

    error_code = "CSV_DECODE_ERROR"

    def __init__(
        self,
        byte_length: int,
        head_hex: str,
        encodings: Sequence[str],
        last_error: str,
    ) -> None:
        self.byte_length = byte_length
        self.head_hex = head_hex
        self.encodings = list(encodings)
        self.last_error = last_error
        super().__init__(
            f"Unable to decode {byte_length} bytes as any of "
            f"{', '.join(self.encodings)} (first bytes: {head_hex or '<none>'}): "
            f"{last_error}",
            context={
                "byte_length": byte_length,
                "head_hex": head_hex,
                "encodings": self.encodings,
                "last_error": last_error,
            },
        )


class EmptyFileError(CSVError):
    """Raised when a file has no header or no data rows."""

    error_code = "CSV_EMPTY_FILE"

    def __init__(self, message: str = "The CSV file is empty") -> None:
        super().__init__(message)


class HeaderError(CSVError):
    """Base exception for header row problems."""

    error_code = "CSV_HEADER_ERROR"


class HeaderColumnCountError(HeaderError):
    """Raised when the header row has the wrong number of columns."""

    error_code = "CSV_HEADER_COLUMN_COUNT"

    def __init__(self, expected: int, found: int, headers: Sequence[str]) -> None:
        self.expected = expected
        self.found = found
        super().__init__(
            f"Header has {found} columns, expected {expected}",
            context={"expected": expected, "found": found, "headers": list(headers)},
        )


class HeaderMismatchError(HeaderError):
    """Raised when the header names differ from the required set."""

    error_code = "CSV_HEADER_MISMATCH"

    def __init__(self, expected: Sequence[str], found: Sequence[str]) -> None:
        self.expected = list(expected)
        self.found = list(found)
        super().__init__(
            f"The CSV headers do not match the required format: expected "
            f"{', '.join(self.expected)}; found {', '.join(self.found)}",
            context={"expected": self.expected, "found": self.found},
        )


class ImportRowsError(CSVError):
    """Raised after an import when one or more rows were rejected.

    Rows processed before the failure stay committed; the error lists every
    rejected row so the caller can report them in one pass.
    """

    error_code = "CSV_ROW_ERRORS"

    def __init__(self, row_errors: Sequence["RowError"]) -> None:
        self.row_errors = list(row_errors)
        lines = [f"{len(self.row_errors)} row(s) could not be imported:"]
        lines.extend(f"- {error}" for error in self.row_errors)
        super().__init__(
            "\n".join(lines),
            context={"rows": [error.row_number for error in self.row_errors]},
        )


class DuplicateCountError(CSVError):
    """Raised after an import when rows were skipped as duplicates."""

    error_code = "CSV_DUPLICATES"

    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(
            f"{count} operations were skipped because they already exist",
            context={"count": count},
        )


# =============================================================================
# Asset Errors
# =============================================================================


class AssetError(AssetLedgerError):
    """Base exception for asset-related errors."""

    error_code = "ASSET_ERROR"


class DuplicateAssetError(AssetError):
    """Raised when attempting to create an asset whose name already exists."""

    error_code = "DUPLICATE_ASSET"

    def __init__(self, name: str) -> None:
        super().__init__(
            f"Asset already exists: {name}",
            context={"asset_name": name},
        )


# =============================================================================
# Validation Errors
# =============================================================================


class ValidationError(AssetLedgerError):
    """Base exception for validation errors."""

    error_code = "VALIDATION_ERROR"


class InvalidCurrencyError(ValidationError):
    """Raised when an invalid currency code is provided."""

    error_code = "INVALID_CURRENCY"

    def __init__(self, currency_code: str) -> None:
        super().__init__(
            f"Invalid currency code: {currency_code}",
            context={"currency_code": currency_code},
        )
