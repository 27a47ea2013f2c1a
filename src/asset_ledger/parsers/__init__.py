"""Parsing helpers for CSV import and export."""

from asset_ledger.parsers.csv_line import escape_value, parse_line, split_records
from asset_ledger.parsers.encoding import DecodedText, decode_bytes, read_file_bytes
from asset_ledger.parsers.headers import (
    REQUIRED_HEADERS,
    HeaderLayout,
    validate_headers,
)
from asset_ledger.parsers.normalize import normalize_name

__all__ = [
    "REQUIRED_HEADERS",
    "DecodedText",
    "HeaderLayout",
    "decode_bytes",
    "escape_value",
    "normalize_name",
    "parse_line",
    "read_file_bytes",
    "split_records",
    "validate_headers",
]
