"""Decoding of raw CSV file bytes with encoding fallback."""

from collections.abc import Sequence
from pathlib import Path
from typing import NamedTuple

from asset_ledger.config import DEFAULT_CSV_ENCODINGS
from asset_ledger.exceptions import DecodeError

BYTE_ORDER_MARK = "\ufeff"
DEFAULT_PREVIEW_BYTES = 16


class DecodedText(NamedTuple):
    text: str
    encoding: str


def decode_bytes(
    data: bytes,
    encodings: Sequence[str] | None = None,
    preview_bytes: int = DEFAULT_PREVIEW_BYTES,
) -> DecodedText:
    """Decode file bytes using the first encoding that succeeds.

    Encodings are tried in order (by default UTF-8, Windows-1252,
    ISO-8859-1, ASCII). A leading byte-order mark is removed from the
    decoded text.

    Args:
        data: Raw file contents.
        encodings: Candidate encodings in priority order.
        preview_bytes: How many leading bytes to report if decoding fails.

    Returns:
        The decoded text and the encoding that produced it.

    Raises:
        DecodeError: If none of the candidate encodings can decode the data.
    """
    candidates = list(encodings or DEFAULT_CSV_ENCODINGS)
    last_error = "no encodings to try"

    for encoding in candidates:
        try:
            text = data.decode(encoding)
        except (UnicodeDecodeError, LookupError) as exc:
            last_error = str(exc)
            continue
        if text.startswith(BYTE_ORDER_MARK):
            text = text[len(BYTE_ORDER_MARK) :]
        return DecodedText(text, encoding)

    raise DecodeError(
        byte_length=len(data),
        head_hex=data[:preview_bytes].hex(" "),
        encodings=candidates,
        last_error=last_error,
    )


def read_file_bytes(file_path: str | Path) -> bytes:
    """Read a whole file as bytes.

    Raises:
        FileNotFoundError: If the file does not exist.
    """
    return Path(file_path).read_bytes()
