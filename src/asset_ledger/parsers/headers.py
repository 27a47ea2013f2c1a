"""Validation of the CSV header row."""

from collections.abc import Sequence
from dataclasses import dataclass

from asset_ledger.exceptions import HeaderColumnCountError, HeaderMismatchError

DATE = "Date"
NAME = "Name"
AMOUNT = "Amount"
CATEGORY = "Category"
ASSET = "Asset"
NOTE = "Note"

REQUIRED_HEADERS: tuple[str, ...] = (DATE, NAME, AMOUNT, CATEGORY, ASSET, NOTE)


@dataclass(frozen=True)
class HeaderLayout:
    """Position of each required column in a validated header row."""

    positions: dict[str, int]

    @classmethod
    def default(cls) -> "HeaderLayout":
        return cls({name: index for index, name in enumerate(REQUIRED_HEADERS)})

    @property
    def is_default_order(self) -> bool:
        return self == HeaderLayout.default()

    def pick(self, values: Sequence[str], column: str) -> str:
        return values[self.positions[column]]


def validate_headers(headers: Sequence[str]) -> HeaderLayout:
    """Check a parsed header row against the required columns.

    Header names are compared after trimming surrounding whitespace. Order
    does not matter: the returned layout records where each column sits so
    rows can be read by column name.

    Args:
        headers: Fields of the header row as returned by parse_line.

    Returns:
        HeaderLayout mapping each required column to its index.

    Raises:
        HeaderColumnCountError: If the number of columns differs.
        HeaderMismatchError: If the set of column names differs.
    """
    found = [header.strip() for header in headers]

    if len(found) != len(REQUIRED_HEADERS):
        raise HeaderColumnCountError(
            expected=len(REQUIRED_HEADERS), found=len(found), headers=found
        )

    if set(found) != set(REQUIRED_HEADERS):
        raise HeaderMismatchError(expected=REQUIRED_HEADERS, found=found)

    return HeaderLayout({name: found.index(name) for name in REQUIRED_HEADERS})
