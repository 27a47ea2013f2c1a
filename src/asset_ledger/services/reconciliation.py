"""Duplicate detection between imported candidates and existing operations.

Two operations are duplicates when all of the following hold:
- they fall on the same calendar day (time of day is ignored)
- their normalized names are equal
- their amounts differ by less than the tolerance (0.001 by default)
- their normalized category names are equal ("" when there is no category)
- their normalized asset names are equal ("" when there is no asset)
"""

from collections import defaultdict
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from uuid import UUID

from asset_ledger.domain.entities import TransactionRecord
from asset_ledger.logging_config import get_logger
from asset_ledger.parsers.normalize import normalize_name

logger = get_logger(__name__)

DEFAULT_AMOUNT_TOLERANCE = Decimal("0.001")


@dataclass(frozen=True)
class DuplicateKey:
    """Exact-match part of the duplicate key; amounts are compared separately."""

    day: date
    name: str
    category: str
    asset: str

    @classmethod
    def build(
        cls,
        record: TransactionRecord,
        category_name: str | None,
        asset_name: str | None,
    ) -> "DuplicateKey":
        return cls(
            day=record.occurred_on,
            name=normalize_name(record.name),
            category=normalize_name(category_name or ""),
            asset=normalize_name(asset_name or ""),
        )


def amounts_match(
    first: Decimal, second: Decimal, tolerance: Decimal = DEFAULT_AMOUNT_TOLERANCE
) -> bool:
    return abs(first - second) < tolerance


class DuplicateReconciler:
    """Index of existing operations answering "is this candidate a duplicate?".

    The index is built once from the operations that existed before an
    import started. Candidates accepted during the import are not added, so
    two identical rows in the same file are both accepted.
    """

    def __init__(
        self,
        existing: Iterable[TransactionRecord],
        category_names: Mapping[UUID, str],
        asset_names: Mapping[UUID, str],
        tolerance: Decimal = DEFAULT_AMOUNT_TOLERANCE,
    ) -> None:
        self._tolerance = tolerance
        self._amounts: dict[DuplicateKey, list[Decimal]] = defaultdict(list)
        count = 0
        for record in existing:
            key = DuplicateKey.build(
                record,
                category_names.get(record.category_id) if record.category_id else None,
                asset_names.get(record.asset_id) if record.asset_id else None,
            )
            self._amounts[key].append(record.amount)
            count += 1
        logger.debug("duplicate_index_built", records=count, keys=len(self._amounts))

    def is_duplicate(
        self,
        candidate: TransactionRecord,
        category_name: str | None,
        asset_name: str | None,
    ) -> bool:
        key = DuplicateKey.build(candidate, category_name, asset_name)
        return any(
            amounts_match(candidate.amount, amount, self._tolerance)
            for amount in self._amounts.get(key, ())
        )
