"""Comparison keys for user-entered names."""

import re
import unicodedata

_WHITESPACE_RE = re.compile(r"\s+")

# Combining marks (accents, emoji variation selectors, keycaps) and format
# characters such as the zero-width joiner used in emoji sequences.
_DROPPED_CATEGORIES = frozenset({"Mn", "Me", "Cf", "Co", "Cs"})


def _is_dropped(char: str) -> bool:
    category = unicodedata.category(char)
    # S* covers math, currency, modifier and other symbols, including emoji
    return category.startswith("S") or category in _DROPPED_CATEGORIES


def normalize_name(value: str) -> str:
    """Return the comparison key for a name.

    Symbols, emoji and diacritics are removed, runs of whitespace collapse
    to a single space, and the result is trimmed and case-folded. An empty
    name stays empty. The key is only used for equality checks; stored
    names keep their original form.

    Example:
        >>> normalize_name("💰 Cash")
        'cash'
        >>> normalize_name("  Café  Crème ")
        'cafe creme'
    """
    decomposed = unicodedata.normalize("NFKD", value)
    kept = "".join(char for char in decomposed if not _is_dropped(char))
    key = _WHITESPACE_RE.sub(" ", kept).strip().casefold()
    if not key:
        # Names made only of emoji or symbols keep their symbols, otherwise
        # every such name would collapse to the same empty key
        return _WHITESPACE_RE.sub(" ", value).strip().casefold()
    return key
