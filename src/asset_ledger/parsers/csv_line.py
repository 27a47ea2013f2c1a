"""Line-level CSV tokenizing and escaping.

Only the comma-separated dialect with double-quote escaping is supported.
The tokenizer never raises: malformed quoting degrades to best-effort
field boundaries.
"""

import re

QUOTE = '"'
SEPARATOR = ","

_CHARS_NEEDING_QUOTES = (SEPARATOR, QUOTE, "\n", "\r")

# The same line breaks escape_value protects; str.splitlines() knows more
_LINE_BREAK_RE = re.compile(r"(\r\n|\r|\n)")


def parse_line(line: str) -> list[str]:
    """Split a single CSV record into trimmed field values.

    A double quote at the start of a field (leading whitespace aside) opens
    a quoted section. Inside it a doubled quote ("") stands for one literal
    quote, a comma is part of the value and a lone quote closes the
    section. A quote anywhere else is kept as a literal character, so a
    value like 5" screen parses as written. Outside quotes a comma ends the
    current field.

    Args:
        line: One logical CSV record, without its line terminator.

    Returns:
        Field values in order, each stripped of surrounding whitespace.
    """
    fields: list[str] = []
    current: list[str] = []
    inside_quotes = False
    field_started = False
    i = 0
    length = len(line)

    while i < length:
        char = line[i]
        if inside_quotes:
            if char == QUOTE:
                if i + 1 < length and line[i + 1] == QUOTE:
                    current.append(QUOTE)
                    i += 2
                    continue
                inside_quotes = False
            else:
                current.append(char)
        elif char == QUOTE and not field_started:
            inside_quotes = True
            field_started = True
        elif char == SEPARATOR:
            fields.append("".join(current))
            current = []
            field_started = False
        else:
            current.append(char)
            if not char.isspace():
                field_started = True
        i += 1

    fields.append("".join(current))
    return [value.strip() for value in fields]


def escape_value(value: str) -> str:
    """Quote a value for CSV output when it needs it.

    Values containing a comma, a double quote or a line break are wrapped
    in double quotes with embedded quotes doubled. Anything else is
    returned unchanged.
    """
    if any(char in value for char in _CHARS_NEEDING_QUOTES):
        return QUOTE + value.replace(QUOTE, QUOTE * 2) + QUOTE
    return value


def _ends_inside_quotes(line: str, inside_quotes: bool) -> bool:
    """Run the parse_line quoting rules over line and return the final state."""
    field_started = inside_quotes
    i = 0
    length = len(line)

    while i < length:
        char = line[i]
        if inside_quotes:
            if char == QUOTE:
                if i + 1 < length and line[i + 1] == QUOTE:
                    i += 2
                    continue
                inside_quotes = False
        elif char == QUOTE and not field_started:
            inside_quotes = True
            field_started = True
        elif char == SEPARATOR:
            field_started = False
        elif not char.isspace():
            field_started = True
        i += 1

    return inside_quotes


def _physical_lines(text: str) -> list[tuple[str, str]]:
    """Split text into (line, line_break) pairs; the last break may be ""."""
    parts = _LINE_BREAK_RE.split(text)
    breaks = parts[1::2] + [""]
    return list(zip(parts[0::2], breaks, strict=True))


def split_records(text: str) -> list[tuple[int, str]]:
    """Split decoded file text into logical CSV records.

    Lines break only on \\r\\n, \\r or \\n. Physical lines are joined, with
    their original line breaks, while a quoted value opened at the start of
    a field is still open, so a note containing line breaks stays in one
    record. A quoted value still open at the end of the text is treated as
    malformed: the lines it swallowed become records of their own again.
    Blank records are dropped.

    Returns:
        (line_number, record) pairs, where line_number is the 1-based
        physical line on which the record starts.
    """
    records: list[tuple[int, str]] = []
    pending: list[tuple[int, str, str]] = []
    inside_quotes = False

    for line_number, (line, line_break) in enumerate(_physical_lines(text), start=1):
        pending.append((line_number, line, line_break))
        inside_quotes = _ends_inside_quotes(line, inside_quotes)
        if inside_quotes:
            continue
        record = "".join(part + brk for _, part, brk in pending[:-1]) + line
        if record.strip():
            records.append((pending[0][0], record))
        pending = []

    for line_number, line, _ in pending:
        if line.strip():
            records.append((line_number, line))

    return records
