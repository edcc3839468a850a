"""Quote-aware field splitting.

This module splits one line into fields on a known delimiter.
Double-quoted segments may contain the delimiter, and a doubled
quote inside a quoted segment stands for one literal quote.
"""

from __future__ import annotations

from core.constants import QUOTE_CHAR
from core.types import SplitLine


def split_line(line: str, delimiter: str) -> SplitLine:
    """Split a line into trimmed fields.

    Args:
        line: Raw line text without newline.
        delimiter: Single-character field delimiter.

    Returns:
        Split fields and whether a quoted segment was left open. A line
        with N unquoted delimiters always yields N + 1 fields.
    """
    fields: list[str] = []
    buffer: list[str] = []
    in_quotes = False
    index = 0
    while index < len(line):
        char = line[index]
        if char == QUOTE_CHAR:
            if in_quotes and line[index + 1 : index + 2] == QUOTE_CHAR:
                buffer.append(QUOTE_CHAR)
                index += 2
                continue
            in_quotes = not in_quotes
        elif char == delimiter and not in_quotes:
            fields.append("".join(buffer))
            buffer.clear()
        else:
            buffer.append(char)
        index += 1
    fields.append("".join(buffer))
    return SplitLine(
        fields=tuple(field.strip() for field in fields),
        unterminated_quote=in_quotes,
    )


def split_fields(line: str, delimiter: str) -> list[str]:
    """Return only the trimmed fields of a split line."""
    return list(split_line(line, delimiter).fields)
