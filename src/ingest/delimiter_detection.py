"""Per-line delimiter detection.

Each line is inspected on its own, so files that mix delimiters
across lines are accepted.
"""

from __future__ import annotations

from core.constants import DEFAULT_DELIMITER, DELIMITER_PRIORITY


def detect_delimiter(line: str) -> str:
    """Choose the delimiter for one line.

    Args:
        line: Raw line text.

    Returns:
        The first of comma, semicolon, tab present in the line, or comma
        when none is present.
    """
    for delimiter in DELIMITER_PRIORITY:
        if delimiter in line:
            return delimiter
    return DEFAULT_DELIMITER
