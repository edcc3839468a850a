"""Source line readers for ingestion.

This module opens a local text source and yields numbered raw lines.
Lines are decoded one at a time so a decode failure names the exact
line and never masks an earlier record error.
"""

from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import IO, Iterator

from core.constants import SOURCE_BOM_ENCODING, SOURCE_ENCODING
from core.errors import SourceNotFoundError, SourceReadError
from core.types import RawLine


@contextmanager
def open_source_lines(source_path: Path) -> Iterator[Iterator[RawLine]]:
    """Open a source file and yield an iterator over its lines.

    The handle is closed when the context exits, including when the
    caller aborts part-way through the file.

    Args:
        source_path: Input file path.

    Yields:
        Iterator of one-based numbered raw lines.

    Raises:
        SourceNotFoundError: If the path cannot be opened for reading.
        SourceReadError: If a line is not valid UTF-8 text.
    """
    handle = _open_source(source_path)
    try:
        yield _iter_raw_lines(handle, source_path)
    finally:
        handle.close()


def read_raw_lines(source_path: Path) -> list[RawLine]:
    """Read every line of a source file eagerly."""
    with open_source_lines(source_path) as raw_lines:
        return list(raw_lines)


def _open_source(source_path: Path) -> IO[bytes]:
    """Open a source file for binary line reading.

    Args:
        source_path: Input file path.

    Returns:
        Open binary handle.

    Raises:
        SourceNotFoundError: If the path is missing or unreadable.
    """
    try:
        return source_path.open("rb")
    except OSError as error:
        reason = error.strerror or type(error).__name__
        raise SourceNotFoundError(
            f"Failed to open source at {source_path}: {reason}. "
            "Provide an existing, readable file."
        ) from error


def _iter_raw_lines(handle: IO[bytes], source_path: Path) -> Iterator[RawLine]:
    """Decode and number lines, treating CRLF, LF, and lone CR as breaks."""
    line_number = 0
    for index, raw_bytes in enumerate(handle):
        text = _decode_line(raw_bytes, index == 0, source_path, line_number + 1)
        if text.endswith("\n"):
            text = text[:-1]
        if text.endswith("\r"):
            text = text[:-1]
        for segment in text.split("\r"):
            line_number += 1
            yield RawLine(line_number=line_number, text=segment)


def _decode_line(raw_bytes: bytes, is_first: bool, source_path: Path, line_number: int) -> str:
    encoding = SOURCE_BOM_ENCODING if is_first else SOURCE_ENCODING
    try:
        return raw_bytes.decode(encoding)
    except UnicodeDecodeError as error:
        raise SourceReadError(
            f"Failed to decode source at {source_path} on line {line_number}: "
            f"{error.reason}. Save the file as UTF-8 and retry."
        ) from error
