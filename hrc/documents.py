"""
Document reading and writing.

Input documents are read as line-delimited text; rewritten documents are
written next to the input as ``<stem>.processed<suffix>``, UTF-8 with a
byte-order mark and CRLF line endings.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from hrc.core.levels import LevelConfig
from hrc.core.result import ProcessingResult
from hrc.engine.processor import process_lines

logger = logging.getLogger(__name__)

OUTPUT_SUFFIX = ".processed"
OUTPUT_LINE_TERMINATOR = "\r\n"
OUTPUT_ENCODING = "utf-8-sig"

_FALLBACK_ENCODINGS = ("cp1252", "latin-1")
_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")
# Control characters other than tab, line breaks and form feeds; text that
# decodes to any of these is treated as binary
_BINARY_CHARS_RE = re.compile(r"[\x00-\x08\x0e-\x1f\x7f-\x9f]")


class DocumentIOError(Exception):
    """Raised when a document cannot be read or written."""

    def __init__(self, message: str, source_path: Path | None = None, details: str | None = None):
        self.source_path = source_path
        self.details = details
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": str(self),
            "source_path": str(self.source_path) if self.source_path else None,
            "details": self.details,
        }


@dataclass
class FileProcessingOutcome:
    """Result of running a file through the engine.

    Attributes:
        input_path: Document that was read.
        output_path: Document that was written.
        result: Engine result for the document.
    """

    input_path: Path
    output_path: Path
    result: ProcessingResult

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "input_path": str(self.input_path),
            "output_path": str(self.output_path),
            **self.result.to_dict(),
        }


def clean_path_input(raw: str) -> str:
    """Trim a user-entered path and strip one pair of surrounding quotes."""
    path = raw.strip()
    if len(path) >= 2 and path.startswith('"') and path.endswith('"'):
        path = path[1:-1]
    return path


def split_lines(content: str) -> list[str]:
    """Split text on CRLF, CR or LF.

    A terminator at the very end does not produce an empty final line.
    """
    if not content:
        return []
    lines = _LINE_BREAK_RE.split(content)
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def read_document_lines(path: Path, encoding: str = "utf-8") -> list[str]:
    """Read a document as a list of lines.

    A leading UTF-8 byte-order mark is dropped. When the content is not
    valid in ``encoding``, single-byte fallbacks are tried. A decoding that
    yields control characters is rejected, so binary files are refused
    rather than processed as mojibake.

    Args:
        path: Document to read.
        encoding: Preferred encoding.

    Returns:
        Lines without terminators.

    Raises:
        DocumentIOError: If the file is missing or cannot be decoded.
    """
    if not path.is_file():
        raise DocumentIOError(f"File not found: {path}", source_path=path)

    try:
        raw = path.read_bytes()
    except OSError as e:
        raise DocumentIOError(
            f"Failed to read file: {e}", source_path=path, details=str(e)
        ) from e

    for candidate in (encoding, *_FALLBACK_ENCODINGS):
        try:
            content = raw.decode(candidate)
        except (UnicodeDecodeError, LookupError):
            continue
        if _BINARY_CHARS_RE.search(content):
            continue
        if candidate != encoding:
            logger.warning("Used fallback encoding %s for %s", candidate, path)
        return split_lines(content.removeprefix("\ufeff"))

    raise DocumentIOError(
        "Could not decode text file with any supported encoding",
        source_path=path,
        details=f"Tried: {', '.join((encoding, *_FALLBACK_ENCODINGS))}",
    )


def build_output_path(input_path: Path) -> Path:
    """Return ``<dir>/<stem>.processed<suffix>`` for an input document."""
    return input_path.with_name(input_path.stem + OUTPUT_SUFFIX + input_path.suffix)


def write_output_lines(path: Path, lines: Sequence[str]) -> None:
    """Write lines joined by CRLF as UTF-8 with a byte-order mark.

    Raises:
        DocumentIOError: If the file cannot be written.
    """
    content = OUTPUT_LINE_TERMINATOR.join(lines)
    try:
        with open(path, "w", encoding=OUTPUT_ENCODING, newline="") as fh:
            fh.write(content)
    except OSError as e:
        raise DocumentIOError(
            f"Failed to write file: {e}", source_path=path, details=str(e)
        ) from e


def process_file(
    input_path: Path,
    levels: Sequence[LevelConfig],
    output_path: Path | None = None,
) -> FileProcessingOutcome:
    """Read a document, renumber it, and write the result.

    Args:
        input_path: Document to process.
        levels: Validated level configurations.
        output_path: Destination; defaults to ``build_output_path(input_path)``.

    Returns:
        FileProcessingOutcome with paths and the engine result.

    Raises:
        DocumentIOError: If reading or writing fails.
    """
    lines = read_document_lines(input_path)
    result = process_lines(lines, levels)

    destination = output_path or build_output_path(input_path)
    write_output_lines(destination, result.output_lines)
    logger.info(
        "Wrote %s (%d of %d lines altered)",
        destination,
        result.summary.transformed_lines_count,
        result.summary.total_lines,
    )

    return FileProcessingOutcome(
        input_path=input_path, output_path=destination, result=result
    )
