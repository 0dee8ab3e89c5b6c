"""Input validation and user-facing error formatting.

Paths arriving from the command line or the HTTP API are validated here
before any file is opened, and exceptions are converted into messages
that can be shown to an operator without exposing internals.
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from pathlib import Path

from hrc.config.builder import LevelConfigError
from hrc.documents import DocumentIOError, clean_path_input

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Input Validation
# ---------------------------------------------------------------------------

# Null bytes in paths
_NULL_BYTE = re.compile(r"\x00")


class ValidationError(Exception):
    """Raised when input validation fails."""


class InputValidator:
    """Validate inputs at system boundaries.

    All methods raise ``ValidationError`` on failure.
    """

    def validate_file_path(
        self,
        path: str | Path,
        *,
        must_exist: bool = True,
        allowed_extensions: tuple[str, ...] | None = None,
    ) -> Path:
        """Validate a document path entered by a user.

        Surrounding whitespace and quotes (as left by pasting a path) are
        stripped first.

        Args:
            path: Raw path from user input.
            must_exist: Require the file to exist on disk.
            allowed_extensions: Restrict to these suffixes (e.g. (".md",)).

        Returns:
            Resolved, validated Path.

        Raises:
            ValidationError: On any validation failure.
        """
        raw = clean_path_input(str(path))
        if not raw:
            raise ValidationError("Please select a valid file.")
        self._check_null_bytes(raw)
        resolved = Path(raw).resolve()

        if allowed_extensions is not None:
            if resolved.suffix.lower() not in {e.lower() for e in allowed_extensions}:
                allowed = ", ".join(allowed_extensions)
                raise ValidationError(f"File type not allowed. Accepted types: {allowed}")

        if must_exist and not resolved.is_file():
            raise ValidationError("Invalid file path. Please select a valid file.")

        return resolved

    @staticmethod
    def _check_null_bytes(raw: str) -> None:
        """Reject paths containing null bytes.

        Raises:
            ValidationError: If a null byte is present.
        """
        if _NULL_BYTE.search(raw):
            raise ValidationError("Path contains null bytes.")


# ---------------------------------------------------------------------------
# Error Formatting
# ---------------------------------------------------------------------------


@dataclass
class UserFriendlyError:
    """A structured error designed for operator consumption.

    Attributes:
        message: Clear description for the user.
        suggestion: Actionable guidance.
        component: Originating subsystem (config, documents, engine).
        error_code: Machine-readable identifier (e.g. "HRC_010").
        technical_detail: Debugging info for logs only.
    """

    message: str
    suggestion: str
    component: str
    error_code: str
    technical_detail: str = ""

    def to_dict(self) -> dict[str, str]:
        """Serialize for API responses (excludes technical_detail)."""
        return {
            "message": self.message,
            "suggestion": self.suggestion,
            "component": self.component,
            "error_code": self.error_code,
        }

    def __str__(self) -> str:
        return f"Error: {self.message} {self.suggestion}"


class ErrorFormatter:
    """Convert exceptions raised while processing into user-friendly errors."""

    def format_processing_error(self, error: Exception) -> UserFriendlyError:
        """Format an error from configuration, file I/O or processing.

        Args:
            error: The caught exception.

        Returns:
            User-friendly error with actionable suggestion.
        """
        message, suggestion, component, code_suffix = _classify_error(error)
        logger.debug("Formatting %s as HRC_%s", type(error).__name__, code_suffix)
        return UserFriendlyError(
            message=message,
            suggestion=suggestion,
            component=component,
            error_code=f"HRC_{code_suffix}",
            technical_detail=repr(error),
        )


def _classify_error(error: Exception) -> tuple[str, str, str, str]:
    """Map an exception to (message, suggestion, component, code_suffix)."""
    if isinstance(error, LevelConfigError):
        prefix = f"Level {error.level} configuration is invalid: " if error.level else ""
        return (
            f"{prefix}{error}",
            "Please check all fields of the level configuration.",
            "config",
            "010",
        )
    if isinstance(error, ValidationError):
        return (
            str(error),
            "Check that the file path is correct and the file exists.",
            "documents",
            "020",
        )
    if isinstance(error, DocumentIOError):
        return (
            str(error),
            "Check that the file is readable text and the folder is writable.",
            "documents",
            "021",
        )
    if isinstance(error, FileNotFoundError):
        return (
            "A required file could not be found.",
            "Check that the file path is correct and the file exists.",
            "documents",
            "001",
        )
    if isinstance(error, PermissionError):
        return (
            "Permission denied when accessing a file.",
            "Check file permissions and ensure the application has access.",
            "documents",
            "002",
        )
    if isinstance(error, json.JSONDecodeError):
        return (
            "A data file contains invalid JSON.",
            "Verify the level file is valid JSON.",
            "config",
            "006",
        )
    if isinstance(error, ValueError):
        return (
            "Invalid input was provided.",
            "Check the input values and try again.",
            "engine",
            "005",
        )
    return (
        "An unexpected error occurred.",
        "If this keeps happening, please report the issue.",
        "engine",
        "999",
    )
