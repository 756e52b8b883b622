"""Exception hierarchy for cjk-fontsel.

Every error raised by the library derives from FontSelectorError and carries
a human readable message plus an optional ``details`` dict. Errors caused by
an underlying OSError or UnicodeError keep it as ``__cause__``.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any


class ErrorKind(str, Enum):
    """What went wrong while resolving an alias."""

    OPEN = "open"
    READ = "read"
    INVALID = "invalid"


class FontSelectorError(Exception):
    """Base exception for all cjk-fontsel errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


class ReadFontNameError(FontSelectorError):
    """Raised when an alias file cannot be opened or read.

    Attributes:
        kind: Whether opening or reading failed.
        path: Full path of the alias file that was attempted.
        category: Alias category (sans, serif, monospace) if known.
    """

    def __init__(
        self,
        path: Path,
        kind: ErrorKind,
        category: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(f"error while reading {path}", details)
        self.path = path
        self.kind = kind
        self.category = category

    @property
    def cause(self) -> BaseException | None:
        """The underlying exception, if any."""
        return self.__cause__


class InvalidAliasError(ReadFontNameError):
    """Raised when an alias identifier is not a plain file name."""

    def __init__(self, path: Path, alias: str, category: str | None = None) -> None:
        super().__init__(
            path,
            ErrorKind.INVALID,
            category=category,
            details={"alias": alias},
        )
        self.message = f"invalid alias identifier {alias!r}"
        self.alias = alias


class WriteConfigError(FontSelectorError):
    """Raised when the fontconfig file cannot be written."""

    def __init__(self, path: Path, details: dict[str, Any] | None = None) -> None:
        super().__init__(f"error while writing {path}", details)
        self.path = path


class ConfigError(FontSelectorError):
    """Raised for a malformed configuration file."""
