# Flagkit CLI Flags — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes raised by flagkit.

Parse-time failures are not exceptions: `FlagSet.parse()` returns a
`ParseError` value and lets the configured `ErrorHandling` policy decide what
happens next. The exceptions below cover the remaining cases, which are
programming errors or explicit escalations.

All exceptions inherit from `FlagkitError`, the base exception for the package.

Exception Hierarchy:
- FlagkitError
    ├── DuplicateFlagError
    ├── InvalidFlagError
    ├── UnknownFlagError
    ├── FlagValueError
    └── FlagPanic
"""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from flagkit.parse_error import ParseError


class FlagkitError(Exception):
    """Base exception for flagkit."""


class DuplicateFlagError(FlagkitError):
    """Raised when a flag name is registered twice on the same flag set."""


class InvalidFlagError(FlagkitError):
    """Raised when a flag cannot be registered (e.g. an empty name)."""


class UnknownFlagError(FlagkitError, KeyError):
    """Raised by `FlagSet.set()` when no flag with the given name exists."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class FlagValueError(FlagkitError, ValueError):
    """Raised by `FlagSet.set()` when the value cannot be converted."""

    def __init__(self, message: str, error: ParseError):
        super().__init__(message)
        self.error = error


class FlagPanic(FlagkitError):
    """Raised on any parse error when the flag set uses `PANIC_ON_ERROR`."""

    def __init__(self, error: ParseError):
        super().__init__(error.message)
        self.error = error
