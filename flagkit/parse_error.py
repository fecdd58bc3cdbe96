# Flagkit CLI Flags — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ParseError`, the immutable value returned when parsing fails, and
`ErrorKind`, the taxonomy that lets callers tell failures apart.

Engine-level kinds are produced by `FlagSet` while walking the token list.
Conversion-level kinds (`PARSE`, `RANGE`) are produced by a flag's `try_set()`
and end up wrapped inside an `INVALID_VALUE` error, where `ParseError.reason`
exposes them.

Contents:
- `ErrorKind`: the error taxonomy.
- `ParseError`: message, kind, optional cause and wrapped conversion error.
- `ERR_HELP`: the sentinel returned when `-h`/`-help` is used but undefined.
- `parse_error()` / `range_error()`: conversion error constructors.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ErrorKind(Enum):
    """Kinds of `ParseError`."""

    BAD_SYNTAX = "bad_syntax"
    UNDEFINED_FLAG = "undefined_flag"
    MISSING_ARGUMENT = "missing_argument"
    INVALID_VALUE = "invalid_value"
    HELP_REQUESTED = "help_requested"
    PARSE = "parse"
    RANGE = "range"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ParseError:
    """
    Describes why a flag could not be parsed or set.

    Attributes:
        message (str): Human readable description, also the `str()` value.
        kind (ErrorKind): Which failure occurred.
        cause (BaseException | None): The exception raised by a converter, if any.
        wrapped (ParseError | None): The conversion error behind an INVALID_VALUE error.
    """

    message: str
    kind: ErrorKind = ErrorKind.PARSE
    cause: BaseException | None = None
    wrapped: ParseError | None = None

    def __post_init__(self) -> None:
        if self.message is None:
            raise TypeError("ParseError message must not be None")

    @property
    def reason(self) -> ErrorKind:
        """The innermost kind: PARSE or RANGE for conversion failures."""
        if self.wrapped is not None:
            return self.wrapped.reason
        return self.kind

    @property
    def is_parse_error(self) -> bool:
        return self.reason == ErrorKind.PARSE

    @property
    def is_out_of_range(self) -> bool:
        return self.reason == ErrorKind.RANGE

    @property
    def is_help(self) -> bool:
        return self.kind == ErrorKind.HELP_REQUESTED

    def __str__(self) -> str:
        return self.message


ERR_HELP = ParseError("flag: help requested", ErrorKind.HELP_REQUESTED)

PARSE_ERROR_MESSAGE = "parse error"
RANGE_ERROR_MESSAGE = "value out of range"


def parse_error(cause: BaseException | None = None) -> ParseError:
    """Return a conversion error for text that is not a valid literal."""
    return ParseError(PARSE_ERROR_MESSAGE, ErrorKind.PARSE, cause)


def range_error(cause: BaseException | None = None) -> ParseError:
    """Return a conversion error for a literal outside the target's range."""
    return ParseError(RANGE_ERROR_MESSAGE, ErrorKind.RANGE, cause)
