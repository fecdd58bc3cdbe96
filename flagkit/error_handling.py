# Flagkit CLI Flags — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ErrorHandling`, the policy a `FlagSet` applies when parsing fails, and
`handle_parse_error()`, the single place where that policy is carried out.

The parse engine never exits or raises for a bad command line; it hands the
`ParseError` to `handle_parse_error()`, which either returns it, calls the
exit collaborator, or escalates with `FlagPanic`.

Example:
    ErrorHandling("exit")      → ErrorHandling.EXIT_ON_ERROR
    ErrorHandling("escalate")  → ErrorHandling.PANIC_ON_ERROR (via alias)
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Callable

from flagkit.exceptions import FlagPanic
from flagkit.logger import logger
from flagkit.parse_error import ParseError

EXIT_HELP = 0
EXIT_USAGE = 2


class ErrorHandling(Enum):
    """
    What `FlagSet.parse()` does after reporting a parse error.

    Members:
        CONTINUE_ON_ERROR: Return the error to the caller.
        EXIT_ON_ERROR: Exit with status 0 for help requests, 2 otherwise.
        PANIC_ON_ERROR: Raise `FlagPanic` with the error message.

    Aliases:
        - "recover" → "continue"
        - "terminate" → "exit"
        - "escalate" → "panic"
    """

    CONTINUE_ON_ERROR = "continue"
    EXIT_ON_ERROR = "exit"
    PANIC_ON_ERROR = "panic"

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "recover": "continue",
            "terminate": "exit",
            "escalate": "panic",
            "continue_on_error": "continue",
            "exit_on_error": "exit",
            "panic_on_error": "panic",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> ErrorHandling:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower().replace("-", "_")
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    def __str__(self) -> str:
        return self.value


def exit_code(error: ParseError) -> int:
    """Return the process exit status for `error`."""
    return EXIT_HELP if error.is_help else EXIT_USAGE


def handle_parse_error(
    policy: ErrorHandling,
    error: ParseError,
    exit: Callable[[int], Any],
) -> ParseError:
    """
    Apply `policy` to a parse error that has already been reported.

    Args:
        policy (ErrorHandling): The flag set's policy.
        error (ParseError): The error returned by the parse engine.
        exit (Callable[[int], Any]): Exit collaborator, normally `sys.exit`.

    Returns:
        ParseError: `error`, unless the policy exits the process or raises.

    Raises:
        FlagPanic: Under PANIC_ON_ERROR, chained from the converter's exception
            when there is one.
    """
    if policy == ErrorHandling.EXIT_ON_ERROR:
        code = exit_code(error)
        logger.debug("Exiting with status %d: %s", code, error)
        exit(code)
        return error
    if policy == ErrorHandling.PANIC_ON_ERROR:
        logger.debug("Escalating parse error: %s", error)
        raise FlagPanic(error) from error.cause
    logger.debug("Returning parse error to caller: %s", error)
    return error
