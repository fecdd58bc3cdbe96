# Flagkit CLI Flags — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Process-wide convenience access to a single `FlagSet` for the program's own
command line.

The flag set is created on first use, named after the program invocation and
configured with `ErrorHandling.EXIT_ON_ERROR`. Every function here forwards to
it, so small programs can skip creating a flag set themselves:

    from flagkit import command_line

    message = command_line.string_flag("message", "Hello, World!", "text to print")
    times = command_line.int_flag("t", 1, "number of `times` to print")
    command_line.parse()

    for _ in range(times.value):
        print(message.value)

This module holds mutable process-wide state and is not thread-safe. Libraries
should create and pass around their own `FlagSet` instead.
"""
from __future__ import annotations

import sys
from datetime import timedelta
from decimal import Decimal
from typing import Any, Callable, Sequence, TypeVar

from flagkit.error_handling import ErrorHandling
from flagkit.flag_set import FlagSet
from flagkit.parse_error import ParseError
from flagkit.protocols import Flag
from flagkit.utils import get_program_invocation
from flagkit.value_flag import ValueFlag
from flagkit.value_kind import ValueKind

T = TypeVar("T")

_command_line: FlagSet | None = None


def get_command_line() -> FlagSet:
    """Return the process-wide flag set, creating it on first use."""
    global _command_line
    if _command_line is None:
        _command_line = FlagSet(get_program_invocation(), ErrorHandling.EXIT_ON_ERROR)
    return _command_line


def new_flag_set(
    name: str,
    error_handling: ErrorHandling | str,
    exit: Callable[[int], Any] | None = None,
) -> FlagSet:
    """Replace the process-wide flag set with a new, empty one and return it."""
    global _command_line
    _command_line = FlagSet(name, error_handling, exit=exit)
    return _command_line


def reset() -> None:
    """Forget the process-wide flag set; the next call creates a fresh one."""
    global _command_line
    _command_line = None


def init(name: str, error_handling: ErrorHandling | str) -> FlagSet:
    """Set the name and error handling policy of the process-wide flag set."""
    command_line = get_command_line()
    command_line.init(name, error_handling)
    return command_line


def bool_flag(name: str, default: bool = False, usage: str = "") -> ValueFlag[bool]:
    return get_command_line().bool_flag(name, default, usage)


def int_flag(name: str, default: int = 0, usage: str = "") -> ValueFlag[int]:
    return get_command_line().int_flag(name, default, usage)


def int64_flag(name: str, default: int = 0, usage: str = "") -> ValueFlag[int]:
    return get_command_line().int64_flag(name, default, usage)


def uint_flag(name: str, default: int = 0, usage: str = "") -> ValueFlag[int]:
    return get_command_line().uint_flag(name, default, usage)


def uint64_flag(name: str, default: int = 0, usage: str = "") -> ValueFlag[int]:
    return get_command_line().uint64_flag(name, default, usage)


def string_flag(name: str, default: str = "", usage: str = "") -> ValueFlag[str]:
    return get_command_line().string_flag(name, default, usage)


def float_flag(name: str, default: float = 0.0, usage: str = "") -> ValueFlag[float]:
    return get_command_line().float_flag(name, default, usage)


def double_flag(name: str, default: float = 0.0, usage: str = "") -> ValueFlag[float]:
    return get_command_line().double_flag(name, default, usage)


def decimal_flag(
    name: str, default: Decimal = Decimal(0), usage: str = ""
) -> ValueFlag[Decimal]:
    return get_command_line().decimal_flag(name, default, usage)


def duration_flag(
    name: str, default: timedelta = timedelta(0), usage: str = ""
) -> ValueFlag[timedelta]:
    return get_command_line().duration_flag(name, default, usage)


def var(
    name: str,
    default: T,
    usage: str = "",
    setter: Callable[[T, str], T] | None = None,
    kind: ValueKind | str | None = None,
    value_type: Any = None,
) -> ValueFlag[T]:
    return get_command_line().var(name, default, usage, setter, kind, value_type)


def parse(arguments: Sequence[str] | None = None) -> ParseError | None:
    """Parse `arguments`, defaulting to `sys.argv[1:]`."""
    if arguments is None:
        arguments = sys.argv[1:]
    return get_command_line().parse(arguments)


def parsed() -> bool:
    return get_command_line().parsed


def args() -> list[str]:
    return get_command_line().args


def arg(i: int) -> str:
    return get_command_line().arg(i)


def n_arg() -> int:
    return get_command_line().n_arg()


def n_flag() -> int:
    return get_command_line().n_flag()


def visit(fn: Callable[[Flag], Any]) -> None:
    get_command_line().visit(fn)


def visit_all(fn: Callable[[Flag], Any]) -> None:
    get_command_line().visit_all(fn)


def lookup(name: str) -> Flag | None:
    return get_command_line().lookup(name)


def set(name: str, value: str) -> None:
    get_command_line().set(name, value)


def print_defaults() -> None:
    get_command_line().print_defaults()


def usage() -> None:
    """Call the usage function of the process-wide flag set."""
    get_command_line().usage()
