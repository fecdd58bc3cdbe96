# Flagkit CLI Flags — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `FlagSet`, a registry of named, typed flags together with
the engine that parses an argv-style token list against it.

Flags are registered up front (`bool_flag()`, `int_flag()`, `var()`,
`add_flag()`, ...). `parse()` then walks the tokens from the left, assigning
values to flags until it meets the first non-flag token or the `--`
terminator; everything from there on is left in `args` as positional
arguments.

Token syntax:
- `-name` / `--name`: boolean flags only, sets the flag to true.
- `-name=value` / `--name=value`: any flag.
- `-name value` / `--name value`: non-boolean flags.
- `--`: ends flag parsing; the token itself is dropped.
- `-h` / `-help` (any case, one or two dashes): prints usage and returns
  `ERR_HELP`, unless a flag named `h` or `help` is registered.

Parse failures are reported by writing the error and the usage block to the
configured output, then handed to the flag set's `ErrorHandling` policy.

Example Usage:
    flags = FlagSet("app", ErrorHandling.CONTINUE_ON_ERROR)
    verbose = flags.bool_flag("v", False, "verbose output")
    count = flags.int_flag("count", 1, "number of `times` to run")

    error = flags.parse(["-v", "-count=3", "input.txt"])

    # error is None, verbose.value is True, count.value == 3
    # flags.args == ["input.txt"]

Design Notes:
A flag set is not thread-safe. Registration and parsing must be serialized by
the caller if the set is shared. The output writer is borrowed, never closed.
"""
from __future__ import annotations

import sys
from datetime import timedelta
from decimal import Decimal
from types import MappingProxyType
from typing import Any, Callable, Mapping, Sequence, TextIO, TypeVar

from flagkit.error_handling import ErrorHandling, handle_parse_error
from flagkit.exceptions import (
    DuplicateFlagError,
    FlagValueError,
    InvalidFlagError,
    UnknownFlagError,
)
from flagkit.logger import logger
from flagkit.parse_error import ERR_HELP, ErrorKind, ParseError
from flagkit.protocols import Flag
from flagkit.usage import format_flag
from flagkit.value_flag import ValueFlag
from flagkit.value_kind import ValueKind

F = TypeVar("F", bound=Flag)
T = TypeVar("T")

HELP_ALIASES = ("help", "h")


class FlagSet:
    """
    A named set of flags and the parser for them.

    Independent flag sets can be used to implement subcommands: parse the
    top-level flags, then hand `args[1:]` to the subcommand's own flag set.

    Attributes:
        name (str): Shown in usage output and redefinition messages.
        error_handling (ErrorHandling): Policy applied when `parse()` fails.
    """

    def __init__(
        self,
        name: str = "",
        error_handling: ErrorHandling | str = ErrorHandling.CONTINUE_ON_ERROR,
        output: TextIO | None = None,
        usage: Callable[[], None] | None = None,
        exit: Callable[[int], Any] | None = None,
    ) -> None:
        """Initialize the FlagSet."""
        self.name: str = name
        self.error_handling: ErrorHandling = ErrorHandling(error_handling)
        self._output: TextIO | None = output
        self._usage: Callable[[], None] | None = usage
        self._exit: Callable[[int], Any] = exit or sys.exit
        self._formal: dict[str, Flag] = {}
        self._actual: dict[str, Flag] = {}
        self._args: list[str] = []
        self._parsed: bool = False

    def init(self, name: str, error_handling: ErrorHandling | str) -> None:
        """Set the name and error handling policy of the flag set."""
        self.name = name
        self.error_handling = ErrorHandling(error_handling)

    @property
    def parsed(self) -> bool:
        """Whether `parse()` has been called."""
        return self._parsed

    @property
    def formal(self) -> Mapping[str, Flag]:
        """All registered flags, by name."""
        return MappingProxyType(self._formal)

    @property
    def actual(self) -> Mapping[str, Flag]:
        """Flags assigned by `parse()` or `set()`, by name."""
        return MappingProxyType(self._actual)

    @property
    def args(self) -> list[str]:
        """The non-flag arguments left after parsing."""
        return list(self._args)

    def arg(self, i: int) -> str:
        """Return the i'th remaining argument, or "" if it does not exist."""
        if i < 0 or i >= len(self._args):
            return ""
        return self._args[i]

    def n_arg(self) -> int:
        """Number of arguments remaining after flags have been processed."""
        return len(self._args)

    def n_flag(self) -> int:
        """Number of flags that have been set."""
        return len(self._actual)

    # Output and usage

    def output(self) -> TextIO:
        """Return the destination for usage and error messages."""
        if self._output is None:
            return sys.stderr
        return self._output

    def set_output(self, output: TextIO | None) -> None:
        """Set the destination for usage and error messages; None means stderr."""
        self._output = output

    @property
    def usage(self) -> Callable[[], None]:
        """The function called to print usage when parsing fails."""
        if self._usage is None:
            return self.default_usage
        return self._usage

    @usage.setter
    def usage(self, usage: Callable[[], None] | None) -> None:
        self._usage = usage

    def default_usage(self) -> None:
        """Write a usage header followed by `print_defaults()`."""
        if self.name:
            self.output().write(f"Usage of {self.name}:\n")
        else:
            self.output().write("Usage:\n")
        self.print_defaults()

    def print_defaults(self) -> None:
        """Write the usage block of every flag to the output, sorted by name."""
        output = self.output()
        self.visit_all(lambda flag: output.write(format_flag(flag) + "\n"))

    # Registry

    def _sorted(self, flags: dict[str, Flag]) -> list[Flag]:
        return [flags[name] for name in sorted(flags)]

    def visit_all(self, fn: Callable[[Flag], Any]) -> None:
        """Call `fn` for every registered flag in lexicographical order."""
        for flag in self._sorted(self._formal):
            fn(flag)

    def visit(self, fn: Callable[[Flag], Any]) -> None:
        """Call `fn` for every flag that has been set, in lexicographical order."""
        for flag in self._sorted(self._actual):
            fn(flag)

    def lookup(self, name: str) -> Flag | None:
        """Return the flag registered under `name`, if any."""
        return self._formal.get(name)

    def set(self, name: str, value: str) -> None:
        """
        Set the value of the named flag as if it had been parsed.

        Raises:
            UnknownFlagError: If no flag is registered under `name`.
            FlagValueError: If `value` cannot be converted.
        """
        flag = self._formal.get(name)
        if flag is None:
            raise UnknownFlagError(f"no such flag -{name}")
        error = flag.try_set(value)
        if error is not None:
            raise FlagValueError(
                f"could not set value of -{name}: {error}", error
            ) from error.cause
        self._actual[name] = flag

    def add_flag(self, flag: F) -> F:
        """
        Register a flag object.

        Any object satisfying the `Flag` protocol can be registered.

        Raises:
            InvalidFlagError: If the object is not a flag or its name is unusable.
            DuplicateFlagError: If the name is already registered. The message
                is also written to the output.
        """
        if not isinstance(flag, Flag):
            raise InvalidFlagError(f"{flag!r} does not implement the Flag protocol")
        name = flag.name
        if not name:
            raise InvalidFlagError("flag name must not be empty")
        if name.startswith("-"):
            raise InvalidFlagError(f"flag {name!r} begins with -")
        if "=" in name:
            raise InvalidFlagError(f"flag {name!r} contains =")
        if name in self._formal:
            if self.name:
                message = f"{self.name} flag redefined: {name}"
            else:
                message = f"flag redefined: {name}"
            self.output().write(f"{message}\n")
            raise DuplicateFlagError(message)
        self._formal[name] = flag
        logger.debug("Registered flag -%s (%s)", name, flag.kind)
        return flag

    def var(
        self,
        name: str,
        default: T,
        usage: str = "",
        setter: Callable[[T, str], T] | None = None,
        kind: ValueKind | str | None = None,
        value_type: Any = None,
    ) -> ValueFlag[T]:
        """
        Define a flag of any type.

        Args:
            name (str): Flag name.
            default (T): Value until one is parsed; also determines the kind
                when `kind` is not given.
            usage (str): Help text.
            setter (Callable[[T, str], T] | None): Custom converter called with
                the current value and the raw text.
            kind (ValueKind | str | None): Explicit value kind.
            value_type (Any): Target type for CUSTOM flags without a setter.

        Returns:
            ValueFlag[T]: The registered flag.
        """
        if kind is not None:
            kind = ValueKind(kind)
        flag: ValueFlag[T] = ValueFlag(
            name, default, usage, kind=kind, setter=setter, value_type=value_type
        )
        return self.add_flag(flag)

    def bool_flag(self, name: str, default: bool = False, usage: str = "") -> ValueFlag[bool]:
        """Define a bool flag."""
        return self.var(name, default, usage, kind=ValueKind.BOOL)

    def int_flag(self, name: str, default: int = 0, usage: str = "") -> ValueFlag[int]:
        """Define a 32-bit signed integer flag."""
        return self.var(name, default, usage, kind=ValueKind.INT)

    def int64_flag(self, name: str, default: int = 0, usage: str = "") -> ValueFlag[int]:
        """Define a 64-bit signed integer flag."""
        return self.var(name, default, usage, kind=ValueKind.INT64)

    def uint_flag(self, name: str, default: int = 0, usage: str = "") -> ValueFlag[int]:
        """Define a 32-bit unsigned integer flag."""
        return self.var(name, default, usage, kind=ValueKind.UINT)

    def uint64_flag(self, name: str, default: int = 0, usage: str = "") -> ValueFlag[int]:
        """Define a 64-bit unsigned integer flag."""
        return self.var(name, default, usage, kind=ValueKind.UINT64)

    def string_flag(self, name: str, default: str = "", usage: str = "") -> ValueFlag[str]:
        """Define a string flag."""
        return self.var(name, default, usage, kind=ValueKind.STRING)

    def float_flag(self, name: str, default: float = 0.0, usage: str = "") -> ValueFlag[float]:
        """Define a single precision float flag."""
        return self.var(name, default, usage, kind=ValueKind.FLOAT)

    def double_flag(
        self, name: str, default: float = 0.0, usage: str = ""
    ) -> ValueFlag[float]:
        """Define a double precision float flag."""
        return self.var(name, default, usage, kind=ValueKind.DOUBLE)

    def decimal_flag(
        self, name: str, default: Decimal = Decimal(0), usage: str = ""
    ) -> ValueFlag[Decimal]:
        """Define a `decimal.Decimal` flag."""
        return self.var(name, default, usage, kind=ValueKind.DECIMAL)

    def duration_flag(
        self, name: str, default: timedelta = timedelta(0), usage: str = ""
    ) -> ValueFlag[timedelta]:
        """Define a `datetime.timedelta` flag."""
        return self.var(name, default, usage, kind=ValueKind.DURATION)

    # Parsing

    def _fail(
        self, message: str, kind: ErrorKind, wrapped: ParseError | None = None
    ) -> ParseError:
        """Report an error and the usage block to the output and return the error."""
        error = ParseError(
            message,
            kind,
            cause=wrapped.cause if wrapped is not None else None,
            wrapped=wrapped,
        )
        self.output().write(f"{error}\n")
        self.usage()
        return error

    def _set_bool(self, flag: Flag, name: str, value: str) -> ParseError | None:
        error = flag.try_set(value)
        if error is not None and value in ("0", "1"):
            error = flag.try_set("false" if value == "0" else "true")
        if error is not None:
            return self._fail(
                f'invalid boolean value "{value}" for -{name}: {error}',
                ErrorKind.INVALID_VALUE,
                error,
            )
        return None

    def _parse_one(self) -> tuple[bool, ParseError | None]:
        """
        Parse a single flag from the remaining arguments.

        Returns:
            tuple[bool, ParseError | None]: (True, None) when a flag was
            consumed, (False, None) when flag parsing is done, and
            (False, error) when it failed.
        """
        if not self._args:
            return False, None
        token = self._args[0]
        if len(token) < 2 or token[0] != "-":
            return False, None
        num_minuses = 1
        if token[1] == "-":
            num_minuses += 1
            if len(token) == 2:  # "--" terminates the flags
                self._args = self._args[1:]
                return False, None
        name = token[num_minuses:]
        if not name or name[0] in ("-", "="):
            return False, self._fail(f"bad flag syntax: {token}", ErrorKind.BAD_SYNTAX)

        self._args = self._args[1:]
        has_value = False
        value = ""
        if "=" in name:
            name, _, value = name.partition("=")
            has_value = True

        flag = self._formal.get(name)
        if flag is None:
            if name.casefold() in HELP_ALIASES:
                self.usage()
                return False, ERR_HELP
            return False, self._fail(
                f"flag provided but not defined: -{name}", ErrorKind.UNDEFINED_FLAG
            )

        if flag.kind == ValueKind.BOOL:
            if has_value:
                error = self._set_bool(flag, name, value)
                if error is not None:
                    return False, error
            else:
                error = flag.try_set("true")
                if error is not None:
                    return False, self._fail(
                        f"invalid boolean flag {name}: {error}",
                        ErrorKind.INVALID_VALUE,
                        error,
                    )
        else:
            if not has_value and self._args:
                has_value = True
                value = self._args[0]
                self._args = self._args[1:]
            if not has_value:
                return False, self._fail(
                    f"flag needs an argument: -{name}", ErrorKind.MISSING_ARGUMENT
                )
            error = flag.try_set(value)
            if error is not None:
                return False, self._fail(
                    f'invalid value "{value}" for flag -{name}: {error}',
                    ErrorKind.INVALID_VALUE,
                    error,
                )

        self._actual[name] = flag
        return True, None

    def parse(self, arguments: Sequence[str]) -> ParseError | None:
        """
        Parse flags from `arguments`, which should not include the program name.

        Must be called after all flags are defined. Values and the set of
        assigned flags from earlier calls are kept.

        Args:
            arguments (Sequence[str]): The command-line tokens.

        Returns:
            ParseError | None: None on success. On failure the error, after the
            error handling policy has run (which may exit or raise instead).

        Raises:
            FlagPanic: On any error when the policy is PANIC_ON_ERROR.
        """
        self._parsed = True
        self._args = list(arguments)
        logger.debug("Parsing %d argument(s) for flag set '%s'", len(self._args), self.name)
        while True:
            seen, error = self._parse_one()
            if seen:
                continue
            if error is None:
                break
            return handle_parse_error(self.error_handling, error, self._exit)
        logger.debug(
            "Parsed flag set '%s': %d flag(s) set, %d argument(s) remain",
            self.name,
            len(self._actual),
            len(self._args),
        )
        return None

    def __str__(self) -> str:
        """Return a human-readable summary of the flag set."""
        return (
            f"FlagSet(name={self.name!r}, flags={len(self._formal)}, "
            f"set={len(self._actual)}, args={len(self._args)}, "
            f"error_handling={self.error_handling})"
        )

    def __repr__(self) -> str:
        return str(self)
