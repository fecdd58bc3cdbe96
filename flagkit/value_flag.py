# Flagkit CLI Flags — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ValueFlag`, the built-in value cell behind every typed flag.

A `ValueFlag` holds a default value and, once parsing assigns one, a current
value. Conversion from command-line text goes either through a caller supplied
setter or through the built-in converter for the flag's `ValueKind`. Failures
never escape as exceptions: `try_set()` reports them as a `ParseError` and
leaves the previous value untouched.

Example:
    flag = ValueFlag("count", 3, "number of `retries`", kind=ValueKind.INT)
    flag.try_set("5")        # None
    flag.value               # 5
    flag.unquote_usage()     # ("retries", "number of retries")
"""
from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, TypeVar

from flagkit.converters import convert, render_value
from flagkit.parse_error import ParseError, parse_error, range_error
from flagkit.value_kind import ValueKind

T = TypeVar("T")


@dataclass(eq=False)
class ValueFlag(Generic[T]):
    """
    A named flag with a typed default and current value.

    Attributes:
        name (str): Flag name, referenced as `-name` on the command line.
        default (T): Value reported until parsing assigns one.
        usage (str): Help text; a back-quoted word names the value in usage output.
        kind (ValueKind | None): Semantic type; inferred from `default` when None.
        setter (Callable[[T, str], T] | None): Custom converter receiving the
            current value and the raw text, returning the new value. On the
            first assignment it receives a shallow copy of the default.
        value_type (Any): Target type for CUSTOM flags without a setter.
            Defaults to the type of `default`.
    """

    name: str
    default: T
    usage: str = ""
    kind: ValueKind | None = None
    setter: Callable[[T, str], T] | None = None
    value_type: Any = None
    _value: T | None = field(default=None, init=False, repr=False)
    _has_value: bool = field(default=False, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.kind is None:
            self.kind = ValueKind.infer(self.default)
        elif not isinstance(self.kind, ValueKind):
            self.kind = ValueKind(self.kind)
        if self.value_type is None and self.default is not None:
            self.value_type = type(self.default)

    @property
    def value(self) -> T:
        """The parsed value, or the default if nothing was set."""
        if self._has_value:
            return self._value  # type: ignore[return-value]
        return self.default

    @property
    def is_set(self) -> bool:
        return self._has_value

    def use_setter(self, setter: Callable[[T, str], T] | None) -> None:
        """Replace the converter used by `try_set()`."""
        self.setter = setter

    def _convert(self, value: str) -> T:
        if self.setter is not None:
            # The default stays untouched by setters that mutate in place.
            current = self._value if self._has_value else copy.copy(self.default)
            return self.setter(current, value)
        assert self.kind is not None
        return convert(self.kind, value, self.value_type)

    def try_set(self, value: str) -> ParseError | None:
        """
        Convert `value` and store it.

        Returns:
            ParseError | None: None on success. On failure a "value out of range"
            error if the converter raised `OverflowError`, otherwise a "parse
            error"; the raised exception is kept as the error's cause.
        """
        try:
            converted = self._convert(value)
        except OverflowError as error:
            return range_error(error)
        except Exception as error:
            return parse_error(error)
        self._value = converted
        self._has_value = True
        return None

    def render_default(self) -> str:
        """Render the default value as text."""
        assert self.kind is not None
        return render_value(self.kind, self.default)

    def unquote_usage(self) -> tuple[str, str]:
        """
        Extract a back-quoted name from the usage text.

        Given "a `name` to show" it returns ("name", "a name to show"). Without
        back quotes the name is guessed from the value kind, and is empty for
        boolean flags.
        """
        start = self.usage.find("`")
        if start != -1:
            end = self.usage.find("`", start + 1)
            if end != -1:
                name = self.usage[start + 1 : end]
                return name, self.usage[:start] + name + self.usage[end + 1 :]
        assert self.kind is not None
        return self.kind.placeholder, self.usage

    def __str__(self) -> str:
        assert self.kind is not None
        return render_value(self.kind, self.value)
