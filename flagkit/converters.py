# Flagkit CLI Flags — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Contains value conversion and rendering utilities for flagkit flags.

Every converter takes the raw command-line text and returns a typed value. The
error contract is shared with user supplied setters:

- `ValueError` (or any other exception) means the text is not a valid literal
  and becomes a "parse error".
- `OverflowError` means the literal is well formed but does not fit the target
  and becomes a "value out of range" error.

Floating point kinds never raise `OverflowError`: out-of-range magnitudes
saturate to infinity, which is how IEEE floats behave on every platform.

Functions:
- parse_bool: `true`/`false`/`1`/`0`.
- parse_integer: decimal or `0x` hexadecimal, range checked per kind.
- parse_float: decimal/exponential notation, single or double precision.
- parse_decimal: `decimal.Decimal` notation with a fixed range.
- parse_duration: `[-][d.]hh:mm[:ss[.fffffff]]` or ISO 8601 durations.
- coerce_enum / coerce_value: coercion to arbitrary Python types for custom flags.
- convert: dispatch on `ValueKind`.
- render_value / format_duration: the inverse, used for defaults and usage output.
"""
from __future__ import annotations

import math
import re
import struct
import types
from datetime import datetime, timedelta
from decimal import Decimal, InvalidOperation
from enum import Enum, EnumMeta
from typing import Any, Literal, Union, get_args, get_origin

from dateutil import parser as date_parser
from pydantic import TypeAdapter

from flagkit.value_kind import ValueKind

FLOAT32_MAX = 3.4028234663852886e38
# Smallest magnitude that rounds to infinity in single precision.
FLOAT32_OVERFLOW = 2.0**128 - 2.0**103
DECIMAL_MAX = Decimal(79228162514264337593543950335)

_DECIMAL_INTEGER = re.compile(r"[+-]?[0-9]+")
_HEX_INTEGER = re.compile(r"([+-]?)0[xX]([0-9a-fA-F]+)")
_MAX_INTEGER_DIGITS = 20

_NUMBER = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_NON_FINITE = re.compile(r"[+-]?(?:inf|infinity|nan)", re.IGNORECASE)
_DAYS_ONLY = re.compile(r"(?P<sign>-)?(?P<days>[0-9]+)")
_TIME_SPAN = re.compile(
    r"(?P<sign>-)?(?:(?P<days>[0-9]+)\.)?"
    r"(?P<hours>[0-9]{1,2}):(?P<minutes>[0-9]{1,2})"
    r"(?::(?P<seconds>[0-9]{1,2})(?:\.(?P<fraction>[0-9]{1,7}))?)?"
)

_timedelta_adapter: TypeAdapter[timedelta] = TypeAdapter(timedelta)


def parse_bool(value: str) -> bool:
    """
    Convert a string to a boolean.

    Only the exact literals `true`, `false`, `1` and `0` are accepted.

    Raises:
        ValueError: If the text is any other string.
    """
    if value in ("true", "1"):
        return True
    if value in ("false", "0"):
        return False
    raise ValueError(f"invalid syntax: {value!r}")


def parse_integer(value: str, kind: ValueKind) -> int:
    """
    Convert a decimal or `0x`-prefixed hexadecimal string to an integer of `kind`.

    Raises:
        ValueError: If the text is not an integer literal.
        OverflowError: If the integer does not fit the width of `kind`.
    """
    bounds = kind.bounds
    if bounds is None:
        raise TypeError(f"{kind} is not an integer kind")
    literal = value.strip()
    hex_match = _HEX_INTEGER.fullmatch(literal)
    if hex_match:
        sign, digits = hex_match.groups()
        number = int(digits, 16)
        if sign == "-":
            number = -number
    elif _DECIMAL_INTEGER.fullmatch(literal):
        digits = literal.lstrip("+-").lstrip("0") or "0"
        # Every integer kind fits in 20 digits; longer literals cannot be in range.
        if len(digits) > _MAX_INTEGER_DIGITS:
            raise OverflowError(f"{literal[:24]}... is out of range for {kind}")
        number = -int(digits) if literal.startswith("-") else int(digits)
    else:
        raise ValueError(f"invalid syntax: {value!r}")

    low, high = bounds
    if not low <= number <= high:
        raise OverflowError(f"{literal} is out of range for {kind}")
    return number


def _round_float32(value: float) -> float:
    if math.isfinite(value) and abs(value) >= FLOAT32_OVERFLOW:
        return math.copysign(math.inf, value)
    return struct.unpack("f", struct.pack("f", value))[0]


def parse_float(value: str, kind: ValueKind = ValueKind.DOUBLE) -> float:
    """
    Convert decimal or exponential notation to a float.

    `ValueKind.FLOAT` rounds to single precision. Magnitudes beyond the
    representable range become +/-infinity rather than failing.

    Raises:
        ValueError: If the text is not a floating point literal.
    """
    literal = value.strip()
    if not (_NUMBER.fullmatch(literal) or _NON_FINITE.fullmatch(literal)):
        raise ValueError(f"invalid syntax: {value!r}")
    number = float(literal)
    if kind == ValueKind.FLOAT:
        return _round_float32(number)
    return number


def parse_decimal(value: str) -> Decimal:
    """
    Convert decimal or exponential notation to a `Decimal`.

    Raises:
        ValueError: If the text is not a finite decimal literal.
        OverflowError: If the magnitude exceeds `DECIMAL_MAX`.
    """
    literal = value.strip()
    if not _NUMBER.fullmatch(literal):
        raise ValueError(f"invalid syntax: {value!r}")
    try:
        number = Decimal(literal)
    except InvalidOperation as error:
        raise ValueError(f"invalid syntax: {value!r}") from error
    if abs(number) > DECIMAL_MAX:
        raise OverflowError(f"{literal} is out of range for decimal")
    return number


def parse_duration(value: str) -> timedelta:
    """
    Convert a time-span literal to a `timedelta`.

    Accepted forms:
        - `d` (whole days), e.g. `3`
        - `[-][d.]hh:mm[:ss[.fffffff]]`, e.g. `00:02:00` or `1.12:00:00.5`
        - ISO 8601 durations, e.g. `PT2M` or `P1DT12H`

    Raises:
        ValueError: If the text is not a duration literal.
        OverflowError: If hours, minutes or seconds exceed their range.
    """
    literal = value.strip()
    if literal.upper().lstrip("+-").startswith("P"):
        return _timedelta_adapter.validate_python(literal)

    days_match = _DAYS_ONLY.fullmatch(literal)
    if days_match:
        days = int(days_match.group("days"))
        return -timedelta(days=days) if days_match.group("sign") else timedelta(days=days)

    match = _TIME_SPAN.fullmatch(literal)
    if not match:
        raise ValueError(f"invalid duration: {value!r}")

    hours = int(match.group("hours"))
    minutes = int(match.group("minutes"))
    seconds = int(match.group("seconds") or 0)
    if hours > 23 or minutes > 59 or seconds > 59:
        raise OverflowError(f"{literal} is out of range for duration")

    fraction = match.group("fraction") or ""
    microseconds = round(int(fraction.ljust(7, "0")) / 10) if fraction else 0
    span = timedelta(
        days=int(match.group("days") or 0),
        hours=hours,
        minutes=minutes,
        seconds=seconds,
        microseconds=microseconds,
    )
    return -span if match.group("sign") else span


def format_duration(value: timedelta) -> str:
    """Render a `timedelta` as `[-][d.]hh:mm:ss[.fffffff]`."""
    sign = "-" if value < timedelta(0) else ""
    value = abs(value)
    minutes, seconds = divmod(value.seconds, 60)
    hours, minutes = divmod(minutes, 60)
    text = f"{sign}{value.days}." if value.days else sign
    text += f"{hours:02d}:{minutes:02d}:{seconds:02d}"
    if value.microseconds:
        text += f".{value.microseconds * 10:07d}"
    return text


def coerce_enum(value: Any, enum_type: EnumMeta) -> Any:
    """
    Convert a raw value or string to an Enum instance.

    Tries to resolve by name, value, or coerced base type.

    Raises:
        ValueError: If the value cannot be resolved to a valid Enum member.
    """
    if isinstance(value, enum_type):
        return value

    if isinstance(value, str):
        try:
            return enum_type[value]
        except KeyError:
            pass

    base_type = type(next(iter(enum_type)).value)
    try:
        coerced_value = base_type(value)
        return enum_type(coerced_value)
    except (ValueError, TypeError):
        values = [str(enum.value) for enum in enum_type]
        raise ValueError(f"'{value}' should be one of {{{', '.join(values)}}}") from None


def coerce_value(value: str, target_type: Any) -> Any:
    """
    Attempt to convert a string to the given target type.

    Handles typing constructs such as Union and Literal, as well as Enum,
    datetime, timedelta, Decimal and bool. Any other type is called with the
    string.

    Raises:
        ValueError: If conversion fails or the value is invalid.
    """
    origin = get_origin(target_type)
    args = get_args(target_type)

    if origin is Literal:
        if value not in args:
            raise ValueError(
                f"Value '{value}' is not a valid literal for type {target_type}"
            )
        return value

    if isinstance(target_type, types.UnionType) or origin is Union:
        for arg in args:
            try:
                return coerce_value(value, arg)
            except Exception:
                continue
        raise ValueError(f"Value '{value}' could not be coerced to any of {args}")

    if isinstance(target_type, EnumMeta):
        return coerce_enum(value, target_type)

    if target_type is bool:
        return parse_bool(value)

    if target_type is timedelta:
        return parse_duration(value)

    if target_type is Decimal:
        return parse_decimal(value)

    if target_type is datetime:
        try:
            return date_parser.parse(value)
        except (ValueError, OverflowError) as error:
            raise ValueError(f"Value '{value}' could not be parsed as a datetime") from error

    return target_type(value)


def convert(kind: ValueKind, value: str, value_type: Any = None) -> Any:
    """
    Convert `value` using the built-in converter for `kind`.

    `ValueKind.CUSTOM` coerces to `value_type`, which must then be given.
    """
    if kind == ValueKind.BOOL:
        return parse_bool(value)
    if kind.is_integer:
        return parse_integer(value, kind)
    if kind in (ValueKind.FLOAT, ValueKind.DOUBLE):
        return parse_float(value, kind)
    if kind == ValueKind.DECIMAL:
        return parse_decimal(value)
    if kind == ValueKind.DURATION:
        return parse_duration(value)
    if kind == ValueKind.STRING:
        return value
    if value_type is None or value_type is type(None):
        raise TypeError("custom flags need a setter or a value type to convert text")
    return coerce_value(value, value_type)


def _format_float(value: float) -> str:
    text = repr(value)
    if text.endswith(".0"):
        text = text[:-2]
    return text


def _format_float32(value: float) -> str:
    if not math.isfinite(value):
        return repr(value)
    for precision in range(1, 10):
        text = f"{value:.{precision}g}"
        if _round_float32(float(text)) == value:
            return text
    return _format_float(value)


def render_value(kind: ValueKind, value: Any) -> str:
    """
    Render `value` as text that `convert(kind, ...)` parses back to an equal value.

    `None` renders as the empty string.
    """
    if value is None:
        return ""
    if kind == ValueKind.BOOL:
        return "true" if value else "false"
    if kind == ValueKind.FLOAT:
        return _format_float32(float(value))
    if kind == ValueKind.DOUBLE:
        return _format_float(float(value))
    if kind == ValueKind.DURATION:
        return format_duration(value)
    if isinstance(value, Enum):
        return value.name
    if isinstance(value, datetime):
        return value.isoformat()
    return str(value)
