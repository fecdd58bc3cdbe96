# Flagkit CLI Flags — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ValueKind`, the enum tagging the semantic type of a flag's value.

The kind drives three things: which built-in converter parses a raw token,
which placeholder name is shown in usage output when the usage text carries no
back-quoted name, and the integer width used for range checking.

Supports alias coercion for shorthand or config-friendly values.

Example:
    ValueKind("int32")     → ValueKind.INT (via alias)
    ValueKind("timedelta") → ValueKind.DURATION (via alias)
    ValueKind.infer(3.5)   → ValueKind.DOUBLE
"""
from __future__ import annotations

from datetime import timedelta
from decimal import Decimal
from enum import Enum
from typing import Any


class ValueKind(Enum):
    """
    Semantic type of a flag value.

    Members:
        BOOL: `true`/`false` (or `1`/`0`); may be passed with no value.
        INT: 32-bit signed integer.
        INT64: 64-bit signed integer.
        UINT: 32-bit unsigned integer.
        UINT64: 64-bit unsigned integer.
        STRING: Any text, never fails.
        FLOAT: Single precision float, saturating to infinity.
        DOUBLE: Double precision float, saturating to infinity.
        DECIMAL: `decimal.Decimal`.
        DURATION: `datetime.timedelta`.
        CUSTOM: Anything else, converted by a setter or by type coercion.

    Aliases:
        - "boolean" → "bool"
        - "int32" → "int"
        - "uint32" → "uint"
        - "str" → "string"
        - "float32" → "float"
        - "float64" → "double"
        - "timedelta" → "duration"
    """

    BOOL = "bool"
    INT = "int"
    INT64 = "int64"
    UINT = "uint"
    UINT64 = "uint64"
    STRING = "string"
    FLOAT = "float"
    DOUBLE = "double"
    DECIMAL = "decimal"
    DURATION = "duration"
    CUSTOM = "custom"

    @classmethod
    def choices(cls) -> list[ValueKind]:
        """Return a list of all value kinds."""
        return list(cls)

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "boolean": "bool",
            "int32": "int",
            "uint32": "uint",
            "str": "string",
            "float32": "float",
            "float64": "double",
            "timedelta": "duration",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> ValueKind:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower()
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    @classmethod
    def infer(cls, value: Any) -> ValueKind:
        """
        Guess the kind of a Python default value.

        Plain `int` maps to INT64 since Python integers carry no width.
        """
        if isinstance(value, bool):
            return cls.BOOL
        if isinstance(value, int) and not isinstance(value, Enum):
            return cls.INT64
        if isinstance(value, float):
            return cls.DOUBLE
        if isinstance(value, Decimal):
            return cls.DECIMAL
        if isinstance(value, timedelta):
            return cls.DURATION
        if isinstance(value, str) and not isinstance(value, Enum):
            return cls.STRING
        return cls.CUSTOM

    @property
    def placeholder(self) -> str:
        """Name shown after the flag in usage output when none is back-quoted."""
        return _PLACEHOLDERS.get(self, "value")

    @property
    def bounds(self) -> tuple[int, int] | None:
        """Inclusive integer range for integer kinds, else None."""
        return _INTEGER_BOUNDS.get(self)

    @property
    def is_integer(self) -> bool:
        return self in _INTEGER_BOUNDS

    def __str__(self) -> str:
        """Return the string representation of the value kind."""
        return self.value


_PLACEHOLDERS = {
    ValueKind.BOOL: "",
    ValueKind.INT: "int",
    ValueKind.INT64: "int",
    ValueKind.UINT: "uint",
    ValueKind.UINT64: "uint",
    ValueKind.STRING: "string",
    ValueKind.FLOAT: "float",
    ValueKind.DOUBLE: "double",
    ValueKind.DURATION: "duration",
}

_INTEGER_BOUNDS = {
    ValueKind.INT: (-(2**31), 2**31 - 1),
    ValueKind.INT64: (-(2**63), 2**63 - 1),
    ValueKind.UINT: (0, 2**32 - 1),
    ValueKind.UINT64: (0, 2**64 - 1),
}
