# Flagkit CLI Flags — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the structural protocol every registered flag satisfies.

`FlagSet` stores flags of many value types in one registry, so it only talks
to them through the type-erased operations below. `ValueFlag` is the built-in
implementation; any object with the same shape can be registered with
`FlagSet.add_flag()` without subclassing anything.

Protocols:
- Flag: name, usage text, value kind, default rendering, `try_set()` and
  `unquote_usage()`.
"""
from __future__ import annotations

from typing import Protocol, runtime_checkable

from flagkit.parse_error import ParseError
from flagkit.value_kind import ValueKind


@runtime_checkable
class Flag(Protocol):
    name: str
    usage: str

    @property
    def kind(self) -> ValueKind: ...

    def render_default(self) -> str: ...

    def try_set(self, value: str) -> ParseError | None: ...

    def unquote_usage(self) -> tuple[str, str]: ...
