# Flagkit CLI Flags — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Usage rendering for flag sets.

`format_flag()` produces the plain-text block for one flag that
`FlagSet.print_defaults()` writes to the output:

    -many int
        pass number of books (default 1337)

The usage text sits on the same line only when the header is at most four
characters (a one-letter boolean flag); otherwise it goes on the next line,
indented by four spaces and a tab. The parenthetical default is omitted when
the default is the zero value for its type.

`RichUsage` is a drop-in usage collaborator that renders the same information
as a Rich table instead.
"""
from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from flagkit.console import console as default_console
from flagkit.protocols import Flag
from flagkit.value_kind import ValueKind

if TYPE_CHECKING:
    from flagkit.flag_set import FlagSet

_ZERO_TEXT = {
    ValueKind.BOOL: "false",
    ValueKind.INT: "0",
    ValueKind.INT64: "0",
    ValueKind.UINT: "0",
    ValueKind.UINT64: "0",
    ValueKind.FLOAT: "0",
    ValueKind.DOUBLE: "0",
    ValueKind.DECIMAL: "0",
    ValueKind.DURATION: "00:00:00",
}


def is_zero_value(flag: Flag) -> bool:
    """
    Return True if the flag's default is the zero value of its type.

    `None`, empty text and falsy defaults are zero. An Enum member is zero when
    its underlying value is falsy, e.g. a member defined as `0`.
    """
    text = flag.render_default()
    if not text:
        return True
    if hasattr(flag, "default"):
        default = flag.default
        if isinstance(default, Enum):
            return not default.value
        return default is None or not default
    return text == _ZERO_TEXT.get(flag.kind)


def format_default(flag: Flag) -> str:
    """Return the ` (default ...)` suffix, or an empty string for zero defaults."""
    if is_zero_value(flag):
        return ""
    if flag.kind == ValueKind.STRING:
        return f' (default "{flag.render_default()}")'
    return f" (default {flag.render_default()})"


def format_flag(flag: Flag) -> str:
    """Render the usage block for a single flag, without a trailing newline."""
    line = f"  -{flag.name}"
    name, usage = flag.unquote_usage()
    if name:
        line += f" {name}"
    # Two spaces, a dash and one letter: keep the usage on the same line.
    if len(line) <= 4:
        line += "\t"
    else:
        line += "\n    \t"
    line += usage.replace("\n", "\n    \t")
    return line + format_default(flag)


class RichUsage:
    """
    Usage collaborator that renders a flag set as a Rich table.

    Assign an instance to `FlagSet.usage` to replace the plain-text output:

        flags.usage = RichUsage(flags)
    """

    def __init__(self, flag_set: FlagSet, console: Console | None = None) -> None:
        self.flag_set = flag_set
        self.console: Console = console or default_console

    def build_table(self) -> Table:
        table = Table(box=None, show_header=False, pad_edge=False)
        table.add_column("flag", style="bold", no_wrap=True)
        table.add_column("description")

        def add_row(flag: Flag) -> None:
            name, usage = flag.unquote_usage()
            header = f"-{flag.name} {name}" if name else f"-{flag.name}"
            table.add_row(escape(header), escape(usage + format_default(flag)))

        self.flag_set.visit_all(add_row)
        return table

    def __call__(self) -> None:
        if self.flag_set.name:
            self.console.print(f"[bold]usage of {escape(self.flag_set.name)}:[/bold]")
        else:
            self.console.print("[bold]usage:[/bold]")
        self.console.print(self.build_table())
