"""
Flagkit CLI Flags

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .error_handling import ErrorHandling
from .exceptions import (
    DuplicateFlagError,
    FlagkitError,
    FlagPanic,
    FlagValueError,
    InvalidFlagError,
    UnknownFlagError,
)
from .flag_set import FlagSet
from .parse_error import ERR_HELP, ErrorKind, ParseError
from .protocols import Flag
from .usage import RichUsage
from .value_flag import ValueFlag
from .value_kind import ValueKind

logger = logging.getLogger("flagkit")


__all__ = [
    "ERR_HELP",
    "DuplicateFlagError",
    "ErrorHandling",
    "ErrorKind",
    "Flag",
    "FlagkitError",
    "FlagPanic",
    "FlagSet",
    "FlagValueError",
    "InvalidFlagError",
    "ParseError",
    "RichUsage",
    "UnknownFlagError",
    "ValueFlag",
    "ValueKind",
]
