# Flagkit CLI Flags — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Helpers for programs built on flagkit.

- get_program_invocation: the name a process-wide flag set shows in usage.
- setup_logging: route flagkit's debug records to the console or a file.
"""
from __future__ import annotations

import logging
import os
import shutil
import sys

import pythonjsonlogger.json
from rich.logging import RichHandler

from flagkit.console import console

LOG_MODES = ("cli", "json")
HANDLER_PREFIX = "flagkit."
JSON_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def get_program_invocation() -> str:
    """Return the program name as a user would type it to run this process."""
    script = sys.argv[0] if sys.argv else ""
    if not script:
        return os.path.basename(sys.executable)
    if shutil.which(script):
        return os.path.basename(script)
    if script.endswith(".py"):
        return f"{os.path.basename(sys.executable)} {script}"
    return script


def _console_handler(mode: str) -> logging.Handler:
    if mode == "cli":
        return RichHandler(console=console, show_path=False, markup=False)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(pythonjsonlogger.json.JsonFormatter(JSON_FORMAT))
    return handler


def _file_handler(path: str | os.PathLike[str], mode: str) -> logging.Handler:
    handler = logging.FileHandler(path, "a", "UTF-8")
    if mode == "json":
        handler.setFormatter(pythonjsonlogger.json.JsonFormatter(JSON_FORMAT))
    else:
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s [%(name)s] [%(levelname)s] %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
    return handler


def setup_logging(
    mode: str | None = None,
    level: int = logging.WARNING,
    log_file: str | os.PathLike[str] | None = None,
    target: logging.Logger | None = None,
) -> logging.Logger:
    """
    Attach console (and optionally file) handlers to the flagkit logger.

    Only `target` is touched, never the root logger. Handlers installed by an
    earlier call are replaced, so calling this twice does not duplicate output.
    Records stop propagating to ancestor loggers while these handlers are in
    place.

    Args:
        mode (str | None): "cli" for Rich console output or "json" for one JSON
            object per line. Defaults to `FLAGKIT_LOG_MODE`, then "cli".
        level (int): Minimum level emitted. Use `logging.DEBUG` to trace
            registration, parsing and error handling.
        log_file (str | PathLike | None): Also append records to this file,
            formatted to match `mode`.
        target (logging.Logger | None): Logger to configure; the "flagkit"
            logger by default.

    Returns:
        logging.Logger: The configured logger.

    Raises:
        ValueError: If `mode` is not a known log mode.
    """
    mode = (mode or os.getenv("FLAGKIT_LOG_MODE") or "cli").lower()
    if mode not in LOG_MODES:
        raise ValueError(f"Invalid log mode: {mode}. Must be one of: {', '.join(LOG_MODES)}")

    target = target or logging.getLogger("flagkit")
    for handler in list(target.handlers):
        if (handler.get_name() or "").startswith(HANDLER_PREFIX):
            target.removeHandler(handler)
            handler.close()

    handlers = [_console_handler(mode)]
    if log_file is not None:
        handlers.append(_file_handler(log_file, mode))
    for handler in handlers:
        handler.set_name(f"{HANDLER_PREFIX}{mode}.{type(handler).__name__}")
        handler.setLevel(level)
        target.addHandler(handler)

    target.setLevel(level)
    target.propagate = False
    target.debug("Logging initialized in '%s' mode.", mode)
    return target
