# unistr:header:start
#
#   project      : UniStr
#   file         : logging.py
#   file_relpath : src/unistr/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# unistr:header:end

"""UniStr logging with a TRACE level.

The library only emits records. Handlers are installed by the CLI and by the
test suite through `setup_logging`; importing a library module never touches
the root logger's handlers.

Levels used by the library:

- TRACE: borrow acquire/release, epoch moves and stale-view detection.
- DEBUG: reallocations and decode failures.

``UNISTR_LOG_LEVEL`` selects the level when `setup_logging` is called without
one. It accepts a level name (``TRACE``, ``debug``, ``warn``...) or a number.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import IO, TYPE_CHECKING, Final, cast

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

LOG_LEVEL_ENV: Final[str] = "UNISTR_LOG_LEVEL"

LOG_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT: Final[str] = (
    "[%(levelname)s] [%(name)s %(filename)s:%(lineno)d] [%(funcName)s] %(message)s"
)

_LEVEL_NAMES: Final[Mapping[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}


class UnistrLogger(logging.Logger):
    """`logging.Logger` with a `trace` method for the TRACE level."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log ``msg % args`` at TRACE level.

        Args:
            msg (object): Message, possibly with %-placeholders.
            *args (object): Values for the placeholders.
            extra (Mapping[str, object] | None): Extra attributes for the record.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, extra=extra, stacklevel=2)


if logging.getLevelName(TRACE_LEVEL) != "TRACE":
    logging.addLevelName(TRACE_LEVEL, "TRACE")

logging.setLoggerClass(UnistrLogger)


# Highest threshold first; a record takes the style of the first threshold it reaches.
_LEVEL_STYLES: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (logging.CRITICAL, chalk.red_bright),
    (logging.ERROR, chalk.red),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
    (TRACE_LEVEL, chalk.blue),
)


class ChalkFormatter(logging.Formatter):
    """Formatter that colours each record according to its level."""

    def format(self, record: logging.LogRecord) -> str:
        """Format ``record`` and wrap it in the colour of its level.

        Levels below TRACE are dimmed.
        """
        message: str = super().format(record)
        for threshold, style in _LEVEL_STYLES:
            if record.levelno >= threshold:
                return style(message)
        return chalk.dim(message)


def resolve_env_log_level() -> int | None:
    """Return the level named by ``UNISTR_LOG_LEVEL``, or None.

    None is returned when the variable is unset, empty or not a known level.
    """
    raw: str = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    if not raw:
        return None
    if raw.isdigit():
        return int(raw)
    return _LEVEL_NAMES.get(raw)


def setup_logging(level: int | None = None, *, stream: IO[str] | None = None) -> None:
    """Install a single coloured handler on the root logger.

    Calling it again replaces the previous handler.

    Args:
        level (int | None): Root level. When None, ``UNISTR_LOG_LEVEL`` is
            consulted and CRITICAL is used if it is unset.
        stream (IO[str] | None): Destination; ``sys.stderr`` at call time by
            default, so program output on stdout stays clean.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root: logging.Logger = logging.getLogger()
    root.setLevel(level)
    for old in list(root.handlers):
        root.removeHandler(old)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT))
    root.addHandler(handler)
    root.propagate = False


def get_logger(name: str) -> UnistrLogger:
    """Return the `UnistrLogger` registered under ``name``."""
    return cast("UnistrLogger", logging.getLogger(name))
