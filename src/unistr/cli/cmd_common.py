# unistr:header:start
#
#   project      : UniStr
#   file         : cmd_common.py
#   file_relpath : src/unistr/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# unistr:header:end

"""Helpers shared by UniStr commands.

Commands fetch the console and verbosity set up by the group, and translate
library exceptions into CLI errors carrying the matching exit code.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING

import click

from unistr.cli.console import ClickConsole
from unistr.cli.errors import (
    UnistrConfigError,
    UnistrEncodingError,
    UnistrFileNotFoundError,
    UnistrIndexError,
    UnistrIOError,
)
from unistr.config.logging import get_logger
from unistr.core.errors import (
    CodegenError,
    ConfigError,
    InvalidScalarError,
    SliceIndexError,
    SliceOverflowError,
)
from unistr.text.utf8 import FromUtf8Error

if TYPE_CHECKING:
    from unistr.config.logging import UnistrLogger

logger: UnistrLogger = get_logger(__name__)


def get_console(ctx: click.Context) -> ClickConsole:
    """Return the console created by the group, or a default one."""
    ctx.ensure_object(dict)
    console: ClickConsole | None = ctx.obj.get("console")
    if console is None:
        console = ClickConsole(enable_color=False)
        ctx.obj["console"] = console
    return console


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity (0 when the group did not set one)."""
    ctx.ensure_object(dict)
    return int(ctx.obj.get("verbosity_level", 0))


@contextmanager
def cli_errors() -> Iterator[None]:
    """Translate library exceptions raised in the block into CLI errors.

    Raises:
        UnistrIndexError: On an invalid or overflowing range.
        UnistrEncodingError: On bytes that are not valid UTF-8, or text holding
            a surrogate code point.
        UnistrConfigError: On malformed codegen settings.
        UnistrFileNotFoundError: On a missing input file.
        UnistrIOError: On any other OS-level error.
    """
    try:
        yield
    except (SliceIndexError, SliceOverflowError) as exc:
        logger.debug("range rejected: %s", exc)
        raise UnistrIndexError(str(exc)) from exc
    except (FromUtf8Error, InvalidScalarError) as exc:
        raise UnistrEncodingError(str(exc)) from exc
    except (ConfigError, CodegenError) as exc:
        raise UnistrConfigError(str(exc)) from exc
    except FileNotFoundError as exc:
        raise UnistrFileNotFoundError(f"File not found: {exc.filename}") from exc
    except OSError as exc:
        raise UnistrIOError(str(exc)) from exc
