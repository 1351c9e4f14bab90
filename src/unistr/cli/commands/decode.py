# unistr:header:start
#
#   project      : UniStr
#   file         : decode.py
#   file_relpath : src/unistr/cli/commands/decode.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# unistr:header:end

"""UniStr `decode` command.

Decodes a file (or STDIN with ``-``) as UTF-8 and reports the number of
scalar values followed by the text. Invalid input ends the run with
``ENCODING_ERROR`` and the position of the first bad byte, unless
``--lossy`` is given, in which case invalid sequences become U+FFFD.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import click

from unistr.cli.cli_types import EnumChoiceParam, OutputFormat
from unistr.cli.cmd_common import cli_errors, get_console, get_effective_verbosity
from unistr.cli.errors import UnistrEncodingError
from unistr.cli.exit_codes import ExitCode
from unistr.config.logging import get_logger
from unistr.text.buffer import UnicodeString
from unistr.text.utf8 import FromUtf8Error

logger = get_logger(__name__)


def _read_input(path: str) -> bytes:
    if path == "-":
        return click.get_binary_stream("stdin").read()
    return Path(path).read_bytes()


def _error_payload(source: str, err: FromUtf8Error) -> dict[str, Any]:
    detail = err.utf8_error()
    return {
        "source": source,
        "ok": False,
        "valid_up_to": detail.valid_up_to,
        "error_len": detail.error_len,
        "message": str(detail),
    }


@click.command(
    name="decode",
    help="Decode PATH (or '-' for STDIN) as UTF-8 and print its scalar count and text.",
)
@click.argument("path", default="-", required=False)
@click.option(
    "--lossy",
    is_flag=True,
    default=False,
    help="Replace invalid sequences with U+FFFD instead of failing.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
def decode_command(
    *,
    path: str,
    lossy: bool = False,
    output_format: OutputFormat | None = None,
) -> None:
    """Decode a file as UTF-8.

    Args:
        path (str): File to read, or ``-`` for STDIN.
        lossy (bool): Fall back to lossy decoding on invalid input.
        output_format (OutputFormat | None): Optional output format (default or json).

    Raises:
        UnistrEncodingError: If the input is not valid UTF-8 and ``lossy`` is off.
    """
    ctx = click.get_current_context()
    console = get_console(ctx)
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT
    source: str = "<stdin>" if path == "-" else path

    with cli_errors():
        data: bytes = _read_input(path)

    result = UnicodeString.try_from_utf8(data)
    if isinstance(result, FromUtf8Error):
        if not lossy:
            if fmt == OutputFormat.JSON:
                console.print(json.dumps(_error_payload(source, result)))
                ctx.exit(ExitCode.ENCODING_ERROR)
            raise UnistrEncodingError(f"{source}: {result}")
        logger.info("%s: falling back to lossy decoding (%s)", source, result)
        if get_effective_verbosity(ctx) >= 0:
            console.warn(f"{source}: {result}; invalid sequences replaced with U+FFFD")
        result = UnicodeString.from_utf8_lossy(data)

    if fmt == OutputFormat.JSON:
        payload: dict[str, Any] = {
            "source": source,
            "ok": True,
            "length": result.len(),
            "text": str(result),
        }
        console.print(json.dumps(payload, ensure_ascii=False))
        return

    if get_effective_verbosity(ctx) > 0:
        console.print(
            console.styled(f"{source}: {len(data)} bytes, {result.len()} scalar values", bold=True)
        )
    else:
        console.print(str(result.len()))
    console.print(str(result))
