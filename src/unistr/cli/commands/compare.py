# unistr:header:start
#
#   project      : UniStr
#   file         : compare.py
#   file_relpath : src/unistr/cli/commands/compare.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# unistr:header:end

"""UniStr `compare` command: code-point order of two texts."""

from __future__ import annotations

import click

from unistr.cli.cmd_common import cli_errors, get_console
from unistr.core.ordering import Ordering
from unistr.text.buffer import UnicodeString


@click.command(
    name="compare",
    help="Print 'less', 'equal' or 'greater' comparing A to B by code point.",
)
@click.argument("left", metavar="A")
@click.argument("right", metavar="B")
def compare_command(*, left: str, right: str) -> None:
    """Compare two texts lexicographically by scalar value."""
    console = get_console(click.get_current_context())
    with cli_errors():
        result: Ordering = UnicodeString.from_text(left).cmp(UnicodeString.from_text(right))
    console.print(result.label)
