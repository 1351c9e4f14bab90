# unistr:header:start
#
#   project      : UniStr
#   file         : slice.py
#   file_relpath : src/unistr/cli/commands/slice.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# unistr:header:end

"""UniStr `slice` command.

Prints the part of a text selected by a range of scalar-value positions:

    unistr slice "Löwe 老虎 Léopard" 5..=6    # -> 老虎
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from unistr.cli.cli_types import RangeParam
from unistr.cli.cmd_common import cli_errors, get_console, get_effective_verbosity
from unistr.text.buffer import UnicodeString

if TYPE_CHECKING:
    from unistr.core.ranges import SliceRange
    from unistr.text.view import UnicodeStr


@click.command(
    name="slice",
    help="Print TEXT[RANGE], with RANGE counted in scalar values (e.g. 2..5, 3.., ..=4).",
)
@click.argument("text")
@click.argument("range_", metavar="RANGE", type=RangeParam())
def slice_command(*, text: str, range_: SliceRange) -> None:
    """Print a sub-view of ``text``.

    Args:
        text (str): The text to slice.
        range_ (SliceRange): Positions to select.
    """
    ctx = click.get_current_context()
    console = get_console(ctx)

    with cli_errors():
        buf: UnicodeString = UnicodeString.from_text(text)
        view: UnicodeStr = buf.view_of(range_)

    if get_effective_verbosity(ctx) > 0:
        console.print(
            console.styled(f"{range_} of {buf.len()} scalar values -> {view.len()}:", dim=True)
        )
    console.print(str(view))
