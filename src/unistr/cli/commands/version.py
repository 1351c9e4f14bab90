# unistr:header:start
#
#   project      : UniStr
#   file         : version.py
#   file_relpath : src/unistr/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# unistr:header:end

"""UniStr `version` command.

Prints the UniStr version as installed in the active Python environment.
"""

from __future__ import annotations

import json

import click

from unistr.cli.cli_types import EnumChoiceParam, OutputFormat
from unistr.cli.cmd_common import get_console, get_effective_verbosity
from unistr.constants import UNISTR_VERSION


@click.command(
    name="version",
    help="Show the current version of UniStr.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of UniStr.

    Args:
        output_format (OutputFormat | None): Optional output format (default or json).
    """
    ctx = click.get_current_context()
    console = get_console(ctx)
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT

    if fmt == OutputFormat.JSON:
        console.print(json.dumps({"version": UNISTR_VERSION}))
    elif get_effective_verbosity(ctx) > 0:
        console.print(console.styled("UniStr version:", bold=True, underline=True))
        console.print(f"    {console.styled(UNISTR_VERSION, bold=True)}")
    else:
        console.print(console.styled(UNISTR_VERSION, bold=True))
