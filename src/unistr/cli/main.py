# unistr:header:start
#
#   project      : UniStr
#   file         : main.py
#   file_relpath : src/unistr/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# unistr:header:end

"""Entry point for the ``unistr`` command.

Group-level options are initialized once and placed into ``ctx.obj``;
subcommands read them back through [`unistr.cli.cmd_common`][unistr.cli.cmd_common].
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from unistr.cli.commands.codegen import codegen_command
from unistr.cli.commands.compare import compare_command
from unistr.cli.commands.decode import decode_command
from unistr.cli.commands.slice import slice_command
from unistr.cli.commands.version import version_command
from unistr.cli.console import ClickConsole
from unistr.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from unistr.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from unistr.config.logging import UnistrLogger

logger: UnistrLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | str | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | str | None): Explicit color mode from ``--color``.
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.ensure_object(dict)

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging is driven by the environment, not by -v/-q.
    level_env: int | None = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    mode: ColorMode = ColorMode.NEVER if no_color else ColorMode(color_mode or ColorMode.AUTO)
    enable_color: bool = resolve_color_mode(cli_mode=mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color
    ctx.obj["console"] = ClickConsole(enable_color=enable_color)
    logger.debug(
        "CLI state: verbosity=%d, log_level=%s, color=%s",
        ctx.obj["verbosity_level"],
        level_env,
        enable_color,
    )


@click.group(
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="UniStr: text as sequences of Unicode scalar values.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Entry point for the UniStr CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    if ctx.invoked_subcommand is None:
        console: ClickConsole = ctx.obj["console"]
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(slice_command)

cli.add_command(decode_command)

cli.add_command(compare_command)

cli.add_command(codegen_command)

if __name__ == "__main__":
    cli()
