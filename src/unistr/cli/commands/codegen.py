# unistr:header:start
#
#   project      : UniStr
#   file         : codegen.py
#   file_relpath : src/unistr/cli/commands/codegen.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# unistr:header:end

"""UniStr `codegen` command.

Generates a Python module of literal text constants from
``[tool.unistr.codegen]`` in ``pyproject.toml`` or ``[codegen]`` in
``unistr.toml``. With ``--check`` nothing is written; the exit code tells
whether the module on disk matches what would be generated, which suits
CI and pre-commit use.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from unistr.cli.cmd_common import cli_errors, get_console, get_effective_verbosity
from unistr.cli.exit_codes import ExitCode
from unistr.codegen.literals import is_up_to_date, write_literal_module
from unistr.config.io import load_codegen_config

if TYPE_CHECKING:
    from unistr.config.model import CodegenConfig, MutableCodegenConfig


@click.command(
    name="codegen",
    help="Generate the literal constants module from the codegen settings.",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Settings file (default: discover unistr.toml or pyproject.toml upwards).",
)
@click.option(
    "--output",
    "output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Override the generated module path.",
)
@click.option(
    "--check",
    is_flag=True,
    default=False,
    help="Do not write; exit with 1 if the generated module is out of date.",
)
def codegen_command(
    *,
    config_path: Path | None = None,
    output: Path | None = None,
    check: bool = False,
) -> None:
    """Generate (or check) the literal constants module.

    Args:
        config_path (Path | None): Explicit settings file.
        output (Path | None): Output path overriding the configured one.
        check (bool): Only report whether the module is up to date.
    """
    ctx = click.get_current_context()
    console = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)

    with cli_errors():
        builder: MutableCodegenConfig = load_codegen_config(config_path)
        if output is not None:
            builder.output = output.resolve()
        config: CodegenConfig = builder.freeze()

        if not config.literals and vlevel >= 0:
            console.warn("No literals configured; the generated module will be empty.")

        if check:
            if is_up_to_date(config):
                if vlevel >= 0:
                    console.print(f"{config.output}: up to date")
                return
            console.print(console.styled(f"{config.output}: out of date", fg="red"))
            ctx.exit(ExitCode.FAILURE)

        written: Path = write_literal_module(config)

    if vlevel >= 0:
        console.print(f"Wrote {len(config.literals)} literal(s) to {written}")
