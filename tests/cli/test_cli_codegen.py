# unistr:header:start
#
#   project      : UniStr
#   file         : test_cli_codegen.py
#   file_relpath : tests/cli/test_cli_codegen.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# unistr:header:end

"""CLI tests: ``codegen`` writing and checking literal modules."""

from __future__ import annotations

import textwrap
from typing import TYPE_CHECKING

from tests.cli.conftest import assert_exit, assert_SUCCESS, run_cli, run_cli_in
from tests.conftest import mark_cli
from unistr.cli.exit_codes import ExitCode
from unistr.constants import UNISTR_START_MARKER

if TYPE_CHECKING:
    from pathlib import Path

PYPROJECT = textwrap.dedent(
    """
    [tool.unistr.codegen]
    output = "src/demo/literals.py"

    [tool.unistr.codegen.literals]
    TIGER = "老虎"
    """
).lstrip()


@mark_cli
def test_codegen_writes_and_checks(tmp_path: Path) -> None:
    """Generate, then ``--check`` passes until the settings change."""
    (tmp_path / "pyproject.toml").write_text(PYPROJECT, encoding="utf-8")
    out = tmp_path / "src" / "demo" / "literals.py"

    result = run_cli_in(tmp_path, ["--no-color", "codegen", "--check"])
    assert_exit(result, ExitCode.FAILURE)
    assert "out of date" in result.output
    assert not out.exists()

    result = run_cli_in(tmp_path, ["codegen"])
    assert_SUCCESS(result)
    assert "Wrote 1 literal(s)" in result.output
    assert out.read_text(encoding="utf-8").startswith(f"# {UNISTR_START_MARKER}")

    result = run_cli_in(tmp_path, ["codegen", "--check"])
    assert_SUCCESS(result)
    assert "up to date" in result.output

    (tmp_path / "pyproject.toml").write_text(
        PYPROJECT + 'LION = "Löwe"\n', encoding="utf-8"
    )
    assert_exit(run_cli_in(tmp_path, ["codegen", "--check"]), ExitCode.FAILURE)


@mark_cli
def test_codegen_explicit_config_and_output(tmp_path: Path) -> None:
    """``--config`` and ``--output`` override discovery and the configured path."""
    cfg = tmp_path / "conf" / "unistr.toml"
    cfg.parent.mkdir()
    cfg.write_text('[codegen.literals]\nA = "a"\n', encoding="utf-8")
    out = tmp_path / "custom.py"

    result = run_cli(["-q", "codegen", "--config", str(cfg), "--output", str(out)])
    assert_SUCCESS(result)
    assert result.output == ""
    assert "A: Final[UnicodeStr]" in out.read_text(encoding="utf-8")


@mark_cli
def test_codegen_bad_config_is_a_config_error(tmp_path: Path) -> None:
    """Malformed settings exit with CONFIG_ERROR."""
    (tmp_path / "unistr.toml").write_text("[codegen]\noutput = 3\n", encoding="utf-8")
    result = run_cli_in(tmp_path, ["codegen"])
    assert_exit(result, ExitCode.CONFIG_ERROR)
    assert "'output' must be a non-empty string" in result.output


@mark_cli
def test_codegen_bad_literal_name_is_a_config_error(tmp_path: Path) -> None:
    """Unusable literal names exit with CONFIG_ERROR."""
    (tmp_path / "unistr.toml").write_text('[codegen.literals]\n_HIDDEN = "x"\n', encoding="utf-8")
    result = run_cli_in(tmp_path, ["codegen"])
    assert_exit(result, ExitCode.CONFIG_ERROR)
    assert "underscore" in result.output


@mark_cli
def test_codegen_without_literals_warns(tmp_path: Path) -> None:
    """An empty literal table still writes a module, with a warning."""
    (tmp_path / "unistr.toml").write_text("[codegen]\n", encoding="utf-8")
    result = run_cli_in(tmp_path, ["codegen"])
    assert_SUCCESS(result)
    assert "No literals configured" in result.output
    assert (tmp_path / "unistr_literals.py").is_file()
