# unistr:header:start
#
#   project      : UniStr
#   file         : test_literal_render.py
#   file_relpath : tests/codegen/test_literal_render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# unistr:header:end

"""Tests for rendering and writing literal constant modules."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from tests.conftest import parametrize
from unistr import UnicodeStr, UnicodeString
from unistr.codegen import (
    check_literal_name,
    is_up_to_date,
    render_literal_module,
    write_literal_module,
)
from unistr.codegen.literals import LINE_WIDTH
from unistr.config import MutableCodegenConfig
from unistr.constants import UNISTR_END_MARKER, UNISTR_START_MARKER
from unistr.core.errors import CodegenError

LITERALS: dict[str, str] = {
    "GREETING": "Grüß Gott",
    "TIGER": "老虎",
    "EMPTY": "",
    "QUOTES": "it's \"quoted\" \\ and\nnew",
    "LONG": "Löwe 老虎 Léopard " * 12,
}


def _exec(source: str) -> dict[str, Any]:
    namespace: dict[str, Any] = {}
    exec(compile(source, "<generated>", "exec"), namespace)  # noqa: S102
    return namespace


def test_generated_views_equal_their_text() -> None:
    """Executing the module yields views equal to the literal text."""
    ns = _exec(render_literal_module(LITERALS))
    for name, text in LITERALS.items():
        view = ns[name]
        assert isinstance(view, UnicodeStr)
        assert view == UnicodeString.from_text(text).as_view()
        assert str(view) == text
    assert ns["__all__"] == sorted(LITERALS)


def test_generated_views_are_read_only() -> None:
    """Literals are static, shared views."""
    ns = _exec(render_literal_module({"A": "ab"}))
    with pytest.raises(TypeError):
        ns["A"][0] = "x"


def test_module_layout() -> None:
    """Marker header, docstring, then imports."""
    source = render_literal_module({"A": "a"}, module_doc='Doc with "quotes"')
    lines = source.splitlines()
    assert lines[0] == f"# {UNISTR_START_MARKER}"
    assert f"# {UNISTR_END_MARKER}" in lines
    assert "from unistr import UnicodeStr" in lines
    assert source.endswith("\n")
    assert _exec(source)["__doc__"] == 'Doc with "quotes"'


def test_rendering_is_deterministic_and_wrapped() -> None:
    """Same input, same output; long literals wrap to the line width."""
    first = render_literal_module(LITERALS)
    assert first == render_literal_module(dict(LITERALS))
    assert max(len(line) for line in first.splitlines()) <= LINE_WIDTH


@parametrize(
    "name",
    ["1ABC", "with space", "class", "_PRIVATE", "UnicodeStr", "Final", "annotations", ""],
)
def test_unusable_names_are_rejected(name: str) -> None:
    """Names must be public identifiers that do not shadow module imports."""
    with pytest.raises(CodegenError):
        check_literal_name(name)
    with pytest.raises(CodegenError):
        render_literal_module({name: "x"})


def test_surrogates_are_rejected() -> None:
    """Literal text must consist of scalar values."""
    with pytest.raises(CodegenError, match="'BAD'"):
        render_literal_module({"BAD": "a\ud800"})


def test_write_and_check_up_to_date(tmp_path: Path) -> None:
    """The written file is importable source and reports as up to date."""
    builder = MutableCodegenConfig(
        output=Path("gen/literals.py"),
        literals={"TIGER": "老虎"},
        config_file=tmp_path / "unistr.toml",
    )
    config = builder.freeze()
    assert not is_up_to_date(config)

    written = write_literal_module(config)
    assert written == tmp_path / "gen" / "literals.py"
    assert is_up_to_date(config)
    assert str(_exec(written.read_text(encoding="utf-8"))["TIGER"]) == "老虎"

    builder.literals["LION"] = "Löwe"
    assert not is_up_to_date(builder.freeze())
