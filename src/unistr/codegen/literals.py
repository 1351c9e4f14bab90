# unistr:header:start
#
#   project      : UniStr
#   file         : literals.py
#   file_relpath : src/unistr/codegen/literals.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# unistr:header:end

"""Build-time generation of literal text constants.

Each literal ``NAME = "text"`` becomes a private tuple of scalar values and a
public read-only view borrowing that tuple without copying::

    _GREETING_CHARS: Final[tuple[str, ...]] = (
        'H', 'é', 'l', 'l', 'o',
    )
    GREETING: Final[UnicodeStr] = UnicodeStr.from_chars(_GREETING_CHARS)

The split into code points happens when the module is generated, not when it
is imported.
"""

from __future__ import annotations

import keyword
from typing import TYPE_CHECKING, Final

from unistr.config.logging import get_logger
from unistr.constants import UNISTR_END_MARKER, UNISTR_START_MARKER
from unistr.core.errors import CodegenError, InvalidScalarError
from unistr.text.scalar import scalars_from_text

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from unistr.config.logging import UnistrLogger
    from unistr.config.model import CodegenConfig

logger: UnistrLogger = get_logger(__name__)

LINE_WIDTH: Final[int] = 88
INDENT: Final[str] = "    "

# Names the generated module binds itself.
RESERVED_NAMES: Final[frozenset[str]] = frozenset({"Final", "UnicodeStr", "annotations"})


def check_literal_name(name: str) -> str:
    """Return ``name`` if it can be used as a module-level constant.

    Raises:
        CodegenError: If ``name`` is not an identifier, is a keyword, starts
            with an underscore, or collides with a name the module imports.
    """
    if not name.isidentifier() or keyword.iskeyword(name):
        raise CodegenError(f"literal name {name!r} is not a valid Python identifier")
    if name.startswith("_"):
        raise CodegenError(f"literal name {name!r} must not start with an underscore")
    if name in RESERVED_NAMES:
        raise CodegenError(f"literal name {name!r} is reserved by the generated module")
    return name


def _render_chars(name: str, chars: list[str]) -> list[str]:
    head: str = f"_{name}_CHARS: Final[tuple[str, ...]] = ("
    if not chars:
        return [f"{head})"]
    lines: list[str] = [head]
    current: str = INDENT
    for ch in chars:
        item: str = f"{ch!r},"
        if current != INDENT and len(current) + 1 + len(item) > LINE_WIDTH:
            lines.append(current)
            current = INDENT
        current = f"{current} {item}" if current != INDENT else f"{current}{item}"
    lines.append(current)
    lines.append(")")
    return lines


def _render_doc(doc: str) -> str:
    escaped: str = doc.replace("\\", "\\\\").replace('"', '\\"')
    return f'"""{escaped}"""'


def render_literal_module(literals: Mapping[str, str], *, module_doc: str | None = None) -> str:
    """Render Python source defining one constant view per literal.

    Args:
        literals (Mapping[str, str]): Constant name to literal text, in output order.
        module_doc (str | None): Docstring for the generated module.

    Returns:
        str: The module source, ending with a newline.

    Raises:
        CodegenError: If a name is unusable or a text holds a surrogate code point.
    """
    out: list[str] = [
        f"# {UNISTR_START_MARKER}",
        "#",
        "# Generated by `unistr codegen`. Do not edit by hand.",
        "#",
        f"# {UNISTR_END_MARKER}",
        "",
        _render_doc(module_doc or "Literal text constants."),
        "",
        "from __future__ import annotations",
        "",
        "from typing import Final",
        "",
        "from unistr import UnicodeStr",
        "",
    ]

    names: list[str] = []
    for name, text in literals.items():
        check_literal_name(name)
        try:
            chars: list[str] = scalars_from_text(text)
        except InvalidScalarError as exc:
            raise CodegenError(f"literal {name!r}: {exc}") from exc
        out.append("")
        out.extend(_render_chars(name, chars))
        out.append(f"{name}: Final[UnicodeStr] = UnicodeStr.from_chars(_{name}_CHARS)")
        names.append(name)
        logger.trace("rendered literal %s (%d scalar values)", name, len(chars))

    out.append("")
    out.append("__all__ = [")
    out.extend(f'{INDENT}"{name}",' for name in sorted(names))
    out.append("]")
    return "\n".join(out) + "\n"


def render_from_config(config: CodegenConfig) -> str:
    """Render the module described by ``config``."""
    return render_literal_module(config.literals, module_doc=config.module_doc)


def is_up_to_date(config: CodegenConfig) -> bool:
    """Return True if the configured output already holds the rendered module."""
    try:
        current: str = config.output.read_text(encoding="utf-8")
    except FileNotFoundError:
        return False
    return current == render_from_config(config)


def write_literal_module(config: CodegenConfig) -> Path:
    """Render the configured module and write it to ``config.output``.

    Returns:
        Path: The written file.
    """
    source: str = render_from_config(config)
    config.output.parent.mkdir(parents=True, exist_ok=True)
    with config.output.open("w", encoding="utf-8", newline="\n") as fh:
        fh.write(source)
    logger.info("Wrote %d literal(s) to %s", len(config.literals), config.output)
    return config.output
