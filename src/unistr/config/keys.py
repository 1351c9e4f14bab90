# unistr:header:start
#
#   project      : UniStr
#   file         : keys.py
#   file_relpath : src/unistr/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# unistr:header:end

"""Canonical TOML section and key names for UniStr configuration.

Keys defined here are the external configuration schema as it appears in
``unistr.toml`` and under ``[tool.unistr]`` in ``pyproject.toml``. Renaming
or removing one is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by UniStr configuration."""

    # [tool.unistr] in pyproject.toml
    SECTION_TOOL: Final[str] = "tool"
    SECTION_UNISTR: Final[str] = "unistr"

    # [codegen]
    SECTION_CODEGEN: Final[str] = "codegen"

    KEY_OUTPUT: Final[str] = "output"
    KEY_MODULE_DOC: Final[str] = "module_doc"

    # [codegen.literals]
    SECTION_LITERALS: Final[str] = "literals"
