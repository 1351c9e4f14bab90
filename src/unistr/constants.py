# unistr:header:start
#
#   project      : UniStr
#   file         : constants.py
#   file_relpath : src/unistr/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# unistr:header:end

"""UniStr Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

UNISTR_VERSION: str = get_version("unistr")

PYPROJECT_TOML_NAME: str = "pyproject.toml"
UNISTR_TOML_NAME: str = "unistr.toml"

DEFAULT_LITERALS_MODULE: str = "unistr_literals.py"

UNISTR_START_MARKER: str = "unistr:generated:start"
UNISTR_END_MARKER: str = "unistr:generated:end"
