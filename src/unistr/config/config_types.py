# unistr:header:start
#
#   project      : UniStr
#   file         : config_types.py
#   file_relpath : src/unistr/config/config_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# unistr:header:end

"""Typing aliases for TOML data handled by the configuration layer."""

from __future__ import annotations

from typing import Any, TypeAlias

TomlValue: TypeAlias = Any
TomlTable: TypeAlias = dict[str, TomlValue]
