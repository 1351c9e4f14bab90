# unistr:header:start
#
#   project      : UniStr
#   file         : __init__.py
#   file_relpath : src/unistr/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# unistr:header:end

"""Configuration for UniStr: logging setup and the code generator's TOML settings.

Design:
    - Settings are built on a mutable `MutableCodegenConfig` and frozen into an
      immutable `CodegenConfig` before use.
    - TOML sources (``pyproject.toml`` or ``unistr.toml``) are parsed with
      ``tomlkit`` in [`unistr.config.io`][unistr.config.io].
"""

from __future__ import annotations

from unistr.config.model import CodegenConfig, MutableCodegenConfig

__all__ = [
    "CodegenConfig",
    "MutableCodegenConfig",
]
