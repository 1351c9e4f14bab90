# unistr:header:start
#
#   project      : UniStr
#   file         : __init__.py
#   file_relpath : src/unistr/codegen/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# unistr:header:end

"""Literal code generation.

Turns literal texts into a Python module of constant scalar-value tuples and
zero-copy views. Run it through ``unistr codegen`` as a build step.
"""

from __future__ import annotations

from unistr.codegen.literals import (
    check_literal_name,
    is_up_to_date,
    render_from_config,
    render_literal_module,
    write_literal_module,
)

__all__ = [
    "check_literal_name",
    "is_up_to_date",
    "render_from_config",
    "render_literal_module",
    "write_literal_module",
]
