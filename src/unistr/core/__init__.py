# unistr:header:start
#
#   project      : UniStr
#   file         : __init__.py
#   file_relpath : src/unistr/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# unistr:header:end

"""Core primitives shared across UniStr.

The ``unistr.core`` package holds the pieces that do not depend on storage:
range values and their bounds policy (``ranges``), the exception taxonomy
(``errors``) and three-way comparison results (``ordering``). They are safe
to import from anywhere, including the CLI and the code generator.
"""

from __future__ import annotations
