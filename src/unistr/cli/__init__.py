# unistr:header:start
#
#   project      : UniStr
#   file         : __init__.py
#   file_relpath : src/unistr/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# unistr:header:end

"""Click-based command line for UniStr.

The CLI is a thin shell over the library: each command parses its
arguments, calls into [`unistr.text`][unistr.text] or
[`unistr.codegen`][unistr.codegen], and maps library exceptions onto
[`ExitCode`][unistr.cli.exit_codes.ExitCode] values.
"""

from __future__ import annotations
