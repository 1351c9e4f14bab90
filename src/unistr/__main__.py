# unistr:header:start
#
#   project      : UniStr
#   file         : __main__.py
#   file_relpath : src/unistr/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# unistr:header:end

"""Module entry point for running UniStr via ``python -m unistr``.

Equivalent to the ``unistr`` console script; delegates to
:func:`unistr.cli.main.cli`.

Examples:
    Slice a text by scalar-value positions::

        python -m unistr slice "Löwe 老虎" 5..=6
"""

from __future__ import annotations

from unistr.cli.main import cli

if __name__ == "__main__":
    cli()
