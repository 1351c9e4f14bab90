# unistr:header:start
#
#   project      : UniStr
#   file         : __init__.py
#   file_relpath : src/unistr/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# unistr:header:end

"""UniStr CLI subcommands."""
