# unistr:header:start
#
#   project      : UniStr
#   file         : errors.py
#   file_relpath : src/unistr/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# unistr:header:end

"""Exceptions for the UniStr CLI.

Raise these in commands to end the run with a standardized message and exit
code. Click prints the message to stderr prefixed with ``Error:``.
"""

from __future__ import annotations

import click

from unistr.cli.exit_codes import ExitCode


class UnistrCliError(click.ClickException):
    """Base class for all UniStr CLI errors."""

    exit_code = ExitCode.FAILURE


class UnistrUsageError(UnistrCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class UnistrEncodingError(UnistrCliError):
    """Error for input that is not valid UTF-8."""

    exit_code = ExitCode.ENCODING_ERROR


class UnistrFileNotFoundError(UnistrCliError):
    """Error when input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class UnistrIndexError(UnistrCliError):
    """Error for invalid or overflowing ranges."""

    exit_code = ExitCode.INDEX_ERROR


class UnistrIOError(UnistrCliError):
    """Error for I/O errors reading/writing files."""

    exit_code = ExitCode.IO_ERROR


class UnistrConfigError(UnistrCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR
