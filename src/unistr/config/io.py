# unistr:header:start
#
#   project      : UniStr
#   file         : io.py
#   file_relpath : src/unistr/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# unistr:header:end

"""Load code generator settings from TOML sources.

Sources, in order of preference when discovering from a directory:

- ``unistr.toml``: settings live in its ``[codegen]`` table.
- ``pyproject.toml``: settings live in ``[tool.unistr.codegen]``.

Parsing is done with `tomlkit` and returned as plain ``dict`` structures.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from unistr.config.keys import Toml
from unistr.config.logging import get_logger
from unistr.config.model import MutableCodegenConfig
from unistr.constants import PYPROJECT_TOML_NAME, UNISTR_TOML_NAME
from unistr.core.errors import ConfigError

if TYPE_CHECKING:
    from unistr.config.config_types import TomlTable
    from unistr.config.logging import UnistrLogger

logger: UnistrLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        raise ConfigError(f"cannot read {path}: {e}") from e
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        raise ConfigError(f"invalid TOML in {path}: {e}") from e
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def extract_codegen_table(path: Path, data: TomlTable) -> TomlTable | None:
    """Return the codegen table of a parsed document, or None if absent.

    ``pyproject.toml`` nests it under ``[tool.unistr]``; any other file keeps
    it at the top level.
    """
    if path.name == PYPROJECT_TOML_NAME:
        tool: Any = data.get(Toml.SECTION_TOOL, {})
        section: Any = tool.get(Toml.SECTION_UNISTR, {}) if isinstance(tool, dict) else {}
    else:
        section = data
    if not isinstance(section, dict):
        return None
    table: Any = section.get(Toml.SECTION_CODEGEN)
    if table is None:
        return None
    if not isinstance(table, dict):
        raise ConfigError(f"{path}: '{Toml.SECTION_CODEGEN}' must be a table")
    return cast("TomlTable", table)


def find_config_file(start: Path) -> Path | None:
    """Walk up from ``start`` and return the first file holding codegen settings."""
    current: Path = start.resolve()
    for directory in (current, *current.parents):
        for name in (UNISTR_TOML_NAME, PYPROJECT_TOML_NAME):
            candidate: Path = directory / name
            if not candidate.is_file():
                continue
            if extract_codegen_table(candidate, load_toml_dict(candidate)) is not None:
                logger.debug("Using codegen settings from %s", candidate)
                return candidate
    return None


def load_codegen_config(
    path: Path | None = None,
    *,
    start: Path | None = None,
) -> MutableCodegenConfig:
    """Build a codegen config builder from a file, or by discovery.

    Args:
        path (Path | None): Explicit config file. When None, `find_config_file`
            runs from ``start`` (default: the current directory).
        start (Path | None): Directory to start discovery from.

    Returns:
        MutableCodegenConfig: Defaults merged with the file's settings, if any.

    Raises:
        ConfigError: If an explicit file lacks a codegen table or holds bad values.
    """
    builder: MutableCodegenConfig = MutableCodegenConfig.from_defaults()
    if path is None:
        path = find_config_file(start or Path.cwd())
        if path is None:
            logger.info("No codegen settings found; using defaults")
            return builder
    table: TomlTable | None = extract_codegen_table(path, load_toml_dict(path))
    if table is None:
        raise ConfigError(f"{path}: no codegen settings found")
    builder.merge_toml(table, source=path.resolve())
    return builder
