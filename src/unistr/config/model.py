# unistr:header:start
#
#   project      : UniStr
#   file         : model.py
#   file_relpath : src/unistr/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# unistr:header:end

"""Code generator configuration: mutable builder and frozen snapshot.

`MutableCodegenConfig` collects settings from TOML and CLI overrides.
`MutableCodegenConfig.freeze` validates them and produces an immutable
`CodegenConfig` used by [`unistr.codegen`][unistr.codegen]. Use
`CodegenConfig.thaw` to go back to a builder.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from unistr.config.keys import Toml
from unistr.config.logging import get_logger
from unistr.constants import DEFAULT_LITERALS_MODULE
from unistr.core.errors import ConfigError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from unistr.config.logging import UnistrLogger

logger: UnistrLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class CodegenConfig:
    """Immutable code generator settings.

    Attributes:
        output (Path): Path of the generated module.
        module_doc (str | None): Docstring placed at the top of the module.
        literals (Mapping[str, str]): Constant name to literal text, in declaration order.
        config_file (Path | None): Source the settings were read from, if any.
    """

    output: Path
    module_doc: str | None
    literals: Mapping[str, str]
    config_file: Path | None = None

    def thaw(self) -> MutableCodegenConfig:
        """Return a mutable copy of this snapshot."""
        return MutableCodegenConfig(
            output=self.output,
            module_doc=self.module_doc,
            literals=dict(self.literals),
            config_file=self.config_file,
        )


@dataclass
class MutableCodegenConfig:
    """Mutable code generator settings used while merging sources.

    Attributes:
        output (Path | None): Path of the generated module; relative paths are
            resolved against the directory of ``config_file`` on freeze.
        module_doc (str | None): Docstring placed at the top of the module.
        literals (dict[str, str]): Constant name to literal text.
        config_file (Path | None): Source the settings were read from, if any.
    """

    output: Path | None = None
    module_doc: str | None = None
    literals: dict[str, str] = field(default_factory=lambda: {})
    config_file: Path | None = None

    @classmethod
    def from_defaults(cls) -> MutableCodegenConfig:
        """Return a builder holding the runtime defaults."""
        return cls()

    def merge_toml(self, table: Mapping[str, Any], *, source: Path | None = None) -> None:
        """Apply a ``[codegen]`` table on top of the current values.

        Args:
            table (Mapping[str, Any]): The ``[codegen]`` table.
            source (Path | None): File the table came from.

        Raises:
            ConfigError: If a key holds a value of the wrong type.
        """
        where: str = str(source) if source is not None else "<inline>"
        if source is not None:
            self.config_file = source

        output: Any = table.get(Toml.KEY_OUTPUT)
        if output is not None:
            if not isinstance(output, str) or not output:
                raise ConfigError(f"{where}: '{Toml.KEY_OUTPUT}' must be a non-empty string")
            self.output = Path(output)

        doc: Any = table.get(Toml.KEY_MODULE_DOC)
        if doc is not None:
            if not isinstance(doc, str):
                raise ConfigError(f"{where}: '{Toml.KEY_MODULE_DOC}' must be a string")
            self.module_doc = doc

        literals: Any = table.get(Toml.SECTION_LITERALS, {})
        if not isinstance(literals, dict):
            raise ConfigError(f"{where}: '[{Toml.SECTION_LITERALS}]' must be a table")
        for name, text in literals.items():
            if not isinstance(text, str):
                raise ConfigError(f"{where}: literal {name!r} must be a string")
            self.literals[str(name)] = text

        unknown: set[str] = set(table) - {
            Toml.KEY_OUTPUT,
            Toml.KEY_MODULE_DOC,
            Toml.SECTION_LITERALS,
        }
        for key in sorted(unknown):
            logger.warning("%s: ignoring unknown codegen key %r", where, key)

    def freeze(self) -> CodegenConfig:
        """Resolve paths and return the immutable snapshot."""
        output: Path = self.output or Path(DEFAULT_LITERALS_MODULE)
        if not output.is_absolute() and self.config_file is not None:
            output = self.config_file.parent / output
        return CodegenConfig(
            output=output,
            module_doc=self.module_doc,
            literals=MappingProxyType(dict(self.literals)),
            config_file=self.config_file,
        )
