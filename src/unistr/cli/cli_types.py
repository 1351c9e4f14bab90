# unistr:header:start
#
#   project      : UniStr
#   file         : cli_types.py
#   file_relpath : src/unistr/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# unistr:header:end

"""Custom Click parameter types for the UniStr CLI."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Generic, Iterable, NoReturn, Protocol, TypeVar, cast

import click

from unistr.cli.errors import UnistrUsageError
from unistr.core.ranges import SliceRange, parse_range

if TYPE_CHECKING:

    class ParamTypeBase(Protocol):
        """Typed base to avoid subclassing Any when Click lacks stubs."""

        name: str

else:
    ParamTypeBase = click.ParamType  # type: ignore[assignment]

E = TypeVar("E", bound=Enum)


class OutputFormat(str, Enum):
    """Output format for command results.

    Members:
      DEFAULT: Human-friendly text output; may include ANSI color if enabled.
      JSON: A single JSON object (machine-readable, never colored).
    """

    DEFAULT = "default"
    JSON = "json"


def _fail(message: str, param: click.Parameter | None, ctx: click.Context | None) -> NoReturn:
    raise click.BadParameter(message, param=param, ctx=ctx)


class EnumChoiceParam(ParamTypeBase, Generic[E]):
    """A Click parameter type that converts a string to a member of a given Enum."""

    enum_cls: type[E]
    name: str
    choices: list[str]

    def __init__(self, enum_cls: type[E]) -> None:
        self.enum_cls = enum_cls
        self.name = self.enum_cls.__name__.lower()
        self.choices = [cast("str", getattr(e, "value", str(e))) for e in self.enum_cls]

    def convert(
        self,
        value: str | E | None,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> E | None:
        """Convert a string to a member of the Enum (case-insensitive)."""
        if value is None or isinstance(value, self.enum_cls):
            return value
        lookup: dict[str, E] = {
            cast("str", getattr(choice, "value", str(choice))).lower(): choice
            for choice in cast("Iterable[E]", self.enum_cls)
        }
        key: str = str(value).lower()
        if key in lookup:
            return lookup[key]
        _fail(f"Invalid value '{value}'. Must be one of: {', '.join(self.choices)}", param, ctx)

    def __repr__(self) -> str:
        """Return a string representation."""
        return f"EnumParam({self.enum_cls.__name__})"


class RangeParam(ParamTypeBase):
    """A Click parameter type parsing range syntax into a range value.

    Accepted forms: ``a..b``, ``a..``, ``..b``, ``..``, ``a..=b`` and ``..=b``.
    Bounds are checked later, against the text being sliced.
    """

    name = "range"

    def convert(
        self,
        value: str | SliceRange,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> SliceRange:
        """Parse ``value``.

        Raises:
            UnistrUsageError: If ``value`` is not range syntax.
        """
        if not isinstance(value, str):
            return value
        try:
            return parse_range(value)
        except ValueError as exc:
            name: str = param.human_readable_name if param is not None else "RANGE"
            raise UnistrUsageError(f"Invalid value for '{name}': {exc}") from exc

    def __repr__(self) -> str:
        """Return a string representation."""
        return "RangeParam()"
