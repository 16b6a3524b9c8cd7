from enum import Enum
from collections.abc import Mapping
import dataclasses as dt
import logging

from typing import Any, Optional

from .errors import InvalidArgumentType, InvalidArgumentValue

_logger = logging.getLogger(__name__)


class ValueKind(Enum):
    """
    What an option accepts after its name.

    `UNSPECIFIED` options never consume the next token; they only take a
    value through the `--name=value` form.
    """

    STRING = "string"
    BOOLEAN = "boolean"
    UNSPECIFIED = None


@dt.dataclass(frozen=True)
class Option:
    """
    A single entry of an option schema.

    Attributes:
        longName: The canonical name (e.g., "file" for "--file").
        shortName: An optional one character alias (e.g., "f" for "-f").
        kind: The declared value kind.
        multiples: Accumulate repeated uses into a list instead of overwriting.
    """

    longName: str
    shortName: Optional[str] = None
    kind: ValueKind = ValueKind.UNSPECIFIED
    multiples: bool = False

    def isString(self) -> bool:
        return self.kind is ValueKind.STRING

    def isBool(self) -> bool:
        return self.kind is ValueKind.BOOLEAN

    @staticmethod
    def extract(longName: str, entry: Any) -> "Option":
        """
        Validates a schema mapping entry and turns it into an `Option`.

        Args:
            longName: The key of the entry in the schema mapping.
            entry: A mapping with optional "short", "type" and "multiples"
                keys ("multiple" is accepted as an alias of "multiples"),
                or an `Option` instance.
        """
        where = f"options.{longName}"

        if isinstance(entry, Option):
            if entry.longName != longName:
                raise InvalidArgumentValue(
                    f"The '{where}' option is named '{entry.longName}'"
                )
            if not isinstance(entry.kind, ValueKind):
                raise InvalidArgumentType.expected(f"{where}.kind", "a ValueKind", entry.kind)
            entry = {
                "short": entry.shortName,
                "type": entry.kind.value,
                "multiples": entry.multiples,
            }
            entry = {k: v for k, v in entry.items() if v is not None}

        if not isinstance(entry, Mapping):
            raise InvalidArgumentType.expected(where, "an object", entry)

        kind = ValueKind.UNSPECIFIED
        if "type" in entry:
            typ = entry["type"]
            if not isinstance(typ, str):
                raise InvalidArgumentType.expected(f"{where}.type", "a string", typ)
            if typ not in ("string", "boolean"):
                raise InvalidArgumentType(
                    f"The '{where}.type' argument must be one of: 'string', 'boolean', got '{typ}'"
                )
            kind = ValueKind(typ)

        shortName = None
        if "short" in entry:
            shortName = entry["short"]
            if not isinstance(shortName, str):
                raise InvalidArgumentType.expected(
                    f"{where}.short", "a string", shortName
                )
            if len(shortName) != 1:
                raise InvalidArgumentValue(
                    f"The '{where}.short' argument must be a single character, got '{shortName}'"
                )

        multiples = None
        for key in ("multiples", "multiple"):
            if key not in entry:
                continue
            value = entry[key]
            if not isinstance(value, bool):
                raise InvalidArgumentType.expected(f"{where}.{key}", "a boolean", value)
            if multiples is not None and multiples != value:
                raise InvalidArgumentValue(
                    f"The '{where}.multiples' and '{where}.multiple' arguments disagree"
                )
            multiples = value

        return Option(longName, shortName, kind, bool(multiples))


@dt.dataclass
class Schema:
    """
    The set of options recognized by a parse call, keyed by long name in
    declaration order.
    """

    options: dict[str, Option] = dt.field(default_factory=dict)

    @staticmethod
    def extract(options: Any) -> "Schema":
        """Validates an options mapping and builds a `Schema` from it."""
        if isinstance(options, Schema):
            options = options.options

        if not isinstance(options, Mapping):
            raise InvalidArgumentType.expected("options", "an object", options)

        s = Schema()
        for longName, entry in options.items():
            if not isinstance(longName, str):
                raise InvalidArgumentType.expected("options key", "a string", longName)
            s.options[longName] = Option.extract(longName, entry)

        _logger.debug(f"Extracted schema with {len(s.options)} option(s)")
        return s

    def lookup(self, name: str) -> Option | None:
        return self.options.get(name)

    def resolveShort(self, short: str) -> str:
        """
        Returns the long name of the first option declaring `short` as its
        alias, or `short` itself when no option does.
        """
        for longName, option in self.options.items():
            if option.shortName == short:
                return longName
        return short

    def __contains__(self, name: str) -> bool:
        return name in self.options

    def __len__(self) -> int:
        return len(self.options)
