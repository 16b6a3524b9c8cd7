import dataclasses as dt

from typing import Any, Optional

from .errors import InvalidOptionValue, UnknownOptionError
from .options import Schema

Scalar = str | bool
Value = Scalar | list[Scalar]


@dt.dataclass
class Args:
    """
    The result of a parse call.

    Attributes:
        flags: Every option seen, by canonical name, mapped to True.
        values: The stored value of every option seen. A list for options
            declared with `multiples`.
        positionals: Tokens not consumed as an option or option value, in
            encounter order.

    Each parse call returns a fresh record owned by the caller.
    """

    flags: dict[str, bool] = dt.field(default_factory=dict)
    values: dict[str, Value] = dt.field(default_factory=dict)
    positionals: list[str] = dt.field(default_factory=list)

    def flag(self, key: str) -> bool:
        return self.flags.get(key, False)

    def value(self, key: str, default: Any = None) -> Any:
        if key in self.values:
            return self.values[key]
        return default

    def asDict(self) -> dict[str, Any]:
        return dt.asdict(self)


def store(
    strict: bool,
    schema: Schema,
    name: str,
    value: Optional[str],
    result: Args,
) -> None:
    """
    Records one use of option `name` in `result`.

    Args:
        strict: Reject options absent from `schema`, and values that do not
            match the declared kind.
        schema: The options of the current parse call.
        name: The canonical option name.
        value: The explicit value, or None when the option was used as a flag.
        result: The record to update.
    """
    option = schema.lookup(name)

    if strict:
        if option is None:
            raise UnknownOptionError(name)
        if option.isBool() and value is not None:
            raise InvalidOptionValue(
                name, f"Option '{name}' does not take an argument"
            )
        if option.isString() and value is None:
            raise InvalidOptionValue(
                name, f"Option '{name}' expects an argument"
            )

    result.flags[name] = True

    newValue: Scalar = True if value is None else value
    if option is not None and option.multiples:
        existing = result.values.get(name)
        if isinstance(existing, list):
            existing.append(newValue)
        else:
            result.values[name] = [newValue]
    else:
        result.values[name] = newValue
