import logging

from typing import Any, Callable, Optional

from . import host
from .args import Args, store
from .errors import InvalidArgumentType
from .options import Schema

_logger = logging.getLogger(__name__)

# --- Scanner ---------------------------------------------------------------- #


def _expandShorts(tokens: list[str], pos: int) -> None:
    """Expands `-abc` at `pos` so that `-b` and `-c` follow it in order."""
    arg = tokens[pos]
    for i in range(2, len(arg)):
        tokens.insert(pos + (i - 1), f"-{arg[i]}")


def scan(tokens: list[str], schema: Schema, strict: bool = False) -> Args:
    """
    Classifies `tokens` left to right against `schema`.

    Operates on a copy of `tokens`; short-option groups are expanded into
    that copy as they are met, so the last option of a group can still take
    the following token as its value.
    """
    argv = list(tokens)
    result = Args()

    pos = 0
    while pos < len(argv):
        arg = argv[pos]

        if not arg.startswith("-"):
            result.positionals.append(arg)
            pos += 1
            continue

        if arg == "-":
            # stdin/stdout by convention
            result.positionals.append(arg)
            pos += 1
            continue

        if arg == "--":
            _logger.debug(f"Terminator at {pos}, {len(argv) - pos - 1} positional(s) follow")
            result.positionals.extend(argv[pos + 1 :])
            return result

        if arg[1] != "-":
            if len(arg) > 2:
                _expandShorts(argv, pos)
            name = schema.resolveShort(arg[1])
        else:
            # Excess dashes stay part of the name: ---foo is option '-foo'
            name = arg[2:]

        if "=" in name:
            name, value = name.split("=", 1)
            _logger.debug(f"Option '{name}' with attached value")
            store(strict, schema, name, value, result)
        elif (
            pos + 1 < len(argv)
            and not argv[pos + 1].startswith("-")
            and (option := schema.lookup(name)) is not None
            and option.isString()
        ):
            pos += 1
            _logger.debug(f"Option '{name}' takes next token as value")
            store(strict, schema, name, argv[pos], result)
        else:
            store(strict, schema, name, None, result)

        pos += 1

    return result


# --- Entry point ------------------------------------------------------------ #


def parseArgs(
    argv: Optional[list[str]] = None,
    strict: bool = False,
    options: Any = None,
    mainArgs: Callable[[], list[str]] = host.mainArgs,
) -> Args:
    """
    Parses command-line arguments.

    Args:
        argv: The tokens to parse. Defaults to the arguments of the current
            process, as returned by `mainArgs`.
        strict: Raise on options absent from `options` and on values that
            do not match an option's declared type.
        options: Mapping of long option names to entries with optional
            "short", "type" ("string" or "boolean") and "multiples" keys.
        mainArgs: Source of the default tokens.

    Raises:
        InvalidArgumentType, InvalidArgumentValue: before scanning, when the
            arguments are malformed.
        UnknownOptionError, InvalidOptionValue: in strict mode.
    """
    if argv is None:
        argv = mainArgs()

    if not isinstance(argv, (list, tuple)):
        raise InvalidArgumentType.expected("argv", "an array", argv)

    for i, tok in enumerate(argv):
        if not isinstance(tok, str):
            raise InvalidArgumentType.expected(f"argv[{i}]", "a string", tok)

    if not isinstance(strict, bool):
        raise InvalidArgumentType.expected("strict", "a boolean", strict)

    schema = Schema.extract({} if options is None else options)

    return scan(list(argv), schema, strict)
