import json
import logging

from typing import Optional

from . import (
    args,
    const,
    errors,
    host,
    options,
    scan,
    vt100,
)
from .args import Args, store  # noqa: F401
from .errors import (  # noqa: F401
    ArgsError,
    InvalidArgumentType,
    InvalidArgumentValue,
    InvalidOptionValue,
    UnknownOptionError,
)
from .options import Option, Schema, ValueKind  # noqa: F401
from .scan import parseArgs

_logger = logging.getLogger(__name__)


class logger:
    @staticmethod
    def setup(root: Args):
        if root.flag("verbose"):
            logging.basicConfig(
                level=logging.DEBUG,
                format=f"{vt100.CYAN}%(asctime)s{vt100.RESET} {vt100.YELLOW}%(levelname)s{vt100.RESET} %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        else:
            logging.basicConfig(
                level=logging.WARNING,
                format="%(asctime)s %(levelname)s %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )


ROOT_OPTIONS = {
    "schema": {"short": "s", "type": "string"},
    "strict": {"type": "boolean"},
    "verbose": {"short": "v", "type": "boolean"},
    "version": {"type": "boolean"},
    "usage": {"short": "u", "type": "boolean"},
}


def usage():
    print(
        f"Usage: {const.ARGV0} [-v|--verbose] [--strict] [-s|--schema=<json>] [-- tokens...]"
    )


def main(argv: Optional[list[str]] = None) -> int:
    try:
        root = parseArgs(argv, strict=True, options=ROOT_OPTIONS)
        logger.setup(root)

        if root.flag("version"):
            print(f"posixargs v{const.VERSION_STR}")
            return 0

        if root.flag("usage"):
            usage()
            return 0

        schema = json.loads(root.value("schema", "{}"))
        _logger.debug(f"Parsing {len(root.positionals)} token(s)")
        result = parseArgs(root.positionals, strict=root.flag("strict"), options=schema)
        print(json.dumps(result.asDict(), indent=2))
        return 0

    except json.JSONDecodeError as e:
        vt100.error(f"Invalid schema: {e}")
        usage()
        return 1

    except RuntimeError as e:
        _logger.debug(e, exc_info=True)
        vt100.error(str(e))
        usage()
        return 1

    except KeyboardInterrupt:
        print()
        return 1
