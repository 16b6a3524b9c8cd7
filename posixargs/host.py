import sys
import logging

from typing import Optional

_logger = logging.getLogger(__name__)


def mainArgs(argv: Optional[list[str]] = None) -> list[str]:
    """
    Returns the user supplied arguments of the current process.

    `sys.argv[0]` holds the script path, the module path under `-m`, `-c`
    for inline code or `-` when the script is read from stdin. The user
    arguments always start right after it.
    """
    if argv is None:
        argv = getattr(sys, "argv", None) or []

    if len(argv) == 0:
        return []

    _logger.debug(f"Skipping program token '{argv[0]}'")
    return list(argv[1:])
