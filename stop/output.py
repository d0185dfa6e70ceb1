"""Terminal output and process termination."""

import logging
import os
import sys
import threading
from typing import Any, NoReturn

from . import config

logger = logging.getLogger(__name__)

BOLD = "\033[1m"
RED = "\033[31m"
NC = "\033[0m"


def render(value: Any) -> str:
    """Return the display form of value, falling back to repr."""
    try:
        return str(value)
    except Exception:
        logger.debug("str() failed for %s, using repr", type(value).__name__)
    try:
        return repr(value)
    except Exception:
        return f"<unprintable {type(value).__name__} object>"


def paint_prefix(prefix: str, colored: bool) -> str:
    """Wrap the prefix token in bold red when colored."""
    if not colored:
        return prefix
    return f"{BOLD}{RED}{prefix}{NC}"


def write_line(stream: Any, line: str) -> None:
    """Write line to stream, escaping what its encoding cannot take.

    Write errors are ignored.
    """
    if stream is None:
        return
    try:
        print(line, file=stream)
        return
    except UnicodeEncodeError:
        pass
    except (OSError, ValueError):
        # closed stream or broken pipe
        return
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        print(line.encode(encoding, "backslashreplace").decode(encoding), file=stream)
    except (OSError, ValueError, LookupError):
        pass


def terminate() -> NoReturn:
    """Exit the whole process with EXIT_CODE, from any thread."""
    if threading.current_thread() is not threading.main_thread():
        # SystemExit would only end this thread
        try:
            sys.stderr.flush()
        except (AttributeError, OSError, ValueError):
            pass
        os._exit(config.EXIT_CODE & 0xFF)
    sys.exit(config.EXIT_CODE)


def report_and_exit(prefix: str, message: Any, colored: bool | None = None) -> NoReturn:
    """Print "prefix: message" to stderr and exit with EXIT_CODE.

    Never returns. A failed write is ignored; the exit happens regardless.

    Args:
        prefix: Severity tag, e.g. "fatal"
        message: Message text; other values are shown in their display form
        colored: Override for config.COLORED, None to use the build setting
    """
    try:
        if colored is None:
            colored = config.COLORED
        write_line(sys.stderr, f"{paint_prefix(prefix, colored)}: {render(message)}")
    finally:
        terminate()
