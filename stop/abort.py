"""Abort entry points: fatal and error.

Each entry point is an ``Abort`` bound to a fixed prefix and offers three
call shapes. Callers pick one explicitly:

    fatal.display(42)                       # fatal: 42
    fatal.format("this is {}", "an error")  # fatal: this is an error
    attempt(load, fatal.handler())          # fatal: <str of the exception>

Calling the instance directly picks the shape from the arguments: no
arguments returns the handler, a single positional argument is displayed,
anything else is formatted with the first argument as the template.

None of these return. The process exits with ``config.EXIT_CODE``.
"""

import logging
from typing import Any, Callable, NoReturn, TypeVar

from .errors import InvalidPrefix
from .output import render, report_and_exit

logger = logging.getLogger(__name__)

T = TypeVar("T")


def render_format(template: Any, *args: Any, **kwargs: Any) -> str:
    """Format template with args, or join the parts if formatting fails."""
    try:
        return template.format(*args, **kwargs)
    except Exception:
        logger.debug("could not format %s template", type(template).__name__)
    parts = [render(template)]
    parts.extend(render(arg) for arg in args)
    parts.extend(f"{key}={render(value)}" for key, value in kwargs.items())
    return " ".join(parts)


class Abort:
    """Report-and-exit entry point with a fixed prefix."""

    def __init__(self, prefix: str):
        if not isinstance(prefix, str) or not prefix:
            raise InvalidPrefix(prefix)
        self.prefix = prefix

    def __repr__(self) -> str:
        return f"Abort({self.prefix!r})"

    def hook(self, message: Any) -> NoReturn:
        """Abort with an already rendered message."""
        report_and_exit(self.prefix, message)

    def display(self, value: Any) -> NoReturn:
        """Abort with the display form of value."""
        self.hook(render(value))

    def format(self, template: str, *args: Any, **kwargs: Any) -> NoReturn:
        """Abort with template.format(*args, **kwargs)."""
        self.hook(render_format(template, *args, **kwargs))

    def handler(self) -> Callable[[Any], NoReturn]:
        """Return a unary callable that aborts with the display of its argument."""
        return self.display

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        if not args and not kwargs:
            return self.handler()
        if len(args) == 1 and not kwargs:
            self.display(args[0])
        if not args:
            # keywords only: nothing to use as a template
            self.hook(" ".join(f"{key}={render(value)}" for key, value in kwargs.items()))
        self.format(*args, **kwargs)


fatal = Abort("fatal")
error = Abort("error")


def fatal_hook(message: Any) -> NoReturn:
    """Print "fatal: message" to stderr and exit."""
    fatal.hook(message)


def error_hook(message: Any) -> NoReturn:
    """Print "error: message" to stderr and exit."""
    error.hook(message)


def attempt(func: Callable[..., T], on_error: Callable[[Exception], Any], *args: Any, **kwargs: Any) -> T:
    """Call func, passing any Exception it raises to on_error.

    Meant to pair with ``Abort.handler``:

        data = attempt(read_config, fatal.handler(), path)

    If on_error returns, its result is returned in place of func's.
    """
    try:
        return func(*args, **kwargs)
    except Exception as e:
        return on_error(e)
