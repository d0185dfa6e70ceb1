"""stop - report an unrecoverable condition and terminate the process."""

__version__ = "0.1.0"

from .abort import Abort, attempt, error, error_hook, fatal, fatal_hook
from .errors import InvalidPrefix, StopError
from .output import report_and_exit

__all__ = [
    "Abort",
    "InvalidPrefix",
    "StopError",
    "attempt",
    "error",
    "error_hook",
    "fatal",
    "fatal_hook",
    "report_and_exit",
]
