"""Exception hierarchy for stop."""


class StopError(Exception):
    """Base exception for stop errors."""


class InvalidPrefix(StopError, ValueError):
    """Abort prefix is empty or not a string."""

    def __init__(self, prefix: object):
        self.prefix = prefix
        super().__init__(f"Invalid abort prefix: {prefix!r}")
