"""Build configuration for stop.

COLORED is decided when the package is built:

    pip install . -C colored=enabled     # bold red prefix
    pip install . -C colored=disabled    # plain prefix (default)

Nothing here is read from the environment.
"""

from ._build import COLORED

# -1 is reported as 255 by POSIX shells.
EXIT_CODE = -1

__all__ = ["COLORED", "EXIT_CODE"]
