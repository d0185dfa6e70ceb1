"""Allow running as ``python -m stop``."""

from .cli import main

main()
