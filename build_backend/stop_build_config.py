"""Build options for stop.

Turns the ``colored`` config setting into ``stop/_build.py``.
"""

from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent

OPTION = "colored"

VALUES = {
    "enabled": True,
    "colored-enabled": True,
    "true": True,
    "1": True,
    "disabled": False,
    "colored-disabled": False,
    "false": False,
    "0": False,
}


def parse_colored(value) -> bool:
    """Map a config setting value to the COLORED flag."""
    if isinstance(value, list):
        # repeated -C options: last one wins
        value = value[-1] if value else "disabled"
    try:
        return VALUES[str(value).strip().lower()]
    except KeyError:
        choices = ", ".join(sorted(VALUES))
        raise ValueError(f"Invalid value for {OPTION}: {value!r} (expected one of {choices})") from None


def split_settings(config_settings: dict | None) -> tuple[bool, dict | None]:
    """Return (colored, remaining settings) for the setuptools backend."""
    settings = dict(config_settings or {})
    colored = parse_colored(settings.pop(OPTION, "disabled"))
    return colored, settings or None


def write_build_module(colored: bool, root: Path = ROOT) -> Path:
    """Write stop/_build.py under root."""
    path = root / "stop" / "_build.py"
    lines = [
        "# Generated at build time by build_backend/stop_build_config.py. Do not edit.",
        f"COLORED = {colored!r}",
    ]
    path.write_text("\n".join(lines) + "\n")
    return path
