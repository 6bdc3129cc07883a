"""
Environment-driven defaults for the command line.

Values come from the process environment, which ``load_dotenv`` may have
populated from a ``.env`` file.
"""

import os
from typing import Any, Dict

from semverdesc.models.options import DEFAULT_ABBREV, DEFAULT_CANDIDATES

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


def env_int(name: str, default: int) -> int:
    """Read a non-negative integer from the environment."""
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")


def cli_defaults() -> Dict[str, Any]:
    """Defaults for the CLI flags that can be preset from the environment."""
    return {
        "abbrev": env_int("SEMVERDESC_ABBREV", DEFAULT_ABBREV),
        "candidates": env_int("SEMVERDESC_CANDIDATES", DEFAULT_CANDIDATES),
        "dirty_mark": os.getenv("SEMVERDESC_DIRTY_MARK"),
        "legacy": env_bool("SEMVERDESC_LEGACY", False),
        "tags": env_bool("SEMVERDESC_TAGS", False),
    }
