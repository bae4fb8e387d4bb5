"""
Configuration management for ipnav.

Front-end defaults, loaded from environment variables. The address core
never reads configuration; the CLI builds one ``CLIConfig`` at startup
and hands it to each command.
"""

import os
from dataclasses import dataclass
from typing import Mapping

from ipnav import __version__

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"", "0", "false", "no", "off"}
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _env_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value < 1:
        raise ValueError(f"{name} must be at least 1, got {value}")
    return value


def _env_bool(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = env.get(name)
    if raw is None:
        return default
    lowered = raw.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")


@dataclass
class CLIConfig:
    """Command-line front-end configuration."""

    version: str = __version__

    # Addresses listed by `range` before truncating formatted output
    range_limit: int = 100

    # Upper bound for `next --count` / `previous --count`
    max_step_count: int = 100

    # Default to machine-readable output for every command
    plain: bool = False

    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "CLIConfig":
        """Load configuration from environment variables."""
        env = os.environ if environ is None else environ

        log_level = env.get("IPNAV_LOG_LEVEL", "WARNING").upper()
        if log_level not in _LOG_LEVELS:
            raise ValueError(f"IPNAV_LOG_LEVEL must be one of {sorted(_LOG_LEVELS)}, got {log_level!r}")

        return cls(
            range_limit=_env_int(env, "IPNAV_RANGE_LIMIT", 100),
            max_step_count=_env_int(env, "IPNAV_MAX_STEP_COUNT", 100),
            plain=_env_bool(env, "IPNAV_PLAIN", False),
            log_level=log_level,
        )
