"""Environment driven defaults for pdftool."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .utils import get_logger

LOGGER = get_logger("pdftool.config")

LOG_LEVEL_ENV = "PDFTOOL_LOG_LEVEL"
COMPRESSION_LEVEL_ENV = "PDFTOOL_COMPRESSION_LEVEL"
OPEN_RESULT_ENV = "PDFTOOL_OPEN_RESULT"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off", ""}
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
_COMPRESSION_LEVELS = {"high", "medium", "low"}


def _read_flag(env: Mapping[str, str], name: str, default: bool) -> bool:
    value = env.get(name)
    if value is None:
        return default
    normalised = value.strip().lower()
    if normalised in _TRUTHY:
        return True
    if normalised in _FALSY:
        return False
    LOGGER.warning("Ignoring unrecognised value %r for %s", value, name)
    return default


def _read_choice(env: Mapping[str, str], name: str, choices: set, default: str, *, upper: bool = False) -> str:
    value = env.get(name)
    if value is None or not value.strip():
        return default
    normalised = value.strip().upper() if upper else value.strip().lower()
    if normalised not in choices:
        LOGGER.warning("Ignoring unrecognised value %r for %s", value, name)
        return default
    return normalised


@dataclass(frozen=True)
class Settings:
    """Runtime defaults that the command line options can override."""

    log_level: str = "WARNING"
    compression_level: str = "medium"
    open_result: bool = False

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if env is None else env
        return cls(
            log_level=_read_choice(env, LOG_LEVEL_ENV, _LOG_LEVELS, cls.log_level, upper=True),
            compression_level=_read_choice(
                env, COMPRESSION_LEVEL_ENV, _COMPRESSION_LEVELS, cls.compression_level
            ),
            open_result=_read_flag(env, OPEN_RESULT_ENV, cls.open_result),
        )


__all__ = [
    "Settings",
    "LOG_LEVEL_ENV",
    "COMPRESSION_LEVEL_ENV",
    "OPEN_RESULT_ENV",
]
