"""
Severity levels shared by logcore and everything built on it.
"""

import logging
from enum import IntEnum
from typing import Dict, Optional, Union


class LogLevel(IntEnum):
    """Ordered severity levels, numerically aligned with stdlib logging"""
    TRACE = 5
    DEBUG = 10
    INFO = 20
    WARN = 30
    ERROR = 40


LOG_LEVEL_NAMES: Dict[LogLevel, str] = {
    LogLevel.TRACE: 'TRACE',
    LogLevel.DEBUG: 'DEBUG',
    LogLevel.INFO: 'INFO',
    LogLevel.WARN: 'WARN',
    LogLevel.ERROR: 'ERROR',
}

# Accept "WARNING" from env vars / stdlib-style config
_ALIASES: Dict[str, LogLevel] = {
    'WARNING': LogLevel.WARN,
}

logging.addLevelName(LogLevel.TRACE, 'TRACE')


def level_name(level: LogLevel) -> str:
    """Canonical display name for a level"""
    return LOG_LEVEL_NAMES[LogLevel(level)]


def parse_log_level(
    value: Union[str, int, LogLevel],
    default: Optional[LogLevel] = None
) -> LogLevel:
    """
    Parse a level from a LogLevel, its integer value or its name.

    Args:
        value: Level to parse (case-insensitive when a string)
        default: Returned for unrecognized values instead of raising

    Returns:
        Matching LogLevel

    Raises:
        ValueError: If value is not a known level and no default is given
    """
    if isinstance(value, LogLevel):
        return value

    if isinstance(value, int) and not isinstance(value, bool):
        try:
            return LogLevel(value)
        except ValueError:
            pass
    elif isinstance(value, str):
        normalized = value.strip().upper()
        if normalized.isdigit():
            return parse_log_level(int(normalized), default)
        if normalized in _ALIASES:
            return _ALIASES[normalized]
        for level, name in LOG_LEVEL_NAMES.items():
            if name == normalized:
                return level

    if default is not None:
        return default
    raise ValueError(f"Unknown log level: {value!r}. Must be one of {list(LOG_LEVEL_NAMES.values())}")
