"""
logcore: Structured logging library

Provides a leveled structured logger with pluggable formatters and
transports, plus a helper for pre-configured stdlib JSON loggers.
"""

from logcore.entry import LogEntry, describe_error
from logcore.formatters import (
    JsonFormatter,
    SimpleFormatter,
    TimestampedFormatter,
    create_json_formatter,
    create_simple_formatter,
    create_timestamped_formatter,
)
from logcore.levels import LOG_LEVEL_NAMES, LogLevel, level_name, parse_log_level
from logcore.logger import Logger, create_logger, get_logger
from logcore.transports import (
    CallbackTransport,
    ConsoleTransport,
    MemoryTransport,
    create_callback_transport,
    create_console_transport,
    create_memory_transport,
)

__all__ = [
    'LogLevel', 'LOG_LEVEL_NAMES', 'level_name', 'parse_log_level',
    'LogEntry', 'describe_error',
    'Logger', 'create_logger', 'get_logger',
    'SimpleFormatter', 'TimestampedFormatter', 'JsonFormatter',
    'create_simple_formatter', 'create_timestamped_formatter', 'create_json_formatter',
    'ConsoleTransport', 'MemoryTransport', 'CallbackTransport',
    'create_console_transport', 'create_memory_transport', 'create_callback_transport',
]
__version__ = '1.1.0'
